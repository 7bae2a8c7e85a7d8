"""Definition cleanup applied to every accepted candidate."""

import re

from vocab_parser.pipeline.patterns import CJK

_WHITESPACE_RE = re.compile(r"\s+")
# Row reconstruction joins fragments with a space, which splits CJK words apart
_CJK_GAP_RE = re.compile(rf"({CJK})\s+(?={CJK})")


def normalize_definition(raw: str) -> str:
    text = _WHITESPACE_RE.sub(" ", raw.strip())
    return _CJK_GAP_RE.sub(r"\1", text)
