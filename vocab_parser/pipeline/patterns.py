"""
Pattern pieces and rejection rules shared by both extraction passes.

The two pass patterns are composed from the small pieces below; the
rejection rules applied after a match (stop words, CJK presence) are
plain functions.
"""

import re

# CJK Unified Ideographs, the common block
CJK_RANGE = r"\u4e00-\u9fa5"
CJK = rf"[{CJK_RANGE}]"

# n.  adj.  vt.  n/v.
POS_MARKER = r"(?:[a-z]{1,5}\.|[a-z]+/[a-z]+\.)"

WORD = r"[a-zA-Z\-]{2,}"

# ☐ ☑ □ and the Wingdings box at U+F0A3, or [ ] / [x]
CHECKBOX = r"(?:[\u2610\u2611\uF0A3\u25A1]|\s*\[[\sxX]?\])"

# CJK, whitespace, ASCII word characters and light punctuation
_STREAM_DEFINITION_CHARS = rf"[{CJK_RANGE}\sA-Za-z0-9_;,.()\[\]]"

LINE_RE = re.compile(
    rf"^\s*{CHECKBOX}?\s*(?P<word>{WORD})\s+"
    rf"(?P<definition>.*{POS_MARKER}\s*.*{CJK}+.*)$",
    re.MULTILINE,
)

STREAM_RE = re.compile(
    rf"(?P<word>{WORD})\s+(?P<definition>{POS_MARKER}\s*{_STREAM_DEFINITION_CHARS}+)"
)

_CJK_RE = re.compile(CJK)


def contains_cjk(text: str) -> bool:
    return _CJK_RE.search(text) is not None


def is_stop_word(word: str, stop_words: frozenset[str]) -> bool:
    return word.lower() in stop_words
