"""
Heuristic word/definition extraction.

Primary pass: one entry per line, "word  pos. 中文". Fallback pass: an
unanchored scan for "word pos.中文" runs, for pages whose rows came out
misaligned. Both yield raw candidates in text order and leave dedup to
the session.
"""

import logging
from typing import Iterator

from vocab_parser.pipeline.patterns import LINE_RE, STREAM_RE, contains_cjk, is_stop_word
from vocab_parser.state import VocabularyCandidate

logger = logging.getLogger(__name__)


def primary_candidates(text: str, stop_words: frozenset[str]) -> Iterator[VocabularyCandidate]:
    for m in LINE_RE.finditer(text):
        word = m.group("word").strip()
        if is_stop_word(word, stop_words):
            logger.debug("Stop word %r skipped", word)
            continue
        yield VocabularyCandidate(word=word, definition=m.group("definition").strip())


def fallback_candidates(text: str, stop_words: frozenset[str]) -> Iterator[VocabularyCandidate]:
    for m in STREAM_RE.finditer(text):
        word = m.group("word").strip()
        definition = m.group("definition").strip()
        if is_stop_word(word, stop_words):
            logger.debug("Stop word %r skipped", word)
            continue
        if not contains_cjk(definition):
            logger.debug("No CJK in definition for %r: %r", word, definition)
            continue
        yield VocabularyCandidate(word=word, definition=definition)
