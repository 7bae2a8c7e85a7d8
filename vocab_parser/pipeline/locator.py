"""
Skips narrative prose that precedes the vocabulary list.

A "List 3 词汇" / "Unit 2 生词" style header, or an explicit Vocabulary /
词汇表 / Word List heading, marks where the list begins.
"""

import logging
import re

from vocab_parser.config import DEFAULT_START_MARKER

logger = logging.getLogger(__name__)


def locate_vocabulary_region(text: str, start_marker: str = DEFAULT_START_MARKER) -> str:
    """Text from the first start marker onwards, or all of it when there is none."""
    m = re.search(start_marker, text, flags=re.IGNORECASE)
    if m is None:
        logger.info("No list header found, scanning whole document")
        return text

    logger.info("Skipping %d chars of preamble, list starts at %r", m.start(), m.group(0))
    return text[m.start():]


def locate_region(state: dict) -> dict:
    config = state["config"]
    return {"region_text": locate_vocabulary_region(state["document_text"], config.start_marker)}
