"""
pipeline/vocabulary.py — locate the list, run both passes, index the results.
"""

import logging

from vocab_parser.config import ExtractionConfig
from vocab_parser.pipeline.extractor import fallback_candidates, primary_candidates
from vocab_parser.pipeline.locator import locate_vocabulary_region
from vocab_parser.pipeline.session import ExtractionSession, IdFactory
from vocab_parser.state import VocabularyItem

logger = logging.getLogger(__name__)


def extract_from_region(
    region: str,
    config: ExtractionConfig,
    session: ExtractionSession,
) -> list[VocabularyItem]:
    """Primary pass, then the stream fallback if it accepted too few entries."""
    for candidate in primary_candidates(region, config.stop_words):
        session.accept(candidate)
    logger.info("Line pass accepted %d entries", len(session))

    if len(session) < config.min_primary_items:
        logger.warning(
            "Line pass found %d entries (< %d), trying stream fallback",
            len(session), config.min_primary_items,
        )
        before = len(session)
        for candidate in fallback_candidates(region, config.stop_words):
            session.accept(candidate)
        logger.info("Stream fallback added %d entries", len(session) - before)

    return session.items


def extract_vocabulary(
    text: str,
    config: ExtractionConfig | None = None,
    id_factory: IdFactory | None = None,
) -> list[VocabularyItem]:
    """Extract an ordered, deduplicated vocabulary list from document text."""
    config = config or ExtractionConfig()
    region = locate_vocabulary_region(text, config.start_marker)
    return extract_from_region(region, config, ExtractionSession(id_factory))


def extract_vocabulary_stage(state: dict) -> dict:
    vocabulary = extract_from_region(
        state["region_text"],
        state["config"],
        ExtractionSession(state.get("id_factory")),
    )
    logger.info("Extracted %d vocabulary entries", len(vocabulary))
    return {"vocabulary": vocabulary}
