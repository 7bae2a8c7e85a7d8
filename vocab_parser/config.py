"""Tunable constants for vocabulary extraction, passed into each stage."""

from dataclasses import dataclass, field

from vocab_parser.pipeline.patterns import CJK

DEFAULT_ROW_TOLERANCE = 4.0

DEFAULT_STOP_WORDS = frozenset({
    "page", "list", "unit", "story", "section",
    "part", "vocabulary", "word", "audio", "track",
})

DEFAULT_START_MARKER = rf"(?:List|Unit|Chapter)\s*\d+\s*{CJK}+|Vocabulary|词汇表|Word\s*List"


@dataclass(frozen=True)
class ExtractionConfig:
    row_tolerance: float = DEFAULT_ROW_TOLERANCE  # baseline distance for "same row"
    min_primary_items: int = 5        # below this the stream fallback runs
    min_usable_items: int = 5         # CLI rejects results shorter than this
    stop_words: frozenset[str] = field(default_factory=lambda: DEFAULT_STOP_WORDS)
    start_marker: str = DEFAULT_START_MARKER
