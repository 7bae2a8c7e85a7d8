"""
Shared TypedDicts for the extraction pipeline.
"""

from typing import TypedDict


class Fragment(TypedDict):
    text: str
    x: float         # left edge
    y: float         # baseline, higher is further up the page


class Row(TypedDict):
    y: float         # baseline of the first fragment assigned, never re-averaged
    fragments: list[Fragment]


class VocabularyCandidate(TypedDict):
    word: str
    definition: str  # raw, before normalization


class VocabularyItem(TypedDict):
    id: str
    word: str
    definition: str
    level: int
    originalIndex: int  # acceptance order, 0..n-1
