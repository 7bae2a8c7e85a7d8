"""
One extraction run's dedup set and index counter.

Both passes accept candidates through the same session, so fallback items
continue numbering after the primary ones. A new document needs a new
session.
"""

import hashlib
import itertools
import logging
from typing import Callable

from vocab_parser.pipeline.normalizer import normalize_definition
from vocab_parser.state import VocabularyCandidate, VocabularyItem

logger = logging.getLogger(__name__)

IdFactory = Callable[[str, int], str]


def hashed_id(word: str, index: int) -> str:
    """Stable id from position and word; the index prefix keeps it unique within a run."""
    digest = hashlib.sha1(f"{index}:{word}".encode("utf-8")).hexdigest()
    return f"{index}-{digest[:7]}"


def sequential_ids(prefix: str = "w") -> IdFactory:
    counter = itertools.count()

    def next_id(word: str, index: int) -> str:
        return f"{prefix}{next(counter)}"

    return next_id


class ExtractionSession:
    def __init__(self, id_factory: IdFactory | None = None):
        self.id_factory = id_factory or hashed_id
        self.items: list[VocabularyItem] = []
        self._seen: set[str] = set()

    def __len__(self) -> int:
        return len(self.items)

    def accept(self, candidate: VocabularyCandidate) -> VocabularyItem | None:
        """Add the candidate unless its word was already taken, in any casing."""
        word = candidate["word"]
        key = word.lower()
        if key in self._seen:
            logger.debug("Duplicate %r dropped", word)
            return None

        self._seen.add(key)
        index = len(self.items)
        item = VocabularyItem(
            id=self.id_factory(word, index),
            word=word,
            definition=normalize_definition(candidate["definition"]),
            level=0,
            originalIndex=index,
        )
        self.items.append(item)
        return item
