"""Tests for the line and stream extraction passes."""

from vocab_parser.config import DEFAULT_STOP_WORDS
from vocab_parser.pipeline.extractor import fallback_candidates, primary_candidates


class TestPrimaryCandidates:
    def test_yields_in_text_order(self):
        text = "cat n. 猫\ndog n. 狗\nbird n. 鸟\n"
        candidates = list(primary_candidates(text, DEFAULT_STOP_WORDS))

        assert [c["word"] for c in candidates] == ["cat", "dog", "bird"]
        assert candidates[0]["definition"] == "n. 猫"

    def test_definition_is_raw(self):
        """Whitespace cleanup is left to the normalizer."""
        candidates = list(primary_candidates("cat   n.  猫 头\n", DEFAULT_STOP_WORDS))
        assert candidates[0]["definition"] == "n.  猫 头"

    def test_stop_words_dropped(self):
        text = "Unit 3 第三单元 n. 单元\ncat n. 猫\n"
        candidates = list(primary_candidates(text, DEFAULT_STOP_WORDS))
        assert [c["word"] for c in candidates] == ["cat"]

    def test_line_without_pos_ignored(self):
        assert list(primary_candidates("cat 猫\n", DEFAULT_STOP_WORDS)) == []

    def test_duplicates_are_not_filtered_here(self):
        text = "cat n. 猫\ncat n. 猫\n"
        assert len(list(primary_candidates(text, DEFAULT_STOP_WORDS))) == 2


class TestFallbackCandidates:
    def test_recovers_entries_from_one_line(self):
        text = "词 apple n.苹果；banana n.香蕉；cherry n.樱桃；"
        candidates = list(fallback_candidates(text, DEFAULT_STOP_WORDS))

        assert [(c["word"], c["definition"]) for c in candidates] == [
            ("apple", "n.苹果"),
            ("banana", "n.香蕉"),
            ("cherry", "n.樱桃"),
        ]

    def test_latin_only_definition_dropped(self):
        """The loose pattern matches Latin noise; no CJK means no entry."""
        text = "see p. 12 for more / cat n. 猫"
        candidates = list(fallback_candidates(text, DEFAULT_STOP_WORDS))
        assert [c["word"] for c in candidates] == ["cat"]

    def test_stop_words_dropped(self):
        candidates = list(fallback_candidates("词 track n.音轨；", DEFAULT_STOP_WORDS))
        assert candidates == []
