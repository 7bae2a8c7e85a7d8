"""Tests for the individual pattern pieces and rejection rules."""

from vocab_parser.config import DEFAULT_STOP_WORDS
from vocab_parser.pipeline.patterns import (
    LINE_RE,
    STREAM_RE,
    contains_cjk,
    is_stop_word,
)


class TestRules:
    def test_contains_cjk(self):
        assert contains_cjk("n. 猫")
        assert not contains_cjk("n. cat")
        assert not contains_cjk("")

    def test_stop_words_case_insensitive(self):
        assert is_stop_word("Vocabulary", DEFAULT_STOP_WORDS)
        assert is_stop_word("TRACK", DEFAULT_STOP_WORDS)
        assert not is_stop_word("cat", DEFAULT_STOP_WORDS)

    def test_stop_words_are_injectable(self):
        assert is_stop_word("cat", frozenset({"cat"}))
        assert not is_stop_word("page", frozenset())


class TestLinePattern:
    def test_plain_line(self):
        m = LINE_RE.search("cat n. 猫")
        assert m.group("word") == "cat"
        assert m.group("definition") == "n. 猫"

    def test_checkbox_prefix(self):
        """Leading checkbox glyphs and bracket boxes are skipped."""
        for prefix in ("☐ ", "☑", "□ ", "[ ] ", "[x] ", "[] "):
            m = LINE_RE.search(f"{prefix}cat n. 猫")
            assert m is not None, prefix
            assert m.group("word") == "cat"

    def test_word_must_start_line(self):
        assert LINE_RE.search("猫 cat n. 猫") is None

    def test_requires_cjk(self):
        assert LINE_RE.search("cat n. a small animal") is None

    def test_part_of_speech_shapes(self):
        """Lowercase tags of up to five letters, or two joined by a slash."""
        for definition in ("n. 猫", "adj. 快乐的", "n/v. 跑；奔跑"):
            m = LINE_RE.search(f"word-x {definition}")
            assert m.group("definition") == definition

    def test_cjk_must_follow_marker(self):
        assert LINE_RE.search("cat 猫 n.") is None
        assert LINE_RE.search("cat N. 猫") is None

    def test_word_shape(self):
        """Two or more Latin letters or hyphens."""
        assert LINE_RE.search("well-known adj. 著名的").group("word") == "well-known"
        assert LINE_RE.search("a n. 一个") is None
        assert LINE_RE.search("cat1 n. 猫") is None


class TestStreamPattern:
    def test_unanchored_run(self):
        m = STREAM_RE.search("词 apple n.苹果；banana")
        assert m.group("word") == "apple"
        assert m.group("definition") == "n.苹果"

    def test_definition_must_start_with_pos(self):
        assert STREAM_RE.search("apple 苹果") is None
