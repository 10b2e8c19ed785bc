"""
Unit tests for the SymSpell word-list backend.
"""
import pytest

from spellcheck.models.dictionary import Dictionary
from spellcheck.services.spellcheck_base import (
    DictionaryNotFoundError,
    MalformedDictionaryError,
    UnsupportedOperationError,
)
from spellcheck.services.spellcheck_symspell import SymSpellBackend, parse_wordlist_line


class TestParseWordlistLine:
    """Tests for Hunspell word-list line parsing."""

    def test_plain_word(self):
        assert parse_wordlist_line("hello\n") == "hello"

    def test_flags_stripped(self):
        assert parse_wordlist_line("walk/SDG") == "walk"

    def test_morphology_stripped(self):
        assert parse_wordlist_line("walk/SDG\tpo:verb") == "walk"
        assert parse_wordlist_line("walk po:verb") == "walk"

    def test_escaped_slash_kept(self):
        assert parse_wordlist_line("km\\/h/X") == "km/h"

    @pytest.mark.parametrize("line", ["", "   \n", "# comment"])
    def test_blank_and_comment_lines(self, line):
        assert parse_wordlist_line(line) == ""


class TestSymSpellBackend:
    """Tests for SymSpellBackend."""

    def test_load_and_check(self, dictionary_dir):
        backend = SymSpellBackend(search_path=dictionary_dir)
        loaded = backend.load(Dictionary.named("en_US"))

        assert backend.is_loaded() is True
        assert loaded.location == dictionary_dir / "en_US"
        assert backend.check("hello") is True
        assert backend.check("Hello") is True
        assert backend.check("wrold") is False

    def test_entry_count_line_skipped(self, dictionary_dir):
        """Test the leading entry count is not loaded as a word."""
        backend = SymSpellBackend(search_path=dictionary_dir)
        backend.load(Dictionary.named("en_US"))
        assert backend.check("7") is False

    def test_suggest(self, dictionary_dir):
        backend = SymSpellBackend(search_path=dictionary_dir)
        backend.load(Dictionary.named("en_US"))
        assert backend.suggest("wrold")[0] == "world"

    def test_suggest_returns_all_closest_candidates(self, tmp_path, make_dictionary, dictionary_texts):
        aff, _ = dictionary_texts
        make_dictionary(tmp_path, "en_US", aff=aff, dic="2\nworld\nwold\n")
        backend = SymSpellBackend(search_path=tmp_path)
        backend.load(Dictionary.named("en_US"))
        assert sorted(backend.suggest("wrold")) == ["wold", "world"]

    def test_zero_edit_distance(self, dictionary_dir):
        """Test an explicit zero distance allows exact matches only."""
        backend = SymSpellBackend(search_path=dictionary_dir, max_edit_distance=0)
        backend.load(Dictionary.named("en_US"))
        assert backend.check("hello") is True
        assert backend.suggest("wrold") == []

    def test_known_word_not_suggested_for_itself(self, dictionary_dir):
        backend = SymSpellBackend(search_path=dictionary_dir)
        backend.load(Dictionary.named("en_US"))
        assert "hello" not in backend.suggest("hello")

    def test_missing_language(self, dictionary_dir):
        with pytest.raises(DictionaryNotFoundError):
            SymSpellBackend(search_path=dictionary_dir).load(Dictionary.named("xx_XX"))

    def test_empty_wordlist(self, tmp_path, make_dictionary, dictionary_texts):
        aff, _ = dictionary_texts
        make_dictionary(tmp_path, "empty", aff=aff, dic="0\n")
        with pytest.raises(MalformedDictionaryError):
            SymSpellBackend(search_path=tmp_path).load(Dictionary.named("empty"))

    def test_contents_not_supported(self):
        with pytest.raises(UnsupportedOperationError):
            SymSpellBackend().load(Dictionary.from_contents(), contents=b"PK")
