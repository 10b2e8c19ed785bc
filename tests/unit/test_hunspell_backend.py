"""
Unit tests for the Hunspell (spylls) backend.
"""
import pytest

from spellcheck.models.dictionary import Dictionary, DictionarySource
from spellcheck.services.spellcheck_base import (
    DictionaryNotFoundError,
    MalformedDictionaryError,
)
from spellcheck.services.spellcheck_hunspell import HunspellBackend


@pytest.fixture
def loaded_backend(dictionary_dir):
    backend = HunspellBackend(search_path=dictionary_dir)
    backend.load(Dictionary.named("en_US"))
    return backend


class TestHunspellBackendCapabilities:
    """Tests for capability reporting."""

    def test_capabilities(self):
        capabilities = HunspellBackend().capabilities
        assert capabilities.name == "hunspell"
        assert capabilities.supports_contents_loading is True
        assert capabilities.supports_suggestions is True

    def test_not_loaded_initially(self):
        backend = HunspellBackend()
        assert backend.is_loaded() is False
        assert backend.get_language() is None
        assert backend.suggest("wrold") == []


class TestHunspellBackendNamedLoading:
    """Tests for loading dictionaries by language."""

    def test_load_named(self, dictionary_dir):
        """Test loading resolves the pair and records its location."""
        backend = HunspellBackend(search_path=dictionary_dir)
        loaded = backend.load(Dictionary.named("en_US"))

        assert backend.is_loaded() is True
        assert backend.get_language() == "en_US"
        assert loaded.source is DictionarySource.NAMED_PATH
        assert loaded.location == dictionary_dir / "en_US"

    def test_load_missing_language(self, dictionary_dir):
        backend = HunspellBackend(search_path=dictionary_dir)
        with pytest.raises(DictionaryNotFoundError) as exc_info:
            backend.load(Dictionary.named("xx_XX"))

        assert exc_info.value.language == "xx_XX"
        assert exc_info.value.backend == "hunspell"
        assert backend.is_loaded() is False


class TestHunspellBackendContentsLoading:
    """Tests for loading dictionaries from raw contents."""

    def test_load_zip_contents(self, dictionary_zip):
        backend = HunspellBackend()
        loaded = backend.load(Dictionary.from_contents("en_US"), contents=dictionary_zip)

        assert loaded.source is DictionarySource.RAW_CONTENTS
        assert loaded.location is None
        assert backend.check("hello") is True
        assert backend.check("wrold") is False

    def test_contents_support_suggestions(self, dictionary_zip):
        backend = HunspellBackend()
        backend.load(Dictionary.from_contents(), contents=dictionary_zip)
        assert "world" in backend.suggest("wrold")

    def test_members_in_subfolder(self, make_contents, dictionary_texts):
        """Test extension-style archives with the pair under a folder load too."""
        aff, dic = dictionary_texts
        contents = make_contents({"dictionaries/en_US.aff": aff, "dictionaries/en_US.dic": dic, "README": "x"})
        backend = HunspellBackend()
        backend.load(Dictionary.from_contents("en_US"), contents=contents)
        assert backend.check("hello") is True

    def test_no_temporary_files_left(self, dictionary_zip, tmp_path, monkeypatch):
        """Test the unpacked pair does not outlive the load call."""
        monkeypatch.setattr("tempfile.tempdir", str(tmp_path))
        backend = HunspellBackend()
        backend.load(Dictionary.from_contents(), contents=dictionary_zip)

        assert list(tmp_path.iterdir()) == []
        assert backend.check("hello") is True

    def test_not_a_zip(self):
        """Test arbitrary bytes are reported as malformed."""
        with pytest.raises(MalformedDictionaryError):
            HunspellBackend().load(Dictionary.from_contents(), contents=b"definitely not a dictionary")

    def test_zip_without_wordlist(self, make_contents, dictionary_texts):
        aff, _ = dictionary_texts
        contents = make_contents({"en_US.aff": aff})
        with pytest.raises(MalformedDictionaryError, match="exactly one"):
            HunspellBackend().load(Dictionary.from_contents(), contents=contents)

    def test_zip_with_two_affix_files(self, make_contents, dictionary_texts):
        aff, dic = dictionary_texts
        contents = make_contents({"en_US.aff": aff, "en_GB.aff": aff, "en_US.dic": dic})
        with pytest.raises(MalformedDictionaryError):
            HunspellBackend().load(Dictionary.from_contents(), contents=contents)

    def test_missing_contents(self):
        with pytest.raises(MalformedDictionaryError):
            HunspellBackend().load(Dictionary.from_contents())

    def test_failed_load_keeps_previous_dictionary(self, loaded_backend):
        """Test a malformed payload leaves the loaded dictionary in place."""
        with pytest.raises(MalformedDictionaryError):
            loaded_backend.load(Dictionary.from_contents(), contents=b"garbage")

        assert loaded_backend.get_language() == "en_US"
        assert loaded_backend.check("hello") is True


class TestHunspellBackendChecking:
    """Tests for check() and suggest()."""

    def test_check_known_word(self, loaded_backend):
        assert loaded_backend.check("hello") is True
        assert loaded_backend.check("world") is True

    def test_check_unknown_word(self, loaded_backend):
        assert loaded_backend.check("wrold") is False

    def test_check_contraction(self, loaded_backend):
        assert loaded_backend.check("don't") is True

    def test_typographic_apostrophe_retried(self, loaded_backend):
        """Test U+2019 falls back to the ASCII apostrophe form."""
        assert loaded_backend.check("don" + chr(0x2019) + "t") is True

    def test_empty_word_is_correct(self, loaded_backend):
        assert loaded_backend.check("") is True

    def test_suggest(self, loaded_backend):
        suggestions = loaded_backend.suggest("wrold")
        assert "world" in suggestions

    def test_suggest_respects_candidate_bound(self, dictionary_dir):
        backend = HunspellBackend(search_path=dictionary_dir, max_candidates=1)
        backend.load(Dictionary.named("en_US"))
        assert len(backend.suggest("wrold")) <= 1

    def test_suggest_empty_word(self, loaded_backend):
        assert loaded_backend.suggest("") == []
