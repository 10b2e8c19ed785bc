"""
Word-list spell-check backend using SymSpellPy.

Reads the word list of a catalog dictionary (affix flags stripped, affix rules
ignored) and suggests corrections by edit distance.
"""
import time
from pathlib import Path
from typing import List, Optional, Union

from symspellpy import SymSpell, Verbosity

from spellcheck.config import settings
from spellcheck.models.dictionary import Dictionary
from spellcheck.services.dictionary_catalog import DictionaryCatalog
from spellcheck.services.spellcheck_base import (
    DictionaryNotFoundError,
    MalformedDictionaryError,
    SpellcheckBackend,
)
from spellcheck.utils.logger import get_logger


logger = get_logger("services.spellcheck_symspell")


def parse_wordlist_line(line: str) -> str:
    """
    Extract the stem from one word-list line.

    Hunspell lines look like ``word/FLAGS [morphology]``; an escaped slash
    (``\\/``) belongs to the word.
    """
    entry = line.strip()
    if not entry or entry.startswith("#"):
        return ""

    entry = entry.split(None, 1)[0].split("\t", 1)[0]

    stem = []
    escaped = False
    for char in entry:
        if escaped:
            stem.append(char)
            escaped = False
        elif char == "\\":
            escaped = True
        elif char == "/":
            break
        else:
            stem.append(char)
    return "".join(stem)


class SymSpellBackend(SpellcheckBackend):
    """
    SymSpell backend over the stems of a Hunspell word list.

    Fast edit-distance suggestions; inflected forms that only exist through
    affix rules are not known to it.
    """

    NAME = "symspell"
    SUPPORTS_CONTENTS_LOADING = False
    SUPPORTS_SUGGESTIONS = True

    def __init__(
        self,
        search_path: Optional[Union[str, Path]] = None,
        max_edit_distance: Optional[int] = None,
        prefix_length: Optional[int] = None,
        catalog: Optional[DictionaryCatalog] = None,
    ):
        """
        Initialize SymSpell backend.

        Args:
            search_path: Directory holding dictionary pairs (default from config)
            max_edit_distance: Maximum edit distance for suggestions (default from config)
            prefix_length: SymSpell optimization parameter (default from config)
            catalog: Catalog used to resolve language identifiers
        """
        super().__init__()
        self._symspell: Optional[SymSpell] = None
        self._catalog = catalog or DictionaryCatalog(search_path)

        self._max_edit_distance = (
            settings.SPELLCHECK_MAX_EDIT_DISTANCE if max_edit_distance is None else max_edit_distance
        )
        self._prefix_length = settings.SPELLCHECK_PREFIX_LENGTH if prefix_length is None else prefix_length

    def _load_named(self, dictionary: Dictionary) -> Dictionary:
        files = self._catalog.find(dictionary.language_code)
        if files is None:
            raise DictionaryNotFoundError(dictionary.language_code, self.NAME)

        start_time = time.time()
        symspell = SymSpell(
            max_dictionary_edit_distance=self._max_edit_distance,
            prefix_length=self._prefix_length,
        )

        word_count = 0
        try:
            with open(files.wordlist_path, "r", encoding="utf-8", errors="replace") as f:
                for line_number, line in enumerate(f):
                    # First line of a .dic file is the approximate entry count
                    if line_number == 0 and line.strip().isdigit():
                        continue
                    word = parse_wordlist_line(line)
                    if word:
                        # Use count=1 for all words (no frequency data available)
                        symspell.create_dictionary_entry(word, 1)
                        word_count += 1
        except OSError as e:
            raise MalformedDictionaryError(f"could not read {files.wordlist_path}: {e}") from e

        if word_count == 0:
            logger.error(
                "No words loaded from word list",
                wordlist_path=str(files.wordlist_path),
            )
            raise MalformedDictionaryError(f"word list {files.wordlist_path} is empty")

        self._symspell = symspell
        logger.info(
            "SymSpell dictionary built from word list",
            language=dictionary.language_code,
            word_count=word_count,
            build_time_seconds=round(time.time() - start_time, 2),
            wordlist_path=str(files.wordlist_path),
        )
        return dictionary.with_location(files.base_path)

    def check(self, word: str) -> bool:
        """Known as written, or in lower case (capitalized sentence starts)."""
        if not word or self._symspell is None:
            return True
        words = self._symspell.words
        return word in words or word.lower() in words

    def _suggest(self, word: str) -> List[str]:
        if not word:
            return []

        word_lower = word.lower()
        suggestions = self._symspell.lookup(
            word_lower,
            Verbosity.CLOSEST,
            max_edit_distance=self._max_edit_distance,
        )
        # A known word comes back as its own distance-0 suggestion
        return [s.term for s in suggestions if s.term != word_lower]

    def is_loaded(self) -> bool:
        """Check if dictionary is loaded."""
        return self._symspell is not None
