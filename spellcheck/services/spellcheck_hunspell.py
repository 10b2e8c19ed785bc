"""
Affix-rule spell-check backend using spylls (pure-Python Hunspell).

Loads ``<lang>.aff``/``<lang>.dic`` pairs found by the dictionary catalog, or
a raw payload: a ZIP archive holding one ``.aff`` and one ``.dic`` member, the
layout used by LibreOffice/OpenOffice dictionary extensions.
"""
import io
import itertools
import tempfile
import time
import zipfile
from pathlib import Path
from typing import List, Optional, Union

from spylls.hunspell import Dictionary as HunspellDictionary

from spellcheck.models.dictionary import Dictionary
from spellcheck.services.dictionary_catalog import (
    AFFIX_EXTENSION,
    WORDLIST_EXTENSION,
    DictionaryCatalog,
)
from spellcheck.services.spellcheck_base import (
    DictionaryNotFoundError,
    MalformedDictionaryError,
    SpellcheckBackend,
)
from spellcheck.utils.logger import get_logger


logger = get_logger("services.spellcheck_hunspell")

TYPOGRAPHIC_APOSTROPHE = "\N{RIGHT SINGLE QUOTATION MARK}"

# Bound on the lazy spylls suggestion stream
MAX_SUGGESTION_CANDIDATES = 25


class HunspellBackend(SpellcheckBackend):
    """
    Hunspell-compatible backend.

    The only backend able to load dictionaries from raw contents.
    """

    NAME = "hunspell"
    SUPPORTS_CONTENTS_LOADING = True
    SUPPORTS_SUGGESTIONS = True

    def __init__(
        self,
        search_path: Optional[Union[str, Path]] = None,
        max_candidates: Optional[int] = None,
        catalog: Optional[DictionaryCatalog] = None,
    ):
        """
        Initialize Hunspell backend.

        Args:
            search_path: Directory holding dictionary pairs (default from config)
            max_candidates: Upper bound on suggestions generated per word
            catalog: Catalog used to resolve language identifiers
        """
        super().__init__()
        self._hunspell: Optional[HunspellDictionary] = None
        self._catalog = catalog or DictionaryCatalog(search_path)
        self._max_candidates = MAX_SUGGESTION_CANDIDATES if max_candidates is None else max_candidates

    def _load_named(self, dictionary: Dictionary) -> Dictionary:
        """Load the .aff/.dic pair the catalog resolves for the language."""
        files = self._catalog.find(dictionary.language_code)
        if files is None:
            logger.info(
                "No Hunspell dictionary for language",
                language=dictionary.language_code,
                search_path=str(self._catalog.search_path),
            )
            raise DictionaryNotFoundError(dictionary.language_code, self.NAME)

        start_time = time.time()
        try:
            hunspell = HunspellDictionary.from_files(str(files.base_path))
        except Exception as e:
            logger.error(
                "Failed to read Hunspell dictionary files",
                language=dictionary.language_code,
                affix_path=str(files.affix_path),
                error=str(e),
            )
            raise MalformedDictionaryError(
                f"could not parse dictionary {dictionary.language_code!r}: {e}"
            ) from e

        self._hunspell = hunspell
        logger.info(
            "Hunspell dictionary loaded from files",
            language=dictionary.language_code,
            load_time_seconds=round(time.time() - start_time, 2),
            affix_path=str(files.affix_path),
        )
        return dictionary.with_location(files.base_path)

    def _load_contents(self, dictionary: Dictionary, contents: bytes) -> Dictionary:
        """Load a dictionary from a ZIP payload held in memory."""
        start_time = time.time()

        try:
            with zipfile.ZipFile(io.BytesIO(contents)) as archive:
                names = archive.namelist()
                affix_members = [name for name in names if name.endswith(AFFIX_EXTENSION)]
                wordlist_members = [name for name in names if name.endswith(WORDLIST_EXTENSION)]
                if len(affix_members) != 1 or len(wordlist_members) != 1:
                    raise MalformedDictionaryError(
                        f"dictionary contents must hold exactly one {AFFIX_EXTENSION} and one "
                        f"{WORDLIST_EXTENSION} file (found {len(affix_members)} and {len(wordlist_members)})"
                    )
                affix_data = archive.read(affix_members[0])
                wordlist_data = archive.read(wordlist_members[0])
        except (zipfile.BadZipFile, RuntimeError) as e:  # RuntimeError: encrypted members
            raise MalformedDictionaryError(f"dictionary contents are not a ZIP archive: {e}") from e

        # spylls reads dictionaries by path; the files only live for this call
        with tempfile.TemporaryDirectory(prefix="spellcheck_contents_") as temp_dir:
            base_path = Path(temp_dir) / "dictionary"
            base_path.with_suffix(AFFIX_EXTENSION).write_bytes(affix_data)
            base_path.with_suffix(WORDLIST_EXTENSION).write_bytes(wordlist_data)
            try:
                hunspell = HunspellDictionary.from_files(str(base_path))
            except Exception as e:
                logger.warning(
                    "Failed to parse dictionary contents",
                    size_bytes=len(contents),
                    error=str(e),
                )
                raise MalformedDictionaryError(f"could not parse dictionary contents: {e}") from e

        self._hunspell = hunspell
        logger.info(
            "Hunspell dictionary loaded from contents",
            language=dictionary.language_code,
            size_bytes=len(contents),
            load_time_seconds=round(time.time() - start_time, 2),
        )
        return dictionary

    def check(self, word: str) -> bool:
        """Check a word, retrying typographic apostrophes as ASCII ones."""
        if not word or self._hunspell is None:
            return True

        if self._hunspell.lookup(word):
            return True

        if TYPOGRAPHIC_APOSTROPHE in word:
            return self._hunspell.lookup(word.replace(TYPOGRAPHIC_APOSTROPHE, "'"))

        return False

    def _suggest(self, word: str) -> List[str]:
        if not word:
            return []
        # spylls generates suggestions lazily, most relevant first
        return list(itertools.islice(self._hunspell.suggest(word), self._max_candidates))

    def is_loaded(self) -> bool:
        """Check if a dictionary is loaded."""
        return self._hunspell is not None
