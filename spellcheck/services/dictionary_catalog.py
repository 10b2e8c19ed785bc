"""
Discovery of installed Hunspell-style dictionaries.

A dictionary is a pair of files sharing a base name (the language
identifier): ``<name>.aff`` with affix rules and ``<name>.dic`` with the word
list. Only file names are inspected; contents are never read.
"""
from pathlib import Path
from typing import List, NamedTuple, Optional, Union

from spellcheck.config import settings
from spellcheck.utils.logger import get_logger

logger = get_logger("services.dictionary_catalog")

AFFIX_EXTENSION = ".aff"
WORDLIST_EXTENSION = ".dic"

PathLike = Union[str, Path]


class DictionaryFiles(NamedTuple):
    """Affix and word-list files of one dictionary."""
    language: str
    affix_path: Path
    wordlist_path: Path

    @property
    def base_path(self) -> Path:
        """Path without extension, as expected by Hunspell loaders."""
        return self.affix_path.with_suffix("")


class DictionaryCatalog:
    """Lists and resolves dictionaries under a search directory."""

    def __init__(self, search_path: Optional[PathLike] = None):
        """
        Args:
            search_path: Directory to scan (default from config)
        """
        self.search_path = Path(search_path) if search_path else settings.dictionary_path

    def _resolve_path(self, path: Optional[PathLike]) -> Path:
        return Path(path) if path else self.search_path

    def list(self, path: Optional[PathLike] = None) -> List[str]:
        """
        List language identifiers with both an affix and a word-list file.

        Args:
            path: Directory to scan (defaults to the catalog's search path)

        Returns:
            Sorted, de-duplicated language identifiers; empty if the directory
            is missing or unreadable
        """
        directory = self._resolve_path(path)

        try:
            entries = list(directory.iterdir())
        except OSError as e:
            logger.debug(
                "Dictionary directory not readable",
                path=str(directory),
                error=str(e),
            )
            return []

        affix_names = set()
        wordlist_names = set()
        for entry in entries:
            if entry.suffix == AFFIX_EXTENSION:
                affix_names.add(entry.stem)
            elif entry.suffix == WORDLIST_EXTENSION:
                wordlist_names.add(entry.stem)

        languages = sorted(name for name in affix_names & wordlist_names if name)

        logger.debug(
            "Dictionaries discovered",
            path=str(directory),
            count=len(languages),
        )
        return languages

    def find(self, language: str, path: Optional[PathLike] = None) -> Optional[DictionaryFiles]:
        """
        Resolve a language identifier to its dictionary files.

        "en-US" and "en_US" are treated as the same identifier.

        Args:
            language: Language identifier (e.g. "en_US")
            path: Directory to search (defaults to the catalog's search path)

        Returns:
            DictionaryFiles if both files exist, None otherwise
        """
        if not language or "/" in language or "\\" in language:
            return None

        directory = self._resolve_path(path)

        for candidate in _language_variants(language):
            affix_path = directory / f"{candidate}{AFFIX_EXTENSION}"
            wordlist_path = directory / f"{candidate}{WORDLIST_EXTENSION}"
            if affix_path.is_file() and wordlist_path.is_file():
                return DictionaryFiles(candidate, affix_path, wordlist_path)

        return None

    def __contains__(self, language: str) -> bool:
        return self.find(language) is not None


def _language_variants(language: str) -> List[str]:
    """The identifier as given, then with '-' and '_' swapped."""
    variants = [language]
    if "-" in language:
        variants.append(language.replace("-", "_"))
    elif "_" in language:
        variants.append(language.replace("_", "-"))
    return variants


def list_dictionaries(path: Optional[PathLike] = None) -> List[str]:
    """List dictionaries under a directory (default from config)."""
    return DictionaryCatalog(path).list()
