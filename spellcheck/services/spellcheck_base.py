"""
Abstract base class and errors for spell-check backends.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from spellcheck.models.dictionary import Dictionary, DictionarySource
from spellcheck.schemas.spellcheck import BackendCapabilities


class SpellcheckError(Exception):
    """Base exception for spell-check errors."""

    pass


class BadArgumentError(SpellcheckError, TypeError):
    """Raised when a call receives a missing or malformed argument."""

    pass


class DictionaryNotFoundError(SpellcheckError):
    """Raised when a named language has no matching dictionary."""

    def __init__(self, language: str, backend: Optional[str] = None):
        message = f"dictionary {language!r} not found"
        if backend:
            message += f" for backend {backend}"
        super().__init__(message)
        self.language = language
        self.backend = backend


class MalformedDictionaryError(SpellcheckError):
    """Raised when raw dictionary contents cannot be parsed."""

    pass


class UnsupportedOperationError(SpellcheckError):
    """Raised when a backend is asked for something it cannot do."""

    pass


class SpellcheckBackend(ABC):
    """
    Abstract base class for spell-check backend implementations.

    A backend holds at most one loaded dictionary. ``load`` builds the new
    handle completely before replacing the previous one, so a failed load
    leaves the backend as it was.
    """

    NAME: str = "base"
    SUPPORTS_CONTENTS_LOADING: bool = False
    SUPPORTS_SUGGESTIONS: bool = True

    def __init__(self):
        self._dictionary: Optional[Dictionary] = None

    @classmethod
    def is_available(cls) -> bool:
        """Check whether the backend's engine can be used in this process."""
        return True

    @property
    def supports_contents_loading(self) -> bool:
        return self.SUPPORTS_CONTENTS_LOADING

    @property
    def supports_suggestions(self) -> bool:
        return self.SUPPORTS_SUGGESTIONS

    @property
    def capabilities(self) -> BackendCapabilities:
        return BackendCapabilities(
            name=self.NAME,
            supports_contents_loading=self.supports_contents_loading,
            supports_suggestions=self.supports_suggestions,
        )

    @property
    def dictionary(self) -> Optional[Dictionary]:
        return self._dictionary

    def load(self, dictionary: Dictionary, contents: Optional[bytes] = None) -> Dictionary:
        """
        Load a dictionary, replacing any previously loaded one.

        Args:
            dictionary: Dictionary to load; its source selects named or contents loading
            contents: Raw dictionary payload, required for raw-contents dictionaries

        Returns:
            The loaded dictionary (with its resolved location, if any)

        Raises:
            DictionaryNotFoundError: If a named language cannot be resolved
            MalformedDictionaryError: If raw contents cannot be parsed
            UnsupportedOperationError: If the backend cannot load raw contents
        """
        if dictionary.source is DictionarySource.RAW_CONTENTS:
            if not self.supports_contents_loading:
                raise UnsupportedOperationError(f"{self.NAME} backend cannot load dictionary contents")
            if contents is None:
                raise MalformedDictionaryError("no dictionary contents supplied")
            loaded = self._load_contents(dictionary, contents)
        else:
            loaded = self._load_named(dictionary)

        self._dictionary = loaded
        return loaded

    @abstractmethod
    def _load_named(self, dictionary: Dictionary) -> Dictionary:
        """Resolve and load a dictionary by language identifier."""
        pass

    def _load_contents(self, dictionary: Dictionary, contents: bytes) -> Dictionary:
        """Load a dictionary from raw bytes."""
        raise UnsupportedOperationError(f"{self.NAME} backend cannot load dictionary contents")

    @abstractmethod
    def check(self, word: str) -> bool:
        """
        Check a single word against the loaded dictionary.

        Args:
            word: Word to check

        Returns:
            True if the word is spelled correctly
        """
        pass

    def suggest(self, word: str) -> List[str]:
        """
        Get ordered correction candidates for a word.

        Returns an empty list when the backend has no suggestion capability
        or no dictionary is loaded.
        """
        if not self.supports_suggestions or not self.is_loaded():
            return []
        return self._suggest(word)

    @abstractmethod
    def _suggest(self, word: str) -> List[str]:
        """Backend-specific suggestion lookup."""
        pass

    @abstractmethod
    def is_loaded(self) -> bool:
        """Check if a dictionary is loaded and ready."""
        pass

    def get_language(self) -> Optional[str]:
        """Get the language code of the loaded dictionary."""
        return self._dictionary.language_code if self._dictionary else None
