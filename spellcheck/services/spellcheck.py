"""
Spell-check engine: backend selection, the active dictionary, the custom word
overlay and the public checking contract.
"""
from pathlib import Path
from typing import Dict, List, Optional, Union

from spellcheck.config import settings
from spellcheck.models.dictionary import CustomWordList, Dictionary
from spellcheck.schemas.spellcheck import EngineStatus, MisspelledRange
from spellcheck.services.backend_registry import (
    create_backend,
    get_backend_for_contents,
    get_backend_order_for_language,
    normalize_preference,
)
from spellcheck.services.dictionary_catalog import DictionaryCatalog
from spellcheck.services.spellcheck_base import (
    DictionaryNotFoundError,
    MalformedDictionaryError,
    SpellcheckBackend,
    UnsupportedOperationError,
)
from spellcheck.utils.logger import get_logger
from spellcheck.utils.tokenizer import TextInput, iter_words
from spellcheck.utils.validators import (
    validate_contents,
    validate_language,
    validate_path,
    validate_text,
    validate_word,
)

logger = get_logger("services.spellcheck")


def has_letter(word: str) -> bool:
    """Numbers and other letterless tokens are never reported."""
    return any(char.isalpha() for char in word)


class SpellcheckEngine:
    """
    One independent spell-checking session.

    Owns one backend and the active dictionary. Replacing the dictionary
    builds a new backend first and swaps it in only when loading succeeded,
    so a failed load leaves the previous dictionary active.

    Not thread-safe: use one engine per thread. Engines share no state.

    Example:
        >>> engine = SpellcheckEngine(search_path="/usr/share/hunspell")
        >>> engine.set_dictionary("en_US")
        True
        >>> [r.model_dump() for r in engine.check_spelling("hello wrold")]
        [{'start': 6, 'end': 11}]
    """

    def __init__(
        self,
        backend: Optional[str] = None,
        search_path: Optional[Union[str, Path]] = None,
        suggestion_count: Optional[int] = None,
        persist_custom_words: Optional[bool] = None,
        min_word_length: Optional[int] = None,
    ):
        """
        Initialize spell-check engine.

        Args:
            backend: Backend preference: auto, hunspell, enchant or symspell (default from config)
            search_path: Dictionary directory (default from config)
            suggestion_count: Maximum suggestions per word (default from config)
            persist_custom_words: Keep added/removed words across dictionary reloads (default from config)
            min_word_length: Skip shorter words in check_spelling (default from config)
        """
        self._preference = normalize_preference(backend)
        self._search_path = Path(search_path) if search_path else settings.dictionary_path
        self._catalog = DictionaryCatalog(self._search_path)
        self._suggestion_count = (
            settings.SPELLCHECK_SUGGESTION_COUNT if suggestion_count is None else suggestion_count
        )
        self._persist_custom_words = (
            settings.SPELLCHECK_PERSIST_CUSTOM_WORDS if persist_custom_words is None else persist_custom_words
        )
        self._min_word_length = (
            settings.SPELLCHECK_MIN_WORD_LENGTH if min_word_length is None else min_word_length
        )

        self._backend: Optional[SpellcheckBackend] = None
        self._dictionary: Optional[Dictionary] = None
        self._custom_words = CustomWordList()

        logger.debug(
            "Spell-check engine initialized",
            backend=self._preference,
            search_path=str(self._search_path),
            suggestion_count=self._suggestion_count,
            persist_custom_words=self._persist_custom_words,
        )

    @property
    def backend(self) -> Optional[SpellcheckBackend]:
        return self._backend

    @property
    def dictionary(self) -> Optional[Dictionary]:
        return self._dictionary

    @property
    def custom_words(self) -> CustomWordList:
        return self._custom_words

    # Dictionary loading

    def set_dictionary(self, language: str, contents: Optional[bytes] = None) -> bool:
        """
        Load a dictionary by language, or from raw contents when given.

        Args:
            language: Language identifier (e.g. "en_US")
            contents: Optional raw dictionary payload (bytes-like)

        Returns:
            True if the dictionary is now active, False otherwise

        Raises:
            BadArgumentError: If language is not a string or contents is not bytes-like
        """
        language = validate_language(language)
        if contents is not None:
            return self.set_dictionary_to_contents(contents, language=language)
        return self.set_dictionary_by_language(language)

    def set_dictionary_by_language(self, language: str) -> bool:
        """
        Resolve and load a dictionary for a language.

        Backends are tried in policy order; the first one that loads wins.
        On failure the previous dictionary stays active.

        Returns:
            True if a dictionary was loaded, False if none matched
        """
        language = validate_language(language)

        for name in get_backend_order_for_language(self._preference):
            backend = create_backend(name, search_path=self._search_path)
            try:
                loaded = backend.load(Dictionary.named(language))
            except DictionaryNotFoundError:
                logger.debug("Backend has no dictionary for language", backend=name, language=language)
                continue
            except MalformedDictionaryError as e:
                logger.warning(
                    "Dictionary found but could not be loaded",
                    backend=name,
                    language=language,
                    error=str(e),
                )
                continue

            self._install(backend, loaded)
            return True

        logger.warning(
            "No dictionary found for language",
            language=language,
            backend=self._preference,
            search_path=str(self._search_path),
        )
        return False

    def set_dictionary_to_contents(self, contents: bytes, language: str = "") -> bool:
        """
        Load a dictionary from an in-memory payload via the affix backend.

        The payload is copied before parsing; no reference to the caller's
        buffer is kept after this call returns.

        Args:
            contents: Raw dictionary payload (bytes-like)
            language: Optional language identifier to record

        Returns:
            True if the payload was parsed and is now active, False otherwise
        """
        data = validate_contents(contents)
        language = validate_language(language)

        name = get_backend_for_contents()
        backend = create_backend(name)
        try:
            loaded = backend.load(Dictionary.from_contents(language), contents=data)
        except (MalformedDictionaryError, UnsupportedOperationError) as e:
            logger.warning(
                "Dictionary contents rejected",
                backend=name,
                size_bytes=len(data),
                error=str(e),
            )
            return False

        self._install(backend, loaded)
        return True

    def _install(self, backend: SpellcheckBackend, dictionary: Dictionary) -> None:
        """Swap in a fully loaded backend and dictionary."""
        if self._persist_custom_words:
            dictionary.custom_words = self._custom_words.copy()

        previous = self._dictionary
        self._backend = backend
        self._dictionary = dictionary
        self._custom_words = dictionary.custom_words

        logger.info(
            "Dictionary activated",
            language=dictionary.language_code,
            source=dictionary.source.value,
            backend=backend.NAME,
            replaced=previous.language_code if previous else None,
        )

    # Checking

    def is_misspelled(self, word: str) -> bool:
        """
        Check a single word.

        Removed words are always misspelled, added words never are; anything
        else is decided by the backend. Empty words are not misspelled.

        Raises:
            BadArgumentError: If word is not a string
        """
        return self._is_misspelled(validate_word(word))

    def _is_misspelled(self, word: str) -> bool:
        if not word:
            return False

        verdict = self._custom_words.lookup(word)
        if verdict is not None:
            return not verdict

        if not has_letter(word):
            return False

        if self._backend is None or not self._backend.is_loaded():
            return False

        return not self._backend.check(word)

    def check_spelling(self, text: TextInput) -> List[MisspelledRange]:
        """
        Find misspelled words in text.

        Args:
            text: A str, or a sequence of UTF-16 code units

        Returns:
            Ascending, non-overlapping ranges in UTF-16 code units

        Raises:
            BadArgumentError: If text is neither a str nor code units
        """
        text = validate_text(text)
        if len(text) == 0:
            return []

        ranges: List[MisspelledRange] = []
        verdicts: Dict[str, bool] = {}

        for token in iter_words(text):
            if len(token.word) < self._min_word_length:
                continue

            misspelled = verdicts.get(token.word)
            if misspelled is None:
                misspelled = self._is_misspelled(token.word)
                verdicts[token.word] = misspelled

            if misspelled:
                ranges.append(MisspelledRange(start=token.start, end=token.end))

        logger.debug(
            "Text checked",
            unique_words=len(verdicts),
            misspelled_count=len(ranges),
        )
        return ranges

    def get_corrections_for_misspelling(self, word: str) -> List[str]:
        """
        Get ranked corrections for a word, misspelled or not.

        Returns an empty list when no dictionary is loaded or the backend
        cannot suggest. Words removed from the dictionary are never offered.

        Raises:
            BadArgumentError: If word is not a string
        """
        word = validate_word(word)
        if not word or self._backend is None:
            return []

        # Backends return every candidate; the cap applies after filtering
        corrections: List[str] = []
        for candidate in self._backend.suggest(word):
            if len(corrections) >= self._suggestion_count:
                break
            if candidate in corrections or self._custom_words.is_removed(candidate):
                continue
            corrections.append(candidate)

        return corrections

    # Custom words

    def add(self, word: str) -> None:
        """Treat a word as correctly spelled for this session."""
        word = validate_word(word)
        self._custom_words.add(word)
        logger.debug("Custom word added", word=word)

    def remove(self, word: str) -> None:
        """Treat a word as misspelled for this session."""
        word = validate_word(word)
        self._custom_words.remove(word)
        logger.debug("Custom word removed", word=word)

    # Discovery and status

    def get_available_dictionaries(self, path: Optional[Union[str, Path]] = None) -> List[str]:
        """
        List dictionaries installed under a directory.

        Args:
            path: Directory to scan (defaults to the engine's search path)

        Returns:
            Sorted language identifiers; empty if the directory is unusable
        """
        return self._catalog.list(validate_path(path))

    def is_loaded(self) -> bool:
        """Check if a dictionary is active."""
        return self._backend is not None and self._backend.is_loaded()

    def get_language(self) -> Optional[str]:
        """Get the active dictionary's language code."""
        return self._dictionary.language_code if self._dictionary else None

    def get_status(self) -> EngineStatus:
        """Get a snapshot of the engine's state."""
        dictionary = self._dictionary
        return EngineStatus(
            loaded=self.is_loaded(),
            language=dictionary.language_code if dictionary else None,
            source=dictionary.source.value if dictionary else None,
            location=str(dictionary.location) if dictionary and dictionary.location else None,
            backend=self._backend.capabilities if self._backend else None,
            custom_added_count=len(self._custom_words.added),
            custom_removed_count=len(self._custom_words.removed),
        )


def create_spellcheck_engine(language: Optional[str] = None, **kwargs) -> SpellcheckEngine:
    """
    Create an engine and optionally load a dictionary into it.

    Args:
        language: Language to load right away (None to skip)
        **kwargs: Passed to SpellcheckEngine

    Returns:
        SpellcheckEngine instance (check is_loaded() if a language was given)
    """
    engine = SpellcheckEngine(**kwargs)

    if language is not None:
        logger.info("Initializing spell-check engine", language=language)
        if engine.set_dictionary(language):
            logger.info("Spell-check engine initialized successfully", language=language)
        else:
            logger.warning("Failed to initialize spell-check engine", language=language)

    return engine
