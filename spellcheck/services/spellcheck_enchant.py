"""
Native spell-check backend using the host's Enchant broker (pyenchant).

Enchant fronts whatever spell-checking providers the system has installed
(Hunspell, Nuspell, Aspell, AppleSpell, ...), keyed by language tag only.
Requires: pip install pyenchant, plus the enchant C library.
Note: macOS may need: brew install enchant
"""
from typing import Any, List, Optional

from spellcheck.config import settings
from spellcheck.models.dictionary import Dictionary
from spellcheck.services.spellcheck_base import (
    DictionaryNotFoundError,
    SpellcheckBackend,
)
from spellcheck.utils.logger import get_logger


logger = get_logger("services.spellcheck_enchant")

_enchant_module: Any = None


def _import_enchant():
    """Import pyenchant on first use; raises ImportError without the C library."""
    global _enchant_module
    if _enchant_module is None:
        import enchant
        _enchant_module = enchant
    return _enchant_module


class EnchantBackend(SpellcheckBackend):
    """
    Host spell-check facility via Enchant.

    Cannot load raw dictionary contents. Suggestion support is a
    configuration-level capability of the host.
    """

    NAME = "enchant"
    SUPPORTS_CONTENTS_LOADING = False

    def __init__(
        self,
        suggestions_enabled: Optional[bool] = None,
    ):
        """
        Initialize Enchant backend.

        Args:
            suggestions_enabled: Whether the host offers suggestions (default from config)
        """
        super().__init__()
        self._broker = None
        self._dict = None
        self._suggestions_enabled = (
            settings.SPELLCHECK_NATIVE_SUGGESTIONS if suggestions_enabled is None else suggestions_enabled
        )

    @classmethod
    def is_available(cls) -> bool:
        """Check if pyenchant and the enchant C library can be loaded."""
        try:
            _import_enchant()
            return True
        except ImportError as e:
            logger.debug("Enchant not available", error=str(e))
            return False

    @property
    def supports_suggestions(self) -> bool:
        return self._suggestions_enabled

    def _get_broker(self):
        if self._broker is None:
            self._broker = _import_enchant().Broker()
        return self._broker

    def has_dictionary(self, language: str) -> bool:
        """Check whether the host can serve a language."""
        if not language or not self.is_available():
            return False
        return self._get_broker().dict_exists(language)

    def _load_named(self, dictionary: Dictionary) -> Dictionary:
        language = dictionary.language_code
        if not self.has_dictionary(language):
            logger.info("No Enchant dictionary for language", language=language)
            raise DictionaryNotFoundError(language, self.NAME)

        enchant = _import_enchant()
        try:
            enchant_dict = self._get_broker().request_dict(language)
        except enchant.errors.DictNotFoundError as e:
            raise DictionaryNotFoundError(language, self.NAME) from e

        self._dict = enchant_dict
        logger.info(
            "Enchant dictionary loaded",
            language=language,
            provider=enchant_dict.provider.name,
        )
        return dictionary

    def check(self, word: str) -> bool:
        if not word or self._dict is None:
            return True
        return self._dict.check(word)

    def _suggest(self, word: str) -> List[str]:
        if not word:
            return []
        return list(self._dict.suggest(word))

    def is_loaded(self) -> bool:
        """Check if a dictionary is loaded."""
        return self._dict is not None
