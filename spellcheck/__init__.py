"""
Spell-checking engine: misspelled-word ranges, corrections and a per-session
custom word list over pluggable dictionary backends.
"""
from spellcheck.schemas.spellcheck import MisspelledRange
from spellcheck.services.dictionary_catalog import list_dictionaries
from spellcheck.services.spellcheck import SpellcheckEngine, create_spellcheck_engine
from spellcheck.services.spellcheck_base import (
    BadArgumentError,
    DictionaryNotFoundError,
    MalformedDictionaryError,
    SpellcheckError,
    UnsupportedOperationError,
)
from spellcheck.utils.tokenizer import tokenize

__version__ = "0.1.0"

__all__ = [
    "SpellcheckEngine",
    "create_spellcheck_engine",
    "MisspelledRange",
    "list_dictionaries",
    "tokenize",
    "SpellcheckError",
    "BadArgumentError",
    "DictionaryNotFoundError",
    "MalformedDictionaryError",
    "UnsupportedOperationError",
]
