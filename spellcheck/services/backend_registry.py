"""
Backend registry for spell-check engines.

Provides backend definitions, availability checks, the selection policy and
factory functions used by the engine.
"""
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from spellcheck.config import BACKEND_CHOICES, settings
from spellcheck.services.spellcheck_base import BadArgumentError, SpellcheckBackend
from spellcheck.utils.logger import get_logger


logger = get_logger("services.backend_registry")


# Backend definitions
SPELLCHECK_BACKENDS: Dict[str, Dict[str, Any]] = {
    "hunspell": {
        "native": False,
        "supports_contents_loading": True,
        "description": "Hunspell affix-rule engine (spylls)",
    },
    "enchant": {
        "native": True,
        "supports_contents_loading": False,
        "description": "Host spell-checker via Enchant (pyenchant)",
    },
    "symspell": {
        "native": False,
        "supports_contents_loading": False,
        "description": "Word-list edit-distance engine (symspellpy)",
    },
}

# Order tried for a language when the preference is "auto": native first
AUTO_BACKEND_ORDER = ["enchant", "hunspell"]

# The only backend able to parse raw dictionary contents
CONTENTS_BACKEND = "hunspell"


def _get_backend_class(name: str):
    """Import a backend class lazily so missing optional libraries only affect that backend."""
    if name == "hunspell":
        from spellcheck.services.spellcheck_hunspell import HunspellBackend
        return HunspellBackend
    if name == "enchant":
        from spellcheck.services.spellcheck_enchant import EnchantBackend
        return EnchantBackend
    if name == "symspell":
        from spellcheck.services.spellcheck_symspell import SymSpellBackend
        return SymSpellBackend
    raise BadArgumentError(
        f"Unsupported spell-check backend: {name}. "
        f"Supported backends: {', '.join(SPELLCHECK_BACKENDS)}"
    )


def is_backend_available(name: str) -> bool:
    """
    Check if a backend can be used in this process.

    Args:
        name: Backend name (e.g., "hunspell", "enchant")

    Returns:
        True if the backend is known and its engine can be loaded
    """
    name = name.lower()
    if name not in SPELLCHECK_BACKENDS:
        return False

    try:
        backend_class = _get_backend_class(name)
    except ImportError as e:
        logger.debug("Backend library not installed", backend=name, error=str(e))
        return False

    return backend_class.is_available()


def get_available_backends() -> List[Dict[str, Any]]:
    """
    Get list of backends usable in this process.

    Returns:
        List of dicts with name, description and capability info
    """
    available = []
    for name, config in SPELLCHECK_BACKENDS.items():
        if is_backend_available(name):
            available.append({
                "name": name,
                "description": config["description"],
                "native": config["native"],
                "supports_contents_loading": config["supports_contents_loading"],
            })
    return available


def normalize_preference(preference: Optional[str]) -> str:
    """Validate a backend preference, defaulting to the configured one."""
    preference = (preference or settings.SPELLCHECK_BACKEND).lower()
    if preference not in BACKEND_CHOICES:
        raise BadArgumentError(
            f"Unsupported backend preference: {preference}. "
            f"Options: {', '.join(BACKEND_CHOICES)}"
        )
    return preference


def get_backend_order_for_language(preference: Optional[str] = None) -> List[str]:
    """
    Backends to try, in order, when loading a dictionary by language.

    "auto" prefers the native engine when it is available and falls back to
    the affix engine. An explicit preference yields only that backend.

    Args:
        preference: Backend preference (default from config)

    Returns:
        Backend names in the order they should be tried
    """
    preference = normalize_preference(preference)

    if preference != "auto":
        return [preference]

    return [name for name in AUTO_BACKEND_ORDER if is_backend_available(name)]


def get_backend_for_contents() -> str:
    """Backend used for raw dictionary contents, whatever the preference."""
    return CONTENTS_BACKEND


def create_backend(
    name: str,
    search_path: Optional[Union[str, Path]] = None,
) -> SpellcheckBackend:
    """
    Factory function to create a spell-check backend.

    Args:
        name: Backend name ("hunspell", "enchant" or "symspell")
        search_path: Dictionary directory for file-based backends

    Returns:
        SpellcheckBackend implementation

    Raises:
        BadArgumentError: If the backend is not supported
    """
    name = name.lower()
    backend_class = _get_backend_class(name)

    if name == "enchant":
        return backend_class()

    return backend_class(search_path=search_path)
