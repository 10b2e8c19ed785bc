"""
Argument validation for the engine's public methods.
"""
import os
from array import array
from typing import Any, Optional

from spellcheck.services.spellcheck_base import BadArgumentError
from spellcheck.utils.logger import get_logger

logger = get_logger("validators")

TEXT_SEQUENCE_TYPES = (list, tuple, array)


def validate_word(word: Any, name: str = "word") -> str:
    """
    Ensure a single-word argument is a string.

    Args:
        word: Argument received from the caller
        name: Argument name for the error message

    Returns:
        The word unchanged

    Raises:
        BadArgumentError: If the word is not a str
    """
    if not isinstance(word, str):
        logger.warning("Bad argument", argument=name, type=type(word).__name__)
        raise BadArgumentError(f"Bad argument: {name} must be a string, got {type(word).__name__}")
    return word


def validate_language(language: Any) -> str:
    """Ensure a language identifier is a string."""
    return validate_word(language, name="language")


def validate_text(text: Any) -> Any:
    """
    Ensure text is a str or a sequence of UTF-16 code units.

    Raises:
        BadArgumentError: For any other type, or code units outside 0..0xFFFF
    """
    if isinstance(text, str):
        return text

    if isinstance(text, TEXT_SEQUENCE_TYPES):
        if all(isinstance(unit, int) and 0 <= unit <= 0xFFFF for unit in text):
            return text
        raise BadArgumentError("Bad argument: text code units must be integers in 0..0xFFFF")

    logger.warning("Bad argument", argument="text", type=type(text).__name__)
    raise BadArgumentError(
        f"Bad argument: text must be a string or UTF-16 code units, got {type(text).__name__}"
    )


def validate_contents(contents: Any) -> bytes:
    """
    Take a private copy of a dictionary payload.

    The caller's buffer is only read during this call; the returned bytes
    object is independent of it.

    Raises:
        BadArgumentError: If contents is not bytes-like
    """
    if isinstance(contents, (bytes, bytearray, memoryview)):
        return bytes(contents)

    logger.warning("Bad argument", argument="contents", type=type(contents).__name__)
    raise BadArgumentError(
        f"Bad argument: dictionary contents must be a bytes-like buffer, got {type(contents).__name__}"
    )


def validate_path(path: Any) -> Optional[str]:
    """Ensure an optional directory argument is a str or path-like."""
    if path is None:
        return None
    if isinstance(path, (str, os.PathLike)):
        return os.fspath(path)
    raise BadArgumentError(f"Bad argument: path must be a string or path-like, got {type(path).__name__}")
