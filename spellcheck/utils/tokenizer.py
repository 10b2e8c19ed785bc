"""
Word tokenization over UTF-16 code-unit offsets.

Spans are reported as half-open ``(start, end)`` intervals measured in UTF-16
code units of the input, so callers holding the text in a UTF-16 runtime can
slice it directly. Characters outside the Basic Multilingual Plane count as two
units; lone surrogates count as one.
"""
import unicodedata
from array import array
from typing import Iterator, List, NamedTuple, Sequence, Tuple, Union

TextInput = Union[str, Sequence[int]]

# Joiners kept inside a word only when surrounded by letters/numbers
APOSTROPHES = frozenset("'\u2019\u02bc")
HYPHENS = frozenset("-\u2010\u2011")

# Zero-width (non-)joiner, used inside words by several Indic and Arabic scripts
ZERO_WIDTH_JOINERS = frozenset("\u200c\u200d")


class Token(NamedTuple):
    """A word span and the text it covers."""
    start: int
    end: int
    word: str


def as_text(text: TextInput) -> str:
    """
    Normalize tokenizer input to a Python string.

    Args:
        text: A str, or a sequence of UTF-16 code units

    Returns:
        The decoded string (lone surrogates preserved)
    """
    if isinstance(text, str):
        return text
    units = array("H", text)
    return units.tobytes().decode("utf-16-le", "surrogatepass")


def utf16_width(char: str) -> int:
    """Number of UTF-16 code units needed for one code point."""
    return 2 if ord(char) > 0xFFFF else 1


def utf16_length(text: TextInput) -> int:
    """Length of the text in UTF-16 code units."""
    if not isinstance(text, str):
        return len(text)
    return sum(utf16_width(char) for char in text)


def utf16_slice(text: str, start: int, end: int) -> str:
    """
    Slice a string by UTF-16 code-unit offsets.

    Args:
        text: Source text
        start: Start offset (inclusive)
        end: End offset (exclusive)

    Returns:
        Substring covering the requested units
    """
    units = text.encode("utf-16-le", "surrogatepass")
    return units[start * 2:end * 2].decode("utf-16-le", "surrogatepass")


def is_word_char(char: str) -> bool:
    """Letters and numbers of any script."""
    return unicodedata.category(char)[0] in ("L", "N")


def is_continuation_char(char: str) -> bool:
    """Combining marks and zero-width joiners extend a word but never start one."""
    return unicodedata.category(char)[0] == "M" or char in ZERO_WIDTH_JOINERS


def is_joiner(char: str) -> bool:
    return char in APOSTROPHES or char in HYPHENS


def iter_words(text: TextInput) -> Iterator[Token]:
    """
    Yield every word in the text with its UTF-16 span.

    A word is a maximal run of letters and numbers, extended by combining marks,
    and bridged by a single apostrophe or hyphen only when a letter or number
    sits directly on both sides ("don't", "well-known"). Everything else
    separates words.

    Args:
        text: A str, or a sequence of UTF-16 code units

    Yields:
        Token(start, end, word) in ascending order, never overlapping
    """
    text = as_text(text)
    length = len(text)

    # Code-point index and UTF-16 offset of the current word start
    word_start = -1
    word_offset = 0
    offset = 0

    index = 0
    while index < length:
        char = text[index]
        width = utf16_width(char)

        if word_start < 0:
            if is_word_char(char):
                word_start = index
                word_offset = offset
        elif is_word_char(char) or is_continuation_char(char):
            pass
        elif is_joiner(char) and index + 1 < length and is_word_char(text[index + 1]):
            # The preceding character already belongs to the word
            pass
        else:
            yield Token(word_offset, offset, text[word_start:index])
            word_start = -1

        offset += width
        index += 1

    if word_start >= 0:
        yield Token(word_offset, offset, text[word_start:])


def tokenize(text: TextInput) -> Iterator[Tuple[int, int]]:
    """
    Yield ``(start, end)`` UTF-16 spans of every word in the text.

    Example:
        >>> list(tokenize("well-known ones"))
        [(0, 10), (11, 15)]
    """
    for token in iter_words(text):
        yield token.start, token.end


def split_words(text: TextInput) -> List[str]:
    """Return just the words, in order."""
    return [token.word for token in iter_words(text)]
