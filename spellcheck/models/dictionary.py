"""
Dictionary state: identity of the loaded base vocabulary plus the per-engine
custom word overlay.
"""
import enum
from pathlib import Path
from typing import Iterable, Optional, Set


class DictionarySource(str, enum.Enum):
    """Where a dictionary's base data came from."""
    NAMED_PATH = "named-path"
    RAW_CONTENTS = "raw-contents"


class CustomWordList:
    """
    Added/removed words that override the base dictionary.

    The two sets are kept disjoint: adding a word clears it from the removed
    set and removing a word clears it from the added set. Matching is exact.
    """

    def __init__(self, added: Optional[Iterable[str]] = None, removed: Optional[Iterable[str]] = None):
        self._added: Set[str] = set(added or ())
        self._removed: Set[str] = set(removed or ()) - self._added

    @property
    def added(self) -> frozenset:
        return frozenset(self._added)

    @property
    def removed(self) -> frozenset:
        return frozenset(self._removed)

    def add(self, word: str) -> None:
        self._removed.discard(word)
        self._added.add(word)

    def remove(self, word: str) -> None:
        self._added.discard(word)
        self._removed.add(word)

    def lookup(self, word: str) -> Optional[bool]:
        """
        Overlay verdict for a word.

        Returns:
            False if the word was removed (misspelled), True if it was added
            (correct), None if the base dictionary decides
        """
        if word in self._removed:
            return False
        if word in self._added:
            return True
        return None

    def is_removed(self, word: str) -> bool:
        return word in self._removed

    def copy(self) -> "CustomWordList":
        return CustomWordList(self._added, self._removed)

    def clear(self) -> None:
        self._added.clear()
        self._removed.clear()

    def __len__(self) -> int:
        return len(self._added) + len(self._removed)

    def __repr__(self) -> str:
        return f"CustomWordList(added={len(self._added)}, removed={len(self._removed)})"


class Dictionary:
    """
    A loaded dictionary as seen by the engine.

    Identity fields are fixed at construction. The base word/affix data lives
    in the backend handle and is never mutated; only ``custom_words`` changes.
    """

    __slots__ = ("_language_code", "_source", "_location", "custom_words")

    def __init__(
        self,
        language_code: str,
        source: DictionarySource,
        location: Optional[Path] = None,
        custom_words: Optional[CustomWordList] = None,
    ):
        self._language_code = language_code
        self._source = DictionarySource(source)
        self._location = location
        self.custom_words = custom_words if custom_words is not None else CustomWordList()

    @property
    def language_code(self) -> str:
        return self._language_code

    @property
    def source(self) -> DictionarySource:
        return self._source

    @property
    def location(self) -> Optional[Path]:
        """Resolved file location for named dictionaries."""
        return self._location

    def with_location(self, location: Optional[Path]) -> "Dictionary":
        """Copy of this dictionary pointing at the resolved location."""
        return Dictionary(self._language_code, self._source, location, self.custom_words)

    @classmethod
    def named(cls, language_code: str) -> "Dictionary":
        return cls(language_code, DictionarySource.NAMED_PATH)

    @classmethod
    def from_contents(cls, language_code: str = "") -> "Dictionary":
        return cls(language_code, DictionarySource.RAW_CONTENTS)

    def __repr__(self) -> str:
        return (
            f"Dictionary(language_code={self._language_code!r}, source={self._source.value!r}, "
            f"custom_words={self.custom_words!r})"
        )
