"""
Pytest configuration and fixtures for spell-check engine tests.
"""
import io
import os
import zipfile
from pathlib import Path
from unittest.mock import patch

import pytest

# Keep host dictionaries out of the tests; every test passes its own directory
os.environ["SPELLCHECK_DICTIONARY_PATH"] = "/nonexistent/spellcheck-test-dictionaries"
os.environ.setdefault("LOG_LEVEL", "DEBUG")

from spellcheck.services.spellcheck_enchant import EnchantBackend


# Minimal Hunspell dictionary: no affix rules, just a word list
TEST_AFF = """SET UTF-8
TRY esianrtolcdugmphbyfvkwzESIANRTOLCDUGMPHBYFVKWZ'
"""

TEST_WORDS = ["hello", "world", "well", "known", "don't", "the", "cat"]

TEST_DIC = f"{len(TEST_WORDS)}\n" + "\n".join(TEST_WORDS) + "\n"


def write_dictionary(directory: Path, name: str, aff: str = TEST_AFF, dic: str = TEST_DIC) -> Path:
    """Write a <name>.aff/<name>.dic pair and return the base path."""
    directory.mkdir(parents=True, exist_ok=True)
    (directory / f"{name}.aff").write_text(aff, encoding="utf-8")
    (directory / f"{name}.dic").write_text(dic, encoding="utf-8")
    return directory / name


def make_zip(members: dict) -> bytes:
    """Build an in-memory ZIP archive from a {name: text} mapping."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as archive:
        for name, text in members.items():
            archive.writestr(name, text)
    return buffer.getvalue()


@pytest.fixture
def dictionary_dir(tmp_path):
    """Directory holding an en_US dictionary pair."""
    directory = tmp_path / "dictionaries"
    write_dictionary(directory, "en_US")
    return directory


@pytest.fixture
def dictionary_zip():
    """Raw dictionary contents: ZIP with one .aff and one .dic member."""
    return make_zip({"en_US.aff": TEST_AFF, "en_US.dic": TEST_DIC})


@pytest.fixture
def no_enchant():
    """Pretend the host Enchant library is not installed."""
    with patch.object(EnchantBackend, "is_available", return_value=False):
        yield


@pytest.fixture
def make_dictionary():
    """Factory writing dictionary pairs into a directory."""
    return write_dictionary


@pytest.fixture
def make_contents():
    """Factory building raw dictionary contents from {member name: text}."""
    return make_zip


@pytest.fixture
def dictionary_texts():
    """(aff, dic) texts of the test dictionary."""
    return TEST_AFF, TEST_DIC
