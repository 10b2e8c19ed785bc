"""
Dictionary state models for the spell-check engine.
"""
from spellcheck.models.dictionary import CustomWordList, Dictionary, DictionarySource

__all__ = [
    "CustomWordList",
    "Dictionary",
    "DictionarySource",
]
