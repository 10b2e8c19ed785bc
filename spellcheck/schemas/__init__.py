"""
Pydantic schemas for spell-check results.
"""
from spellcheck.schemas.spellcheck import (
    BackendCapabilities,
    EngineStatus,
    MisspelledRange,
)

__all__ = [
    "BackendCapabilities",
    "EngineStatus",
    "MisspelledRange",
]
