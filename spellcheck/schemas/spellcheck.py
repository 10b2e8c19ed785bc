"""
Pydantic schemas for spell-check results.
"""
from typing import Optional

from pydantic import BaseModel, Field, model_validator


class MisspelledRange(BaseModel):
    """A misspelled word as a half-open interval of UTF-16 code units."""

    start: int = Field(ge=0, description="Offset of the first code unit of the word")
    end: int = Field(ge=0, description="Offset one past the last code unit of the word")

    @model_validator(mode="after")
    def check_non_empty(self) -> "MisspelledRange":
        if self.start >= self.end:
            raise ValueError(f"start ({self.start}) must be less than end ({self.end})")
        return self


class BackendCapabilities(BaseModel):
    """What a spell-check backend can do."""

    name: str = Field(description="Backend name (hunspell, enchant, symspell)")
    supports_contents_loading: bool = Field(description="Can load a dictionary from raw bytes")
    supports_suggestions: bool = Field(description="Can produce correction suggestions")


class EngineStatus(BaseModel):
    """Snapshot of a spell-check engine's state."""

    loaded: bool
    language: Optional[str] = None
    source: Optional[str] = Field(default=None, description="named-path or raw-contents")
    location: Optional[str] = Field(default=None, description="Resolved dictionary path")
    backend: Optional[BackendCapabilities] = None
    custom_added_count: int = 0
    custom_removed_count: int = 0
