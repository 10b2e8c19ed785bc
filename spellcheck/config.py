"""
Configuration management using Pydantic Settings.
Loads configuration from environment variables and .env file.
"""
from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine settings loaded from environment variables."""

    # Backend Selection
    SPELLCHECK_BACKEND: str = "auto"  # Options: auto, hunspell, enchant, symspell

    # Dictionary Discovery
    SPELLCHECK_DICTIONARY_PATH: str = "/usr/share/hunspell"  # Directory holding <lang>.aff/<lang>.dic pairs

    # Suggestions
    SPELLCHECK_SUGGESTION_COUNT: int = 5  # Max suggestions per word
    SPELLCHECK_MAX_EDIT_DISTANCE: int = 2  # SymSpell max edit distance (1-3)
    SPELLCHECK_PREFIX_LENGTH: int = 7  # SymSpell optimization parameter
    SPELLCHECK_NATIVE_SUGGESTIONS: bool = True  # Host engine offers suggestions

    # Checking
    SPELLCHECK_MIN_WORD_LENGTH: int = 1  # Skip words shorter than this
    SPELLCHECK_PERSIST_CUSTOM_WORDS: bool = False  # Keep added/removed words across dictionary reloads

    # Logging Configuration (Optional - per-module log levels)
    LOG_LEVEL: str = "INFO"
    APP_LOG_LEVEL: Optional[str] = None
    SYMSPELLPY_LOG_LEVEL: Optional[str] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def dictionary_path(self) -> Path:
        """Dictionary search directory as a Path."""
        return Path(self.SPELLCHECK_DICTIONARY_PATH)


# Backends accepted by SPELLCHECK_BACKEND
BACKEND_CHOICES = ("auto", "hunspell", "enchant", "symspell")


# Global settings instance
settings = Settings()
