# tag_lexicon/config.py
import codecs
from enum import Enum
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogFormat(str, Enum):
    JSON = "json"
    CONSOLE = "console"


class MalformedRecordPolicy(str, Enum):
    """What the builder does with a corpus record lacking a usable word or tag."""
    SKIP = "skip"          # Drop the record and log a warning
    FAIL = "fail"          # Abort the whole build
    SENTINEL = "sentinel"  # Record the word with the schema's sentinel tag


class Settings(BaseSettings):
    """
    Configuration for the tag lexicon.
    Values can be overridden with TAG_LEXICON_* environment variables or a .env file.
    """

    # --- Logging ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: LogFormat = LogFormat.CONSOLE

    # --- Corpus reading ---
    # Tokens are split on whitespace first, so the separator cannot contain any
    TAG_SEPARATOR: str = Field(default="/", pattern=r"^\S+$")
    CORPUS_ENCODING: str = "utf-8"

    # --- Build behaviour ---
    MALFORMED_RECORDS: MalformedRecordPolicy = MalformedRecordPolicy.SKIP

    @field_validator("CORPUS_ENCODING")
    @classmethod
    def _known_codec(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as e:
            raise ValueError(f"unknown encoding: {value}") from e
        return value

    model_config = SettingsConfigDict(
        env_prefix="TAG_LEXICON_",
        env_file=".env",
        extra="ignore",
    )


_SETTINGS: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the shared Settings instance, reading the environment on first use."""
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings()
    return _SETTINGS


def set_settings(settings: Optional[Settings]) -> None:
    """
    Replace the shared Settings instance.
    Passing None forces the next get_settings() to re-read the environment.
    """
    global _SETTINGS
    if settings is not None and not isinstance(settings, Settings):
        raise TypeError("settings must be a Settings instance")
    _SETTINGS = settings


__all__ = [
    "LogFormat",
    "MalformedRecordPolicy",
    "Settings",
    "get_settings",
    "set_settings",
]
