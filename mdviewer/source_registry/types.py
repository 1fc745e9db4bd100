"""Domain types and constants for registered markdown sources."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

DEFAULT_SOURCE_KEY = "docs"
DEFAULT_SOURCE_NAME = "docs"
DEFAULT_SOURCE_DIRECTORY = "docs"
GENERATED_SOURCE_PREFIX = "source-"
INITIAL_NEXT_ID = 1


@dataclass(frozen=True)
class MarkdownSource:
    """Directory exposed under a stable logical key."""

    key: str
    name: str
    root_path: Path


class SourceRegistrationError(str, Enum):
    """Reasons a directory could not be registered as a source."""

    NOT_DIRECTORY = "SOURCE_NOT_DIRECTORY"
    STAT_FAILED = "SOURCE_STAT_FAILED"


__all__ = [
    "DEFAULT_SOURCE_KEY",
    "DEFAULT_SOURCE_NAME",
    "DEFAULT_SOURCE_DIRECTORY",
    "GENERATED_SOURCE_PREFIX",
    "INITIAL_NEXT_ID",
    "MarkdownSource",
    "SourceRegistrationError",
]
