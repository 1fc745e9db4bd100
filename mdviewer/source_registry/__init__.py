"""Source registry: logical keys mapped to filesystem roots.

Contains the source datatypes, directory validation helpers, and the
copy-on-write ``SourceRegistry`` handle.
"""

from __future__ import annotations

from .directories import ensure_directory_exists, resolve_project_path
from .registry import SourceRegistry, build_generated_key
from .types import (
    DEFAULT_SOURCE_DIRECTORY,
    DEFAULT_SOURCE_KEY,
    DEFAULT_SOURCE_NAME,
    GENERATED_SOURCE_PREFIX,
    INITIAL_NEXT_ID,
    MarkdownSource,
    SourceRegistrationError,
)

__all__ = [
    "DEFAULT_SOURCE_DIRECTORY",
    "DEFAULT_SOURCE_KEY",
    "DEFAULT_SOURCE_NAME",
    "GENERATED_SOURCE_PREFIX",
    "INITIAL_NEXT_ID",
    "MarkdownSource",
    "SourceRegistrationError",
    "SourceRegistry",
    "build_generated_key",
    "ensure_directory_exists",
    "resolve_project_path",
]
