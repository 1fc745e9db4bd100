"""Markdown document datatypes shared by resolution, discovery, and navigation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


@dataclass(frozen=True)
class MarkdownFile:
    """Markdown document located inside one source.

    ``relative_path`` is POSIX-style with no leading slash and no ``..`` or
    empty segments; ``url_path`` is ``"{source_key}/{relative_path}"``.
    """

    source_key: str
    relative_path: str
    absolute_path: Path
    url_path: str

    @classmethod
    def build(cls, source_key: str, relative_path: str, absolute_path: Path) -> MarkdownFile:
        """Construct a file record deriving ``url_path`` from key and path."""
        return cls(
            source_key=source_key,
            relative_path=relative_path,
            absolute_path=absolute_path,
            url_path=f"{source_key}/{relative_path}",
        )


@dataclass(frozen=True)
class MarkdownDocumentRequest:
    """Parsed document address."""

    source_key: str
    relative_path: str


class MarkdownPathError(str, Enum):
    """Reasons a document address could not be resolved or rendered."""

    INVALID_FORMAT = "MARKDOWN_PATH_INVALID_FORMAT"
    UNKNOWN_SOURCE = "MARKDOWN_PATH_UNKNOWN_SOURCE"
    PATH_TRAVERSAL = "MARKDOWN_PATH_TRAVERSAL_DETECTED"
    ESCAPED_SOURCE = "MARKDOWN_PATH_ESCAPED_SOURCE"
    MISSING_FILE = "MARKDOWN_PATH_MISSING_FILE"


__all__ = ["MarkdownFile", "MarkdownDocumentRequest", "MarkdownPathError"]
