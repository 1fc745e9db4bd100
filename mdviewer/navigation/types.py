"""Navigation tree datatypes built from discovered markdown files."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..markdown_types import MarkdownFile


@dataclass(frozen=True)
class NavigationFileNode:
    """Leaf row for one markdown file."""

    name: str
    file: MarkdownFile


@dataclass(frozen=True)
class NavigationDirectoryNode:
    """Directory node keyed by path prefix with nested folders and files.

    ``subdirectories`` is keyed by segment name and keeps insertion order;
    ``files`` keeps the order files were attached.
    """

    name: str
    path: str
    subdirectories: dict[str, NavigationDirectoryNode] = field(default_factory=dict)
    files: list[NavigationFileNode] = field(default_factory=list)


__all__ = ["NavigationFileNode", "NavigationDirectoryNode"]
