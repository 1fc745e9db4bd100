"""Markdown discovery, resolution, and rendering bound to a source manager.

``MarkdownLibrary`` composes the registry, the path resolver, discovery, and
the navigation builder into the operations a front end calls. Every method
returns fresh values; nothing is cached between calls.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .discovery import collect_markdown_files_from_source
from .markdown_path import parse_document_path, resolve_within_source_root
from .markdown_types import MarkdownFile, MarkdownPathError
from .navigation import NavigationDirectoryNode, build_navigation_tree
from .rendering import MarkdownConverter, render_markdown
from .result import Failure, Result, failure, success
from .source_registry import MarkdownSource
from .sources import MarkdownSources
from .text import read_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MarkdownIndexSection:
    """One source with its discovered files and navigation tree."""

    source: MarkdownSource
    files: list[MarkdownFile]
    tree: NavigationDirectoryNode | None = None


@dataclass(frozen=True)
class MarkdownIndex:
    """Sources, files, and trees needed to render a listing page."""

    sections: list[MarkdownIndexSection]


def _file_exists(path: Path) -> bool:
    try:
        return path.is_file()
    except OSError:
        return False


class MarkdownLibrary:
    """Resolve, render, and list markdown documents across all sources."""

    def __init__(self, sources: MarkdownSources, converter: MarkdownConverter = render_markdown) -> None:
        self.sources = sources
        self.converter = converter

    def resolve_markdown_file(self, document_path: str) -> Result[MarkdownFile, MarkdownPathError]:
        """Resolve a ``"<source_key>/<relative_path>"`` address to a file on disk."""
        parsed = parse_document_path(document_path)
        if isinstance(parsed, Failure):
            return parsed

        request = parsed.value
        source = self.sources.get_source(request.source_key)
        if source is None:
            return failure(MarkdownPathError.UNKNOWN_SOURCE)

        resolved_path = resolve_within_source_root(source.root_path, request.relative_path)
        if isinstance(resolved_path, Failure):
            return resolved_path

        if not _file_exists(resolved_path.value):
            return failure(MarkdownPathError.MISSING_FILE)

        return success(MarkdownFile.build(source.key, request.relative_path, resolved_path.value))

    def read_markdown_source(self, document_path: str) -> Result[str, MarkdownPathError]:
        """Return the raw text of the addressed document."""
        resolved = self.resolve_markdown_file(document_path)
        if isinstance(resolved, Failure):
            return resolved

        try:
            return success(read_text(resolved.value.absolute_path))
        except OSError as exc:
            logger.warning("Failed to read %s: %s", resolved.value.absolute_path, exc)
            return failure(MarkdownPathError.MISSING_FILE)

    def render_markdown_to_html(self, document_path: str) -> Result[str, MarkdownPathError]:
        """Resolve and read the addressed document, then convert it to HTML."""
        source_content = self.read_markdown_source(document_path)
        if isinstance(source_content, Failure):
            return source_content
        return success(self.converter(source_content.value))

    def list_markdown_files(self) -> list[MarkdownFile]:
        """Discover files for every source in registration order.

        Each source's files are sorted by relative path; sources are not
        re-sorted against each other.
        """
        aggregated: list[MarkdownFile] = []
        for source in self.sources.list_sources():
            aggregated.extend(collect_markdown_files_from_source(source.key, source.root_path))
        return aggregated

    def build_markdown_index(self) -> MarkdownIndex:
        """Group discovered files per source and build each source's tree.

        Trees are anchored at the source key so node paths read like
        document addresses. Sources without files get no tree.
        """
        sources = self.sources.list_sources()
        files = self.list_markdown_files()

        sections: list[MarkdownIndexSection] = []
        for source in sources:
            source_files = [file for file in files if file.source_key == source.key]
            tree = build_navigation_tree(source_files, source.key) if source_files else None
            sections.append(MarkdownIndexSection(source=source, files=source_files, tree=tree))
        return MarkdownIndex(sections=sections)


__all__ = ["MarkdownIndex", "MarkdownIndexSection", "MarkdownLibrary"]
