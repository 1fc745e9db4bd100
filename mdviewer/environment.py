"""Wire registry, source manager, and markdown library into one environment."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .library import MarkdownLibrary
from .rendering import MarkdownConverter, render_markdown
from .source_registry import DEFAULT_SOURCE_DIRECTORY, SourceRegistry
from .sources import MarkdownSources


@dataclass(frozen=True)
class MarkdownViewerEnvironment:
    """Owning handle passed to every consumer; there is no global registry."""

    registry: SourceRegistry
    sources: MarkdownSources
    markdown: MarkdownLibrary


def create_markdown_viewer_environment(
    base_directory: Path | None = None,
    default_directory: str | Path = DEFAULT_SOURCE_DIRECTORY,
    converter: MarkdownConverter = render_markdown,
) -> MarkdownViewerEnvironment:
    """Build an isolated environment with fresh registry state."""
    registry = SourceRegistry(base_directory=base_directory, default_directory=default_directory)
    sources = MarkdownSources(registry)
    library = MarkdownLibrary(sources, converter=converter)
    return MarkdownViewerEnvironment(registry=registry, sources=sources, markdown=library)


__all__ = ["MarkdownViewerEnvironment", "create_markdown_viewer_environment"]
