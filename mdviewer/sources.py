"""Source manager facade handed to consumers instead of the raw registry."""

from __future__ import annotations

from pathlib import Path

from .result import Result
from .source_registry import MarkdownSource, SourceRegistrationError, SourceRegistry


class MarkdownSources:
    """Thin wrapper exposing the registry operations consumers may call."""

    def __init__(self, registry: SourceRegistry | None = None) -> None:
        self.registry = registry if registry is not None else SourceRegistry()

    def list_sources(self) -> list[MarkdownSource]:
        return self.registry.list_sources()

    def get_source(self, source_key: str) -> MarkdownSource | None:
        return self.registry.get_source(source_key)

    def register_source(self, directory_path: str | Path) -> Result[MarkdownSource, SourceRegistrationError]:
        return self.registry.register_source(directory_path)

    def reset_sources(self) -> None:
        self.registry.reset()


__all__ = ["MarkdownSources"]
