"""Registry of markdown sources keyed by stable logical keys.

The registry owns one immutable state snapshot (sources mapping plus the next
generated id). Every write builds a new snapshot and swaps it in, so readers
always see either the old or the new mapping in full.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from ..result import Failure, Result, success
from .directories import ensure_directory_exists, resolve_project_path
from .types import (
    DEFAULT_SOURCE_DIRECTORY,
    DEFAULT_SOURCE_KEY,
    DEFAULT_SOURCE_NAME,
    GENERATED_SOURCE_PREFIX,
    INITIAL_NEXT_ID,
    MarkdownSource,
    SourceRegistrationError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _RegistryState:
    """Immutable registry snapshot."""

    sources: Mapping[str, MarkdownSource]
    next_id: int


def build_generated_key(identifier: int) -> str:
    """Return the source key for generated id ``identifier``."""
    return f"{GENERATED_SOURCE_PREFIX}{identifier}"


class SourceRegistry:
    """Explicit handle over the key -> source mapping.

    ``base_directory`` anchors relative registration paths and the default
    source directory. It is captured once at construction and never changes.
    """

    def __init__(
        self,
        base_directory: Path | None = None,
        default_directory: str | Path = DEFAULT_SOURCE_DIRECTORY,
    ) -> None:
        self.base_directory = Path(base_directory) if base_directory is not None else Path.cwd()
        self.default_directory = default_directory
        self._write_lock = threading.Lock()
        self._state = self._initial_state()

    def _default_source(self) -> MarkdownSource:
        return MarkdownSource(
            key=DEFAULT_SOURCE_KEY,
            name=DEFAULT_SOURCE_NAME,
            root_path=resolve_project_path(self.default_directory, self.base_directory),
        )

    def _initial_state(self) -> _RegistryState:
        return _RegistryState(
            sources=MappingProxyType({DEFAULT_SOURCE_KEY: self._default_source()}),
            next_id=INITIAL_NEXT_ID,
        )

    def list_sources(self) -> list[MarkdownSource]:
        """Return a snapshot of registered sources in insertion order."""
        return list(self._state.sources.values())

    def get_source(self, source_key: str) -> MarkdownSource | None:
        """Return the source registered under ``source_key`` or ``None``."""
        return self._state.sources.get(source_key)

    def register_source(self, directory_path: str | Path) -> Result[MarkdownSource, SourceRegistrationError]:
        """Register ``directory_path`` as a new source.

        The directory check runs first; only on success is a key allocated
        and the new snapshot swapped in. Key allocation and the swap share
        one critical section so concurrent registrations get distinct keys.
        """
        absolute_path = resolve_project_path(directory_path, self.base_directory)
        directory_check = ensure_directory_exists(absolute_path)
        if isinstance(directory_check, Failure):
            logger.info("Rejected source %s: %s", absolute_path, directory_check.error.value)
            return directory_check

        normalized_path = directory_check.value
        with self._write_lock:
            state = self._state
            generated_key = build_generated_key(state.next_id)
            source = MarkdownSource(
                key=generated_key,
                name=normalized_path.name or str(normalized_path),
                root_path=normalized_path,
            )
            next_sources = dict(state.sources)
            next_sources[generated_key] = source
            self._state = _RegistryState(
                sources=MappingProxyType(next_sources),
                next_id=state.next_id + 1,
            )

        logger.info("Registered source %s -> %s", generated_key, normalized_path)
        return success(source)

    def reset(self) -> None:
        """Restore the single default source and the id counter."""
        with self._write_lock:
            self._state = self._initial_state()
        logger.debug("Source registry reset to default source")


__all__ = ["SourceRegistry", "build_generated_key"]
