"""Markdown file discovery for one source root.

Walks the root with an explicit stack instead of recursion so deep trees do
not grow the Python call stack. Unreadable directories and files that land
outside the root are logged and skipped; the walk always returns what it
found, sorted by relative path. Symlinked markdown files are listed when their
target stays inside the source root.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .markdown_path import derive_relative_markdown_path
from .markdown_types import MarkdownFile
from .result import Failure

MARKDOWN_EXTENSION = ".md"

logger = logging.getLogger(__name__)


def is_markdown_name(name: str) -> bool:
    """Return whether ``name`` carries the markdown extension (any case)."""
    return name.lower().endswith(MARKDOWN_EXTENSION)


def _symlink_stays_inside(entry_path: Path, resolved_root: Path) -> bool:
    """Return whether a symlinked entry's target is still under the real root."""
    try:
        resolved_target = entry_path.resolve(strict=True)
    except (OSError, RuntimeError):
        return False
    return not isinstance(derive_relative_markdown_path(resolved_root, resolved_target), Failure)


def collect_markdown_files_from_source(source_key: str, source_root: str | Path) -> list[MarkdownFile]:
    """Enumerate markdown files below ``source_root``.

    Directories are descended without following symlinks. Symlinked markdown
    files are kept only when their target stays inside the resolved root.
    Visitation order is unspecified; the result is sorted by ``relative_path``.
    """
    root = Path(source_root)
    discovered: list[MarkdownFile] = []
    stack: list[Path] = [root]
    resolved_root: Path | None = None

    while stack:
        current_dir = stack.pop()

        try:
            with os.scandir(current_dir) as entries:
                children = list(entries)
        except OSError as exc:
            logger.warning("Failed to read directory %s for source %s: %s", current_dir, source_key, exc)
            continue

        for entry in children:
            entry_path = Path(entry.path)

            try:
                is_dir = entry.is_dir(follow_symlinks=False)
                is_file = entry.is_file()
                is_symlink = entry.is_symlink()
            except OSError as exc:
                logger.warning("Skipping unreadable entry %s for source %s: %s", entry_path, source_key, exc)
                continue

            if is_dir:
                stack.append(entry_path)
                continue

            if not is_file or not is_markdown_name(entry.name):
                continue

            relative_path_result = derive_relative_markdown_path(root, entry_path)
            if isinstance(relative_path_result, Failure):
                logger.warning("Skipping file outside source root %s for source %s", entry_path, source_key)
                continue

            if is_symlink:
                if resolved_root is None:
                    resolved_root = root.resolve()
                if not _symlink_stays_inside(entry_path, resolved_root):
                    logger.warning("Skipping symlink leaving source root %s for source %s", entry_path, source_key)
                    continue

            discovered.append(
                MarkdownFile.build(
                    source_key,
                    relative_path_result.value,
                    Path(os.path.abspath(entry_path)),
                )
            )

    discovered.sort(key=lambda item: item.relative_path)
    return discovered


__all__ = ["MARKDOWN_EXTENSION", "is_markdown_name", "collect_markdown_files_from_source"]
