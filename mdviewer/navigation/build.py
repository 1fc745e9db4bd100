"""Fold a flat markdown file list into a hierarchical navigation tree."""

from __future__ import annotations

from collections.abc import Iterable

from ..markdown_types import MarkdownFile
from .types import NavigationDirectoryNode, NavigationFileNode

DIRECTORY_SEPARATOR = "/"


def build_navigation_tree(files: Iterable[MarkdownFile], root_path: str) -> NavigationDirectoryNode:
    """Build a directory tree for ``files`` anchored at ``root_path``.

    Intermediate directories are looked up by segment name before being
    created, so files sharing a prefix share one node. Siblings keep
    insertion order; sorting for display belongs to the renderer.
    """
    root = NavigationDirectoryNode(name="", path=root_path)

    for file in files:
        segments = file.relative_path.split(DIRECTORY_SEPARATOR)
        file_name = segments[-1]
        if not file_name:
            continue

        current = root
        for segment in segments[:-1]:
            directory = current.subdirectories.get(segment)
            if directory is None:
                directory = NavigationDirectoryNode(
                    name=segment,
                    path=f"{current.path}{DIRECTORY_SEPARATOR}{segment}",
                )
                current.subdirectories[segment] = directory
            current = directory

        current.files.append(NavigationFileNode(name=file_name, file=file))

    return root


def iter_navigation_files(tree: NavigationDirectoryNode) -> list[NavigationFileNode]:
    """Return every file leaf below ``tree`` (iterative, pre-order)."""
    leaves: list[NavigationFileNode] = []
    stack = [tree]
    while stack:
        node = stack.pop()
        leaves.extend(node.files)
        stack.extend(reversed(list(node.subdirectories.values())))
    return leaves


__all__ = ["DIRECTORY_SEPARATOR", "build_navigation_tree", "iter_navigation_files"]
