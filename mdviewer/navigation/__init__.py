"""Navigation tree construction and display helpers.

Builds one directory node per unique path prefix from a flat markdown file
list, and renders trees as terminal text with optional document titles.
"""

from __future__ import annotations

from .build import DIRECTORY_SEPARATOR, build_navigation_tree, iter_navigation_files
from .rendering import TreePalette, format_navigation_tree, sorted_files, sorted_subdirectories
from .titles import cached_markdown_title, clear_title_cache, markdown_title
from .types import NavigationDirectoryNode, NavigationFileNode

__all__ = [
    "DIRECTORY_SEPARATOR",
    "NavigationDirectoryNode",
    "NavigationFileNode",
    "TreePalette",
    "build_navigation_tree",
    "cached_markdown_title",
    "clear_title_cache",
    "format_navigation_tree",
    "iter_navigation_files",
    "markdown_title",
    "sorted_files",
    "sorted_subdirectories",
]
