"""Render navigation trees as terminal tree text.

Sibling ordering is decided here, not in the builder: directories first,
then files, each group sorted case-insensitively by name.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from ..text import sanitize_terminal_text
from .titles import cached_markdown_title
from .types import NavigationDirectoryNode, NavigationFileNode

TitleProvider = Callable[[Path], str | None]


@dataclass(frozen=True)
class TreePalette:
    """ANSI fragments used for tree rows; all empty when color is off."""

    directory: str = ""
    file: str = ""
    branch: str = ""
    title: str = ""
    reset: str = ""

    @classmethod
    def colored(cls) -> TreePalette:
        return cls(
            directory="\033[1;34m",
            file="\033[38;5;252m",
            branch="\033[2;38;5;245m",
            title="\033[2;38;5;244m",
            reset="\033[0m",
        )


def sorted_subdirectories(node: NavigationDirectoryNode) -> list[NavigationDirectoryNode]:
    """Return child directories sorted by name for display."""
    return sorted(node.subdirectories.values(), key=lambda child: (child.name.lower(), child.name))


def sorted_files(node: NavigationDirectoryNode) -> list[NavigationFileNode]:
    """Return file leaves sorted by name for display."""
    return sorted(node.files, key=lambda leaf: (leaf.name.lower(), leaf.name))


def format_navigation_tree(
    tree: NavigationDirectoryNode,
    label: str | None = None,
    no_color: bool = True,
    show_titles: bool = False,
    title_for_path: TitleProvider | None = None,
) -> str:
    """Render ``tree`` as ``├─``/``└─`` tree text.

    ``label`` replaces the root row text (defaults to ``tree.path``). With
    ``show_titles`` each file row is suffixed by its document title when one
    is found.
    """
    palette = TreePalette() if no_color else TreePalette.colored()
    provider = title_for_path
    if provider is None and show_titles:
        provider = cached_markdown_title

    root_label = sanitize_terminal_text(label if label is not None else tree.path)
    lines_out: list[str] = [f"{palette.directory}{root_label}/{palette.reset}"]
    # (node, prefix, is_last_sibling); popped in pre-order
    stack: list[tuple[NavigationDirectoryNode | NavigationFileNode, str, bool]] = []

    def push_children(node: NavigationDirectoryNode, prefix: str) -> None:
        children: list[NavigationDirectoryNode | NavigationFileNode] = [
            *sorted_subdirectories(node),
            *sorted_files(node),
        ]
        for idx in range(len(children) - 1, -1, -1):
            stack.append((children[idx], prefix, idx == len(children) - 1))

    push_children(tree, "")
    while stack:
        child, prefix, last = stack.pop()
        branch = "└─ " if last else "├─ "
        name = sanitize_terminal_text(child.name)
        if isinstance(child, NavigationDirectoryNode):
            lines_out.append(f"{palette.branch}{prefix}{branch}{palette.reset}{palette.directory}{name}/{palette.reset}")
            push_children(child, prefix + ("   " if last else "│  "))
            continue

        title_label = ""
        if provider is not None:
            title = provider(child.file.absolute_path)
            if title:
                title_label = f"{palette.title}  -- {title}{palette.reset}"
        lines_out.append(f"{palette.branch}{prefix}{branch}{palette.reset}{palette.file}{name}{palette.reset}{title_label}")

    return "\n".join(lines_out)


__all__ = [
    "TreePalette",
    "sorted_subdirectories",
    "sorted_files",
    "format_navigation_tree",
]
