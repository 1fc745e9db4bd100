"""Tests for terminal tree text rendering of navigation trees."""

from __future__ import annotations

import unittest
from pathlib import Path

from mdviewer.markdown_types import MarkdownFile
from mdviewer.navigation import build_navigation_tree, format_navigation_tree


def _tree(*relative_paths: str):
    files = [MarkdownFile.build("docs", relative, Path("/srv/docs") / relative) for relative in relative_paths]
    return build_navigation_tree(files, "docs")


class NavigationRenderingTests(unittest.TestCase):
    def test_sorts_directories_before_files_with_branch_glyphs(self) -> None:
        rendered = format_navigation_tree(_tree("b.md", "A.md", "zeta/x.md", "alpha/y.md", "alpha/sub/z.md"))

        self.assertEqual(
            rendered.splitlines(),
            [
                "docs/",
                "├─ alpha/",
                "│  ├─ sub/",
                "│  │  └─ z.md",
                "│  └─ y.md",
                "├─ zeta/",
                "│  └─ x.md",
                "├─ A.md",
                "└─ b.md",
            ],
        )

    def test_label_and_titles(self) -> None:
        titles = {Path("/srv/docs/a.md"): "Alpha Guide"}

        rendered = format_navigation_tree(
            _tree("a.md", "b.md"),
            label="Handbook",
            title_for_path=titles.get,
        )

        self.assertEqual(rendered.splitlines(), ["Handbook/", "├─ a.md  -- Alpha Guide", "└─ b.md"])

    def test_color_output_wraps_names_in_ansi(self) -> None:
        rendered = format_navigation_tree(_tree("a.md"), no_color=False)

        self.assertIn("\033[0m", rendered)
        self.assertIn("a.md", rendered)

    def test_control_characters_in_names_are_escaped(self) -> None:
        rendered = format_navigation_tree(_tree("bad\x1bname.md"))

        self.assertIn("bad\\x1bname.md", rendered)
        self.assertNotIn("\x1b", rendered)


if __name__ == "__main__":
    unittest.main()
