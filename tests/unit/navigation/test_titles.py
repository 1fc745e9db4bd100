"""Tests for markdown title extraction used by tree rows."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from mdviewer.navigation import cached_markdown_title, clear_title_cache, markdown_title


class MarkdownTitleTests(unittest.TestCase):
    def setUp(self) -> None:
        clear_title_cache()

    def _write(self, root: Path, name: str, text: str) -> Path:
        path = root / name
        path.write_text(text, encoding="utf-8")
        return path

    def test_extracts_atx_and_setext_headings(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            atx = self._write(root, "atx.md", "\n\n## Getting   Started ##\nbody\n")
            setext = self._write(root, "setext.md", "Overview\n========\n")
            front = self._write(root, "front.md", "---\ntitle: x\n---\n# After Front Matter\n")

            self.assertEqual(markdown_title(atx), "Getting Started")
            self.assertEqual(markdown_title(setext), "Overview")
            self.assertEqual(markdown_title(front), "After Front Matter")

    def test_no_title_when_body_comes_first(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            plain = self._write(root, "plain.md", "Just text.\n# Late heading\n")
            empty = self._write(root, "empty.md", "")

            self.assertIsNone(markdown_title(plain))
            self.assertIsNone(markdown_title(empty))
            self.assertIsNone(markdown_title(root / "missing.md"))

    def test_long_titles_are_clipped(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = self._write(Path(tmp), "long.md", "# " + "word " * 60 + "\n")

            title = markdown_title(path)

            self.assertIsNotNone(title)
            self.assertLessEqual(len(title), 96)
            self.assertTrue(title.endswith("..."))

    def test_cached_title_refreshes_when_file_changes(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = self._write(Path(tmp), "doc.md", "# First\n")

            self.assertEqual(cached_markdown_title(path), "First")
            path.write_text("# Second version\n", encoding="utf-8")

            self.assertEqual(cached_markdown_title(path), "Second version")


if __name__ == "__main__":
    unittest.main()
