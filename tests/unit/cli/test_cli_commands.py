"""Tests for CLI argument handling and subcommand output."""

from __future__ import annotations

import io
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from mdviewer import cli, config
from mdviewer.markdown_types import MarkdownPathError
from mdviewer.source_registry import SourceRegistrationError


class CliCommandTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.base = Path(self._tmp.name)
        docs = self.base / "docs"
        (docs / "guide").mkdir(parents=True)
        (docs / "index.md").write_text("# Welcome\n", encoding="utf-8")
        (docs / "guide" / "setup.md").write_text("# Setup\n\n```\ncode\n```\n", encoding="utf-8")
        (self.base / "notes").mkdir()
        (self.base / "notes" / "todo.md").write_text("Todo\n====\n", encoding="utf-8")
        config_patch = mock.patch.object(config, "CONFIG_PATH", self.base / "config" / "config.json")
        config_patch.start()
        self.addCleanup(config_patch.stop)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _run(self, *argv: str) -> str:
        with mock.patch("sys.stdout", new_callable=io.StringIO) as stdout:
            cli.main(["--base-dir", str(self.base), *argv])
        return stdout.getvalue()

    def test_sources_lists_default_and_registered(self) -> None:
        output = self._run("--source", "notes", "sources")

        rows = [line.split("\t") for line in output.splitlines()]
        self.assertEqual([row[0] for row in rows], ["docs", "source-1"])
        self.assertEqual(rows[1][1], "notes")

    def test_list_prints_addresses(self) -> None:
        output = self._run("--source", "notes", "list")

        self.assertEqual(output.splitlines(), ["docs/guide/setup.md", "docs/index.md", "source-1/todo.md"])

    def test_tree_prints_sorted_tree_with_titles(self) -> None:
        output = self._run("--no-color", "tree", "--titles")

        self.assertIn("docs/\n├─ guide/\n│  └─ setup.md  -- Setup\n└─ index.md  -- Welcome", output)
        self.assertIn("2 documents", output)

    def test_tree_reports_sources_without_documents(self) -> None:
        (self.base / "empty").mkdir()

        output = self._run("--no-color", "--source", "empty", "tree")

        self.assertIn("source-1/\n└─ (no markdown files)", output)

    def test_resolve_raw_and_render(self) -> None:
        self.assertEqual(self._run("resolve", "docs/index.md").strip(), str((self.base / "docs" / "index.md").absolute()))
        self.assertEqual(self._run("raw", "docs/index.md"), "# Welcome\n")
        self.assertIn("<h1>Welcome</h1>", self._run("render", "docs/index.md"))

    def test_failures_exit_with_messages(self) -> None:
        with self.assertRaises(SystemExit) as unknown:
            self._run("render", "nope/index.md")
        self.assertEqual(str(unknown.exception), "Unknown markdown source")

        with self.assertRaises(SystemExit) as missing:
            self._run("resolve", "docs/missing.md")
        self.assertEqual(str(missing.exception), "Markdown not found")

        with self.assertRaises(SystemExit) as not_dir:
            self._run("--source", "docs/index.md", "list")
        self.assertIn("Provided path is not a directory", str(not_dir.exception))

    def test_docs_option_and_config_sources(self) -> None:
        config.save_config({"source_directories": ["notes"]})

        output = self._run("--docs", "notes", "list")

        self.assertEqual(output.splitlines(), ["docs/todo.md", "source-1/todo.md"])

    def test_save_style_persists(self) -> None:
        self._run("--style", "friendly", "--save-style", "sources")

        self.assertEqual(config.load_code_style(), "friendly")

    def test_error_descriptions_cover_every_kind(self) -> None:
        self.assertEqual(cli.describe_markdown_error(MarkdownPathError.INVALID_FORMAT), "Invalid document path")
        self.assertEqual(cli.describe_markdown_error(MarkdownPathError.PATH_TRAVERSAL), "Path traversal is not allowed")
        self.assertEqual(cli.describe_markdown_error(MarkdownPathError.ESCAPED_SOURCE), "Path traversal is not allowed")
        self.assertEqual(cli.describe_registration_error(SourceRegistrationError.STAT_FAILED), "Unable to read directory")
        self.assertEqual(
            cli.describe_registration_error(SourceRegistrationError.NOT_DIRECTORY),
            "Provided path is not a directory",
        )


if __name__ == "__main__":
    unittest.main()
