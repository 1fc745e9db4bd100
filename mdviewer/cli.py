"""Command-line front door for mdviewer.

Builds an environment, registers requested sources, then dispatches one
subcommand: list sources, list files, print navigation trees, or resolve,
print, and render a single document address.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from . import config
from .environment import MarkdownViewerEnvironment, create_markdown_viewer_environment
from .markdown_types import MarkdownPathError
from .navigation import format_navigation_tree, iter_navigation_files
from .rendering import make_markdown_converter
from .result import Failure
from .source_registry import DEFAULT_SOURCE_DIRECTORY, SourceRegistrationError
from .text import sanitize_terminal_text

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def describe_registration_error(error: SourceRegistrationError) -> str:
    """Return a user-facing message for a registration failure."""
    if error is SourceRegistrationError.STAT_FAILED:
        return "Unable to read directory"
    return "Provided path is not a directory"


def describe_markdown_error(error: MarkdownPathError) -> str:
    """Return a user-facing message for a resolution/rendering failure."""
    if error is MarkdownPathError.UNKNOWN_SOURCE:
        return "Unknown markdown source"
    if error is MarkdownPathError.MISSING_FILE:
        return "Markdown not found"
    if error is MarkdownPathError.INVALID_FORMAT:
        return "Invalid document path"
    if error in (MarkdownPathError.PATH_TRAVERSAL, MarkdownPathError.ESCAPED_SOURCE):
        return "Path traversal is not allowed"
    return "Unable to resolve markdown path"


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format=LOG_FORMAT)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdviewer",
        description="Browse markdown documents across registered source directories.",
    )
    parser.add_argument("--base-dir", default=None, help="Directory relative paths resolve against (default: cwd).")
    parser.add_argument("--docs", default=None, help="Directory of the default 'docs' source.")
    parser.add_argument(
        "--source",
        dest="sources",
        action="append",
        default=[],
        metavar="DIR",
        help="Register DIR as an extra source (repeatable).",
    )
    parser.add_argument("--style", default=None, help="Pygments style name for fenced code blocks.")
    parser.add_argument("--save-style", action="store_true", help="Persist --style as the default style.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr.")

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("sources", help="List registered sources.")
    commands.add_parser("list", help="List document addresses of every source.")
    tree_parser = commands.add_parser("tree", help="Print the navigation tree of every source.")
    tree_parser.add_argument("--titles", action="store_true", help="Show the first heading of each document.")
    for name, help_text in (
        ("resolve", "Print the absolute path of a document."),
        ("raw", "Print the markdown text of a document."),
        ("render", "Print a document rendered to HTML."),
    ):
        command_parser = commands.add_parser(name, help=help_text)
        command_parser.add_argument("address", help="Document address: <source-key>/<relative/path.md>.")
    return parser


def build_environment(args: argparse.Namespace) -> MarkdownViewerEnvironment:
    """Create the environment and register sources from config and CLI flags.

    Registration failures abort with a message naming the directory.
    """
    style = args.style or config.load_code_style()
    if args.style and args.save_style:
        config.save_code_style(args.style)

    base_directory = Path(args.base_dir) if args.base_dir else None
    default_directory = args.docs or config.load_default_source_directory() or DEFAULT_SOURCE_DIRECTORY
    environment = create_markdown_viewer_environment(
        base_directory=base_directory,
        default_directory=default_directory,
        converter=make_markdown_converter(style),
    )

    for directory in [*config.load_extra_source_directories(), *args.sources]:
        registration = environment.sources.register_source(directory)
        if isinstance(registration, Failure):
            raise SystemExit(f"{describe_registration_error(registration.error)}: {directory}")
    return environment


def _use_color(args: argparse.Namespace) -> bool:
    return not args.no_color and sys.stdout.isatty()


def _print_sources(environment: MarkdownViewerEnvironment) -> None:
    for source in environment.sources.list_sources():
        sys.stdout.write(f"{source.key}\t{sanitize_terminal_text(source.name)}\t{source.root_path}\n")


def _print_files(environment: MarkdownViewerEnvironment) -> None:
    for file in environment.markdown.list_markdown_files():
        sys.stdout.write(f"{sanitize_terminal_text(file.url_path)}\n")


def _print_trees(environment: MarkdownViewerEnvironment, show_titles: bool, color: bool) -> None:
    index = environment.markdown.build_markdown_index()
    blocks: list[str] = []
    for section in index.sections:
        if section.tree is None:
            blocks.append(f"{section.source.key}/\n└─ (no markdown files)")
            continue
        count = len(iter_navigation_files(section.tree))
        rendered = format_navigation_tree(
            section.tree,
            no_color=not color,
            show_titles=show_titles,
        )
        blocks.append(f"{rendered}\n{count} document{'s' if count != 1 else ''}")
    sys.stdout.write("\n\n".join(blocks) + "\n")


def run_command(args: argparse.Namespace, environment: MarkdownViewerEnvironment) -> None:
    """Execute the parsed subcommand against ``environment``."""
    if args.command == "sources":
        _print_sources(environment)
        return
    if args.command == "list":
        _print_files(environment)
        return
    if args.command == "tree":
        _print_trees(environment, args.titles, _use_color(args))
        return

    library = environment.markdown
    if args.command == "resolve":
        resolved = library.resolve_markdown_file(args.address)
        if isinstance(resolved, Failure):
            raise SystemExit(describe_markdown_error(resolved.error))
        sys.stdout.write(f"{resolved.value.absolute_path}\n")
        return

    if args.command == "raw":
        result = library.read_markdown_source(args.address)
    else:
        result = library.render_markdown_to_html(args.address)
    if isinstance(result, Failure):
        raise SystemExit(describe_markdown_error(result.error))
    text = result.value
    sys.stdout.write(text if text.endswith("\n") else text + "\n")


def main(argv: Sequence[str] | None = None) -> None:
    """Parse CLI arguments and run one mdviewer subcommand.

    ``argv`` is primarily for tests; ``None`` reads ``sys.argv``.
    """
    args = _build_parser().parse_args(argv)
    _configure_logging(args.verbose)
    environment = build_environment(args)
    run_command(args, environment)


if __name__ == "__main__":
    main()
