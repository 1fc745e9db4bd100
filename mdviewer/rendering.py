"""Markdown-to-HTML conversion.

Uses Python-Markdown with GitHub-flavoured extras (tables, fenced code,
footnotes) and Pygments-backed code highlighting. Callers only rely on
"text in, markup out"; ``MarkdownLibrary`` accepts any such converter.
"""

from __future__ import annotations

from collections.abc import Callable

import markdown
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

DEFAULT_CODE_STYLE = "monokai"
MARKDOWN_EXTENSIONS = ("extra", "sane_lists", "codehilite")

MarkdownConverter = Callable[[str], str]

_VALID_STYLES: set[str] = set()
_INVALID_STYLES: set[str] = set()


def normalize_code_style(style: str | None) -> str:
    """Return ``style`` when Pygments knows it, otherwise the default style."""
    if not style:
        return DEFAULT_CODE_STYLE
    if style in _VALID_STYLES:
        return style
    if style in _INVALID_STYLES:
        return DEFAULT_CODE_STYLE

    try:
        get_style_by_name(style)
    except ClassNotFound:
        _INVALID_STYLES.add(style)
        return DEFAULT_CODE_STYLE
    _VALID_STYLES.add(style)
    return style


def render_markdown(source: str, style: str | None = None) -> str:
    """Convert markdown ``source`` to an HTML fragment.

    Fenced code blocks are highlighted with inline Pygments styles so the
    fragment needs no companion stylesheet. A fresh ``Markdown`` instance is
    used per call because instances carry per-document state.
    """
    converter = markdown.Markdown(
        extensions=list(MARKDOWN_EXTENSIONS),
        extension_configs={
            "codehilite": {
                "guess_lang": False,
                "noclasses": True,
                "pygments_style": normalize_code_style(style),
            }
        },
        output_format="html",
    )
    return converter.convert(source)


def make_markdown_converter(style: str | None = None) -> MarkdownConverter:
    """Return a converter bound to one code-highlighting style."""
    resolved_style = normalize_code_style(style)

    def convert(source: str) -> str:
        return render_markdown(source, resolved_style)

    return convert


__all__ = [
    "DEFAULT_CODE_STYLE",
    "MARKDOWN_EXTENSIONS",
    "MarkdownConverter",
    "make_markdown_converter",
    "normalize_code_style",
    "render_markdown",
]
