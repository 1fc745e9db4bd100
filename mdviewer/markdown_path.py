"""Document-address parsing and traversal-safe path resolution.

All path arithmetic here is lexical: roots and targets are normalized with
``os.path.abspath`` and compared through their relative offset, never by
string prefix. Symlink handling is the caller's concern.
"""

from __future__ import annotations

import os
from pathlib import Path, PurePath

from .markdown_types import MarkdownDocumentRequest, MarkdownPathError
from .result import Result, failure, success

PATH_SEGMENT_SEPARATOR = "/"
PATH_TRAVERSAL_TOKEN = ".."


def _normalize_to_posix(value: str) -> str:
    return PurePath(value).as_posix()


def _relative_offset(root: str, target: str) -> str | None:
    """Return ``target`` relative to ``root`` or ``None`` when not computable."""
    try:
        return os.path.relpath(target, root)
    except ValueError:
        # different drives on Windows
        return None


def _escapes_root(offset: str | None) -> bool:
    """Return whether ``offset`` points at the root itself or outside of it.

    Any offset starting with ``..`` counts as an escape, so root-level names
    such as ``..notes.md`` are refused along with real parent references.
    """
    if offset is None or offset in ("", os.curdir):
        return True
    return offset.startswith(PATH_TRAVERSAL_TOKEN)


def _normalized_root(source_root: str | Path) -> str:
    return os.path.abspath(source_root)


def parse_document_path(document_path: str) -> Result[MarkdownDocumentRequest, MarkdownPathError]:
    """Split ``"<source_key>/<relative/path>"`` into a document request.

    ``document_path`` must already be URL-decoded. Empty segments (leading,
    trailing, or doubled separators) are ``INVALID_FORMAT``; a literal ``..``
    segment is ``PATH_TRAVERSAL``.
    """
    source_key, *raw_segments = document_path.split(PATH_SEGMENT_SEPARATOR)

    if not source_key or not raw_segments:
        return failure(MarkdownPathError.INVALID_FORMAT)

    if any(not segment for segment in raw_segments):
        return failure(MarkdownPathError.INVALID_FORMAT)

    if any(segment == PATH_TRAVERSAL_TOKEN for segment in raw_segments):
        return failure(MarkdownPathError.PATH_TRAVERSAL)

    return success(
        MarkdownDocumentRequest(
            source_key=source_key,
            relative_path=PATH_SEGMENT_SEPARATOR.join(raw_segments),
        )
    )


def resolve_within_source_root(source_root: str | Path, relative_path: str) -> Result[Path, MarkdownPathError]:
    """Join ``relative_path`` onto ``source_root`` and reject escapes.

    The root itself is not a valid target: an empty offset is reported as
    ``ESCAPED_SOURCE`` just like an offset leaving the root.
    """
    root = _normalized_root(source_root)
    target = os.path.abspath(os.path.join(root, relative_path))

    if _escapes_root(_relative_offset(root, target)):
        return failure(MarkdownPathError.ESCAPED_SOURCE)

    return success(Path(target))


def derive_relative_markdown_path(source_root: str | Path, absolute_path: str | Path) -> Result[str, MarkdownPathError]:
    """Return ``absolute_path`` relative to ``source_root`` in POSIX form."""
    root = _normalized_root(source_root)
    target = os.path.abspath(absolute_path)
    offset = _relative_offset(root, target)

    if offset is None or _escapes_root(offset):
        return failure(MarkdownPathError.ESCAPED_SOURCE)

    return success(_normalize_to_posix(offset))


__all__ = [
    "PATH_SEGMENT_SEPARATOR",
    "PATH_TRAVERSAL_TOKEN",
    "parse_document_path",
    "resolve_within_source_root",
    "derive_relative_markdown_path",
]
