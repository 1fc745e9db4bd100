"""Top-of-document title extraction for navigation rows, with a small cache."""

from __future__ import annotations

from collections import OrderedDict
from pathlib import Path
import re
import threading

from ..text import sanitize_terminal_text

TITLE_READ_BYTES = 4_096
TITLE_MAX_FILE_BYTES = 1024 * 1024
TITLE_MAX_CHARS = 96
TITLE_CACHE_MAX = 4_096

_ATX_HEADING_RE = re.compile(r"^ {0,3}(#{1,6})[ \t]+(.+?)[ \t]*#*[ \t]*$")
_SETEXT_UNDERLINE_RE = re.compile(r"^ {0,3}(=+|-+)[ \t]*$")
_FRONT_MATTER_FENCE = "---"
_TITLE_CACHE: OrderedDict[tuple[str, int, int], str | None] = OrderedDict()
_TITLE_CACHE_LOCK = threading.RLock()
_CACHE_MISS = object()


def _normalize_title(text: str) -> str | None:
    """Collapse whitespace and clip to one short safe line."""
    candidate = sanitize_terminal_text(" ".join(text.strip().split()))
    if not candidate:
        return None
    if len(candidate) > TITLE_MAX_CHARS:
        return candidate[: TITLE_MAX_CHARS - 3].rstrip() + "..."
    return candidate


def _skip_front_matter(lines: list[str]) -> int:
    """Return index of the first line after a leading YAML front-matter block."""
    if not lines or lines[0].strip() != _FRONT_MATTER_FENCE:
        return 0
    for idx in range(1, len(lines)):
        if lines[idx].strip() in (_FRONT_MATTER_FENCE, "..."):
            return idx + 1
    return 0


def markdown_title(path: Path, size_bytes: int | None = None) -> str | None:
    """Return the first heading at the top of a markdown file.

    Leading blank lines and front matter are skipped. The first non-blank
    line must be an ATX heading (``# Title``) or a setext heading (a line
    followed by ``===``/``---``); anything else means there is no title.
    """
    if size_bytes is not None and size_bytes > TITLE_MAX_FILE_BYTES:
        return None

    try:
        with path.open("rb") as handle:
            sample = handle.read(TITLE_READ_BYTES)
    except OSError:
        return None
    if not sample or b"\x00" in sample:
        return None

    lines = sample.decode("utf-8", errors="replace").splitlines()
    if lines and lines[0].startswith("\ufeff"):
        lines[0] = lines[0].lstrip("\ufeff")

    idx = _skip_front_matter(lines)
    while idx < len(lines) and not lines[idx].strip():
        idx += 1
    if idx >= len(lines):
        return None

    match = _ATX_HEADING_RE.match(lines[idx])
    if match is not None:
        return _normalize_title(match.group(2))

    if idx + 1 < len(lines) and _SETEXT_UNDERLINE_RE.match(lines[idx + 1]):
        return _normalize_title(lines[idx])
    return None


def _title_cache_key(path: Path, size_bytes: int | None) -> tuple[str, int, int] | None:
    """Build cache key from resolved path, mtime, and size."""
    try:
        resolved = path.resolve()
        stat = resolved.stat()
    except (OSError, RuntimeError):
        return None
    size = int(size_bytes) if size_bytes is not None else int(stat.st_size)
    return str(resolved), int(stat.st_mtime_ns), size


def cached_markdown_title(path: Path, size_bytes: int | None = None) -> str | None:
    """Return ``markdown_title`` for ``path``, memoized by path/mtime/size."""
    cache_key = _title_cache_key(path, size_bytes)
    if cache_key is not None:
        with _TITLE_CACHE_LOCK:
            cached = _TITLE_CACHE.get(cache_key, _CACHE_MISS)
            if cached is not _CACHE_MISS:
                _TITLE_CACHE.move_to_end(cache_key)
                return cached

    title = markdown_title(path, size_bytes)

    if cache_key is not None:
        with _TITLE_CACHE_LOCK:
            _TITLE_CACHE[cache_key] = title
            _TITLE_CACHE.move_to_end(cache_key)
            while len(_TITLE_CACHE) > TITLE_CACHE_MAX:
                _TITLE_CACHE.popitem(last=False)

    return title


def clear_title_cache() -> None:
    """Clear in-memory title cache."""
    with _TITLE_CACHE_LOCK:
        _TITLE_CACHE.clear()


__all__ = [
    "markdown_title",
    "cached_markdown_title",
    "clear_title_cache",
]
