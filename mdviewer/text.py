"""Text loading and terminal-output sanitization."""

from __future__ import annotations

import re
from pathlib import Path

_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")


def read_text(path: Path) -> str:
    """Return the markdown document at ``path`` as text.

    Documents saved with a BOM or in a legacy 8-bit encoding still load;
    bytes that no encoding accepts come back as replacement characters, so a
    document is never refused for its encoding alone.
    """
    for encoding in ("utf-8", "utf-8-sig", "latin-1"):
        try:
            return path.read_text(encoding=encoding)
        except UnicodeDecodeError:
            continue
    return path.read_bytes().decode("utf-8", errors="replace")


def sanitize_terminal_text(source: str) -> str:
    """Escape control characters in source names, document addresses and titles.

    CLI rows and tree lines embed names taken from the filesystem; escaping
    keeps a crafted file name from moving the cursor or recoloring the output.
    """
    if _CONTROL_RE.search(source) is None:
        return source

    out: list[str] = []
    for ch in source:
        code = ord(ch)
        if ch in {"\n", "\r", "\t"}:
            out.append(ch)
            continue
        if code < 32 or code == 127 or 0x80 <= code <= 0x9F:
            out.append(f"\\x{code:02x}")
            continue
        out.append(ch)
    return "".join(out)


__all__ = ["read_text", "sanitize_terminal_text"]
