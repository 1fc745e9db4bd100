"""Resolve and validate directories offered for registration."""

from __future__ import annotations

import os
import stat
from pathlib import Path

from ..result import Result, failure, success
from .types import SourceRegistrationError


def resolve_project_path(directory_path: str | Path, base_directory: Path) -> Path:
    """Return ``directory_path`` as an absolute, lexically normalized path.

    Relative inputs are joined onto ``base_directory``; absolute inputs are
    only normalized. Symlinks are left untouched.
    """
    return Path(os.path.abspath(os.path.join(base_directory, os.fspath(directory_path))))


def ensure_directory_exists(directory_path: Path) -> Result[Path, SourceRegistrationError]:
    """Check that ``directory_path`` names an existing directory.

    ``STAT_FAILED`` covers every way ``stat`` can fail (missing path,
    permission denied, invalid name); ``NOT_DIRECTORY`` means the path exists
    but is something else.
    """
    try:
        mode = directory_path.stat().st_mode
    except (OSError, ValueError):
        return failure(SourceRegistrationError.STAT_FAILED)

    if not stat.S_ISDIR(mode):
        return failure(SourceRegistrationError.NOT_DIRECTORY)
    return success(directory_path)


__all__ = ["resolve_project_path", "ensure_directory_exists"]
