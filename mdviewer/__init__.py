"""Public package surface for mdviewer.

Exports ``main`` for programmatic CLI invocation and the environment factory
for embedding. Most implementation lives in submodules under ``mdviewer``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


def create_markdown_viewer_environment(*args, **kwargs):
    """Lazily import the environment factory (pulls in the markdown stack)."""
    from .environment import create_markdown_viewer_environment as _create

    return _create(*args, **kwargs)


__all__ = ["main", "create_markdown_viewer_environment"]
