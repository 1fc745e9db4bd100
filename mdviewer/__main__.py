"""Module entrypoint for ``python -m mdviewer``.

All argument parsing and environment setup happen in ``mdviewer.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
