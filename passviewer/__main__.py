"""Module entrypoint for ``python -m passviewer``.

All argument parsing and runtime setup happen in ``passviewer.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
