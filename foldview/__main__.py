"""Module entrypoint for ``python -m foldview``."""

from .cli import main


if __name__ == "__main__":
    main()
