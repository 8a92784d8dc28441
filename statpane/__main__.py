"""Module entrypoint for ``python -m statpane``."""

from .cli import main


if __name__ == "__main__":
    main()
