"""Module entrypoint for ``python -m newassets``."""

from .cli import main


if __name__ == "__main__":
    main()
