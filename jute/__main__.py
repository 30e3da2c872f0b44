"""Module entrypoint for ``python -m jute``."""

from .cli import main


if __name__ == "__main__":
    main()
