"""Module entrypoint for ``python -m skill_installer``."""

from .cli import main


if __name__ == "__main__":
    main()
