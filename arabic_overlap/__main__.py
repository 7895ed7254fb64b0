"""Module entrypoint for running arabic-overlap as ``python -m arabic_overlap``."""

from __future__ import annotations

from arabic_overlap.cli import main


if __name__ == "__main__":
    main()
