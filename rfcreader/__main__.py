"""Module entrypoint for running rfcreader as ``python -m rfcreader``."""

from __future__ import annotations

from rfcreader.cli import main


if __name__ == "__main__":
    main()
