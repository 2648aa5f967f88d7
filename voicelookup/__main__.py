"""Module entrypoint for running voicelookup as ``python -m voicelookup``."""

from __future__ import annotations

from voicelookup.cli import main


if __name__ == "__main__":
    main()
