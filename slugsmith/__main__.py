"""Module entrypoint for running slugsmith as ``python -m slugsmith``."""

from __future__ import annotations

from slugsmith.cli import main


if __name__ == "__main__":
    main()
