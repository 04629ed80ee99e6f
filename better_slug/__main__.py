"""Module entrypoint for running better-slug as ``python -m better_slug``."""

from __future__ import annotations

from better_slug.cli import main


if __name__ == "__main__":
    main()
