"""Entry point for ``python -m mdlistsort``."""

from mdlistsort.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
