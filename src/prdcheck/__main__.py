"""Module entrypoint for ``python -m prdcheck``."""

from prdcheck.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
