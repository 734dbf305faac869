"""Entrypoint for ``python -m prdcheck.cli``."""

from prdcheck.cli import main

raise SystemExit(main())
