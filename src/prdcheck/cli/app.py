"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import sys

from prdcheck import CompactionCheckError, ConfigError, PrdLoadError, PrdValidationError


def main(argv: list[str] | None = None) -> int:
    import prdcheck.cli as cli

    parser = cli.build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        cli.logging.basicConfig(level=cli.logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        if args.command == "validate":
            cli._run_validate(args)
        elif args.command == "status":
            cli._run_status(args)
        elif args.command == "compact-check":
            cli._run_compact_check(args)
        return 0
    except (ConfigError, PrdLoadError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except PrdValidationError as exc:
        print(f"error: {exc.kind}: {exc}", file=sys.stderr)
        return 4
    except CompactionCheckError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 5
    except Exception as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


__all__ = ["main"]
