"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import sys

from hoarder_sync import ConfigError, HoarderSyncError


def main(argv: list[str] | None = None) -> int:
    import hoarder_sync.cli as cli

    parser = cli.build_parser()
    args = parser.parse_args(argv)

    if args.command == "init":
        try:
            cli._run_init(args)
            return 0
        except ConfigError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 3

    if args.verbose:
        cli.logging.basicConfig(level=cli.logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        if args.command == "sync":
            outcome = cli.asyncio.run(cli._run_sync(args))
            return 0 if outcome.success else 5
        cli.asyncio.run(cli._run_watch(args))
        return 0
    except KeyboardInterrupt:
        return 0
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except HoarderSyncError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 5
    except Exception as exc:  # pragma: no cover - defensive fallback
        print(f"error: {exc}", file=sys.stderr)
        return 1


__all__ = ["main"]
