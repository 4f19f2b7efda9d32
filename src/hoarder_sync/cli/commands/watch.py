"""Watch command."""

from __future__ import annotations

import argparse

from hoarder_sync.cli.commands.sync import format_outcome
from hoarder_sync.contracts.sync import SyncOutcome


def _print_outcome(outcome: SyncOutcome) -> None:
    print(format_outcome(outcome), flush=True)


async def run_watch(args: argparse.Namespace) -> None:
    import hoarder_sync.cli as cli

    config = cli.load_config(args.config)
    sdk = cli.HoarderSync.from_config(config)
    print(
        f"hoarder-sync: watching {config.vault_path}/{config.sync_folder} "
        f"(sync every {config.sync_interval_minutes} min, Ctrl+C to stop)",
        flush=True,
    )
    await sdk.watch(on_outcome=_print_outcome)


__all__ = ["run_watch"]
