"""Sync command."""

from __future__ import annotations

import argparse

from hoarder_sync.cli.progress.rich import RichSyncProgress
from hoarder_sync.contracts.sync import SyncOutcome


def format_outcome(outcome: SyncOutcome) -> str:
    prefix = "hoarder-sync" if outcome.success else "hoarder-sync - failed"
    return f"{prefix}: {outcome.message}"


async def run_sync(args: argparse.Namespace) -> SyncOutcome:
    import hoarder_sync.cli as cli

    config = cli.load_config(args.config)

    if not args.verbose:
        with RichSyncProgress() as progress:
            sdk = cli.HoarderSync.from_config(config, progress=progress)
            await sdk.check_credentials()
            outcome = await sdk.sync_now()
    else:
        sdk = cli.HoarderSync.from_config(config)
        await sdk.check_credentials()
        outcome = await sdk.sync_now()

    print(format_outcome(outcome))
    return outcome


__all__ = ["format_outcome", "run_sync"]
