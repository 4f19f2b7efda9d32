"""Init command."""

from __future__ import annotations

import argparse
from pathlib import Path


def run_init(args: argparse.Namespace) -> Path:
    import hoarder_sync.cli as cli

    output = Path(args.output)
    config = cli.scaffold_config(vault_path=args.vault, api_endpoint=args.api_endpoint)
    cli.write_config(config, output)
    print(f"hoarder-sync: wrote {output}")
    print(f"  Set {config['api_key_env']} to your Karakeep API key, then run: hoarder-sync sync --config {output}")
    return output


__all__ = ["run_init"]
