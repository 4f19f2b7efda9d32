"""Command-line interface for hoarder-sync."""

from __future__ import annotations

import asyncio as asyncio
import logging as logging

from hoarder_sync import ConfigError as ConfigError
from hoarder_sync import HoarderSync as HoarderSync
from hoarder_sync import load_config as load_config
from hoarder_sync import scaffold_config as scaffold_config
from hoarder_sync import write_config as write_config
from hoarder_sync.cli.app import main as main
from hoarder_sync.cli.commands import init as init_command
from hoarder_sync.cli.commands import sync as sync_command
from hoarder_sync.cli.commands import watch as watch_command
from hoarder_sync.cli.parser import build_parser as build_parser

_format_outcome = sync_command.format_outcome
_run_init = init_command.run_init
_run_sync = sync_command.run_sync
_run_watch = watch_command.run_watch
