"""Config loading and scaffolding."""

from hoarder_sync.config.loader import load_config
from hoarder_sync.config.scaffold import scaffold_config, write_config

__all__ = ["load_config", "scaffold_config", "write_config"]
