"""Default config scaffolding for ``hoarder-sync init``."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from hoarder_sync.contracts.config import HoarderSyncConfig
from hoarder_sync.contracts.exceptions import ConfigError

_SCAFFOLD_KEYS = (
    "api_endpoint",
    "auth",
    "api_key_env",
    "vault_path",
    "sync_folder",
    "attachments_folder",
    "sync_interval_minutes",
    "update_existing_files",
    "exclude_archived",
    "only_favorites",
    "sync_notes_to_remote",
    "excluded_tags",
    "included_tags",
    "download_assets",
    "sync_highlights",
    "only_bookmarks_with_highlights",
    "sync_deletions",
    "deletion_action",
    "deletion_tag",
    "archive_folder",
    "handle_archived_bookmarks",
    "archived_bookmark_action",
    "archived_bookmark_tag",
    "archived_bookmark_folder",
)


def scaffold_config(*, vault_path: str = ".", api_endpoint: str | None = None) -> dict[str, Any]:
    """Return the user-facing config keys with their defaults filled in."""
    overrides: dict[str, Any] = {"vault_path": vault_path}
    if api_endpoint is not None:
        overrides["api_endpoint"] = api_endpoint

    try:
        config = HoarderSyncConfig.model_validate(overrides)
    except ValidationError as exc:
        raise ConfigError(f"invalid config: {exc}") from exc

    payload = config.model_dump(mode="json")
    return {key: payload[key] for key in _SCAFFOLD_KEYS}


def write_config(config: dict[str, Any], path: Path) -> None:
    if path.exists():
        raise ConfigError(f"refusing to overwrite existing file: {path}")
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(config, indent=2) + "\n", encoding="utf-8")
