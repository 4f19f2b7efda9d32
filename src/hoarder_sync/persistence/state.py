"""Persisted state shared between sync passes."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ValidationError

from hoarder_sync.contracts.exceptions import ConfigError, SyncError


class SyncState(BaseModel):
    last_sync_timestamp: datetime | None = None


def load_state(path: Path) -> SyncState:
    if not path.exists():
        return SyncState()
    try:
        payload: Any = json.loads(path.read_text(encoding="utf-8"))
        return SyncState.model_validate(payload)
    except (OSError, json.JSONDecodeError, ValidationError) as exc:
        raise ConfigError(f"invalid state file: {path}") from exc


def persist_state(state: SyncState, path: Path) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(state.model_dump_json(indent=2), encoding="utf-8")
    except OSError as exc:
        raise SyncError(f"failed to persist sync state: {path}") from exc
