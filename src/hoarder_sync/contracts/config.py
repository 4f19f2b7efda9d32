"""Configuration contracts."""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path

from pydantic import BaseModel, Field, field_validator, model_validator

from hoarder_sync.tags import sanitize_tag


class DispositionAction(StrEnum):
    """What happens to a local document whose bookmark was deleted or archived."""

    DELETE = "delete"
    RELOCATE = "relocate"
    TAG = "tag"
    IGNORE = "ignore"


def _coerce_action(value: object) -> object:
    # "archive" is what older configs call a move into a folder.
    if value == "archive":
        return DispositionAction.RELOCATE
    return value


class DeletionPolicy(BaseModel):
    sync_deletions: bool = False
    deletion_action: DispositionAction = DispositionAction.DELETE
    handle_archived_bookmarks: bool = False
    archived_bookmark_action: DispositionAction = DispositionAction.DELETE

    model_config = {"frozen": True}

    @field_validator("deletion_action", "archived_bookmark_action", mode="before")
    @classmethod
    def accept_legacy_action(cls, value: object) -> object:
        return _coerce_action(value)


class HoarderSyncConfig(BaseModel):
    api_endpoint: str = "https://api.hoarder.app/api/v1"
    auth: str = "env"
    token: str | None = None
    api_key_env: str = "HOARDER_API_KEY"
    vault_path: Path = Path(".")
    sync_folder: str = "Hoarder"
    attachments_folder: str = "Hoarder/attachments"
    sync_interval_minutes: int = Field(default=60, ge=1)
    update_existing_files: bool = False
    exclude_archived: bool = True
    only_favorites: bool = False
    sync_notes_to_remote: bool = True
    excluded_tags: list[str] = Field(default_factory=list)
    included_tags: list[str] = Field(default_factory=list)
    download_assets: bool = True
    sync_highlights: bool = False
    only_bookmarks_with_highlights: bool = False
    sync_deletions: bool = False
    deletion_action: DispositionAction = DispositionAction.DELETE
    deletion_tag: str = "deleted"
    archive_folder: str = "Hoarder/deleted"
    handle_archived_bookmarks: bool = False
    archived_bookmark_action: DispositionAction = DispositionAction.DELETE
    archived_bookmark_tag: str = "archived"
    archived_bookmark_folder: str = "Hoarder/archived"
    page_size: int = Field(default=100, ge=1, le=100)
    edit_debounce_seconds: float = Field(default=2.0, ge=0)
    reference_note_delay_seconds: float = Field(default=5.0, ge=0)
    poll_interval_seconds: float = Field(default=1.0, gt=0)
    state_path: Path = Path("hoarder-sync-state.json")
    max_retries: int = Field(default=3, ge=0, le=10)

    model_config = {"frozen": True}

    @field_validator("deletion_action", "archived_bookmark_action", mode="before")
    @classmethod
    def accept_legacy_action(cls, value: object) -> object:
        return _coerce_action(value)

    @field_validator("excluded_tags", "included_tags")
    @classmethod
    def strip_tag_entries(cls, value: list[str]) -> list[str]:
        return [tag.strip() for tag in value if tag.strip()]

    @field_validator("deletion_tag", "archived_bookmark_tag")
    @classmethod
    def sanitize_disposition_tag(cls, value: str) -> str:
        tag = sanitize_tag(value)
        if tag is None:
            raise ValueError(f"invalid tag: {value!r}")
        return tag

    @field_validator("sync_folder", "attachments_folder", "archive_folder", "archived_bookmark_folder")
    @classmethod
    def normalize_folder(cls, value: str) -> str:
        folder = value.strip().strip("/")
        if not folder:
            raise ValueError("folder must not be empty")
        return folder

    @model_validator(mode="after")
    def validate_auth_token(self) -> HoarderSyncConfig:
        token = (self.token or "").strip()
        if self.auth not in {"env", "token"}:
            raise ValueError("auth must be one of: env, token")
        if self.auth == "token" and not token:
            raise ValueError("token auth requires a non-empty token")
        if self.auth != "token" and token:
            raise ValueError("token must be unset when auth is not 'token'")
        return self

    @property
    def deletion_policy(self) -> DeletionPolicy:
        return DeletionPolicy(
            sync_deletions=self.sync_deletions,
            deletion_action=self.deletion_action,
            handle_archived_bookmarks=self.handle_archived_bookmarks,
            archived_bookmark_action=self.archived_bookmark_action,
        )
