"""Sync pass contracts."""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, Field

from hoarder_sync.contracts.config import DispositionAction


class DispositionReason(StrEnum):
    DELETED = "deleted"
    ARCHIVED = "archived"


class DispositionInstruction(BaseModel):
    bookmark_id: str
    action: DispositionAction
    reason: DispositionReason

    model_config = {"frozen": True}


class DispositionCounts(BaseModel):
    deleted: int = 0
    archived: int = 0
    tagged: int = 0
    archived_handled: int = 0

    @property
    def total_deleted(self) -> int:
        return self.deleted + self.archived + self.tagged


class SyncStats(BaseModel):
    total_bookmarks: int = 0
    skipped_files: int = 0
    updated_in_remote: int = 0
    excluded_by_tags: int = 0
    included_by_tags: int = 0
    included_tags_enabled: bool = False
    skipped_no_highlights: int = 0
    dispositions: DispositionCounts = Field(default_factory=DispositionCounts)


class SyncReport(BaseModel):
    stats: SyncStats
    completed_at: datetime


class SyncOutcome(BaseModel):
    """Terminal result of one manual or scheduled sync request."""

    success: bool
    message: str
