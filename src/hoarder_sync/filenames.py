"""Filesystem-safe, length-bounded names for documents and assets."""

from __future__ import annotations

import re
from datetime import datetime

from hoarder_sync.timestamps import iso_date

_HOSTILE_CHARS_RE = re.compile(r'[\\/:*?"<>|]')
_WHITESPACE_RE = re.compile(r"\s+")
_DASH_RUN_RE = re.compile(r"-+")

# 50 overall: 10 (date) + 1 (dash) + 36 (title) + 3 (".md")
MAX_TITLE_LENGTH = 36
MAX_ASSET_TITLE_LENGTH = 30


def slugify_title(title: str, max_length: int) -> str:
    """Replace hostile characters and whitespace with dashes, then shorten.

    When the cut lands past the middle of *max_length*, the title is cut back
    to the preceding dash instead of splitting a word.
    """
    slug = _HOSTILE_CHARS_RE.sub("-", title)
    slug = _WHITESPACE_RE.sub("-", slug)
    slug = _DASH_RUN_RE.sub("-", slug)
    slug = slug.strip("-")

    if len(slug) > max_length:
        truncated = slug[:max_length]
        last_dash = truncated.rfind("-")
        slug = truncated[:last_dash] if last_dash > max_length / 2 else truncated
    return slug


def build_filename(title: str, created_at: str | datetime) -> str:
    """Return ``YYYY-MM-DD-{slug}``; the caller appends the extension."""
    return f"{iso_date(created_at)}-{slugify_title(title, MAX_TITLE_LENGTH)}"
