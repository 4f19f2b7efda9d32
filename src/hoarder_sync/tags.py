"""Tag normalisation and tag-based bookmark filtering."""

from __future__ import annotations

import re
from collections.abc import Collection, Iterable
from enum import StrEnum

from pydantic import BaseModel

_WHITESPACE_RE = re.compile(r"\s+")
_INVALID_TAG_CHARS_RE = re.compile(r"[^A-Za-z0-9_/\-]")
_NUMERIC_TAG_RE = re.compile(r"^[\d/\-_]+$")


def sanitize_tag(tag: str) -> str | None:
    """Normalise *tag* into a valid local tag token.

    Whitespace runs become hyphens and anything outside ``[A-Za-z0-9_/-]`` is
    dropped. A tag made only of digits and separators gets a ``tag-`` prefix so
    it always carries at least one non-numeric character. Returns ``None`` when
    nothing usable is left.
    """
    sanitized = tag.strip()
    if not sanitized:
        return None

    sanitized = _WHITESPACE_RE.sub("-", sanitized)
    sanitized = _INVALID_TAG_CHARS_RE.sub("", sanitized)
    if not sanitized:
        return None

    if _NUMERIC_TAG_RE.match(sanitized):
        sanitized = f"tag-{sanitized}"
    return sanitized


def sanitize_tags(tags: Iterable[str]) -> list[str]:
    return [sanitized for sanitized in map(sanitize_tag, tags) if sanitized is not None]


class FilterReason(StrEnum):
    MISSING_INCLUDED_TAG = "missing_included_tag"
    EXCLUDED_TAG = "excluded_tag"


class FilterResult(BaseModel):
    include: bool
    reason: FilterReason | None = None

    model_config = {"frozen": True}


def evaluate_tag_filter(
    bookmark_tags: Collection[str],
    included_tags: Collection[str],
    excluded_tags: Collection[str],
    *,
    is_favorite: bool,
) -> FilterResult:
    """Decide whether a bookmark passes the include/exclude tag rules.

    All tag collections are expected to be lowercased already. The include rule
    is checked first and is never bypassed; favorites only bypass the exclude
    rule.
    """
    if included_tags and not any(tag in bookmark_tags for tag in included_tags):
        return FilterResult(include=False, reason=FilterReason.MISSING_INCLUDED_TAG)

    if not is_favorite and excluded_tags and any(tag in bookmark_tags for tag in excluded_tags):
        return FilterResult(include=False, reason=FilterReason.EXCLUDED_TAG)

    return FilterResult(include=True)
