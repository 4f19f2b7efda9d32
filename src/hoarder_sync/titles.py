"""Human-readable titles for bookmarks."""

from __future__ import annotations

import re
from urllib.parse import urlsplit

from hoarder_sync.contracts.bookmark import AssetContent, Bookmark, LinkContent, TextContent, UnknownContent
from hoarder_sync.timestamps import iso_date

_EXTENSION_RE = re.compile(r"\.[^/.]+$")
_MAX_TEXT_TITLE = 100


def resolve_title(bookmark: Bookmark) -> str:
    """Return a non-empty title for *bookmark*.

    Priority: explicit bookmark title, then a title derived from the content
    variant, then ``Bookmark-{id}-{YYYY-MM-DD}``.
    """
    if bookmark.title:
        return bookmark.title

    derived = _title_from_content(bookmark)
    if derived:
        return derived

    return f"Bookmark-{bookmark.id}-{iso_date(bookmark.created_at)}"


def _title_from_content(bookmark: Bookmark) -> str | None:
    content = bookmark.content
    match content:
        case LinkContent():
            if content.title:
                return content.title
            return title_from_url(content.url) if content.url else None
        case TextContent():
            return title_from_text(content.text) if content.text else None
        case AssetContent():
            if content.file_name:
                stripped = _EXTENSION_RE.sub("", content.file_name)
                if stripped:
                    return stripped
            return title_from_url(content.source_url) if content.source_url else None
        case UnknownContent():
            return None
    raise TypeError(f"unsupported bookmark content: {type(content).__name__}")


def title_from_url(url: str) -> str:
    """Derive a title from the last path segment of *url*, else its hostname.

    A value that does not parse as an absolute URL is returned unchanged.
    """
    try:
        parts = urlsplit(url)
        hostname = parts.hostname
    except ValueError:
        return url
    if not parts.scheme or not hostname:
        return url

    segments = [segment for segment in parts.path.split("/") if segment]
    if segments:
        path_title = _EXTENSION_RE.sub("", segments[-1])
        path_title = path_title.replace("-", " ").replace("_", " ")
        if path_title:
            return path_title

    return hostname.removeprefix("www.")


def title_from_text(text: str) -> str | None:
    first_line = text.split("\n")[0]
    if not first_line.strip():
        return None
    if len(first_line) <= _MAX_TEXT_TITLE:
        return first_line
    return first_line[: _MAX_TEXT_TITLE - 3] + "..."
