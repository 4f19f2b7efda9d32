"""Typed access to a document's structured header.

Reading goes through python-frontmatter with a PyYAML ``BaseLoader`` so every
scalar stays a string. A header that does not parse as a whole is read entry
by entry, so one unparsable value does not cost the document its identity.
Writing never re-serialises the whole header: a single top-level entry is
replaced in place and every other byte of the document is kept.
"""

from __future__ import annotations

import logging
import re
from typing import Any

import frontmatter
import yaml
from frontmatter.default_handlers import YAMLHandler
from pydantic import BaseModel, Field, field_validator

from hoarder_sync.contracts.exceptions import StorageError
from hoarder_sync.contracts.storage import DocumentStore
from hoarder_sync.rendering.escaping import escape_tag, escape_yaml

_LOG = logging.getLogger(__name__)

_HEADER_RE = re.compile(r"\A---\n(?P<header>.*?)\n---[ \t]*(?:\n|\Z)", re.DOTALL)
_ENTRY_START_RE = re.compile(r"^(?P<key>[A-Za-z_][\w-]*):")


class DocumentHeader(BaseModel):
    bookmark_id: str | None = None
    url: str | None = None
    title: str | None = None
    date: str | None = None
    modified: str | None = None
    tags: list[str] = Field(default_factory=list)
    note: str | None = None
    original_note: str | None = None
    summary: str | None = None
    image: str | None = None
    banner: str | None = None
    screenshot: str | None = None
    full_page_archive: str | None = None
    video: str | None = None
    additional: list[str] = Field(default_factory=list)

    @field_validator("tags", "additional", mode="before")
    @classmethod
    def coerce_list(cls, value: object) -> object:
        if value is None:
            return []
        if isinstance(value, str):
            return [value] if value else []
        if isinstance(value, list):
            return [item for item in value if isinstance(item, str) and item]
        return value

    @field_validator(
        "bookmark_id",
        "url",
        "title",
        "date",
        "modified",
        "note",
        "original_note",
        "summary",
        "image",
        "banner",
        "screenshot",
        "full_page_archive",
        "video",
        mode="before",
    )
    @classmethod
    def scalar_only(cls, value: object) -> object:
        return value if isinstance(value, str) else None

    @property
    def reference_note(self) -> str | None:
        """``original_note`` trimmed the way extracted notes are, or ``None`` if absent."""
        if self.original_note is None:
            return None
        return self.original_note.strip()


class _StringYAMLHandler(YAMLHandler):
    """Front matter handler that keeps every scalar a string."""

    def load(self, fm: str, **kwargs: Any) -> Any:
        return yaml.load(fm, Loader=yaml.BaseLoader)


_FRONT_MATTER = _StringYAMLHandler()


def _header_entries(block: str) -> list[tuple[str, str]]:
    """Split a header block into its top-level entries, continuation lines included."""
    entries: list[tuple[str, list[str]]] = []
    for line in block.split("\n"):
        match = _ENTRY_START_RE.match(line)
        if match is not None:
            entries.append((match.group("key"), [line]))
        elif entries:
            entries[-1][1].append(line)
    return [(key, "\n".join(lines)) for key, lines in entries]


def _single_quoted(entry: str, key: str) -> str | None:
    # A value holding both quote kinds is written as '...' with nothing escaped.
    value = entry[len(key) + 1 :].strip()
    if "\n" in value or len(value) < 2 or value[0] != "'" or value[-1] != "'":
        return None
    return value[1:-1]


def _parse_entries(content: str) -> dict[str, Any]:
    """Read what can be read from a header that fails to parse as a whole."""
    try:
        block, _ = _FRONT_MATTER.split(content)
    except ValueError:
        return {}

    data: dict[str, Any] = {}
    for key, entry in _header_entries(block):
        try:
            value = yaml.load(entry, Loader=yaml.BaseLoader)
        except yaml.YAMLError:
            recovered = _single_quoted(entry, key)
            if recovered is None:
                _LOG.debug("Dropping unparsable header entry %r", key)
                continue
            data[key] = recovered
            continue
        if isinstance(value, dict):
            data.update(value)
    return data


def parse_header(content: str) -> DocumentHeader | None:
    if not _FRONT_MATTER.detect(content):
        return None
    try:
        data, _ = frontmatter.parse(content, handler=_FRONT_MATTER)
    except yaml.YAMLError as exc:
        _LOG.debug("Unparsable document header, reading it entry by entry: %s", exc)
        data = _parse_entries(content)
    if not data:
        return None
    return DocumentHeader.model_validate(data)


async def read_header(store: DocumentStore, path: str) -> DocumentHeader | None:
    return parse_header(await store.read(path))


def replace_header_entry(content: str, key: str, entry: str) -> str:
    """Replace the top-level *key* entry (with its continuation lines) by *entry*.

    A missing key is appended at the end of the header.
    """
    match = _HEADER_RE.match(content)
    if match is None:
        raise StorageError("document has no header block")

    lines = match.group("header").split("\n")
    start = next((index for index, line in enumerate(lines) if line.startswith(f"{key}:")), None)
    new_lines = entry.split("\n")

    if start is None:
        insert_at = len(lines)
        while insert_at > 0 and not lines[insert_at - 1].strip():
            insert_at -= 1
        lines[insert_at:insert_at] = new_lines
    else:
        end = start + 1
        while end < len(lines) and (lines[end][:1] in {" ", "\t"} or lines[end].startswith("- ")):
            end += 1
        lines[start:end] = new_lines

    return content[: match.start("header")] + "\n".join(lines) + content[match.end("header") :]


def set_reference_note(content: str, note: str) -> str:
    return replace_header_entry(content, "original_note", f"original_note: {escape_yaml(note)}")


def add_tag(content: str, tag: str) -> str | None:
    """Return *content* with *tag* added to the header tags, or ``None`` if already present."""
    header = parse_header(content)
    if header is None:
        raise StorageError("document has no header block")
    if tag in header.tags:
        return None
    tags = [*header.tags, tag]
    entry = "tags:\n  - " + "\n  - ".join(escape_tag(name) for name in tags)
    return replace_header_entry(content, "tags", entry)
