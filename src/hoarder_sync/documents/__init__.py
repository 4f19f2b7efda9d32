"""Parsing of persisted documents."""

from hoarder_sync.documents.header import (
    DocumentHeader,
    add_tag,
    parse_header,
    read_header,
    replace_header_entry,
    set_reference_note,
)
from hoarder_sync.documents.notes import extract_notes

__all__ = [
    "DocumentHeader",
    "add_tag",
    "extract_notes",
    "parse_header",
    "read_header",
    "replace_header_entry",
    "set_reference_note",
]
