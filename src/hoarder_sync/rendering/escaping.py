"""Escaping for header scalars, tag entries and Markdown link targets.

The output of these helpers is persisted in every document and compared
byte-for-byte on later passes, so any change here rewrites the whole vault.
"""

from __future__ import annotations

import re

_YAML_SPECIAL_RE = re.compile(r"[:#{}\[\],&*?|<>=!%@`]")
_EDGE_WHITESPACE_RE = re.compile(r"^[ \t]|[ \t]$")
_PATH_SPECIAL_RE = re.compile(r"[<>\[\](){}]")
_WHITESPACE_RE = re.compile(r"\s+")


def escape_yaml(value: str | None) -> str:
    """Render *value* as a header scalar.

    Multi-line values and values with YAML indicator characters become a
    literal block scalar indented by two spaces; other values are quoted only
    when a quote or edge whitespace requires it.
    """
    if not value:
        return ""

    if "\n" in value or _YAML_SPECIAL_RE.search(value):
        return "|\n  " + value.replace("\n", "\n  ")

    if '"' in value:
        return f"'{value}'"

    if "'" in value or _EDGE_WHITESPACE_RE.search(value):
        escaped = value.replace('"', '\\"')
        return f'"{escaped}"'

    return value


def escape_tag(tag: str) -> str:
    processed = _WHITESPACE_RE.sub("-", tag)
    if '"' in processed:
        return f"'{processed}'"
    return f'"{processed}"'


def escape_markdown_path(path: str) -> str:
    if " " in path or _PATH_SPECIAL_RE.search(path):
        return f"<{path}>"
    return path


def quote_header_link(value: str) -> str:
    """Double-quote an asset link (wikilink or URL) for the header."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'
