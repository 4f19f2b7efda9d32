"""Recover the user-editable Notes section from a rendered document."""

from __future__ import annotations

import re

# Matches the first "## Notes" marker at any heading depth ("### Notes" too).
# Documents already in users' vaults depend on this, so the depth is not checked.
_NOTES_RE = re.compile(r"## Notes\n\n(.*?)(?=\n##|\n\[|\Z)", re.DOTALL)


def extract_notes(content: str) -> str | None:
    """Return the trimmed Notes section, or ``None`` when there is none.

    The section runs until the next ``##`` heading, the next line starting with
    a Markdown link, or the end of the text.
    """
    match = _NOTES_RE.search(content)
    if match is None:
        return None
    return match.group(1).strip()
