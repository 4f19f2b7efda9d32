"""Markdown document renderer."""

from __future__ import annotations

from collections.abc import Sequence

from hoarder_sync.contracts.bookmark import AssetContent, Bookmark, Highlight
from hoarder_sync.rendering.assets import AssetEmbeds
from hoarder_sync.rendering.escaping import escape_markdown_path, escape_tag, escape_yaml, quote_header_link
from hoarder_sync.timestamps import long_date, to_iso_utc


def render_highlight(highlight: Highlight) -> str:
    lines = [f"> [!karakeep-{highlight.color.value}] {long_date(highlight.created_at)}"]
    lines.extend(f"> {line}" for line in highlight.text.split("\n"))
    if highlight.note and highlight.note.strip():
        lines.append(">")
        note_lines = highlight.note.split("\n")
        lines.append(f"> *Note: {note_lines[0]}*")
        lines.extend(f"> *{line}*" for line in note_lines[1:])
    return "\n".join(lines) + "\n\n"


class MarkdownRenderer:
    """Serialise a bookmark into a document: header block, then body sections.

    Rendering is a pure function of its arguments. The header stores the note
    twice, as ``note`` and ``original_note``; the latter is the reference the
    next pass diffs local edits against.
    """

    def __init__(self, *, include_highlights: bool = False) -> None:
        self._include_highlights = include_highlights

    def render(
        self,
        bookmark: Bookmark,
        title: str,
        *,
        view_url: str,
        highlights: Sequence[Highlight] | None = None,
        assets: AssetEmbeds | None = None,
    ) -> str:
        assets = assets or AssetEmbeds()
        url = bookmark.url
        description = bookmark.description

        parts = [self._header(bookmark, title, url, assets), f"\n# {title}\n"]
        parts.append(assets.body)

        if bookmark.summary:
            parts.append(f"\n## Summary\n\n{bookmark.summary}\n")
        if description:
            parts.append(f"\n## Description\n\n{description}\n")
        if highlights and self._include_highlights:
            ordered = sorted(highlights, key=lambda highlight: highlight.start_offset)
            parts.append("\n## Highlights\n\n")
            parts.extend(render_highlight(highlight) for highlight in ordered)

        parts.append(f"\n## Notes\n\n{bookmark.note or ''}\n")

        if url and not isinstance(bookmark.content, AssetContent):
            parts.append(f"\n[Visit Link]({escape_markdown_path(url)})\n")
        parts.append(f"\n[View in Hoarder]({escape_markdown_path(view_url)})")
        return "".join(parts)

    @staticmethod
    def _header(bookmark: Bookmark, title: str, url: str | None, assets: AssetEmbeds) -> str:
        lines = [
            "---",
            f'bookmark_id: "{bookmark.id}"',
            f"url: {escape_yaml(url)}",
            f"title: {escape_yaml(title)}",
            f"date: {to_iso_utc(bookmark.created_at)}",
        ]
        if bookmark.modified_at:
            lines.append(f"modified: {to_iso_utc(bookmark.modified_at)}")
        tags = "\n  - ".join(escape_tag(name) for name in bookmark.tag_names())
        lines.append(f"tags:\n  - {tags}")
        lines.append(f"note: {escape_yaml(bookmark.note)}")
        lines.append(f"original_note: {escape_yaml(bookmark.note)}")
        lines.append(f"summary: {escape_yaml(bookmark.summary)}")

        asset_lines = [f"{key}: {quote_header_link(value)}" for key, value in assets.header_fields()]
        if assets.additional:
            asset_lines.append("additional:")
            asset_lines.extend(f"  - {quote_header_link(link)}" for link in assets.additional)
        lines.extend(asset_lines)

        lines.extend(["", "---"])
        return "\n".join(lines) + "\n"
