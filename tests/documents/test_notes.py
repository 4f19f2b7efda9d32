"""Tests for Notes section extraction."""

from __future__ import annotations

from hoarder_sync.documents import extract_notes


def test_extracts_trimmed_notes() -> None:
    content = "# Title\n\n## Notes\n\n  my local note  \n\n[Visit Link](https://example.com)\n"

    assert extract_notes(content) == "my local note"


def test_missing_section_gives_none() -> None:
    assert extract_notes("# Title\n\nno notes here\n") is None


def test_empty_section_gives_empty_string() -> None:
    content = "## Notes\n\n\n\n[View in Hoarder](https://karakeep.test/dashboard/preview/b1)"

    assert extract_notes(content) == ""


def test_section_stops_at_next_heading() -> None:
    content = "## Notes\n\nfirst\nsecond\n## Later\n\nnot a note"

    assert extract_notes(content) == "first\nsecond"


def test_section_runs_to_end_of_text() -> None:
    assert extract_notes("## Notes\n\nlast words\n") == "last words"


def test_first_marker_wins_even_at_deeper_heading() -> None:
    content = "### Notes\n\nfirst\n\n## Notes\n\nsecond"

    assert extract_notes(content) == "first"


def test_multiline_notes_keep_inner_line_breaks() -> None:
    content = "## Notes\n\nline one\n\nline three\n\n[Visit Link](https://example.com)"

    assert extract_notes(content) == "line one\n\nline three"
