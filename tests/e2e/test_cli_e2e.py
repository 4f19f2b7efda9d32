from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import httpx
import pytest

from hoarder_sync.cli import main
from hoarder_sync.contracts.config import HoarderSyncConfig
from hoarder_sync.providers.karakeep import KarakeepClient


class FakeKarakeep:
    """Minimal stateful stand-in for the bookmark and note endpoints."""

    def __init__(self) -> None:
        self.bookmark: dict[str, Any] = {
            "id": "b1",
            "createdAt": "2024-01-15T10:30:00Z",
            "modifiedAt": None,
            "title": "My Article",
            "archived": False,
            "favourited": False,
            "note": "remember this",
            "summary": None,
            "tags": [{"id": "t1", "name": "news", "attachedBy": "human"}],
            "content": {"type": "link", "url": "https://example.com/my-article.html"},
            "assets": [],
        }
        self.patches: list[dict[str, Any]] = []
        self.auth_headers: set[str] = set()

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.auth_headers.add(request.headers.get("Authorization", ""))
        if request.method == "GET" and request.url.path == "/api/v1/bookmarks":
            return httpx.Response(200, json={"bookmarks": [self.bookmark], "nextCursor": None})
        if request.method == "PATCH" and request.url.path == "/api/v1/bookmarks/b1":
            body = json.loads(request.content)
            self.patches.append(body)
            self.bookmark = {**self.bookmark, **body}
            return httpx.Response(200, json=self.bookmark)
        return httpx.Response(404, text="not found")


@pytest.fixture
def server(monkeypatch: pytest.MonkeyPatch) -> FakeKarakeep:
    fake = FakeKarakeep()

    def _create_client(config: HoarderSyncConfig, token: str) -> KarakeepClient:
        return KarakeepClient(
            base_url=config.api_endpoint,
            token=token,
            max_retries=0,
            transport=httpx.MockTransport(fake),
        )

    monkeypatch.setattr("hoarder_sync.sdk.create_client", _create_client)
    return fake


def _write_config(tmp_path: Path, **overrides: object) -> Path:
    payload: dict[str, object] = {
        "api_endpoint": "https://karakeep.test/api/v1",
        "auth": "token",
        "token": "secret",
        "vault_path": "vault",
        "state_path": "state.json",
        "download_assets": False,
        **overrides,
    }
    config_path = tmp_path / "hoarder-sync.json"
    config_path.write_text(json.dumps(payload), encoding="utf-8")
    return config_path


def _documents(tmp_path: Path) -> list[Path]:
    return sorted((tmp_path / "vault" / "Hoarder").glob("*.md"))


def test_sync_creates_document_and_records_state(
    tmp_path: Path, server: FakeKarakeep, capsys: pytest.CaptureFixture[str]
) -> None:
    config_path = _write_config(tmp_path)

    assert main(["sync", "--config", str(config_path)]) == 0

    assert "hoarder-sync: Successfully synced 1 bookmark" in capsys.readouterr().out
    documents = _documents(tmp_path)
    assert [path.name for path in documents] == ["2024-01-15-My-Article.md"]
    content = documents[0].read_text(encoding="utf-8")
    assert 'bookmark_id: "b1"' in content
    assert "\n## Notes\n\nremember this\n" in content
    assert server.auth_headers == {"Bearer secret"}
    assert json.loads((tmp_path / "state.json").read_text(encoding="utf-8"))["last_sync_timestamp"]


def test_second_sync_skips_existing_document(
    tmp_path: Path, server: FakeKarakeep, capsys: pytest.CaptureFixture[str]
) -> None:
    config_path = _write_config(tmp_path)
    assert main(["sync", "--config", str(config_path)]) == 0
    capsys.readouterr()

    assert main(["sync", "--config", str(config_path)]) == 0

    assert "Successfully synced 0 bookmarks (skipped 1 existing file)" in capsys.readouterr().out
    assert server.patches == []


def test_local_note_edit_is_pushed_on_next_sync(
    tmp_path: Path, server: FakeKarakeep, capsys: pytest.CaptureFixture[str]
) -> None:
    config_path = _write_config(tmp_path, update_existing_files=True)
    assert main(["sync", "--config", str(config_path)]) == 0
    capsys.readouterr()

    [document] = _documents(tmp_path)
    edited = document.read_text(encoding="utf-8").replace(
        "\n## Notes\n\nremember this\n", "\n## Notes\n\nrevised locally\n"
    )
    document.write_text(edited, encoding="utf-8")

    assert main(["sync", "--config", str(config_path)]) == 0

    out = capsys.readouterr().out
    assert "Successfully synced 1 bookmark and updated 1 note in Karakeep" in out
    assert server.patches == [{"note": "revised locally"}]
    content = document.read_text(encoding="utf-8")
    assert "original_note: revised locally" in content
    assert "\n## Notes\n\nrevised locally\n" in content


def test_sync_reports_remote_failure_with_exit_code(
    tmp_path: Path, server: FakeKarakeep, capsys: pytest.CaptureFixture[str]
) -> None:
    config_path = _write_config(tmp_path, api_endpoint="https://karakeep.test/other")

    assert main(["sync", "--config", str(config_path)]) == 5

    assert "hoarder-sync - failed: Error syncing: HTTP 404" in capsys.readouterr().out
    assert not (tmp_path / "state.json").exists()


def test_sync_with_invalid_config_exits_with_config_error(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    config_path = tmp_path / "hoarder-sync.json"
    config_path.write_text('{"auth": "token"}', encoding="utf-8")

    assert main(["sync", "--config", str(config_path)]) == 3
    assert "error:" in capsys.readouterr().err


@pytest.mark.parametrize("command", ["sync", "watch"])
def test_missing_api_key_exits_with_config_error(
    tmp_path: Path,
    server: FakeKarakeep,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    command: str,
) -> None:
    monkeypatch.delenv("HOARDER_API_KEY", raising=False)
    config_path = _write_config(tmp_path, auth="env", token=None)

    assert main([command, "--config", str(config_path)]) == 3

    assert "error: Hoarder API key not configured" in capsys.readouterr().err
    assert server.auth_headers == set()
    assert not (tmp_path / "vault" / "Hoarder").exists()


def test_non_utf8_document_in_sync_folder_does_not_abort_the_pass(
    tmp_path: Path, server: FakeKarakeep, capsys: pytest.CaptureFixture[str]
) -> None:
    legacy = tmp_path / "vault" / "Hoarder" / "legacy-notes.md"
    legacy.parent.mkdir(parents=True)
    legacy.write_bytes(b"# caf\xe9 notes\n")
    config_path = _write_config(tmp_path, sync_deletions=True)

    assert main(["sync", "--config", str(config_path)]) == 0

    assert "hoarder-sync: Successfully synced 1 bookmark" in capsys.readouterr().out
    assert legacy.read_bytes() == b"# caf\xe9 notes\n"
