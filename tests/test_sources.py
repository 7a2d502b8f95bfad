"""Unit tests for reading YAML sources from disk and over HTTP.

Remote fetches use an in-memory stand-in for ``requests.Session`` so the
suite never touches the network.
"""

from __future__ import annotations

import typing as typ

import pytest
import requests

from awesome_readme.errors import SourceLoadError, SourceParseError
from awesome_readme.sources import load_text, load_yaml

if typ.TYPE_CHECKING:
    from pathlib import Path


class _Response:
    def __init__(self, body: str, status_code: int = 200) -> None:
        self.text = body
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            msg = f"{self.status_code} Client Error"
            raise requests.HTTPError(msg)


class _Session:
    def __init__(self, response: _Response) -> None:
        self.response = response
        self.calls: list[tuple[str, float]] = []

    def get(self, url: str, timeout: float) -> _Response:
        self.calls.append((url, timeout))
        return self.response

    def close(self) -> None:  # pragma: no cover - stub
        return None


def test_load_local_yaml_preserves_key_order(tmp_path: Path) -> None:
    """Mappings come back as dicts in document order."""
    path = tmp_path / "modules.yml"
    path.write_text("zeta:\n  title: Z\nalpha:\n  title: A\n", encoding="utf-8")
    loaded = load_yaml(path)
    assert list(loaded) == ["zeta", "alpha"], f"unexpected order: {list(loaded)!r}"
    assert loaded["zeta"] == {"title": "Z"}


def test_load_empty_yaml_returns_none(tmp_path: Path) -> None:
    """An empty document parses to None."""
    path = tmp_path / "empty.yml"
    path.write_text("", encoding="utf-8")
    assert load_yaml(path) is None


def test_missing_file_raises_source_load_error(tmp_path: Path) -> None:
    """Unreadable files surface as load errors naming the path."""
    missing = tmp_path / "missing.yml"
    with pytest.raises(SourceLoadError, match="missing.yml"):
        load_yaml(missing)


def test_invalid_yaml_raises_source_parse_error(tmp_path: Path) -> None:
    """Syntax errors surface as parse errors rather than library exceptions."""
    path = tmp_path / "broken.yml"
    path.write_text("topic: [unclosed, list\n", encoding="utf-8")
    with pytest.raises(SourceParseError, match="broken.yml"):
        load_yaml(path)


def test_custom_tags_are_rejected(tmp_path: Path) -> None:
    """The safe loader refuses arbitrary Python object tags."""
    path = tmp_path / "tagged.yml"
    path.write_text("value: !!python/object:os.system {}\n", encoding="utf-8")
    with pytest.raises(SourceParseError):
        load_yaml(path)


def test_load_text_reads_utf8(tmp_path: Path) -> None:
    """Text is decoded as UTF-8."""
    path = tmp_path / "note.txt"
    path.write_text("Café ✓\n", encoding="utf-8")
    assert load_text(path) == "Café ✓\n"


def test_remote_yaml_uses_session_and_timeout() -> None:
    """Remote loading GETs the URL with the configured timeout."""
    session = _Session(_Response("gold:\n  - name: Acme\n    link: https://acme\n"))
    loaded = load_yaml(
        "https://example.invalid/companies.yml",
        remote=True,
        session=session,  # type: ignore[arg-type]
        timeout=5.0,
    )
    assert session.calls == [("https://example.invalid/companies.yml", 5.0)]
    assert loaded == {"gold": [{"name": "Acme", "link": "https://acme"}]}


def test_remote_http_error_raises_source_load_error() -> None:
    """HTTP error statuses are reported as load errors."""
    session = _Session(_Response("Not Found", status_code=404))
    with pytest.raises(SourceLoadError, match="404"):
        load_yaml(
            "https://example.invalid/missing.yml",
            remote=True,
            session=session,  # type: ignore[arg-type]
        )


def test_remote_connection_error_raises_source_load_error(
    mocker: typ.Any,
) -> None:
    """Transport failures from a default session are wrapped as load errors."""
    session = mocker.Mock()
    session.get.side_effect = requests.ConnectionError("connection refused")
    mocker.patch("awesome_readme.sources.requests.Session", return_value=session)
    with pytest.raises(SourceLoadError, match="connection refused"):
        load_yaml("https://example.invalid/companies.yml", remote=True)
    session.close.assert_called_once_with()
