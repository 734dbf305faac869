from __future__ import annotations

import json
from pathlib import Path

import pytest

from prdcheck.core.contracts.exceptions import PrdLoadError
from prdcheck.core.prd.loader import PrdLoader


def test_load_returns_parsed_json(tmp_path) -> None:
    prd_path = tmp_path / "prd.json"
    prd_path.write_text(json.dumps({"stories": [{"id": 1}]}), encoding="utf-8")

    assert PrdLoader().load(prd_path) == {"stories": [{"id": 1}]}


def test_load_does_not_check_document_shape(tmp_path) -> None:
    prd_path = tmp_path / "prd.json"
    prd_path.write_text("[]", encoding="utf-8")

    assert PrdLoader().load(prd_path) == []


def test_missing_file_raises_prd_load_error(tmp_path) -> None:
    with pytest.raises(PrdLoadError, match="prd file not found"):
        PrdLoader().load(tmp_path / "missing.json")


def test_directory_raises_prd_load_error(tmp_path) -> None:
    with pytest.raises(PrdLoadError, match="not a file"):
        PrdLoader().load(tmp_path)


def test_invalid_json_raises_prd_load_error(tmp_path) -> None:
    prd_path = tmp_path / "prd.json"
    prd_path.write_text("{not valid json", encoding="utf-8")

    with pytest.raises(PrdLoadError, match="invalid JSON"):
        PrdLoader().load(prd_path)


def test_os_error_is_wrapped_as_prd_load_error(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    prd_path = tmp_path / "prd.json"
    prd_path.write_text("{}", encoding="utf-8")
    original_read_text = Path.read_text

    def _boom(self: Path, *args: object, **kwargs: object) -> str:
        if self == prd_path:
            raise OSError("permission denied")
        return original_read_text(self, *args, **kwargs)

    monkeypatch.setattr(Path, "read_text", _boom)

    with pytest.raises(PrdLoadError, match="failed reading prd file"):
        PrdLoader().load(prd_path)


def test_non_utf8_file_raises_prd_load_error(tmp_path) -> None:
    prd_path = tmp_path / "prd.json"
    prd_path.write_bytes(b'{"stories": ["\xff\xfe"]}')

    with pytest.raises(PrdLoadError, match="not valid UTF-8") as exc_info:
        PrdLoader().load(prd_path)

    assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)
