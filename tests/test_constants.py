from pathlib import Path

import pytest

from instadraw.constants import (
    FONT_DATA_PATH,
    VERTEX_SHADER_PATH,
    asset_path,
    load_bytes,
    load_text,
)


def test_asset_path_joins_root(tmp_path):
    assert asset_path(VERTEX_SHADER_PATH, tmp_path) == tmp_path / VERTEX_SHADER_PATH


def test_asset_path_defaults_to_working_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert asset_path(FONT_DATA_PATH) == Path.cwd() / FONT_DATA_PATH


def test_load_text_round_trip(tmp_path):
    target = tmp_path / FONT_DATA_PATH
    target.parent.mkdir(parents=True)
    target.write_text("abc?xyz", encoding="utf-8")
    assert load_text(FONT_DATA_PATH, tmp_path) == "abc?xyz"


def test_load_bytes_round_trip(tmp_path):
    payload = bytes(range(256))
    (tmp_path / "blob.bin").write_bytes(payload)
    assert load_bytes("blob.bin", str(tmp_path)) == payload


def test_missing_asset_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_text("does/not/exist.txt", tmp_path)
    with pytest.raises(FileNotFoundError):
        load_bytes("does/not/exist.bin", tmp_path)