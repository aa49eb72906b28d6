# tests/unit/test_io.py
"""Unit tests for folio IO utilities."""

import json
import os
import stat
from unittest.mock import patch

import pytest

from folio.io import dump_json, save_json


class TestSaveJson:
    def test_creates_file(self, tmp_path):
        path = tmp_path / "output" / "test.json"
        save_json(path, {"key": "value"})
        assert path.exists()

    def test_valid_json(self, tmp_path):
        path = tmp_path / "test.json"
        data = {"skills": [{"name": "Python", "icon": "Terminal"}], "services": []}
        save_json(path, data)
        with open(path, encoding="utf-8") as f:
            loaded = json.load(f)
        assert loaded == data

    def test_creates_parent_dirs(self, tmp_path):
        path = tmp_path / "a" / "b" / "c" / "test.json"
        save_json(path, {"x": 1})
        assert path.exists()

    def test_indent_and_unicode(self, tmp_path):
        path = tmp_path / "test.json"
        save_json(path, {"title": "Café"})
        text = path.read_text(encoding="utf-8")
        assert text == '{\n  "title": "Café"\n}'

    def test_no_temp_files_left(self, tmp_path):
        save_json(tmp_path / "test.json", {"x": 1})
        assert [p.name for p in tmp_path.iterdir()] == ["test.json"]

    def test_unserializable_leaves_old_file(self, tmp_path):
        path = tmp_path / "test.json"
        save_json(path, {"version": 1})
        with pytest.raises(TypeError):
            save_json(path, {"version": object()})
        assert json.loads(path.read_text(encoding="utf-8")) == {"version": 1}

    def test_failed_rename_cleans_temp(self, tmp_path):
        path = tmp_path / "test.json"
        with patch("folio.io.os.replace", side_effect=OSError("disk full")):
            with pytest.raises(OSError):
                save_json(path, {"x": 1})
        assert list(tmp_path.iterdir()) == []

    def test_file_mode_follows_umask(self, tmp_path):
        path = tmp_path / "test.json"
        old = os.umask(0o022)
        try:
            save_json(path, {"x": 1})
        finally:
            os.umask(old)
        assert stat.S_IMODE(path.stat().st_mode) == 0o644


class TestDumpJson:
    def test_preserves_key_order(self):
        text = dump_json({"b": 1, "a": 2})
        assert text.index('"b"') < text.index('"a"')

    def test_rejects_nan(self):
        with pytest.raises(ValueError):
            dump_json({"x": float("nan")})
