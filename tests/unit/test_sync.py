"""Unit tests for the portfolio data sync."""

import functools
import json
import sys
import types
from dataclasses import dataclass
from unittest.mock import patch

import pytest

from folio.content.icons import Icon
from folio.io import dump_json
from folio.sync import (
    SyncError,
    icon_label,
    main,
    process_data,
    sync_portfolio,
    to_jsonable,
)


def Sparkles():
    return None


class TestIconLabel:
    def test_named_function(self):
        assert icon_label(Sparkles) == "Sparkles"

    def test_lambda_is_anonymous(self):
        assert icon_label(lambda: None) == "Icon"

    def test_function_with_empty_name(self):
        def fn():
            return None
        fn.__name__ = ""
        assert icon_label(fn) == "Icon"

    def test_display_name_wins_over_name(self):
        def fn():
            return None
        fn.displayName = "ArrowRight"
        assert icon_label(fn) == "ArrowRight"

    def test_callable_without_name(self):
        assert icon_label(functools.partial(Sparkles)) == "Icon"

    def test_icon_object(self):
        assert icon_label(Icon("Github")) == "Github"


class TestToJsonable:
    def test_function_leaf(self):
        assert to_jsonable({"icon": Sparkles}) == {"icon": "Sparkles"}

    def test_anonymous_function_leaf(self):
        assert to_jsonable({"icon": lambda: None}) == {"icon": "Icon"}

    def test_object_with_display_name(self):
        icon = types.SimpleNamespace(displayName="Mail", size=24)
        assert to_jsonable([icon]) == ["Mail"]

    def test_mapping_with_display_name(self):
        assert to_jsonable({"icon": {"displayName": "Github", "size": 24}}) == {"icon": "Github"}

    def test_mapping_with_empty_display_name_recurses(self):
        assert to_jsonable({"icon": {"displayName": "", "size": 24}}) == {"icon": {"displayName": "", "size": 24}}

    def test_non_finite_floats_become_null(self):
        data = {"x": float("nan"), "y": [float("inf"), float("-inf"), 1.5]}
        assert to_jsonable(data) == {"x": None, "y": [None, None, 1.5]}

    def test_nested(self):
        data = {"a": [{"b": (1, 2.5, None, True)}], "c": {"d": Sparkles}}
        assert to_jsonable(data) == {"a": [{"b": [1, 2.5, None, True]}], "c": {"d": "Sparkles"}}

    def test_dataclass(self):
        @dataclass
        class Link:
            label: str
            icon: object

        assert to_jsonable(Link("Repo", Sparkles)) == {"label": "Repo", "icon": "Sparkles"}

    def test_unserializable_raises(self):
        with pytest.raises(TypeError):
            to_jsonable({"when": object()})

    def test_does_not_mutate_source(self):
        source = {"skills": [{"icon": Sparkles}]}
        to_jsonable(source)
        assert source["skills"][0]["icon"] is Sparkles


class TestProcessData:
    def test_mapping_with_json_keys(self):
        raw = {"skills": [1], "skillCategories": [], "unrelated": "x"}
        result = process_data(raw)
        assert result == {"skills": [1], "skillCategories": []}

    def test_module_with_snake_case_attributes(self):
        mod = types.ModuleType("fake_content")
        mod.about_skills = [{"icon": Sparkles}]
        mod.services = []
        result = process_data(mod)
        assert result == {"aboutSkills": [{"icon": "Sparkles"}], "services": []}

    def test_key_order_fixed(self):
        raw = {k: [] for k in ["services", "projects", "skills", "aboutSkills", "experiences", "skillCategories"]}
        assert list(process_data(raw)) == [
            "skills", "skillCategories", "experiences", "projects", "aboutSkills", "services",
        ]

    def test_none_value_skipped(self):
        assert process_data({"skills": None, "projects": []}) == {"projects": []}

    def test_bundled_content(self):
        from folio.content import data

        result = process_data(data)
        assert set(result) == {"skills", "skillCategories", "experiences", "projects", "aboutSkills", "services"}
        assert result["projects"][0]["icon"] == "Sparkles"
        assert all(isinstance(s["icon"], str) for s in result["skills"])

    def test_idempotent(self):
        from folio.content import data

        once = dump_json(process_data(data))
        twice = dump_json(process_data(json.loads(once)))
        assert once == twice


class TestSyncPortfolio:
    def test_writes_file(self, tmp_path):
        out = tmp_path / "public" / "portfolioData.json"
        data = sync_portfolio({"skills": [{"icon": Sparkles}]}, out)
        assert json.loads(out.read_text(encoding="utf-8")) == data == {"skills": [{"icon": "Sparkles"}]}

    def test_rerun_is_byte_identical(self, tmp_path):
        out = tmp_path / "portfolioData.json"
        sync_portfolio("folio.content.data", out)
        first = out.read_bytes()
        sync_portfolio("folio.content.data", out)
        assert out.read_bytes() == first

    def test_missing_module_is_sync_error(self, tmp_path):
        with pytest.raises(SyncError):
            sync_portfolio("folio.content.does_not_exist", tmp_path / "out.json")

    def test_serialization_failure_writes_nothing(self, tmp_path):
        out = tmp_path / "out.json"
        with pytest.raises(SyncError):
            sync_portfolio({"skills": [object()]}, out)
        assert not out.exists()


class TestMain:
    def test_success(self, tmp_path):
        out = tmp_path / "portfolioData.json"
        argv = ["folio-sync", "--output", str(out)]
        with patch.object(sys, "argv", argv):
            main()
        assert "skills" in json.loads(out.read_text(encoding="utf-8"))

    def test_failure_exits_nonzero(self, tmp_path):
        argv = ["folio-sync", "--source", "folio.content.nope", "--output", str(tmp_path / "x.json")]
        with patch.object(sys, "argv", argv):
            with pytest.raises(SystemExit) as exc:
                main()
        assert exc.value.code == 1
        assert not (tmp_path / "x.json").exists()
