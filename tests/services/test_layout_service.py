"""Tests for LayoutService — ServiceResult-returning layout operations."""

from __future__ import annotations

from pathlib import Path

import pytest

from formgrid.config.models import GridConfig
from formgrid.config.settings import FormgridSettings
from formgrid.domain.errors import DefinitionError
from formgrid.domain.filtering import ButtonMode
from formgrid.domain.forms import Form
from formgrid.infrastructure.definitions import load_definition
from formgrid.services.layout import LayoutService, find_container


@pytest.fixture
def service(tmp_path: Path, _isolated: None) -> LayoutService:
    return LayoutService(FormgridSettings.from_cli(cwd=tmp_path))


@pytest.fixture
def loaded_form(definition_file: Path) -> Form:
    return load_definition(definition_file)


class TestFindContainer:
    def test_root(self, signup_form: Form) -> None:
        assert find_container(signup_form, None) is signup_form

    def test_nested(self, signup_form: Form) -> None:
        assert find_container(signup_form, "address-geo").name == "geo"

    def test_missing(self, signup_form: Form) -> None:
        with pytest.raises(DefinitionError, match="no container"):
            find_container(signup_form, "billing")


class TestGrid:
    def test_default(self, service: LayoutService) -> None:
        result = service.grid()
        assert result.ok
        assert result.op == "grid"
        assert result.data["sub_col_left"] == 3
        assert result.data["offset_class"] == "col-lg-offset-1"

    def test_invalid(self, tmp_path: Path) -> None:
        settings = FormgridSettings.from_cli(cwd=tmp_path, grid=GridConfig(sub_width=0))
        result = LayoutService(settings).grid()
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_CONFIGURATION"


class TestResolveGroups:
    def test_declared_order(self, service: LayoutService, loaded_form: Form) -> None:
        result = service.resolve_groups(loaded_form)
        assert result.ok
        assert result.data["count"] == 2
        assert [g["name"] for g in result.data["groups"]] == ["personal", "contact"]

    def test_translated_labels(self, service: LayoutService, loaded_form: Form) -> None:
        groups = service.resolve_groups(loaded_form).data["groups"]
        assert [g["label"] for g in groups] == ["Osobni", "Kontakt"]
        assert groups[1]["attrs"] == {"data-section": "contact"}

    def test_priority(self, service: LayoutService, loaded_form: Form) -> None:
        result = service.resolve_groups(loaded_form, ["contact"])
        assert [g["name"] for g in result.data["groups"]] == ["contact", "personal"]

    def test_suppressed_group_warns(self, service: LayoutService, loaded_form: Form) -> None:
        result = service.resolve_groups(loaded_form)
        assert result.warnings == ["Group 'internal' has nothing to show"]

    def test_unknown_priority(self, service: LayoutService, loaded_form: Form) -> None:
        result = service.resolve_groups(loaded_form, ["billing"])
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "GROUP_NOT_FOUND"
        assert result.error.detail == {"form": "signup"}


class TestGroupTree:
    def test_flat(self, service: LayoutService, loaded_form: Form) -> None:
        result = service.group_tree(loaded_form)
        assert result.data["depth"] == 1
        assert result.data["tree"]["root"] is True

    def test_group_level_override(self, service: LayoutService, loaded_form: Form) -> None:
        result = service.group_tree(loaded_form, group_level=2)
        assert result.data["group_level"] == 2
        assert result.data["depth"] == 3

    def test_container(self, service: LayoutService, loaded_form: Form) -> None:
        tree = service.group_tree(loaded_form, "address").data["tree"]
        assert tree["name"] == "address"
        assert tree["label"] == "Address"
        assert tree["controls"] == [
            "address-street",
            "address-city",
            "address-geo-lat",
            "address-geo-lng",
        ]

    def test_unknown_container(self, service: LayoutService, loaded_form: Form) -> None:
        result = service.group_tree(loaded_form, "billing")
        assert result.error is not None
        assert result.error.code == "INVALID_DEFINITION"


class TestFilterControls:
    def test_buttons(self, service: LayoutService, loaded_form: Form) -> None:
        result = service.filter_controls(loaded_form, buttons=ButtonMode.BUTTONS_ONLY)
        assert result.data["mode"] == "buttons"
        assert result.data["controls"] == ["send", "cancel"]

    def test_fields_skip_hidden(self, service: LayoutService, loaded_form: Form) -> None:
        result = service.filter_controls(loaded_form, buttons=ButtonMode.NON_BUTTONS_ONLY)
        assert result.data["controls"] == ["first", "last", "email", "phone"]

    def test_nested_container(self, service: LayoutService, loaded_form: Form) -> None:
        result = service.filter_controls(loaded_form, "address-geo")
        assert result.data["controls"] == ["address-geo-lat", "address-geo-lng"]


class TestFindErrors:
    def test_form_errors_only(self, service: LayoutService, loaded_form: Form) -> None:
        result = service.find_errors(loaded_form)
        assert result.data["errors"] == ["Please fix the highlighted fields"]

    def test_all_errors(self, tmp_path: Path, loaded_form: Form, _isolated: None) -> None:
        (tmp_path / "formgrid.toml").write_text("[renderer]\nerrors_at_inputs = false\n")
        service = LayoutService(FormgridSettings.from_cli(cwd=tmp_path))
        result = service.find_errors(loaded_form)
        assert result.data["count"] == 2
        assert result.data["errors"][1] == "Invalid email"


class TestPlan:
    def test_plan(self, service: LayoutService, loaded_form: Form) -> None:
        result = service.plan(loaded_form)
        assert result.ok
        assert result.op == "render_plan"
        assert [g["name"] for g in result.data["groups"]] == ["personal", "contact"]
        assert result.data["buttons"] == ["send", "cancel"]
        assert result.data["grid"]["sub_width"] == 8

    def test_repeatable(self, service: LayoutService, loaded_form: Form) -> None:
        first = service.plan(loaded_form)
        second = service.plan(loaded_form)
        assert first.data == second.data
