"""End-to-end CLI tests over a YAML form definition."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from formgrid.cli import cli

pytestmark = pytest.mark.usefixtures("_isolated")


def _json(cli_runner: CliRunner, *args: str) -> dict:
    result = cli_runner.invoke(cli, ["--json", *args])
    assert result.exit_code == 0, result.output
    return json.loads(result.output)


class TestGroups:
    def test_json(self, cli_runner: CliRunner, definition_file: Path) -> None:
        payload = _json(cli_runner, "groups", str(definition_file))
        assert payload["ok"] is True
        assert [g["name"] for g in payload["data"]["groups"]] == ["personal", "contact"]
        assert payload["warnings"] == ["Group 'internal' has nothing to show"]

    def test_prior(self, cli_runner: CliRunner, definition_file: Path) -> None:
        payload = _json(cli_runner, "groups", str(definition_file), "--prior", "contact")
        assert [g["name"] for g in payload["data"]["groups"]] == ["contact", "personal"]

    def test_prior_from_config(
        self, cli_runner: CliRunner, definition_file: Path, tmp_path: Path
    ) -> None:
        (tmp_path / "formgrid.toml").write_text('[renderer]\nprior_groups = ["contact"]\n')
        payload = _json(cli_runner, "groups", str(definition_file))
        assert payload["data"]["groups"][0]["name"] == "contact"

    def test_unknown_prior(self, cli_runner: CliRunner, definition_file: Path) -> None:
        result = cli_runner.invoke(cli, ["groups", str(definition_file), "--prior", "billing"])
        assert result.exit_code == 1
        assert "Form has no group billing." in result.output

    def test_quiet(self, cli_runner: CliRunner, definition_file: Path) -> None:
        result = cli_runner.invoke(cli, ["-q", "groups", str(definition_file)])
        assert result.exit_code == 0
        assert result.output.splitlines()[:2] == ["personal", "contact"]

    def test_human(self, cli_runner: CliRunner, definition_file: Path) -> None:
        result = cli_runner.invoke(cli, ["groups", str(definition_file)])
        assert result.exit_code == 0
        assert "OK  resolve_groups" in result.output
        assert "Osobni" in result.output


class TestLayout:
    def test_group_level(self, cli_runner: CliRunner, definition_file: Path) -> None:
        payload = _json(cli_runner, "layout", str(definition_file), "--group-level", "1")
        assert payload["data"]["depth"] == 2

    def test_group_level_from_env(
        self, cli_runner: CliRunner, definition_file: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("FORMGRID_RENDERER__GROUP_LEVEL", "2")
        payload = _json(cli_runner, "layout", str(definition_file))
        assert payload["data"]["group_level"] == 2

    def test_negative_group_level(self, cli_runner: CliRunner, definition_file: Path) -> None:
        result = cli_runner.invoke(cli, ["layout", str(definition_file), "--group-level", "-1"])
        assert result.exit_code == 2

    def test_unknown_container(self, cli_runner: CliRunner, definition_file: Path) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "layout", str(definition_file), "--container", "billing"]
        )
        assert result.exit_code == 1
        assert json.loads(result.output)["error"]["code"] == "INVALID_DEFINITION"


class TestControls:
    def test_buttons(self, cli_runner: CliRunner, definition_file: Path) -> None:
        result = cli_runner.invoke(
            cli, ["-q", "controls", str(definition_file), "--mode", "buttons"]
        )
        assert result.exit_code == 0
        assert result.output.split() == ["send", "cancel"]

    def test_container(self, cli_runner: CliRunner, definition_file: Path) -> None:
        payload = _json(cli_runner, "controls", str(definition_file), "--container", "address")
        assert payload["data"]["controls"] == ["address-street", "address-city"]

    def test_bad_mode(self, cli_runner: CliRunner, definition_file: Path) -> None:
        result = cli_runner.invoke(cli, ["controls", str(definition_file), "--mode", "all"])
        assert result.exit_code == 2


class TestGrid:
    def test_defaults(self, cli_runner: CliRunner) -> None:
        payload = _json(cli_runner, "grid")
        assert payload["data"]["sub_col_left"] == 3
        assert payload["data"]["sub_col_right"] == 9

    def test_config_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        config = tmp_path / "layout.toml"
        config.write_text("[grid]\ncol_left = 2\ncol_right = 10\nsub_width = 12\n")
        result = cli_runner.invoke(cli, ["--json", "-c", str(config), "grid"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)["data"]
        assert (data["sub_col_left"], data["sub_offset"]) == (2, 0)

    def test_invalid_grid(self, cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FORMGRID_GRID__SUB_WIDTH", "0")
        result = cli_runner.invoke(cli, ["grid"])
        assert result.exit_code == 1
        assert "sub_width must be positive" in result.output

    def test_missing_config_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["-c", str(tmp_path / "nope.toml"), "grid"])
        assert result.exit_code == 1
        assert "Config file not found" in result.output


class TestErrorsAndPlan:
    def test_errors(self, cli_runner: CliRunner, definition_file: Path) -> None:
        payload = _json(cli_runner, "errors", str(definition_file))
        assert payload["data"]["errors"] == ["Please fix the highlighted fields"]

    def test_plan(self, cli_runner: CliRunner, definition_file: Path) -> None:
        data = _json(cli_runner, "plan", str(definition_file))["data"]
        assert [g["name"] for g in data["groups"]] == ["personal", "contact"]
        assert data["controls"][0] == "address-street"
        assert data["buttons"] == ["send", "cancel"]

    def test_invalid_definition(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        bad = tmp_path / "bad.yml"
        bad.write_text("components:\n  - label: no name\n")
        result = cli_runner.invoke(cli, ["--json", "plan", str(bad)])
        assert result.exit_code == 1
        payload = json.loads(result.output)
        assert payload["op"] == "load_definition"
        assert payload["error"]["code"] == "INVALID_DEFINITION"

    def test_missing_definition(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["plan", str(tmp_path / "missing.yml")])
        assert result.exit_code == 2
