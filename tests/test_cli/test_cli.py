"""Tests for the selectorkit CLI commands."""
from __future__ import annotations

import json

from click.testing import CliRunner

from selectorkit import __version__
from selectorkit.cli.main import cli


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help_lists_commands(self) -> None:
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "build" in result.output
        assert "check" in result.output
        assert "combine" in result.output

    def test_version(self) -> None:
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_log_level_option(self) -> None:
        result = CliRunner().invoke(cli, ["--log-level", "debug", "check", "div"])
        assert result.exit_code == 0

    def test_bad_log_level(self) -> None:
        result = CliRunner().invoke(cli, ["--log-level", "loud", "check", "div"])
        assert result.exit_code == 2

    def test_bad_env_log_level(self) -> None:
        result = CliRunner().invoke(
            cli, ["check", "div"], env={"SELECTORKIT_LOG_LEVEL": "loud"}
        )
        assert result.exit_code == 2
        assert "SELECTORKIT_LOG_LEVEL" in result.output
        assert not isinstance(result.exception, ValueError)

    def test_bad_env_json_indent(self) -> None:
        result = CliRunner().invoke(
            cli, ["check", "div"], env={"SELECTORKIT_JSON_INDENT": "two"}
        )
        assert result.exit_code == 2
        assert "must be an integer" in result.output
        assert not isinstance(result.exception, ValueError)

    def test_env_json_indent_applies(self) -> None:
        result = CliRunner().invoke(
            cli, ["build", "--json", "id=main"], env={"SELECTORKIT_JSON_INDENT": "0"}
        )
        assert result.exit_code == 0
        assert json.loads(result.output)["type"] == "simple"


# ---------------------------------------------------------------------------
# build command
# ---------------------------------------------------------------------------


class TestBuildCommand:
    def test_build_renders(self) -> None:
        result = CliRunner().invoke(
            cli, ["build", "element=a", 'attr=href$=".png"', "pseudo-class=focus"]
        )
        assert result.exit_code == 0
        assert result.output.strip() == 'a[href$=".png"]:focus'

    def test_build_json(self) -> None:
        result = CliRunner().invoke(cli, ["build", "--json", "id=main", "class=x"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["type"] == "simple"
        assert [f["kind"] for f in data["fragments"]] == ["id", "class"]

    def test_build_order_violation(self) -> None:
        result = CliRunner().invoke(cli, ["build", "class=a", "id=b"])
        assert result.exit_code == 1
        assert "arranged in the following order" in result.output

    def test_build_duplicate(self) -> None:
        result = CliRunner().invoke(cli, ["build", "id=a", "id=b"])
        assert result.exit_code == 1
        assert "more then one time" in result.output

    def test_build_unknown_kind(self) -> None:
        result = CliRunner().invoke(cli, ["build", "tag=a"])
        assert result.exit_code == 2
        assert "unknown kind" in result.output

    def test_build_missing_equals(self) -> None:
        result = CliRunner().invoke(cli, ["build", "div"])
        assert result.exit_code == 2
        assert "KIND=VALUE" in result.output

    def test_build_requires_parts(self) -> None:
        result = CliRunner().invoke(cli, ["build"])
        assert result.exit_code == 2


# ---------------------------------------------------------------------------
# check command
# ---------------------------------------------------------------------------


class TestCheckCommand:
    def test_check_valid(self) -> None:
        result = CliRunner().invoke(cli, ["check", "div#main > p.note"])
        assert result.exit_code == 0
        assert result.output.strip() == "OK: div#main > p.note"

    def test_check_order_violation(self) -> None:
        result = CliRunner().invoke(cli, ["check", ".a#b"])
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_check_syntax_error(self) -> None:
        result = CliRunner().invoke(cli, ["check", "a >"])
        assert result.exit_code == 1
        assert "Error:" in result.output


# ---------------------------------------------------------------------------
# combine command
# ---------------------------------------------------------------------------


class TestCombineCommand:
    def test_combine(self) -> None:
        result = CliRunner().invoke(cli, ["combine", "ul.menu", ">", "li"])
        assert result.exit_code == 0
        assert result.output.strip() == "ul.menu > li"

    def test_combine_space(self) -> None:
        result = CliRunner().invoke(cli, ["combine", "nav", " ", "a"])
        assert result.exit_code == 0
        assert result.output == "nav   a\n"

    def test_combine_json(self) -> None:
        result = CliRunner().invoke(cli, ["combine", "--json", "a", "+", "b"])
        assert result.exit_code == 0
        assert json.loads(result.output)["combinator"] == "+"

    def test_combine_invalid_side(self) -> None:
        result = CliRunner().invoke(cli, ["combine", "#a#b", "~", "p"])
        assert result.exit_code == 1
        assert "more then one time" in result.output
