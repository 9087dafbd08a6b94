"""Tests for the root CLI group, global flags, and help output."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from salesctl import __version__
from salesctl.cli import cli

# (CLI args, expected keywords in output)
HELP_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["--help"], ["customer", "company", "--json", "--db"]),
    (["customer", "--help"], ["list", "get", "add", "update", "delete"]),
    (["customer", "list", "--help"], ["--sort", "alphabeticaldesc"]),
    (["customer", "get", "--help"], ["CUSTOMER_ID"]),
    (["customer", "add", "--help"], ["NAME", "--company", "--email"]),
    (["customer", "update", "--help"], ["CUSTOMER_ID", "--name", "--company"]),
    (["customer", "delete", "--help"], ["CUSTOMER_ID"]),
    (["company", "--help"], ["add", "list"]),
    (["company", "add", "--help"], ["NAME", "--address", "--phone"]),
]

EXAMPLES_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["customer", "--examples"], ["salesctl customer list --sort alphabetical"]),
    (["customer", "list", "--examples"], ["--sort date"]),
    (["customer", "get", "--examples"], ["salesctl customer get"]),
    (["customer", "add", "--examples"], ["--company <company-id>"]),
    (["customer", "update", "--examples"], ["--name"]),
    (["customer", "delete", "--examples"], ["salesctl customer delete"]),
    (["company", "--examples"], ["salesctl company list"]),
    (["company", "add", "--examples"], ["salesctl company add"]),
    (["company", "list", "--examples"], ["-q company list"]),
]


def _args_id(item: tuple[list[str], list[str]]) -> str:
    args, _ = item
    return "_".join(a.lstrip("-") for a in args)


@pytest.mark.parametrize(
    "args,expected_keywords",
    HELP_COMMANDS,
    ids=[_args_id(item) for item in HELP_COMMANDS],
)
def test_help(cli_runner: CliRunner, args: list[str], expected_keywords: list[str]) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0
    for kw in expected_keywords:
        assert kw in result.output, f"Expected '{kw}' in help output for {args}"


@pytest.mark.parametrize(
    "args,expected_keywords",
    EXAMPLES_COMMANDS,
    ids=[_args_id(item) for item in EXAMPLES_COMMANDS],
)
def test_examples_flag(
    cli_runner: CliRunner, args: list[str], expected_keywords: list[str]
) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0
    assert "Examples for" in result.output
    for kw in expected_keywords:
        assert kw in result.output, f"Expected '{kw}' in examples output for {args}"


class TestRootGroup:
    def test_version(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_no_subcommand_prints_help(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, [])
        assert result.exit_code == 0
        assert "Usage:" in result.output

    @pytest.mark.usefixtures("_isolated_project")
    def test_examples_skip_required_args(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["customer", "update", "--examples"])
        assert result.exit_code == 0
        assert not (tmp_path / ".salesctl").exists()


@pytest.mark.usefixtures("_isolated_project")
class TestDatabaseLocation:
    def test_default_location(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["company", "list"])
        assert result.exit_code == 0
        assert (tmp_path / ".salesctl" / "sales.db").is_file()

    def test_db_flag(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["--db", "other/alt.db", "company", "add", "Contoso"])
        assert result.exit_code == 0
        assert (tmp_path / "other" / "alt.db").is_file()
        # The default database never saw the write.
        listed = cli_runner.invoke(cli, ["--json", "company", "list"])
        assert json.loads(listed.output)["data"]["items"] == []

    def test_db_from_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "salesctl.toml").write_text(
            '[database]\npath = "data/crm.db"\n', encoding="utf-8"
        )
        result = cli_runner.invoke(cli, ["company", "list"])
        assert result.exit_code == 0
        assert (tmp_path / "data" / "crm.db").is_file()

    def test_db_from_env(
        self, cli_runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("SALESCTL_DATABASE__PATH", "env.db")
        result = cli_runner.invoke(cli, ["company", "list"])
        assert result.exit_code == 0
        assert (tmp_path / "env.db").is_file()

    def test_invalid_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "salesctl.toml").write_text("[database\n", encoding="utf-8")
        result = cli_runner.invoke(cli, ["company", "list"])
        assert result.exit_code == 1
        assert "Invalid TOML" in result.output


@pytest.mark.usefixtures("_isolated_project")
class TestVerboseOutput:
    def test_verbose_error_shows_code(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-v", "customer", "get", "missing"])
        assert result.exit_code == 1
        assert "NOT_FOUND" in result.output
        assert "missing" in result.output


@pytest.mark.usefixtures("_isolated_project")
class TestConfigErrors:
    def test_bad_default_sort_in_toml(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "salesctl.toml").write_text(
            '[customers]\ndefault_sort = "bogus"\n', encoding="utf-8"
        )
        result = cli_runner.invoke(cli, ["customer", "list"])
        assert result.exit_code == 1
        assert "Invalid configuration" in result.output
        assert isinstance(result.exception, SystemExit)

    def test_bad_default_sort_in_env(
        self, cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("SALESCTL_CUSTOMERS__DEFAULT_SORT", "bogus")
        result = cli_runner.invoke(cli, ["customer", "list"])
        assert result.exit_code == 1
        assert "Invalid configuration" in result.output


class TestDbFlagFromSubdirectory:
    def test_relative_db_uses_cwd(
        self, cli_runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "salesctl.toml").write_text("", encoding="utf-8")
        sub = tmp_path / "reports"
        sub.mkdir()
        monkeypatch.chdir(sub)

        result = cli_runner.invoke(cli, ["--db", "rel.db", "company", "list"])
        assert result.exit_code == 0
        assert (sub / "rel.db").is_file()
        assert not (tmp_path / "rel.db").exists()
