"""Tests for the compile, format, and tags CLI commands."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from sflang.cli import cli


class TestCompileCommand:
    def test_help(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["compile", "--help"])
        assert result.exit_code == 0
        assert "SOURCE" in result.output

    def test_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["compile", "--examples"])
        assert result.exit_code == 0
        assert "sflang compile page.sf" in result.output

    def test_compile_file_json(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "page.sf").write_text('big "Hello"; p "World";', encoding="utf-8")
        result = cli_runner.invoke(cli, ["--json", "compile", "page.sf"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["op"] == "compile"
        assert [e["tag"] for e in data["data"]["elements"]] == ["big", "p"]

    def test_compile_stdin(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["compile", "-"], input='small "from stdin";')
        assert result.exit_code == 0
        assert "from stdin" in result.output

    def test_source_names(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "page.sf").write_text('p "x";', encoding="utf-8")
        from_file = cli_runner.invoke(cli, ["--json", "compile", "page.sf"])
        assert json.loads(from_file.output)["data"]["source"] == "page.sf"
        from_stdin = cli_runner.invoke(cli, ["--json", "compile", "-"], input='p "x";')
        assert json.loads(from_stdin.output)["data"]["source"] == "<stdin>"

    def test_directory_rejected(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "docs").mkdir()
        assert cli_runner.invoke(cli, ["compile", "docs"]).exit_code == 2

    def test_warnings_on_stderr(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "page.sf").write_text('marquee "x";', encoding="utf-8")
        result = cli_runner.invoke(cli, ["compile", "page.sf"])
        assert result.exit_code == 0
        assert "WARNING: Unknown tag 'marquee'" in result.output

    def test_document_too_large_exits_1(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "big.sf").write_text('p "x";' * 101, encoding="utf-8")
        result = cli_runner.invoke(cli, ["compile", "big.sf"])
        assert result.exit_code == 1
        assert "more than 100 commands" in result.output

    def test_missing_file(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["compile", "nope.sf"])
        assert result.exit_code == 2

    def test_config_limit(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "sflang.toml").write_text("[compiler]\nmax_commands = 1\n", encoding="utf-8")
        (tmp_path / "page.sf").write_text('p "a"; p "b";', encoding="utf-8")
        result = cli_runner.invoke(cli, ["compile", "page.sf"])
        assert result.exit_code == 1


class TestFormatCommand:
    def test_format_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "format", r"x \U y \U"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["data"]["runs"][1] == {"text": " y ", "flags": ["underline"]}

    def test_format_human(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["format", r"\B bold \B"])
        assert result.exit_code == 0
        assert "bold" in result.output

    def test_format_quiet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "format", "x"])
        assert result.output.strip() == "OK: format"


class TestTagsCommand:
    def test_tags_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "tags"])
        assert result.exit_code == 0
        items = json.loads(result.output)["data"]["items"]
        assert any(item["tag"] == "img" and "alt" in item["options"] for item in items)

    def test_tags_human(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["tags"])
        assert result.exit_code == 0
        assert "middle" in result.output
