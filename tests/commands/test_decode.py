"""Tests for the decode CLI command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from loadtok.cli import cli


@pytest.mark.usefixtures("_isolated_project")
class TestDecodeCommand:
    def test_help(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["decode", "--help"])
        assert result.exit_code == 0
        assert "TEXT" in result.output
        assert "--as" in result.output

    def test_integer_human(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["decode", "33", "--as", "int"])
        assert result.exit_code == 0
        assert "OK  decode" in result.output
        assert "33" in result.output

    def test_quiet_prints_value_only(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["-q", "decode", "3/apple/banana/cherry", "--as", "list[str]"]
        )
        assert result.exit_code == 0
        assert result.output.strip() == "[apple, banana, cherry]"

    def test_company_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "decode", "CatWorld/3/tama/5/mike/6/kuro/7", "--as", "Company"]
        )
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["data"]["type"] == "Company"
        assert data["data"]["value"] == {
            "name": "CatWorld",
            "employees": [
                {"name": "tama", "age": 5},
                {"name": "mike", "age": 6},
                {"name": "kuro", "age": 7},
            ],
        }

    def test_trailing_tokens_warning(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["decode", "2/a/b/c", "--as", "list[str]"])
        assert result.exit_code == 0
        assert "WARNING: 1 trailing token(s)" in result.output

    def test_parse_error_exits_1(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["decode", "abc", "--as", "int"])
        assert result.exit_code == 1
        assert "PARSE_ERROR" in result.output

    def test_short_input_json_error(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "decode", "3/apple/banana", "--as", "list[str]"]
        )
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["ok"] is False
        assert data["error"]["code"] == "END_OF_STREAM"

    def test_negative_length(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["decode", "--as", "list[int]", "--", "-1"])
        assert result.exit_code == 1
        assert "INVALID_LENGTH" in result.output

    def test_oversized_integer_exits_1(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["decode", "9" * 5000, "--as", "int"])
        assert result.exit_code == 1
        assert result.exception is None or isinstance(result.exception, SystemExit)
        assert "PARSE_ERROR" in result.output

    def test_overflowing_float_exits_1(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["decode", "1e999", "--as", "float"])
        assert result.exit_code == 1
        assert "PARSE_ERROR" in result.output

    def test_unknown_type(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["decode", "x", "--as", "Dog"])
        assert result.exit_code == 1
        assert "UNKNOWN_TYPE" in result.output

    def test_as_is_required(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["decode", "33"])
        assert result.exit_code == 2

    def test_delimiter_option(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["-q", "decode", "2|1|2|0", "--as", "list[list[int]]", "--delimiter", "|"]
        )
        assert result.exit_code == 0
        assert result.output.strip() == "[[2], []]"

    def test_config_delimiter(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "loadtok.toml").write_text('[decode]\ndelimiter = ","\n')
        result = cli_runner.invoke(cli, ["-q", "decode", "taro,3", "--as", "Employee"])
        assert result.exit_code == 0
        assert result.output.strip() == "(name=taro, age=3)"

    def test_local_plugin_type(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        plugin_dir = tmp_path / ".loadtok" / "plugins"
        plugin_dir.mkdir(parents=True)
        (plugin_dir / "pets.py").write_text(
            "from loadtok.domain.record import record\n"
            "from loadtok.domain.scalars import TEXT\n"
            "from loadtok.plugins import hookimpl\n"
            "\n"
            "\n"
            "class Pet:\n"
            "    def __init__(self, name):\n"
            "        self.name = name\n"
            "\n"
            "    def __str__(self):\n"
            "        return f'Pet({self.name})'\n"
            "\n"
            "\n"
            "class PetPlugin:\n"
            "    @hookimpl\n"
            "    def register_capabilities(self):\n"
            "        return {'Pet': record(Pet, name=TEXT)}\n"
        )
        result = cli_runner.invoke(cli, ["-q", "decode", "2/tama/kuro", "--as", "list[Pet]"])
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "[Pet(tama), Pet(kuro)]"

    def test_plugin_factory_mismatch_exits_1(
        self, cli_runner: CliRunner, tmp_path: Path
    ) -> None:
        plugin_dir = tmp_path / ".loadtok" / "plugins"
        plugin_dir.mkdir(parents=True)
        (plugin_dir / "tags.py").write_text(
            "from loadtok.domain.record import record\n"
            "from loadtok.domain.scalars import TEXT\n"
            "from loadtok.plugins import hookimpl\n"
            "\n"
            "\n"
            "class Tag:\n"
            "    def __init__(self, label):\n"
            "        self.label = label\n"
            "\n"
            "\n"
            "class TagPlugin:\n"
            "    @hookimpl\n"
            "    def register_capabilities(self):\n"
            "        return {'Tag': record(Tag, title=TEXT)}\n"
        )
        result = cli_runner.invoke(cli, ["--json", "decode", "urgent", "--as", "Tag"])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["error"]["code"] == "BUILD_FAILED"
