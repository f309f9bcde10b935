"""Tests for the slnkit CLI."""

from __future__ import annotations

import json
import os

from click.testing import CliRunner

from slnkit import parse
from slnkit.cli import cli

FIXTURES_DIR = os.path.join(os.path.dirname(__file__), "fixtures", "solutions")
CONTOSO = os.path.join(FIXTURES_DIR, "Contoso.sln")
MALFORMED = os.path.join(FIXTURES_DIR, "Malformed.sln")


class TestCli:
    def test_help(self):
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "show" in result.output
        assert "format" in result.output

    def test_show_json(self):
        result = CliRunner().invoke(cli, ["show", "--json", CONTOSO])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["name"] == "Contoso"
        assert [p["name"] for p in data["projects"]][0] == "Contoso.Api"

    def test_show_table(self):
        result = CliRunner().invoke(cli, ["show", CONTOSO])
        assert result.exit_code == 0
        assert "Contoso.Api.Tests" in result.output

    def test_show_writes_json_file(self, tmp_path):
        output = tmp_path / "contoso.json"
        result = CliRunner().invoke(cli, ["show", CONTOSO, "-o", str(output)])
        assert result.exit_code == 0
        data = json.loads(output.read_text())
        assert data["diagnostics"] == []

    def test_format_to_stdout(self):
        result = CliRunner().invoke(cli, ["format", CONTOSO])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[1] == "Microsoft Visual Studio Solution File, Format Version 12.00"
        assert lines[-1] == "EndGlobal"

    def test_format_to_file(self, tmp_path):
        output = tmp_path / "Normalized.sln"
        result = CliRunner().invoke(cli, ["format", CONTOSO, "-o", str(output)])
        assert result.exit_code == 0
        assert len(parse(output).projects) == 4

    def test_check_clean(self):
        result = CliRunner().invoke(cli, ["check", CONTOSO])
        assert result.exit_code == 0
        assert "OK" in result.output

    def test_check_reports_diagnostics(self):
        result = CliRunner().invoke(cli, ["check", MALFORMED])
        assert result.exit_code == 1
        assert "malformed project declaration" in result.output

    def test_wrong_extension_is_click_error(self, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_text("Global\nEndGlobal\n")
        result = CliRunner().invoke(cli, ["show", str(path)])
        assert result.exit_code == 1
        assert "not a solution file" in result.output
