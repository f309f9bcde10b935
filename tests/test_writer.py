"""Tests for the solution writer."""

from __future__ import annotations

import os

import pytest

from slnkit import (
    ConfigurationPlatform,
    Project,
    Solution,
    SolutionFolder,
    WriterConfig,
    parse,
    render,
    write,
)

FIXTURES_DIR = os.path.join(os.path.dirname(__file__), "fixtures", "solutions")
CSHARP = "FAE04EC0-301F-11D3-BF4B-00C04F79EFBC"
LF = WriterConfig(newline="\n")


def _lines(solution: Solution) -> list[str]:
    return render(solution, LF).split("\n")


class TestHeaderRendering:
    def test_empty_solution(self):
        solution = parse(os.path.join(FIXTURES_DIR, "Empty.sln"))
        assert render(solution, LF) == (
            "\n"
            "Microsoft Visual Studio Solution File, Format Version 12.00\n"
            "Global\n"
            "EndGlobal\n"
        )

    def test_default_newline_is_crlf(self):
        text = render(Solution())
        assert text.startswith("\r\nMicrosoft Visual Studio Solution File, Format Version 12.00\r\n")
        assert text.endswith("EndGlobal\r\n")

    def test_version_block(self):
        solution = Solution()
        solution.visual_studio_version.version = "17.5.33414.496"
        solution.visual_studio_version.minimum_version = "10.0.40219.1"
        assert _lines(solution)[2:5] == [
            "# Visual Studio Version 17",
            "VisualStudioVersion = 17.5.33414.496",
            "MinimumVisualStudioVersion = 10.0.40219.1",
        ]

    def test_legacy_version_comment(self):
        solution = Solution()
        solution.visual_studio_version.version = "15.0.26124.0"
        assert _lines(solution)[2] == "# Visual Studio 15"

    def test_minimum_version_alone(self):
        solution = Solution()
        solution.visual_studio_version.minimum_version = "10.0.40219.1"
        assert _lines(solution)[2] == "MinimumVisualStudioVersion = 10.0.40219.1"


class TestProjectRendering:
    def test_ids_upper_cased_and_braced(self):
        solution = Solution()
        solution.add_entry(Project(
            id="{6a1e3c0d-4b7e-4f0a-9c55-2f4d8e1b7a10}",
            name="App",
            path="App\\App.csproj",
            type_guid=CSHARP.lower(),
        ))
        assert _lines(solution)[2:4] == [
            f'Project("{{{CSHARP}}}") = "App", "App\\App.csproj", '
            '"{6A1E3C0D-4B7E-4F0A-9C55-2F4D8E1B7A10}"',
            "EndProject",
        ]

    def test_folder_files_section(self):
        solution = Solution()
        folder = SolutionFolder(id="B5C9A1E2-0D3F-4A6B-8C7D-9E0F1A2B3C4D", name="Solution Items", path="Solution Items")
        folder.files = [".editorconfig", "README.md"]
        solution.add_entry(folder)

        assert _lines(solution)[3:8] == [
            "\tProjectSection(SolutionItems) = preProject",
            "\t\t.editorconfig = .editorconfig",
            "\t\tREADME.md = README.md",
            "\tEndProjectSection",
            "EndProject",
        ]

    def test_folder_without_files_has_no_section(self):
        solution = Solution()
        solution.add_entry(SolutionFolder(id="B5C9A1E2-0D3F-4A6B-8C7D-9E0F1A2B3C4D", name="empty", path="empty"))
        assert "ProjectSection" not in render(solution)


class TestGlobalRendering:
    def _solution(self) -> Solution:
        solution = Solution()
        folder = solution.add_entry(SolutionFolder(id="F0000000-0000-0000-0000-000000000001", name="src", path="src"))
        project = solution.add_entry(
            Project(id="P0000000-0000-0000-0000-000000000001", name="App", path="App.csproj", type_guid=CSHARP),
            parent=folder,
        )
        solution.add_configuration_platform("Debug|Any CPU")
        project.configuration_platforms.append(
            ConfigurationPlatform(name="Debug|Any CPU.ActiveCfg", configuration="Debug", platform="x64")
        )
        solution.properties.hide_solution_node = False
        solution.guid = "1f2e3d4c-5b6a-4789-8a9b-0c1d2e3f4a5b"
        return solution

    def test_section_order(self):
        lines = _lines(self._solution())
        headers = [line.strip() for line in lines if line.strip().startswith("GlobalSection")]
        assert headers == [
            "GlobalSection(SolutionConfigurationPlatforms) = preSolution",
            "GlobalSection(ProjectConfigurationPlatforms) = postSolution",
            "GlobalSection(NestedProjects) = preSolution",
            "GlobalSection(SolutionProperties) = preSolution",
            "GlobalSection(ExtensibilityGlobals) = postSolution",
        ]

    def test_section_contents(self):
        lines = _lines(self._solution())
        assert "\t\tDebug|Any CPU = Debug|Any CPU" in lines
        assert "\t\t{P0000000-0000-0000-0000-000000000001}.Debug|Any CPU.ActiveCfg = Debug|x64" in lines
        assert "\t\tHideSolutionNode = FALSE" in lines
        assert "\t\tSolutionGuid = {1F2E3D4C-5B6A-4789-8A9B-0C1D2E3F4A5B}" in lines

    def test_nested_projects_line(self):
        lines = _lines(self._solution())
        start = lines.index("\tGlobalSection(NestedProjects) = preSolution")
        assert lines[start + 1:start + 3] == [
            "\t\t{P0000000-0000-0000-0000-000000000001} = {F0000000-0000-0000-0000-000000000001}",
            "\tEndGlobalSection",
        ]

    def test_no_optional_sections_when_empty(self):
        solution = Solution()
        solution.add_entry(Project(id="P0000000-0000-0000-0000-000000000001", name="App", path="App.csproj", type_guid=CSHARP))
        assert "GlobalSection" not in render(solution)

    def test_hide_solution_node_true(self):
        solution = Solution()
        solution.properties.hide_solution_node = True
        assert "\t\tHideSolutionNode = TRUE" in _lines(solution)


class TestWrite:
    def test_write_creates_file(self, tmp_path):
        solution = parse(os.path.join(FIXTURES_DIR, "Contoso.sln"))
        output = tmp_path / "out" / "Contoso.sln"
        write(solution, output)
        assert output.read_bytes() == render(solution).encode("utf-8")
        assert b"\r\n" in output.read_bytes()

    def test_write_rejects_none(self, tmp_path):
        with pytest.raises(TypeError):
            write(None, tmp_path / "x.sln")

    @pytest.mark.parametrize("path", ["", "  "])
    def test_write_rejects_blank_path(self, path):
        with pytest.raises(ValueError):
            write(Solution(), path)
