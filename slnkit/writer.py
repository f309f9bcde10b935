"""Serialise a Solution back to .sln text."""

from __future__ import annotations

import logging
from pathlib import Path

from slnkit.config import EntryKind, VisualStudioVersion, WriterConfig
from slnkit.solution import Solution

logger = logging.getLogger(__name__)


def _guid(value: str) -> str:
    return f"{{{value.upper()}}}"


def _render_version(version: VisualStudioVersion) -> list[str]:
    lines = []
    if version.version is not None:
        major = version.major
        if major is not None:
            # VS 2019 (16) onwards writes "Version" in the comment
            label = "Visual Studio Version" if major >= 16 else "Visual Studio"
            lines.append(f"# {label} {major}")
        lines.append(f"VisualStudioVersion = {version.version}")
    if version.minimum_version is not None:
        lines.append(f"MinimumVisualStudioVersion = {version.minimum_version}")
    return lines


def _render_projects(solution: Solution) -> list[str]:
    lines = []
    for entry in solution.projects:
        lines.append(
            f'Project("{_guid(entry.type_guid)}") = "{entry.name}", '
            f'"{entry.path}", "{_guid(entry.id)}"'
        )
        if entry.kind == EntryKind.SOLUTION_FOLDER and entry.files:
            lines.append("\tProjectSection(SolutionItems) = preProject")
            lines.extend(f"\t\t{file} = {file}" for file in entry.files)
            lines.append("\tEndProjectSection")
        lines.append("EndProject")
    return lines


def _section(kind: str, timing: str, body: list[str]) -> list[str]:
    return [f"\tGlobalSection({kind}) = {timing}", *(f"\t\t{line}" for line in body), "\tEndGlobalSection"]


def _render_global(solution: Solution) -> list[str]:
    lines = ["Global"]

    if solution.configuration_platforms:
        lines += _section("SolutionConfigurationPlatforms", "preSolution", [
            f"{cp.name} = {cp.name}" for cp in solution.configuration_platforms
        ])

    project_configs = [
        f"{_guid(entry.id)}.{cp.name} = {cp.pair}"
        for entry in solution.projects
        if entry.kind == EntryKind.PROJECT
        for cp in entry.configuration_platforms
    ]
    if project_configs:
        lines += _section("ProjectConfigurationPlatforms", "postSolution", project_configs)

    nested = [
        f"{_guid(child.id)} = {_guid(folder.id)}"
        for folder in solution.projects
        if folder.kind == EntryKind.SOLUTION_FOLDER
        for child in solution.children_of(folder)
    ]
    if nested:
        lines += _section("NestedProjects", "preSolution", nested)

    hide = solution.properties.hide_solution_node
    if hide is not None:
        lines += _section("SolutionProperties", "preSolution", [
            f"HideSolutionNode = {str(hide).upper()}",
        ])

    if solution.guid is not None:
        lines += _section("ExtensibilityGlobals", "postSolution", [
            f"SolutionGuid = {_guid(solution.guid)}",
        ])

    lines.append("EndGlobal")
    return lines


def render(solution: Solution, config: WriterConfig | None = None) -> str:
    """Render the solution in the fixed section order Visual Studio uses."""
    if solution is None:
        raise TypeError("'solution' cannot be None")
    config = config or WriterConfig()

    lines = [
        "",
        f"Microsoft Visual Studio Solution File, Format Version {solution.file_format_version}",
        *_render_version(solution.visual_studio_version),
        *_render_projects(solution),
        *_render_global(solution),
    ]
    return config.newline.join(lines) + config.newline


def write(solution: Solution, path: str | Path, config: WriterConfig | None = None) -> None:
    """Render ``solution`` to ``path``, replacing any existing file."""
    if solution is None:
        raise TypeError("'solution' cannot be None")
    if path is None or not str(path).strip():
        raise ValueError("'path' cannot be empty or whitespace")
    config = config or WriterConfig()

    output = Path(path)
    output.parent.mkdir(parents=True, exist_ok=True)
    with open(output, "w", encoding=config.encoding, newline="") as f:
        f.write(render(solution, config))
    logger.debug(f"Wrote {len(solution.projects)} entries to {output}")
