"""Passes 2 and 3: solution and project configuration platforms."""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from slnkit.config import ConfigurationPlatform, Project
from slnkit.enrichers.base import iter_section, report, split_assignment
from slnkit.solution import Solution

logger = logging.getLogger(__name__)

# {PROJECT-GUID}.Debug|Any CPU.ActiveCfg = Debug|x64
_PROJECT_CONFIG_RE = re.compile(r"^\{([^}]+)\}\.([^=]+?)\s*=\s*(.*)$")


def enrich_solution_configurations(solution: Solution, lines: Sequence[str]) -> None:
    """Read ``GlobalSection(SolutionConfigurationPlatforms)``."""
    for line in iter_section(lines, "GlobalSection", "SolutionConfigurationPlatforms"):
        parts = split_assignment(line)
        if parts is None or not parts[0]:
            report(solution, line, "Skipping malformed solution configuration")
            continue
        solution.add_configuration_platform(parts[0])


def enrich_project_configurations(solution: Solution, lines: Sequence[str]) -> None:
    """Read ``GlobalSection(ProjectConfigurationPlatforms)``.

    Requires the projects pass: lines for unknown ids are ignored.
    """
    for line in iter_section(lines, "GlobalSection", "ProjectConfigurationPlatforms"):
        match = _PROJECT_CONFIG_RE.match(line)
        if match is None:
            report(solution, line, "Skipping malformed project configuration")
            continue

        entry_id, name, value = match.groups()
        project = solution.get(entry_id)
        if not isinstance(project, Project):
            logger.debug(f"No project for configuration line: {line}")
            continue

        configuration, _, platform = value.partition("|")
        project.configuration_platforms.append(ConfigurationPlatform(
            name=name,
            configuration=configuration,
            platform=platform,
        ))
