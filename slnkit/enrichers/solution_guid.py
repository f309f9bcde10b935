"""Pass 7: Solution identifier from ``GlobalSection(ExtensibilityGlobals)``."""

from __future__ import annotations

from collections.abc import Sequence

from slnkit.config import normalize_guid
from slnkit.enrichers.base import iter_section, split_assignment
from slnkit.solution import Solution


def enrich_solution_guid(solution: Solution, lines: Sequence[str]) -> None:
    """Set ``solution.guid``; an absent SolutionGuid leaves it None."""
    for line in iter_section(lines, "GlobalSection", "ExtensibilityGlobals"):
        parts = split_assignment(line)
        if parts and parts[0] == "SolutionGuid" and parts[1]:
            solution.guid = normalize_guid(parts[1])
