"""Pass 6: ``GlobalSection(SolutionProperties)``."""

from __future__ import annotations

from collections.abc import Sequence

from slnkit.enrichers.base import iter_section, split_assignment
from slnkit.solution import Solution

_FLAGS = {"TRUE": True, "FALSE": False}


def enrich_solution_properties(solution: Solution, lines: Sequence[str]) -> None:
    for line in iter_section(lines, "GlobalSection", "SolutionProperties"):
        parts = split_assignment(line)
        if parts is None:
            continue
        key, value = parts
        if key == "HideSolutionNode" and value.upper() in _FLAGS:
            solution.properties.hide_solution_node = _FLAGS[value.upper()]
