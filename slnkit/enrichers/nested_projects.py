"""Pass 5: Folder nesting from ``GlobalSection(NestedProjects)``."""

from __future__ import annotations

from collections.abc import Sequence

from slnkit.config import normalize_guid
from slnkit.enrichers.base import iter_section, report, split_assignment
from slnkit.solution import Solution


def enrich_nested_projects(solution: Solution, lines: Sequence[str]) -> None:
    """Apply ``{CHILD} = {PARENT}`` lines to the solution's nesting index."""
    for line in iter_section(lines, "GlobalSection", "NestedProjects"):
        parts = split_assignment(line)
        if parts is None:
            report(solution, line, "Skipping malformed nesting")
            continue

        child_id, parent_id = (normalize_guid(p) for p in parts)
        if child_id not in solution or parent_id not in solution:
            report(solution, line, "Skipping nesting of unknown entry")
            continue

        try:
            solution.nest(child_id, parent_id)
        except ValueError as e:
            report(solution, line, f"Skipping invalid nesting ({e})")
