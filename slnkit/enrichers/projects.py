"""Pass 1: Project and solution folder declarations."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from slnkit.config import SOLUTION_FOLDER_TYPE_GUID, Project, SolutionFolder
from slnkit.enrichers.base import iter_project_blocks, report
from slnkit.solution import Solution

logger = logging.getLogger(__name__)


def enrich_projects(solution: Solution, lines: Sequence[str]) -> None:
    """Create one entry per well-formed ``Project(...)`` declaration.

    Every entry starts as a root; nesting is applied by a later pass.
    """
    for block in iter_project_blocks(lines):
        if block.match is None:
            report(solution, block.declaration, "Skipping malformed project declaration")
            continue

        type_guid, name, path, entry_id = block.match.groups()
        if type_guid.upper() == SOLUTION_FOLDER_TYPE_GUID:
            entry = SolutionFolder(id=entry_id, name=name, path=path)
        else:
            entry = Project(id=entry_id, name=name, path=path, type_guid=type_guid)

        if entry.id in solution:
            report(solution, block.declaration, f"Skipping duplicate entry {entry.id}")
            continue

        solution.add_entry(entry)
        logger.debug(f"{entry.kind.value}: {entry.name} -> {entry.path}")
