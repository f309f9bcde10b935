"""Pass 4: Loose files held by solution folders."""

from __future__ import annotations

from collections.abc import Sequence

from slnkit.config import SolutionFolder
from slnkit.enrichers.base import iter_project_blocks, split_assignment
from slnkit.solution import Solution


def enrich_solution_folder_files(solution: Solution, lines: Sequence[str]) -> None:
    """Fill ``SolutionFolder.files`` from each folder's SolutionItems section."""
    folders = {f.id: f for f in solution.solution_folders}
    if not folders:
        return

    for block in iter_project_blocks(lines):
        # pop: only the first declaration of an id was kept by the projects pass
        folder: SolutionFolder | None = folders.pop(block.entry_id or "", None)
        if folder is None:
            continue
        for line in block.section("SolutionItems"):
            parts = split_assignment(line)
            if parts and parts[0]:
                folder.files.append(parts[0])
