"""JSON serialisation of a parsed solution."""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any

from slnkit.config import EntryKind
from slnkit.solution import Solution


def _entry_to_dict(solution: Solution, entry) -> dict[str, Any]:
    parent = solution.parent_of(entry)
    data: dict[str, Any] = {
        "id": entry.id,
        "kind": entry.kind.value,
        "name": entry.name,
        "path": entry.path,
        "type_guid": entry.type_guid,
        "parent": parent.id if parent else None,
    }
    if entry.kind == EntryKind.SOLUTION_FOLDER:
        data["files"] = list(entry.files)
        data["children"] = [child.id for child in solution.children_of(entry)]
    else:
        data["configuration_platforms"] = [asdict(cp) for cp in entry.configuration_platforms]
    return data


def solution_to_dict(solution: Solution) -> dict[str, Any]:
    """Structural snapshot of the solution; equal graphs give equal dicts."""
    return {
        "name": solution.name,
        "file_format_version": solution.file_format_version,
        "visual_studio_version": asdict(solution.visual_studio_version),
        "configuration_platforms": [asdict(cp) for cp in solution.configuration_platforms],
        "projects": [_entry_to_dict(solution, e) for e in solution.projects],
        "root_projects": [e.id for e in solution.root_projects],
        "properties": asdict(solution.properties),
        "guid": solution.guid,
    }


def write_output(solution: Solution, output_path: str) -> None:
    """Write the solution snapshot to a JSON file."""
    data = solution_to_dict(solution)
    data["diagnostics"] = [asdict(d) for d in solution.diagnostics]
    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        json.dump(data, f, indent=2, default=str)
