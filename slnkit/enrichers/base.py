"""Enricher protocol and shared line-scanning helpers."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import Protocol

from slnkit.config import Diagnostic, normalize_guid
from slnkit.solution import Solution

logger = logging.getLogger(__name__)

# Project("{TYPE-GUID}") = "Name", "Path\To\Project.csproj", "{PROJECT-GUID}"
PROJECT_RE = re.compile(
    r'^Project\(\"\{([^}]+)\}\"\)\s*=\s*\"([^\"]*)\"\s*,\s*\"([^\"]*)\"\s*,\s*\"\{([^}]+)\}\"\s*$'
)


class Enricher(Protocol):
    """Populates one facet of ``solution`` from the normalized lines."""

    def __call__(self, solution: Solution, lines: Sequence[str]) -> None:
        ...


@dataclass
class ProjectBlock:
    """A ``Project(...)`` ... ``EndProject`` span of normalized lines."""
    declaration: str
    match: re.Match[str] | None
    body: list[str] = field(default_factory=list)

    @property
    def entry_id(self) -> str | None:
        return normalize_guid(self.match.group(4)) if self.match else None

    def section(self, kind: str) -> list[str]:
        """Inner lines of ``ProjectSection(kind)``."""
        return list(iter_section(self.body, "ProjectSection", kind))


def iter_project_blocks(lines: Sequence[str]) -> Iterator[ProjectBlock]:
    """Yield every project block in source order.

    A block with a missing ``EndProject`` is closed by the next declaration
    or by ``Global``.
    """
    current: ProjectBlock | None = None
    for line in lines:
        if line.startswith("Project("):
            if current is not None:
                yield current
            current = ProjectBlock(declaration=line, match=PROJECT_RE.match(line))
        elif current is None:
            continue
        elif line == "EndProject" or line == "Global":
            yield current
            current = None
        else:
            current.body.append(line)
    if current is not None:
        yield current


def iter_section(lines: Sequence[str], header: str, kind: str) -> Iterator[str]:
    """Yield inner lines of every ``header(kind)`` block.

    ``header`` is ``GlobalSection`` or ``ProjectSection``; the block ends at
    the matching ``End<header>`` line.
    """
    start = f"{header}({kind})"
    end = f"End{header}"
    inside = False
    for line in lines:
        if inside:
            if line == end:
                inside = False
            else:
                yield line
        elif line.startswith(start):
            inside = True


def split_assignment(line: str) -> tuple[str, str] | None:
    """Split ``left = right`` on the first ``=``."""
    left, sep, right = line.partition("=")
    if not sep:
        return None
    return left.strip(), right.strip()


def report(solution: Solution, line: str, message: str) -> None:
    """Record a non-fatal anomaly on the solution."""
    solution.diagnostics.append(Diagnostic(line=line, message=message))
    logger.warning(f"{message}: {line!r}")
