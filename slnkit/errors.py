"""Exception hierarchy for slnkit.

Invalid arguments surface as the built-in ``ValueError``/``TypeError`` and a
missing file as ``FileNotFoundError``; everything specific to solution files
derives from :class:`SolutionError`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any


class SolutionError(Exception):
    """Base exception for slnkit errors.

    Attributes:
        message: Short human-readable description.
        context: Extra information (file, line, ...) appended to ``str()``.
    """

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        self.message = message
        self.context = context or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        parts = [self.message]
        for key, value in self.context.items():
            parts.append(f"\n  {key}: {value}")
        return "".join(parts)


class InvalidSolutionFormatError(SolutionError):
    """The file is not a solution file (wrong extension)."""


class SolutionParseError(SolutionError):
    """Scanning a solution failed.

    The original exception, if any, is available as ``__cause__``.
    """

    def __init__(
        self,
        message: str,
        path: str | Path | None = None,
        context: dict[str, Any] | None = None,
    ):
        self.path = Path(path) if path is not None else None
        context = dict(context or {})
        if self.path is not None:
            context.setdefault("file", str(self.path))
        super().__init__(message, context)


class DuplicateEntryError(SolutionError, ValueError):
    """An entry with the same identifier already exists in the solution."""

    def __init__(self, entry_id: str):
        self.entry_id = entry_id
        super().__init__("Duplicate entry identifier", {"id": entry_id})
