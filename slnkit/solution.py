"""The Solution root entity."""

from __future__ import annotations

from pathlib import Path

from slnkit.config import (
    ConfigurationPlatform,
    Diagnostic,
    Entry,
    Project,
    SolutionFolder,
    SolutionProperties,
    VisualStudioVersion,
    normalize_guid,
)
from slnkit.errors import DuplicateEntryError
from slnkit.graph.nesting import NestingIndex


class Solution:
    """In-memory graph of a solution file.

    ``projects`` is the flattened, ordered list of every entry and owns
    them. Folder membership lives in ``nesting`` and is keyed by id.
    """

    def __init__(
        self,
        name: str | None = None,
        path: str | Path | None = None,
        file_format_version: str = "12.00",
    ) -> None:
        self.path = Path(path) if path is not None else None
        if name is None and self.path is not None:
            name = self.path.stem
        self.name = name
        self.file_format_version = file_format_version
        self.visual_studio_version = VisualStudioVersion()
        self.configuration_platforms: list[ConfigurationPlatform] = []
        self.properties = SolutionProperties()
        self.guid: str | None = None
        self.diagnostics: list[Diagnostic] = []
        self.nesting = NestingIndex()
        self._entries: dict[str, Entry] = {}

    # --- Entries ---

    @property
    def projects(self) -> list[Entry]:
        return list(self._entries.values())

    @property
    def root_projects(self) -> list[Entry]:
        return [e for e in self._entries.values() if self.nesting.parent_of(e.id) is None]

    @property
    def solution_folders(self) -> list[SolutionFolder]:
        return [e for e in self._entries.values() if isinstance(e, SolutionFolder)]

    def add_entry(self, entry: Entry, parent: SolutionFolder | str | None = None) -> Entry:
        """Append an entry to the flattened collection, optionally nested.

        Nothing is stored if the entry or ``parent`` is rejected.
        """
        if not isinstance(entry, (Project, SolutionFolder)):
            raise TypeError(f"Expected a Project or SolutionFolder, got {type(entry).__name__}")
        if entry.id in self._entries:
            raise DuplicateEntryError(entry.id)
        folder = self._resolve_folder(parent) if parent is not None else None
        self._entries[entry.id] = entry
        if folder is not None:
            self.nesting.nest(entry.id, folder.id)
        return entry

    def get(self, entry_id: str) -> Entry | None:
        return self._entries.get(normalize_guid(entry_id))

    def __contains__(self, entry_id: object) -> bool:
        return isinstance(entry_id, str) and normalize_guid(entry_id) in self._entries

    def remove_entry(self, entry: Entry | str) -> None:
        """Remove an entry; its children take its place in its parent folder."""
        entry_id = entry if isinstance(entry, str) else entry.id
        entry_id = normalize_guid(entry_id)
        if entry_id not in self._entries:
            raise KeyError(entry_id)
        self.nesting.remove(entry_id)
        del self._entries[entry_id]

    # --- Nesting ---

    def _resolve_folder(self, parent: SolutionFolder | str) -> SolutionFolder:
        parent_id = normalize_guid(parent if isinstance(parent, str) else parent.id)
        folder = self._entries.get(parent_id)
        if folder is None:
            raise KeyError(parent_id)
        if not isinstance(folder, SolutionFolder):
            raise ValueError(f"{parent_id} is not a solution folder")
        return folder

    def nest(self, child: Entry | str, parent: SolutionFolder | str) -> None:
        """Place ``child`` inside the folder ``parent``.

        Both must already belong to the solution.
        """
        child_id = normalize_guid(child if isinstance(child, str) else child.id)
        if child_id not in self._entries:
            raise KeyError(child_id)
        folder = self._resolve_folder(parent)
        self.nesting.nest(child_id, folder.id)

    def parent_of(self, entry: Entry | str) -> SolutionFolder | None:
        entry_id = normalize_guid(entry if isinstance(entry, str) else entry.id)
        parent_id = self.nesting.parent_of(entry_id)
        return self._entries.get(parent_id) if parent_id else None

    def children_of(self, folder: SolutionFolder | str) -> list[Entry]:
        """Direct children of a folder, in nesting order."""
        folder_id = normalize_guid(folder if isinstance(folder, str) else folder.id)
        return [self._entries[c] for c in self.nesting.children_of(folder_id) if c in self._entries]

    # --- Configurations ---

    def add_configuration_platform(self, name: str) -> ConfigurationPlatform | None:
        """Add a solution-level configuration; duplicates are ignored."""
        if any(cp.name == name for cp in self.configuration_platforms):
            return None
        platform = ConfigurationPlatform.from_name(name)
        self.configuration_platforms.append(platform)
        return platform

    @property
    def buildable_projects(self) -> list[Project]:
        return [e for e in self._entries.values() if isinstance(e, Project)]

    def __repr__(self) -> str:
        return (
            f"Solution(name={self.name!r}, projects={len(self._entries)}, "
            f"configurations={len(self.configuration_platforms)})"
        )
