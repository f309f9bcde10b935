"""Core data types and configuration for slnkit."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

# Project type GUID Visual Studio uses for virtual solution folders
SOLUTION_FOLDER_TYPE_GUID = "2150E333-8FDC-42A3-9474-1A3956D46DE8"


def normalize_guid(value: str) -> str:
    """Strip surrounding braces and whitespace, upper-case the rest."""
    return value.strip().strip("{}").upper()


class EntryKind(str, Enum):
    PROJECT = "Project"
    SOLUTION_FOLDER = "SolutionFolder"


@dataclass
class ConfigurationPlatform:
    """A build configuration/platform pair.

    At solution scope ``name`` is always ``"configuration|platform"``. At
    project scope ``name`` is the solution-level key the mapping belongs to
    (e.g. ``"Debug|Any CPU.ActiveCfg"``) and the pair is the project's own.
    """
    name: str
    configuration: str
    platform: str

    @classmethod
    def from_name(cls, name: str) -> ConfigurationPlatform:
        configuration, _, platform = name.partition("|")
        return cls(name=name, configuration=configuration, platform=platform)

    @property
    def pair(self) -> str:
        return f"{self.configuration}|{self.platform}"


@dataclass
class VisualStudioVersion:
    version: str | None = None
    minimum_version: str | None = None

    @property
    def major(self) -> int | None:
        """Major component of ``version``, or None when it isn't numeric."""
        if not self.version:
            return None
        head = self.version.split(".", 1)[0]
        return int(head) if head.isdigit() else None


@dataclass
class SolutionProperties:
    hide_solution_node: bool | None = None


@dataclass
class Entry:
    """Fields shared by every node of the solution graph."""
    id: str
    name: str
    path: str
    type_guid: str
    kind: EntryKind = field(init=False, default=EntryKind.PROJECT)

    def __post_init__(self) -> None:
        self.id = normalize_guid(self.id)
        self.type_guid = normalize_guid(self.type_guid)

    @property
    def is_folder(self) -> bool:
        return self.kind == EntryKind.SOLUTION_FOLDER


@dataclass
class Project(Entry):
    """A buildable project (.csproj, .vcxproj, ...)."""
    configuration_platforms: list[ConfigurationPlatform] = field(default_factory=list)


@dataclass
class SolutionFolder(Entry):
    """A virtual folder; children are tracked by id on the owning Solution."""
    type_guid: str = SOLUTION_FOLDER_TYPE_GUID
    files: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        super().__post_init__()
        self.kind = EntryKind.SOLUTION_FOLDER


@dataclass
class Diagnostic:
    """Non-fatal anomaly found while parsing."""
    line: str
    message: str


@dataclass
class ParserConfig:
    strict: bool = False


@dataclass
class WriterConfig:
    newline: str = "\r\n"
    encoding: str = "utf-8"
