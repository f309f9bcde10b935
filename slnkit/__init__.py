"""slnkit - Read and write Visual Studio solution (.sln) files."""

from slnkit.config import (
    ConfigurationPlatform,
    Diagnostic,
    Entry,
    EntryKind,
    ParserConfig,
    Project,
    SolutionFolder,
    SolutionProperties,
    VisualStudioVersion,
    WriterConfig,
)
from slnkit.errors import (
    DuplicateEntryError,
    InvalidSolutionFormatError,
    SolutionError,
    SolutionParseError,
)
from slnkit.output import solution_to_dict
from slnkit.pipeline import parse, parse_text, try_parse
from slnkit.solution import Solution
from slnkit.writer import render, write

__version__ = "0.1.0"
__all__ = [
    "ConfigurationPlatform",
    "Diagnostic",
    "DuplicateEntryError",
    "Entry",
    "EntryKind",
    "InvalidSolutionFormatError",
    "ParserConfig",
    "Project",
    "Solution",
    "SolutionError",
    "SolutionFolder",
    "SolutionParseError",
    "SolutionProperties",
    "VisualStudioVersion",
    "WriterConfig",
    "parse",
    "parse_text",
    "render",
    "solution_to_dict",
    "try_parse",
    "write",
]
