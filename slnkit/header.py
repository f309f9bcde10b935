"""Header fields: format version and Visual Studio versions."""

from __future__ import annotations

from collections.abc import Sequence

from slnkit.solution import Solution

FORMAT_HEADER = "Microsoft Visual Studio Solution File, "
# "Microsoft Visual Studio Solution File, Format Version " is 54 characters
FORMAT_VERSION_PREFIX_LENGTH = 54
VS_VERSION_PREFIX = "VisualStudioVersion = "
MIN_VS_VERSION_PREFIX = "MinimumVisualStudioVersion = "


def extract_header_fields(solution: Solution, lines: Sequence[str]) -> None:
    """Set header fields from the raw, unnormalized lines.

    The remainder after each prefix is kept verbatim. Every line is
    scanned, so a repeated header means the last occurrence wins.
    """
    for line in lines:
        if line.startswith(FORMAT_HEADER):
            solution.file_format_version = line[FORMAT_VERSION_PREFIX_LENGTH:]
        elif line.startswith(VS_VERSION_PREFIX):
            solution.visual_studio_version.version = line[len(VS_VERSION_PREFIX):]
        elif line.startswith(MIN_VS_VERSION_PREFIX):
            solution.visual_studio_version.minimum_version = line[len(MIN_VS_VERSION_PREFIX):]
