"""Sequential parse pipeline: normalize, enrich, read headers."""

from __future__ import annotations

import logging
import re
import time
from pathlib import Path

from slnkit.config import ParserConfig
from slnkit.enrichers import ENRICHERS
from slnkit.errors import InvalidSolutionFormatError, SolutionParseError
from slnkit.header import extract_header_fields
from slnkit.solution import Solution

logger = logging.getLogger(__name__)

SOLUTION_EXTENSION = ".sln"

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> list[str]:
    """Split on CRLF, CR or LF; other separators are left alone."""
    return _LINE_BREAK_RE.split(text.removeprefix("\ufeff"))


def normalize_lines(lines: list[str]) -> tuple[str, ...]:
    """Strip every line and drop the blank ones."""
    return tuple(stripped for stripped in (line.strip() for line in lines) if stripped)


def run_pipeline(
    lines: list[str],
    name: str | None = None,
    path: str | Path | None = None,
    config: ParserConfig | None = None,
) -> Solution:
    """Build a Solution from raw lines.

    Enrichers run strictly in ``ENRICHERS`` order over the normalized
    lines; header fields are then read from the raw ones.
    """
    config = config or ParserConfig()
    solution = Solution(name=name, path=path, file_format_version="")
    normalized = normalize_lines(lines)
    timings: dict[str, float] = {}

    for pass_name, enricher in ENRICHERS:
        start = time.monotonic()
        enricher(solution, normalized)
        timings[pass_name] = time.monotonic() - start
        if config.strict and solution.diagnostics:
            first = solution.diagnostics[0]
            raise SolutionParseError(
                first.message, path=path, context={"pass": pass_name, "line": first.line}
            )

    extract_header_fields(solution, lines)

    logger.debug(
        f"Parsed {len(solution.projects)} entries in "
        f"{sum(timings.values()) * 1000:.1f}ms ({len(solution.diagnostics)} diagnostics)"
    )
    return solution


def parse_text(
    text: str, name: str | None = None, config: ParserConfig | None = None
) -> Solution:
    """Parse solution text already held in memory."""
    try:
        return run_pipeline(split_lines(text), name=name, config=config)
    except SolutionParseError:
        raise
    except Exception as e:
        raise SolutionParseError(f"Failed to parse solution text: {e}") from e


def parse(path: str | Path, config: ParserConfig | None = None) -> Solution:
    """Parse a ``.sln`` file.

    Raises:
        ValueError: ``path`` is empty or whitespace.
        FileNotFoundError: ``path`` does not exist.
        InvalidSolutionFormatError: ``path`` is not a ``.sln`` file.
        SolutionParseError: reading or scanning failed.
    """
    if path is None or not str(path).strip():
        raise ValueError("'path' cannot be empty or whitespace")

    sln_path = Path(path)
    if not sln_path.is_file():
        raise FileNotFoundError(f"Solution file does not exist: {sln_path}")
    if sln_path.suffix != SOLUTION_EXTENSION:
        raise InvalidSolutionFormatError(
            "The provided file is not a solution file", {"file": str(sln_path)}
        )

    try:
        text = sln_path.read_text(encoding="utf-8-sig")
        return run_pipeline(split_lines(text), path=sln_path, config=config)
    except SolutionParseError:
        raise
    except Exception as e:
        raise SolutionParseError(f"Failed to parse solution: {e}", path=sln_path) from e


def try_parse(
    path: str | Path, config: ParserConfig | None = None
) -> tuple[Solution | None, bool]:
    """Non-raising ``parse``: returns ``(solution, True)`` or ``(None, False)``."""
    try:
        return parse(path, config=config), True
    except Exception as e:
        logger.debug(f"try_parse failed for {path!r}: {e}")
        return None, False
