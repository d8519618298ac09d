"""Rendering of solutions into markdown blocks."""

import re
from collections.abc import Iterable
from datetime import datetime, timezone

from loguru import logger

from leetcode_notes.domain.locale import Language, SOLUTIONS_HEADERS
from leetcode_notes.domain.models import Solution

from .dedup import dedupe_solutions
from .normalization import format_memory, format_runtime

DETAILS_SEPARATOR = " · "
MIN_FENCE_LENGTH = 3
BACKTICK_RUN_PATTERN = re.compile(r"`+")


def format_timestamp(timestamp: int | float) -> str:
    """Epoch seconds as a UTC ISO-8601 instant: 2023-11-14T22:13:20.000Z."""
    moment = datetime.fromtimestamp(float(timestamp), tz=timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def code_fence(code: str) -> str:
    """Backtick fence longer than any backtick run inside the code."""
    longest = max((len(run) for run in BACKTICK_RUN_PATTERN.findall(code)), default=0)
    return "`" * max(MIN_FENCE_LENGTH, longest + 1)


def format_solution(solution: Solution) -> str:
    """Render a details line followed by a fenced code block."""
    lang = solution.lang.lower() if solution.lang else ""
    code = solution.code.rstrip()

    details: list[str] = []
    if solution.lang:
        details.append(solution.lang)
    runtime = format_runtime(solution.runtime)
    if runtime:
        details.append(f"Runtime: {runtime}")
    memory = format_memory(solution.memory)
    if memory:
        details.append(f"Memory: {memory}")
    if solution.timestamp:
        try:
            details.append(format_timestamp(solution.timestamp))
        except (ValueError, OverflowError, OSError):
            logger.warning(
                f"Timestamp {solution.timestamp} of solution {solution.id} is out of range"
            )

    fence = code_fence(code)
    block = f"{fence}{lang}\n{code}\n{fence}"
    if not details:
        return block
    return f"{DETAILS_SEPARATOR.join(details)}\n\n{block}"


def format_solutions_section(
    solutions: Iterable[Solution],
    *,
    include_header: bool = True,
    language: str | Language = Language.EN,
) -> str:
    """
    Render deduplicated solutions separated by blank lines.

    Returns an empty string when there is nothing to render, so no header is
    ever emitted without a body.
    """
    deduped = dedupe_solutions(solutions)
    if not deduped:
        return ""

    entries = "\n\n".join(format_solution(solution) for solution in deduped)
    if not include_header:
        return entries

    header = SOLUTIONS_HEADERS[Language.parse(language)]
    return f"## {header}\n\n{entries}"
