"""Deduplication of solutions by their code."""

from collections.abc import Iterable
from dataclasses import replace

from leetcode_notes.domain.models import Solution


def dedupe_solutions(solutions: Iterable[Solution]) -> list[Solution]:
    """
    Drop solutions whose trimmed code was already seen.

    The first occurrence wins and keeps its position. Kept solutions carry the
    trimmed code.
    """
    seen: set[str] = set()
    result: list[Solution] = []
    for solution in solutions:
        code = solution.normalized_code
        if code in seen:
            continue
        seen.add(code)
        result.append(replace(solution, code=code))
    return result
