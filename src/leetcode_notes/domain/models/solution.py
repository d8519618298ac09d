"""Value objects for accepted submissions."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SubmissionSummary:
    """Entry of the submission list, before its code is fetched."""

    id: str
    lang: str | None = None
    runtime: str | None = None
    memory: str | None = None
    timestamp: int | None = None


@dataclass(frozen=True)
class Solution:
    """Accepted submission with its source code.

    Runtime and memory are kept as received; they are normalized only when
    rendered.
    """

    id: str
    code: str
    lang: str | None = None
    runtime: str | int | float | None = None
    memory: str | int | float | None = None
    timestamp: int | None = None

    @property
    def normalized_code(self) -> str:
        return self.code.strip()
