"""Value objects for problem metadata."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class SimilarProblem:
    """A problem listed as similar to another one."""

    title: str
    slug: str
    difficulty: str = ""


@dataclass(frozen=True)
class ProblemMetadata:
    """Data fetched for a single LeetCode problem."""

    title: str
    slug: str
    difficulty: str = "Unknown"
    id: str | None = None
    number: str | None = None
    tags: tuple[str, ...] = ()
    content: str | None = None
    similar_questions: tuple[SimilarProblem, ...] = field(default_factory=tuple)

    @property
    def display_number(self) -> str:
        """Frontend number, falling back to the internal id."""
        return self.number or self.id or ""
