"""Domain models package."""

from .problem import ProblemMetadata, SimilarProblem
from .solution import Solution, SubmissionSummary

__all__ = [
    "ProblemMetadata",
    "SimilarProblem",
    "Solution",
    "SubmissionSummary",
]
