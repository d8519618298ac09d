"""Pydantic schemas for problem API endpoints."""

from pydantic import BaseModel


class SimilarProblemResponse(BaseModel):
    title: str
    slug: str
    difficulty: str

    class Config:
        from_attributes = True


class ProblemResponse(BaseModel):
    """Response containing problem information."""

    title: str
    slug: str
    difficulty: str
    number: str | None = None
    id: str | None = None
    tags: list[str]
    url: str
    content: str | None = None  # Raw description HTML
    similar_questions: list[SimilarProblemResponse]

    class Config:
        from_attributes = True
