"""Pydantic schemas for note API endpoints."""

from pydantic import BaseModel


class CreateNoteRequest(BaseModel):
    """Request to create a note from a problem link or number."""

    input: str


class NoteResponse(BaseModel):
    """Response describing a created note."""

    path: str
    title: str
    number: str | None = None
    solutions: int
    message: str


class ImportSolutionsRequest(BaseModel):
    """Request to import solutions into an existing note."""

    path: str  # Relative to the notes root


class ImportSolutionsResponse(BaseModel):
    """Result of a solutions import."""

    path: str
    updated: bool
    message: str


class ErrorResponse(BaseModel):
    """Localized error body."""

    detail: str
