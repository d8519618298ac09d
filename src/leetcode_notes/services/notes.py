"""Service for creating notes and importing solutions into them."""

from dataclasses import dataclass
from pathlib import Path

from loguru import logger

from leetcode_notes.config import Settings
from leetcode_notes.domain.exceptions import (
    MissingCredentialsError,
    NoAcceptedSolutionsError,
    ProblemNotResolvedError,
)
from leetcode_notes.domain.models import ProblemMetadata, Solution
from leetcode_notes.domain.notes import merge_solutions_into_document, render_new_document
from leetcode_notes.domain.parsers import URLParser, URLParsingError
from leetcode_notes.infrastructure.interfaces import NoteStoreProtocol, ProblemClientProtocol


@dataclass
class CreatedNote:
    path: Path
    metadata: ProblemMetadata
    solutions_count: int


@dataclass
class ImportResult:
    path: Path
    updated: bool


class NoteService:
    """Creates problem notes and keeps their solutions sections current.

    Importing is a read-modify-write of the note file. Concurrent imports into
    the same note must be serialized by the caller.
    """

    def __init__(
        self,
        *,
        client: ProblemClientProtocol,
        store: NoteStoreProtocol,
        settings: Settings,
    ):
        """Initialize service with dependencies."""
        self.client = client
        self.store = store
        self.settings = settings

    async def close(self) -> None:
        await self.client.close()

    async def resolve_slug(self, user_input: str) -> str:
        """Slug from a problem link or a frontend number."""
        value = user_input.strip()
        if URLParser.is_problem_number(value):
            slug = await self.client.fetch_slug_by_number(value)
            if not slug:
                raise ProblemNotResolvedError(value)
            return slug

        try:
            return URLParser.parse(value)
        except URLParsingError as e:
            raise ProblemNotResolvedError(user_input) from e

    async def fetch_solutions(self, slug: str) -> list[Solution]:
        limit = self.settings.solutions_limit if self.settings.insert_all_solutions else 1
        return await self.client.fetch_solutions(slug, limit)

    async def get_problem(self, slug_or_id: str) -> ProblemMetadata:
        logger.debug(f"Getting problem via service: {slug_or_id}")
        return await self.client.fetch_problem(slug_or_id)

    async def create_note(self, user_input: str) -> CreatedNote:
        """Fetch a problem with its accepted solutions and write a new note."""
        logger.debug(f"Creating note for: {user_input}")

        slug = await self.resolve_slug(user_input)
        metadata = await self.client.fetch_problem(slug)
        solutions = await self.fetch_solutions(slug)

        content = render_new_document(
            metadata,
            self.settings.include_description,
            solutions,
            self.settings.language,
        )
        path = self.store.create(metadata, content)

        logger.info(f"Created note {path} with {len(solutions)} solution(s)")
        return CreatedNote(path=path, metadata=metadata, solutions_count=len(solutions))

    async def import_solutions(self, note_path: str | Path) -> ImportResult:
        """Merge accepted solutions of the note's problem into the note."""
        logger.debug(f"Importing solutions into: {note_path}")

        content = self.store.read(note_path)
        slug = URLParser.extract_slug_from_note(content)
        if not slug:
            raise ProblemNotResolvedError(str(note_path))

        if not self.settings.cookie_header():
            raise MissingCredentialsError()

        solutions = await self.fetch_solutions(slug)
        if not solutions:
            raise NoAcceptedSolutionsError(slug)

        updated = merge_solutions_into_document(content, solutions, self.settings.language)
        if updated == content:
            logger.info(f"No new solutions for {note_path}")
            return ImportResult(path=Path(note_path), updated=False)

        path = self.store.write(note_path, updated)
        logger.info(f"Solutions updated in {path}")
        return ImportResult(path=path, updated=True)
