"""API routes for note commands."""

from litestar import Controller, post
from litestar.datastructures import State
from litestar.status_codes import HTTP_200_OK, HTTP_201_CREATED
from loguru import logger

from leetcode_notes.api.schemas.note import (
    CreateNoteRequest,
    ImportSolutionsRequest,
    ImportSolutionsResponse,
    NoteResponse,
)
from leetcode_notes.domain.locale import get_messages
from leetcode_notes.services import NoteService


class NoteController(Controller):
    """Controller for creating notes and importing solutions."""

    path = "/notes"

    @post("/", status_code=HTTP_201_CREATED)
    async def create_note(
        self,
        data: CreateNoteRequest,
        note_service: NoteService,
        state: State,
    ) -> NoteResponse:
        """
        Create a note from a LeetCode link or problem number.

        Body:
        - input: "https://leetcode.com/problems/two-sum/" or "1"
        """
        logger.debug(f"API request to create note: input={data.input}")

        created = await note_service.create_note(data.input)
        messages = get_messages(state.settings.language)

        return NoteResponse(
            path=created.path.as_posix(),
            title=created.metadata.title,
            number=created.metadata.number,
            solutions=created.solutions_count,
            message=f"{messages.created}: {created.path.as_posix()}",
        )

    @post("/solutions", status_code=HTTP_200_OK)
    async def import_solutions(
        self,
        data: ImportSolutionsRequest,
        note_service: NoteService,
        state: State,
    ) -> ImportSolutionsResponse:
        """Import accepted solutions into an existing note."""
        logger.debug(f"API request to import solutions: path={data.path}")

        result = await note_service.import_solutions(data.path)
        messages = get_messages(state.settings.language)

        return ImportSolutionsResponse(
            path=result.path.as_posix(),
            updated=result.updated,
            message=messages.updated if result.updated else messages.unchanged,
        )
