from collections.abc import AsyncGenerator

from litestar.datastructures import State
from loguru import logger

from leetcode_notes.services import NoteService, create_note_service


async def provide_note_service(state: State) -> AsyncGenerator[NoteService, None]:
    service = create_note_service(state.settings)
    try:
        yield service
    finally:
        await service.close()
        logger.debug("Note service closed")
