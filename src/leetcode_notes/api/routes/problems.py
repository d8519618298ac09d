"""API routes for problem metadata."""

from litestar import Controller, get
from litestar.status_codes import HTTP_200_OK
from loguru import logger

from leetcode_notes.api.schemas.problem import ProblemResponse, SimilarProblemResponse
from leetcode_notes.domain.parsers import URLParser
from leetcode_notes.services import NoteService


class ProblemController(Controller):
    """Controller for problem-related endpoints."""

    path = "/problems"

    @get("/{slug_or_id:str}", status_code=HTTP_200_OK)
    async def get_problem(self, slug_or_id: str, note_service: NoteService) -> ProblemResponse:
        """
        Get problem metadata by slug or frontend number.

        Path parameters:
        - slug_or_id: e.g. "two-sum" or "1"
        """
        logger.debug(f"API request for problem: {slug_or_id}")

        metadata = await note_service.get_problem(slug_or_id)

        return ProblemResponse(
            title=metadata.title,
            slug=metadata.slug,
            difficulty=metadata.difficulty,
            number=metadata.number,
            id=metadata.id,
            tags=list(metadata.tags),
            url=URLParser.build_problem_url(metadata.slug),
            content=metadata.content,
            similar_questions=[
                SimilarProblemResponse.model_validate(q) for q in metadata.similar_questions
            ],
        )
