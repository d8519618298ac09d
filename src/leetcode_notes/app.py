"""Litestar application factory."""

import sys

from litestar import Litestar, Request, Response
from litestar.datastructures import State
from litestar.di import Provide
from litestar.status_codes import (
    HTTP_400_BAD_REQUEST,
    HTTP_401_UNAUTHORIZED,
    HTTP_404_NOT_FOUND,
    HTTP_409_CONFLICT,
    HTTP_500_INTERNAL_SERVER_ERROR,
    HTTP_502_BAD_GATEWAY,
)
from loguru import logger

from leetcode_notes.api.dependencies import provide_note_service
from leetcode_notes.api.routes import NoteController, ProblemController
from leetcode_notes.api.schemas.note import ErrorResponse
from leetcode_notes.config import Settings
from leetcode_notes.domain.exceptions import (
    LeetCodeNotesError,
    MissingCredentialsError,
    NoAcceptedSolutionsError,
    ProblemNotResolvedError,
)
from leetcode_notes.domain.locale import Messages, get_messages
from leetcode_notes.infrastructure.errors import (
    NoteNotFoundError,
    PathConflictError,
    RequestError,
)


def _error_status_and_detail(exc: Exception, messages: Messages) -> tuple[int, str]:
    if isinstance(exc, ProblemNotResolvedError):
        return HTTP_400_BAD_REQUEST, messages.resolve_slug_fail
    if isinstance(exc, MissingCredentialsError):
        return HTTP_401_UNAUTHORIZED, messages.no_cookies
    if isinstance(exc, NoteNotFoundError):
        return HTTP_404_NOT_FOUND, messages.note_not_found
    if isinstance(exc, NoAcceptedSolutionsError):
        return HTTP_404_NOT_FOUND, messages.no_accepted
    if isinstance(exc, PathConflictError):
        return HTTP_409_CONFLICT, messages.path_conflict.format(path=exc.path)
    if isinstance(exc, RequestError):
        return HTTP_502_BAD_GATEWAY, f"{messages.fetch_error}: {exc}"
    return HTTP_500_INTERNAL_SERVER_ERROR, f"{messages.import_error}: {exc}"


def handle_notes_error(request: Request, exc: Exception) -> Response:
    """Map application errors to localized JSON responses."""
    messages = get_messages(request.app.state.settings.language)
    status_code, detail = _error_status_and_detail(exc, messages)

    if status_code >= HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(f"Request to {request.url.path} failed: {exc}")
    else:
        logger.warning(f"Request to {request.url.path} rejected: {exc}")

    return Response(content=ErrorResponse(detail=detail).model_dump(), status_code=status_code)


def configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level)


def create_app(settings: Settings | None = None, **kwargs) -> Litestar:
    """
    Build the application.

    Extra keyword arguments are passed to ``Litestar``, e.g. to override
    dependencies in tests.
    """
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    dependencies = {"note_service": Provide(provide_note_service)}
    dependencies.update(kwargs.pop("dependencies", {}))

    return Litestar(
        route_handlers=[NoteController, ProblemController],
        dependencies=dependencies,
        exception_handlers={LeetCodeNotesError: handle_notes_error},
        state=State({"settings": settings}),
        **kwargs,
    )
