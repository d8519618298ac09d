"""Errors raised by infrastructure adapters."""

from leetcode_notes.domain.exceptions import LeetCodeNotesError


class RequestError(LeetCodeNotesError):
    """Upstream responded with a failure status or an unusable payload."""

    def __init__(self, message: str, status: int | None = None):
        self.status = status
        super().__init__(message)


class NoteStorageError(LeetCodeNotesError):
    """Note could not be read or written."""

    pass


class NoteNotFoundError(NoteStorageError):
    """Note does not exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Note not found: {path}")


class PathConflictError(NoteStorageError):
    """Folder path is already taken by a file."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Path {path} is already a file.")
