from leetcode_notes.config import Settings
from leetcode_notes.services.notes import CreatedNote, ImportResult, NoteService


def create_note_service(settings: Settings) -> NoteService:
    """Factory function to create note service with all dependencies."""
    from leetcode_notes.infrastructure.http_client import AsyncHTTPClient
    from leetcode_notes.infrastructure.leetcode_client import LeetCodeClient
    from leetcode_notes.infrastructure.note_store import NoteStore

    # Create infrastructure dependencies
    http_client = AsyncHTTPClient(timeout=settings.http_timeout)
    client = LeetCodeClient(http_client, cookie=settings.cookie_header())
    store = NoteStore(
        settings.notes_root,
        target_folder=settings.target_folder,
        filename_template=settings.filename_template,
    )

    return NoteService(client=client, store=store, settings=settings)


__all__ = ["CreatedNote", "ImportResult", "NoteService", "create_note_service"]
