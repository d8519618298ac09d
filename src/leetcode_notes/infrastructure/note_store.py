"""File-based storage of problem notes."""

import re
from pathlib import Path

from loguru import logger

from leetcode_notes.domain.models import ProblemMetadata

from .errors import NoteNotFoundError, NoteStorageError, PathConflictError

DEFAULT_FILENAME_TEMPLATE = "{{number}}-{{slug}}"
NOTE_SUFFIX = ".md"


def sanitize_for_path(value: str | None) -> str:
    """Remove characters not allowed in file names and dash whitespace runs."""
    trimmed = (value or "").strip()
    if not trimmed:
        return ""
    cleaned = re.sub(r'[<>:"/\\|?*]+', "", trimmed)
    return re.sub(r"\s+", "-", cleaned)


class NoteStore:
    """Stores notes as markdown files below a root directory."""

    def __init__(
        self,
        root: str | Path,
        target_folder: str = "",
        filename_template: str = DEFAULT_FILENAME_TEMPLATE,
    ):
        """
        Initialize store.

        Args:
            root: Vault directory all note paths are relative to
            target_folder: Folder below root for new notes, may be empty
            filename_template: File name with {{number}}, {{slug}}, {{title}}
        """
        self.root = Path(root).resolve()
        self.target_folder = target_folder.strip().strip("/")
        self.filename_template = filename_template.strip() or DEFAULT_FILENAME_TEMPLATE

    def build_file_name(self, metadata: ProblemMetadata) -> str:
        replacements = {
            "{{number}}": metadata.display_number,
            "{{slug}}": metadata.slug,
            "{{title}}": metadata.title,
        }

        name = self.filename_template
        for placeholder, value in replacements.items():
            name = name.replace(placeholder, sanitize_for_path(value))

        name = name.strip()
        return name or sanitize_for_path(metadata.slug) or "leetcode-problem"

    def resolve(self, path: str | Path) -> Path:
        """Absolute path of a note, refusing paths outside the root."""
        candidate = (self.root / path).resolve()
        if candidate != self.root and self.root not in candidate.parents:
            raise NoteStorageError(f"Path escapes notes root: {path}")
        return candidate

    def ensure_folder(self, folder: Path) -> None:
        if folder.exists() and not folder.is_dir():
            raise PathConflictError(str(folder.relative_to(self.root)))
        try:
            folder.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise NoteStorageError(f"Failed to create folder {folder}: {e}") from e

    def resolve_collision(self, path: Path) -> Path:
        """First free path among ``name.md``, ``name 1.md``, ``name 2.md``..."""
        if not path.exists():
            return path

        counter = 1
        candidate = path.with_name(f"{path.stem} {counter}{path.suffix}")
        while candidate.exists():
            counter += 1
            candidate = path.with_name(f"{path.stem} {counter}{path.suffix}")
        return candidate

    def create(self, metadata: ProblemMetadata, content: str) -> Path:
        """Write a new note and return its path relative to the root."""
        folder = self.resolve(self.target_folder) if self.target_folder else self.root
        if folder != self.root:
            self.ensure_folder(folder)

        requested = self.resolve(folder / f"{self.build_file_name(metadata)}{NOTE_SUFFIX}")
        path = self.resolve_collision(requested)
        path.write_text(content, encoding="utf-8")

        relative = path.relative_to(self.root)
        logger.info(f"Created note: {relative}")
        return relative

    def read(self, path: str | Path) -> str:
        resolved = self.resolve(path)
        if not resolved.is_file():
            raise NoteNotFoundError(str(path))
        return resolved.read_text(encoding="utf-8")

    def write(self, path: str | Path, content: str) -> Path:
        resolved = self.resolve(path)
        if not resolved.is_file():
            raise NoteNotFoundError(str(path))
        resolved.write_text(content, encoding="utf-8")
        logger.debug(f"Updated note: {path}")
        return resolved.relative_to(self.root)
