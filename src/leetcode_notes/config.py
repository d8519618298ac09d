"""Application settings loaded from the environment."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from leetcode_notes.domain.locale import Language
from leetcode_notes.infrastructure.leetcode_client import DEFAULT_SOLUTIONS_LIMIT
from leetcode_notes.infrastructure.note_store import DEFAULT_FILENAME_TEMPLATE

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUE_VALUES


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, ""))
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, ""))
    except ValueError:
        return default


@dataclass
class Settings:
    """Settings for fetching problems and writing notes."""

    csrftoken: str = ""
    leetcode_session: str = ""
    notes_root: str = "."
    target_folder: str = ""
    filename_template: str = DEFAULT_FILENAME_TEMPLATE
    include_description: bool = True
    insert_all_solutions: bool = False
    language: Language = Language.EN
    solutions_limit: int = DEFAULT_SOLUTIONS_LIMIT
    http_timeout: float = 30.0
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()

        return cls(
            csrftoken=os.getenv("LEETCODE_CSRFTOKEN", "").strip(),
            leetcode_session=os.getenv("LEETCODE_SESSION", "").strip(),
            notes_root=os.getenv("NOTES_ROOT", ".").strip() or ".",
            target_folder=os.getenv("NOTES_FOLDER", "").strip(),
            filename_template=os.getenv("NOTES_FILENAME_TEMPLATE", "").strip()
            or DEFAULT_FILENAME_TEMPLATE,
            include_description=_env_bool("NOTES_INCLUDE_DESCRIPTION", True),
            insert_all_solutions=_env_bool("NOTES_INSERT_ALL_SOLUTIONS", False),
            language=Language.parse(os.getenv("NOTES_LANGUAGE")),
            solutions_limit=_env_int("NOTES_SOLUTIONS_LIMIT", DEFAULT_SOLUTIONS_LIMIT),
            http_timeout=_env_float("HTTP_TIMEOUT", 30.0),
            log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO",
        )

    def cookie_header(self) -> str:
        """Cookie header from the configured tokens, accepting pasted ``name=value`` forms."""
        parts = []
        token = self.csrftoken.strip()
        if token:
            parts.append(f"csrftoken={token.removeprefix('csrftoken=')}")
        session = self.leetcode_session.strip()
        if session:
            parts.append(f"LEETCODE_SESSION={session.removeprefix('LEETCODE_SESSION=')}")
        return "; ".join(parts)
