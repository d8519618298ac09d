"""Merging of new solutions into an existing note."""

import re
from collections.abc import Iterable

from loguru import logger

from leetcode_notes.domain.locale import Language, SOLUTIONS_HEADERS
from leetcode_notes.domain.models import Solution

from .formatting import format_solutions_section

FENCE_OPEN_PATTERN = re.compile(r"^(`{3,})[^`]*$")
FENCE_CLOSE_PATTERN = re.compile(r"^(`{3,})[ \t]*$")

# Known limitation: a user heading that reads exactly "## Solutions" is taken
# for the generated section.
SECTION_HEADER_PATTERN = re.compile(
    r"^##[ \t]+(?:{})[ \t]*$".format("|".join(re.escape(h) for h in SOLUTIONS_HEADERS.values())),
    re.IGNORECASE,
)


def _track_fence(line: str, fence_length: int) -> tuple[int, bool]:
    """
    Open fence length after ``line`` (0 outside code) and whether the line is a fence.

    A fence closes only on a bare backtick run at least as long as the one
    that opened it.
    """
    bare = line.strip()
    if fence_length:
        closing = FENCE_CLOSE_PATTERN.match(bare)
        if closing and len(closing.group(1)) >= fence_length:
            return 0, True
        return fence_length, False

    opening = FENCE_OPEN_PATTERN.match(bare)
    if opening:
        return len(opening.group(1)), True
    return 0, False


def _comparable(code: str) -> str:
    return code.replace("\r\n", "\n").strip()


def find_solutions_section(content: str) -> int | None:
    """
    Return the offset of the solutions header, or None.

    Headers inside fenced code are skipped. If the fences never balance, the
    first header anywhere is used instead.
    """
    offset = 0
    fence_length = 0
    first_outside: int | None = None
    first_any: int | None = None

    for line in content.split("\n"):
        fence_length, is_fence = _track_fence(line, fence_length)
        if not is_fence and SECTION_HEADER_PATTERN.match(line.rstrip("\r")):
            if first_any is None:
                first_any = offset
            if not fence_length and first_outside is None:
                first_outside = offset
        offset += len(line) + 1

    if fence_length:
        return first_any
    return first_outside


def extract_codes(section: str) -> list[str]:
    """Trimmed contents of every closed fenced code block in a section."""
    codes: list[str] = []
    buffer: list[str] = []
    fence_length = 0

    for line in section.split("\n"):
        next_length, is_fence = _track_fence(line, fence_length)
        if fence_length and is_fence:
            codes.append(_comparable("\n".join(buffer)))
        elif fence_length:
            buffer.append(line)
        else:
            buffer = []
        fence_length = next_length

    return codes


def merge_solutions_into_document(
    content: str,
    solutions: Iterable[Solution],
    language: str | Language = Language.EN,
) -> str:
    """
    Add solutions that are not yet in the note.

    New blocks go to the end of the existing solutions section, which always
    runs to the end of the note. Without such a section a new one is appended.
    The note is returned unchanged when nothing new remains or when it cannot
    be processed.
    """
    solutions = list(solutions)
    if not solutions:
        return content

    try:
        return _merge(content, solutions, Language.parse(language))
    except Exception:
        logger.opt(exception=True).warning("Failed to merge solutions, note left unchanged")
        return content


def _merge(content: str, solutions: list[Solution], language: Language) -> str:
    start = find_solutions_section(content)
    existing_section = content[start:] if start is not None else ""
    existing_codes = set(extract_codes(existing_section))

    unique_new = [s for s in solutions if _comparable(s.code) not in existing_codes]
    if not unique_new:
        logger.debug("All solutions already present in note")
        return content

    if start is not None:
        block = format_solutions_section(
            unique_new, include_header=False, language=language
        ).strip()
        logger.debug(f"Appending {len(unique_new)} solution(s) to existing section")
        return content[:start] + existing_section.rstrip() + "\n\n" + block

    block = format_solutions_section(unique_new, include_header=True, language=language).strip()
    logger.debug(f"Adding solutions section with {len(unique_new)} solution(s)")
    trimmed = content.rstrip()
    return f"{trimmed}\n\n{block}\n" if trimmed else f"{block}\n"
