"""Composition of a complete problem note."""

from collections.abc import Callable, Iterable

from loguru import logger

from leetcode_notes.domain.locale import Language, get_template_strings
from leetcode_notes.domain.models import ProblemMetadata, Solution
from leetcode_notes.domain.parsers import URLParser, html_to_markdown

from .description import reflow_description
from .formatting import format_solutions_section


def build_frontmatter(metadata: ProblemMetadata) -> str:
    tags = ", ".join(metadata.tags)
    return "\n".join(
        [
            "---",
            f"title: {metadata.title}",
            f"number: {metadata.number or ''}",
            f"difficulty: {metadata.difficulty}",
            f"tags: [{tags}]",
            f"link: {URLParser.build_problem_url(metadata.slug)}",
            "---",
        ]
    )


def build_similar_block(metadata: ProblemMetadata) -> str:
    return "\n".join(
        f"- {q.title} ({q.difficulty or '?'}) — {URLParser.build_problem_url(q.slug)}"
        for q in metadata.similar_questions
    )


def render_new_document(
    metadata: ProblemMetadata,
    include_description: bool = True,
    solutions: Iterable[Solution] | Solution | None = None,
    language: str | Language = Language.EN,
    *,
    converter: Callable[[str], str] = html_to_markdown,
) -> str:
    """
    Build the full note for a problem.

    Layout: frontmatter, title heading, description, "my idea" and "optimal
    solution" placeholders, similar questions when present, then the
    deduplicated solutions section when there are solutions.
    """
    language = Language.parse(language)
    strings = get_template_strings(language)

    description = ""
    if include_description and metadata.content:
        description = converter(metadata.content).strip()
    if description:
        description_block = reflow_description(description)
    else:
        description_block = strings.description_unavailable

    parts = [
        build_frontmatter(metadata),
        f"# {metadata.title}",
        "",
        f"## {strings.description_header}",
        description_block,
        "",
        f"## {strings.my_idea_header}",
        strings.my_idea_placeholder,
        "",
        f"## {strings.optimal_solution_header}",
        strings.optimal_solution_placeholder,
        "",
    ]

    if metadata.similar_questions:
        parts.extend([f"## {strings.similar_header}", build_similar_block(metadata), ""])

    if isinstance(solutions, Solution):
        solutions = [solutions]
    section = format_solutions_section(solutions or [], language=language)
    if section:
        parts.append(section)

    logger.debug(f"Rendered note for {metadata.slug} ({language.value})")
    return "\n".join(parts)
