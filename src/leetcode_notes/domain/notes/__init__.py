"""Rendering of problem notes and merging of solutions into them."""

from .composer import render_new_document
from .dedup import dedupe_solutions
from .description import reflow_description
from .formatting import format_solution, format_solutions_section
from .merger import merge_solutions_into_document
from .normalization import format_memory, format_runtime

__all__ = [
    "dedupe_solutions",
    "format_memory",
    "format_runtime",
    "format_solution",
    "format_solutions_section",
    "merge_solutions_into_document",
    "reflow_description",
    "render_new_document",
]
