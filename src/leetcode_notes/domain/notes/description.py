"""Reflow of converted problem descriptions."""

import re

EXAMPLE_LINE_PATTERN = re.compile(r"^(Input|Output|Explanation)\s*:", re.IGNORECASE)
LEADING_MARKERS_PATTERN = re.compile(r"^[-*>+\s]+")
FENCE = "```"


def _strip_markers(line: str) -> str:
    text = LEADING_MARKERS_PATTERN.sub("", line.strip())
    text = re.sub(r"^\*\*", "", text)
    return re.sub(r"\*\*$", "", text)


def is_example_line(line: str) -> bool:
    """Input/Output/Explanation line, ignoring list, quote and bold markers."""
    return bool(EXAMPLE_LINE_PATTERN.match(_strip_markers(line)))


def reflow_description(markdown: str) -> str:
    """
    Wrap runs of Input/Output/Explanation lines in fenced code blocks.

    Consecutive example lines share one fence. A blank line ending a run is
    kept after the closing fence. Fences already present in the text are
    passed through and nothing is fenced inside them.
    """
    out: list[str] = []
    in_code = False
    in_existing_fence = False

    for line in markdown.split("\n"):
        if in_existing_fence:
            if line.strip().startswith(FENCE):
                in_existing_fence = False
            out.append(line)
            continue

        if is_example_line(line):
            if not in_code:
                out.append(FENCE)
                in_code = True
            out.append(line.strip())
            continue

        if in_code:
            out.append(FENCE)
            in_code = False
            if line.strip() == "":
                out.append("")
                continue

        if line.strip().startswith(FENCE):
            in_existing_fence = True
        # "Example N:" headers and prose pass through unfenced
        out.append(line)

    if in_code:
        out.append(FENCE)

    return "\n".join(out)
