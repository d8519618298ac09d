"""Conversion of problem description HTML into markdown."""

import re

from bs4 import BeautifulSoup
from markdownify import ATX, MarkdownConverter


class DescriptionConverter(MarkdownConverter):
    """Markdown converter that keeps ``<pre>`` blocks as plain lines.

    Example blocks arrive as ``<pre><strong>Input:</strong> ...</pre>``. Their
    text is emitted unfenced so the description reflow fences them uniformly.
    """

    def convert_pre(self, el, text, *args, **kwargs):
        plain = el.get_text().strip("\n")
        if not plain.strip():
            return ""
        return f"\n\n{plain}\n\n"


def html_to_markdown(html: str | None) -> str:
    """Convert description HTML to markdown text."""
    if not html or not html.strip():
        return ""

    soup = BeautifulSoup(html, "html.parser")
    converter = DescriptionConverter(heading_style=ATX, bullets="-", sup_symbol="^")
    markdown = converter.convert_soup(soup)

    # Collapse the blank lines markdownify leaves between blocks
    markdown = re.sub(r"[ \t]+\n", "\n", markdown)
    markdown = re.sub(r"\n{3,}", "\n\n", markdown)
    return markdown.strip()
