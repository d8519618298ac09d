"""Parsers for problem links and description markup."""

from .description_parser import html_to_markdown
from .url_parser import URLParser, URLParsingError

__all__ = [
    "URLParser",
    "URLParsingError",
    "html_to_markdown",
]
