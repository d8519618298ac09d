"""Parser for LeetCode problem URLs."""

import re

from loguru import logger


class URLParsingError(ValueError):
    """Invalid URL format or unable to parse URL."""

    pass


class URLParser:
    """Parser for LeetCode problem links."""

    BASE_URL = "https://leetcode.com"
    # Matches leetcode.com/problems/two-sum
    PATTERN = re.compile(r"leetcode\.com/problems/([a-z0-9-]+)", re.IGNORECASE)
    NUMBER_PATTERN = re.compile(r"^\d+$")
    FRONTMATTER_PATTERN = re.compile(r"\A---[ \t]*\n(.*?)\n---[ \t]*(?:\n|\Z)", re.DOTALL)
    LINK_FIELD_PATTERN = re.compile(r"^link:[ \t]*(.+?)[ \t]*$", re.MULTILINE)

    @classmethod
    def extract_slug(cls, text: str | None) -> str | None:
        """Find the first problem slug in text, if any."""
        if not text:
            return None
        match = cls.PATTERN.search(text)
        return match.group(1) if match else None

    @classmethod
    def parse(cls, url: str) -> str:
        """
        Parse LeetCode problem URL and extract the problem slug.
        """
        logger.debug(f"Parsing URL: {url}")

        slug = cls.extract_slug(url)
        if slug:
            logger.debug(f"Parsed URL to problem: {slug}")
            return slug

        raise URLParsingError(
            f"Unrecognized LeetCode URL format: {url}. "
            "Expected format: https://leetcode.com/problems/<slug>/"
        )

    @classmethod
    def is_problem_number(cls, text: str | None) -> bool:
        return bool(text) and bool(cls.NUMBER_PATTERN.match(text.strip()))

    @classmethod
    def build_problem_url(cls, slug: str) -> str:
        """
        Build problem URL from slug.
        """
        return f"{cls.BASE_URL}/problems/{slug}/"

    @classmethod
    def extract_slug_from_note(cls, content: str) -> str | None:
        """
        Resolve the problem slug of an existing note.

        The frontmatter ``link`` field wins; any problem link in the body is
        used otherwise.
        """
        frontmatter = cls.FRONTMATTER_PATTERN.match(content)
        if frontmatter:
            link = cls.LINK_FIELD_PATTERN.search(frontmatter.group(1))
            if link:
                slug = cls.extract_slug(link.group(1))
                if slug:
                    return slug

        return cls.extract_slug(content)
