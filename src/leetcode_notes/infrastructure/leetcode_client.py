"""Client for the LeetCode GraphQL and problem list endpoints."""

import json
import re
from typing import Any

from loguru import logger

from leetcode_notes.domain.exceptions import ProblemNotResolvedError
from leetcode_notes.domain.models import ProblemMetadata, SimilarProblem, Solution, SubmissionSummary
from leetcode_notes.domain.parsers import URLParser

from .errors import RequestError
from .interfaces import HTTPClientProtocol

GRAPHQL_URL = "https://leetcode.com/graphql"
PROBLEMS_URL = "https://leetcode.com/api/problems/all/"
DEFAULT_SOLUTIONS_LIMIT = 20

QUESTION_QUERY = """
  query questionData($titleSlug: String!) {
    question(titleSlug: $titleSlug) {
      questionId
      questionFrontendId
      title
      titleSlug
      difficulty
      content
      similarQuestions
      topicTags {
        name
        slug
      }
    }
  }
"""

SUBMISSION_LIST_QUERY = """
  query submissionList($offset: Int!, $limit: Int!, $questionSlug: String!) {
    questionSubmissionList(offset: $offset, limit: $limit, questionSlug: $questionSlug) {
      submissions {
        id
        statusDisplay
        lang
        runtime
        memory
        timestamp
      }
    }
  }
"""

SUBMISSION_DETAIL_QUERY = """
  query submissionDetails($submissionId: Int!) {
    submissionDetails(submissionId: $submissionId) {
      id
      code
      lang {
        name
        verboseName
      }
      runtime
      runtimeDisplay
      memory
      memoryDisplay
      timestamp
    }
  }
"""


def extract_cookie(cookie_header: str, key: str) -> str | None:
    match = re.search(rf"{re.escape(key)}=([^;\s]+)", cookie_header)
    return match.group(1) if match else None


def build_headers(slug: str, cookie: str = "", referer: str | None = None) -> dict[str, str]:
    """Headers LeetCode expects from its own web client."""
    headers = {
        "content-type": "application/json",
        "referer": referer or URLParser.build_problem_url(slug),
        "origin": URLParser.BASE_URL,
        "x-requested-with": "XMLHttpRequest",
    }

    trimmed = (cookie or "").strip()
    if trimmed:
        headers["Cookie"] = trimmed
        csrf = extract_cookie(trimmed, "csrftoken")
        if csrf:
            headers["x-csrftoken"] = csrf

    return headers


def parse_similar_questions(raw: Any) -> list[SimilarProblem]:
    """
    Parse the ``similarQuestions`` field, which LeetCode sends as a JSON string.

    Malformed values yield an empty list.
    """
    if not raw:
        return []

    try:
        parsed = json.loads(raw) if isinstance(raw, str) else raw
    except ValueError:
        logger.opt(exception=True).warning("Failed to parse similarQuestions")
        return []

    if not isinstance(parsed, list):
        return []

    result = []
    for item in parsed:
        if not isinstance(item, dict):
            continue
        title = item.get("title")
        slug = item.get("titleSlug")
        if title and slug:
            result.append(
                SimilarProblem(title=title, slug=slug, difficulty=item.get("difficulty") or "")
            )
    return result


def _to_timestamp(value: Any) -> int | None:
    try:
        return int(value) if value else None
    except (TypeError, ValueError):
        return None


class LeetCodeClient:
    """Fetches problems and accepted submissions from leetcode.com."""

    def __init__(self, http_client: HTTPClientProtocol, cookie: str = ""):
        """
        Initialize client.

        Args:
            http_client: Async HTTP client instance
            cookie: Cookie header with csrftoken and LEETCODE_SESSION
        """
        self.http_client = http_client
        self.cookie = cookie

    async def close(self) -> None:
        await self.http_client.close()

    async def _graphql(
        self, query: str, variables: dict[str, Any], headers: dict[str, str]
    ):
        return await self.http_client.post(
            GRAPHQL_URL, json={"query": query, "variables": variables}, headers=headers
        )

    async def fetch_question(self, slug: str) -> ProblemMetadata:
        """
        Fetch problem metadata.

        Raises:
            RequestError: On non-200 status or a payload without a question
        """
        logger.debug(f"Fetching question: {slug}")

        response = await self._graphql(
            QUESTION_QUERY, {"titleSlug": slug}, build_headers(slug, self.cookie)
        )
        if response.status_code != 200:
            raise RequestError(
                f"LeetCode returned status {response.status_code}", status=response.status_code
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise RequestError(f"Malformed response for {slug}") from e

        question = ((payload or {}).get("data") or {}).get("question")
        if not question:
            raise RequestError(f"Could not fetch problem data for {slug} (cookie may be outdated)")

        tags = tuple(
            tag["name"]
            for tag in question.get("topicTags") or []
            if isinstance(tag, dict) and tag.get("name")
        )

        metadata = ProblemMetadata(
            id=question.get("questionId"),
            number=question.get("questionFrontendId") or question.get("questionId"),
            title=question.get("title") or slug,
            slug=question.get("titleSlug") or slug,
            difficulty=question.get("difficulty") or "Unknown",
            tags=tags,
            content=question.get("content") or "",
            similar_questions=tuple(parse_similar_questions(question.get("similarQuestions"))),
        )

        logger.info(f"Fetched problem {metadata.number}. {metadata.title}")
        return metadata

    async def fetch_slug_by_number(self, number: str) -> str | None:
        """Resolve a frontend problem number to its slug."""
        logger.debug(f"Resolving problem number: {number}")

        response = await self.http_client.get(PROBLEMS_URL, headers=build_headers("", self.cookie))
        if response.status_code != 200:
            logger.warning(f"Failed to fetch problem list, status {response.status_code}")
            return None

        try:
            payload = response.json()
        except ValueError:
            logger.warning("Malformed problem list response")
            return None

        for item in (payload or {}).get("stat_status_pairs") or []:
            stat = (item or {}).get("stat") or {}
            if str(stat.get("frontend_question_id")) == str(number).strip():
                slug = stat.get("question__title_slug")
                if isinstance(slug, str) and slug.strip():
                    return slug.strip()
                return None

        return None

    async def fetch_problem(self, slug_or_id: str) -> ProblemMetadata:
        """Fetch problem by slug, link or frontend number."""
        value = slug_or_id.strip()
        slug = URLParser.extract_slug(value)

        if not slug and URLParser.is_problem_number(value):
            slug = await self.fetch_slug_by_number(value)
            if not slug:
                raise ProblemNotResolvedError(value)

        return await self.fetch_question(slug or value)

    async def fetch_accepted_solutions(
        self, slug: str, limit: int = DEFAULT_SOLUTIONS_LIMIT
    ) -> list[Solution]:
        """Fetch accepted solutions with code, newest first."""
        headers = build_headers(slug, self.cookie)
        submissions = await self._fetch_accepted_submissions(slug, headers, limit)
        if not submissions:
            return []

        results = []
        for submission in submissions:
            detail = await self._fetch_submission_details(submission, slug)
            if detail and detail.code:
                results.append(detail)

        logger.info(f"Fetched {len(results)} accepted solution(s) for {slug}")
        return results

    async def fetch_solutions(self, slug: str, limit: int = DEFAULT_SOLUTIONS_LIMIT) -> list[Solution]:
        return await self.fetch_accepted_solutions(slug, limit)

    async def _fetch_accepted_submissions(
        self, slug: str, headers: dict[str, str], limit: int
    ) -> list[SubmissionSummary]:
        response = await self._graphql(
            SUBMISSION_LIST_QUERY,
            {"offset": 0, "limit": limit, "questionSlug": slug},
            headers,
        )

        submissions: Any = []
        if response.status_code == 200:
            try:
                payload = response.json() or {}
                submissions = (
                    ((payload.get("data") or {}).get("questionSubmissionList") or {}).get(
                        "submissions"
                    )
                    or []
                )
            except ValueError:
                logger.warning(f"Malformed submission list for {slug}")
        else:
            logger.warning(
                f"questionSubmissionList status {response.status_code}: {response.text[:400]}"
            )

        if not isinstance(submissions, list) or not submissions:
            logger.warning(f"Submission list is empty for {slug}")
            return []

        accepted = [
            s for s in submissions if isinstance(s, dict) and s.get("statusDisplay") == "Accepted"
        ]
        accepted.sort(key=lambda s: _to_timestamp(s.get("timestamp")) or 0, reverse=True)

        return [
            SubmissionSummary(
                id=str(item.get("id")),
                lang=item.get("lang"),
                runtime=item.get("runtime"),
                memory=item.get("memory"),
                timestamp=_to_timestamp(item.get("timestamp")),
            )
            for item in accepted
        ]

    async def _fetch_submission_details(
        self, submission: SubmissionSummary, slug: str
    ) -> Solution | None:
        headers = build_headers(
            slug,
            self.cookie,
            referer=f"{URLParser.BASE_URL}/submissions/detail/{submission.id}/",
        )

        try:
            submission_id = int(submission.id)
        except ValueError:
            logger.warning(f"Skipping submission with invalid id: {submission.id}")
            return None

        response = await self._graphql(
            SUBMISSION_DETAIL_QUERY, {"submissionId": submission_id}, headers
        )
        if response.status_code != 200:
            logger.warning(
                f"Failed to fetch submission {submission.id} details, "
                f"status {response.status_code}: {response.text[:400]}"
            )
            return None

        try:
            payload = response.json() or {}
        except ValueError:
            logger.warning(f"Malformed details for submission {submission.id}")
            return None

        details = (payload.get("data") or {}).get("submissionDetails")
        if not details or not details.get("code"):
            return None

        lang = details.get("lang")
        lang_name = lang.get("name") if isinstance(lang, dict) else None

        return Solution(
            id=str(details.get("id") or submission.id),
            code=details["code"],
            lang=lang_name or submission.lang,
            runtime=_first_present(
                details.get("runtimeDisplay"), details.get("runtime"), submission.runtime
            ),
            memory=_first_present(
                details.get("memoryDisplay"), details.get("memory"), submission.memory
            ),
            timestamp=_to_timestamp(details.get("timestamp")) or submission.timestamp,
        )


def _first_present(*values: Any) -> Any:
    for value in values:
        if value is not None:
            return value
    return None
