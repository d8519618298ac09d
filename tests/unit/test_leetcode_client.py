"""Unit tests for the LeetCode client."""

import json
from unittest.mock import AsyncMock

import httpx
import pytest

from leetcode_notes.domain.exceptions import ProblemNotResolvedError
from leetcode_notes.infrastructure.errors import RequestError
from leetcode_notes.infrastructure.leetcode_client import (
    GRAPHQL_URL,
    LeetCodeClient,
    build_headers,
    parse_similar_questions,
)

COOKIE = "csrftoken=abc123; LEETCODE_SESSION=sess"


def question_response(**overrides):
    question = {
        "questionId": "1",
        "questionFrontendId": "1",
        "title": "Two Sum",
        "titleSlug": "two-sum",
        "difficulty": "Easy",
        "content": "<p>Find two numbers.</p>",
        "similarQuestions": json.dumps(
            [
                {"title": "3Sum", "titleSlug": "3sum", "difficulty": "Medium"},
                {"title": "", "titleSlug": "broken", "difficulty": "Hard"},
            ]
        ),
        "topicTags": [{"name": "Array", "slug": "array"}, {"name": "", "slug": "x"}],
    }
    question.update(overrides)
    return httpx.Response(200, json={"data": {"question": question}})


@pytest.fixture
def http_client():
    return AsyncMock()


@pytest.fixture
def client(http_client):
    return LeetCodeClient(http_client, cookie=COOKIE)


def test_build_headers_with_cookie():
    headers = build_headers("two-sum", COOKIE)

    assert headers["referer"] == "https://leetcode.com/problems/two-sum/"
    assert headers["origin"] == "https://leetcode.com"
    assert headers["Cookie"] == COOKIE
    assert headers["x-csrftoken"] == "abc123"


def test_build_headers_without_cookie():
    headers = build_headers("two-sum", "  ")

    assert "Cookie" not in headers
    assert "x-csrftoken" not in headers


def test_parse_similar_questions_recovers_from_malformed_json():
    assert parse_similar_questions("[{not json") == []
    assert parse_similar_questions(None) == []
    assert parse_similar_questions('{"title": "x"}') == []


@pytest.mark.asyncio
async def test_fetch_question(client, http_client):
    http_client.post.return_value = question_response()

    metadata = await client.fetch_question("two-sum")

    assert metadata.title == "Two Sum"
    assert metadata.number == "1"
    assert metadata.difficulty == "Easy"
    assert metadata.tags == ("Array",)
    assert [q.slug for q in metadata.similar_questions] == ["3sum"]

    call = http_client.post.call_args
    assert call.args[0] == GRAPHQL_URL
    assert call.kwargs["json"]["variables"] == {"titleSlug": "two-sum"}


@pytest.mark.asyncio
async def test_fetch_question_defaults_missing_fields(client, http_client):
    http_client.post.return_value = question_response(
        title=None, difficulty=None, questionFrontendId=None, similarQuestions="oops"
    )

    metadata = await client.fetch_question("two-sum")

    assert metadata.title == "two-sum"
    assert metadata.difficulty == "Unknown"
    assert metadata.number == "1"
    assert metadata.similar_questions == ()


@pytest.mark.asyncio
async def test_fetch_question_non_200_raises(client, http_client):
    http_client.post.return_value = httpx.Response(403, text="forbidden")

    with pytest.raises(RequestError) as exc_info:
        await client.fetch_question("two-sum")

    assert exc_info.value.status == 403


@pytest.mark.asyncio
async def test_fetch_question_missing_payload_raises(client, http_client):
    http_client.post.return_value = httpx.Response(200, json={"data": {"question": None}})

    with pytest.raises(RequestError):
        await client.fetch_question("two-sum")


@pytest.mark.asyncio
async def test_fetch_slug_by_number(client, http_client):
    http_client.get.return_value = httpx.Response(
        200,
        json={
            "stat_status_pairs": [
                {"stat": {"frontend_question_id": 2, "question__title_slug": "add-two-numbers"}},
                {"stat": {"frontend_question_id": 1, "question__title_slug": "two-sum"}},
            ]
        },
    )

    assert await client.fetch_slug_by_number("1") == "two-sum"
    assert await client.fetch_slug_by_number("3") is None


@pytest.mark.asyncio
async def test_fetch_slug_by_number_failure_returns_none(client, http_client):
    http_client.get.return_value = httpx.Response(500, text="error")

    assert await client.fetch_slug_by_number("1") is None


@pytest.mark.asyncio
async def test_fetch_problem_by_number(client, http_client):
    http_client.get.return_value = httpx.Response(
        200,
        json={"stat_status_pairs": [{"stat": {"frontend_question_id": 1, "question__title_slug": "two-sum"}}]},
    )
    http_client.post.return_value = question_response()

    metadata = await client.fetch_problem("1")

    assert metadata.slug == "two-sum"


@pytest.mark.asyncio
async def test_fetch_problem_unknown_number_raises(client, http_client):
    http_client.get.return_value = httpx.Response(200, json={"stat_status_pairs": []})

    with pytest.raises(ProblemNotResolvedError):
        await client.fetch_problem("99999")


@pytest.mark.asyncio
async def test_fetch_accepted_solutions(client, http_client):
    submissions = httpx.Response(
        200,
        json={
            "data": {
                "questionSubmissionList": {
                    "submissions": [
                        {"id": "11", "statusDisplay": "Accepted", "lang": "python3",
                         "runtime": "40 ms", "memory": "16 MB", "timestamp": "1700000000"},
                        {"id": "12", "statusDisplay": "Wrong Answer", "lang": "python3",
                         "timestamp": "1700000500"},
                        {"id": "13", "statusDisplay": "Accepted", "lang": "cpp",
                         "runtime": "4 ms", "memory": "9 MB", "timestamp": "1700000900"},
                        {"id": "14", "statusDisplay": "Accepted", "lang": "java",
                         "timestamp": "1600000000"},
                    ]
                }
            }
        },
    )
    details = {
        13: {"id": 13, "code": "int main() {}", "lang": {"name": "C++"},
             "runtime": 4, "runtimeDisplay": "4 ms", "memory": 9000000,
             "memoryDisplay": "8.6 MB", "timestamp": 1700000900},
        11: {"id": 11, "code": "return 1", "lang": None, "runtime": None,
             "memory": None, "timestamp": None},
        14: {"id": 14, "code": "", "lang": {"name": "Java"}},
    }

    async def post(url, json=None, headers=None):
        if "submissionList" in json["query"]:
            return submissions
        submission_id = json["variables"]["submissionId"]
        return httpx.Response(200, json={"data": {"submissionDetails": details[submission_id]}})

    http_client.post.side_effect = post

    solutions = await client.fetch_accepted_solutions("two-sum", limit=20)

    # Newest first, wrong answers and empty code dropped
    assert [s.id for s in solutions] == ["13", "11"]
    assert solutions[0].lang == "C++"
    assert solutions[0].runtime == "4 ms"
    assert solutions[0].memory == "8.6 MB"
    # Detail fields fall back to the list entry
    assert solutions[1].lang == "python3"
    assert solutions[1].runtime == "40 ms"
    assert solutions[1].memory == "16 MB"
    assert solutions[1].timestamp == 1700000000


@pytest.mark.asyncio
async def test_fetch_accepted_solutions_list_failure_returns_empty(client, http_client):
    http_client.post.return_value = httpx.Response(500, text="error")

    assert await client.fetch_accepted_solutions("two-sum") == []


@pytest.mark.asyncio
async def test_fetch_solutions_without_submissions(client, http_client):
    http_client.post.return_value = httpx.Response(
        200, json={"data": {"questionSubmissionList": {"submissions": []}}}
    )

    assert await client.fetch_solutions("two-sum", 1) == []
    assert http_client.post.call_args.kwargs["json"]["variables"]["limit"] == 1


@pytest.mark.asyncio
async def test_detail_failure_excludes_entry(client, http_client):
    listing = httpx.Response(
        200,
        json={"data": {"questionSubmissionList": {"submissions": [
            {"id": "1", "statusDisplay": "Accepted", "timestamp": "1"},
        ]}}},
    )
    http_client.post.side_effect = [listing, httpx.Response(429, text="slow down")]

    assert await client.fetch_solutions("two-sum", 5) == []
