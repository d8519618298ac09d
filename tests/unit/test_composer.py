"""Unit tests for new note composition."""

import pytest

from leetcode_notes.domain.locale import Language
from leetcode_notes.domain.models import ProblemMetadata, SimilarProblem, Solution
from leetcode_notes.domain.notes import render_new_document


@pytest.fixture
def two_sum():
    return ProblemMetadata(
        id="1",
        number="1",
        title="Two Sum",
        slug="two-sum",
        difficulty="Easy",
        tags=("Array", "Hash Table"),
    )


def test_render_full_document(two_sum):
    document = render_new_document(
        two_sum, True, [Solution(id="10", code="return a+b", lang="Python3")]
    )

    assert document == (
        "---\n"
        "title: Two Sum\n"
        "number: 1\n"
        "difficulty: Easy\n"
        "tags: [Array, Hash Table]\n"
        "link: https://leetcode.com/problems/two-sum/\n"
        "---\n"
        "# Two Sum\n"
        "\n"
        "## Description\n"
        "(description unavailable or disabled)\n"
        "\n"
        "## My idea\n"
        "(your plan)\n"
        "\n"
        "## Optimal solution\n"
        "(notes)\n"
        "\n"
        "## Solutions\n"
        "\n"
        "Python3\n"
        "\n"
        "```python3\n"
        "return a+b\n"
        "```"
    )


def test_render_without_solutions_has_no_solutions_header(two_sum):
    document = render_new_document(two_sum, True, [])

    assert "## Solutions" not in document
    assert document.endswith("## Optimal solution\n(notes)\n")


def test_render_accepts_single_solution(two_sum):
    document = render_new_document(two_sum, True, Solution(id="1", code="x"))

    assert document.endswith("## Solutions\n\n```\nx\n```")


def test_render_deduplicates_solutions(two_sum):
    solutions = [Solution(id="1", code="x"), Solution(id="2", code="x\n")]

    document = render_new_document(two_sum, True, solutions)

    assert document.count("```\nx\n```") == 1


def test_render_description_is_converted_and_reflowed(two_sum):
    metadata = ProblemMetadata(
        title="Two Sum", slug="two-sum", difficulty="Easy", content="<p>ignored</p>"
    )

    document = render_new_document(
        metadata, True, converter=lambda html: "Find two.\n\nInput: [1,2]\nOutput: [0,1]\n"
    )

    assert "## Description\nFind two.\n\n```\nInput: [1,2]\nOutput: [0,1]\n```\n\n## My idea" in (
        document
    )


def test_render_description_disabled(two_sum):
    metadata = ProblemMetadata(title="T", slug="t", content="<p>text</p>")

    document = render_new_document(metadata, False, converter=pytest.fail)

    assert "## Description\n(description unavailable or disabled)\n" in document


def test_render_similar_questions(two_sum):
    metadata = ProblemMetadata(
        title="Two Sum",
        slug="two-sum",
        similar_questions=(
            SimilarProblem(title="3Sum", slug="3sum", difficulty="Medium"),
            SimilarProblem(title="4Sum", slug="4sum"),
        ),
    )

    document = render_new_document(metadata, False)

    assert (
        "## Similar questions\n"
        "- 3Sum (Medium) — https://leetcode.com/problems/3sum/\n"
        "- 4Sum (?) — https://leetcode.com/problems/4sum/\n"
    ) in document


def test_render_minimal_metadata():
    document = render_new_document(ProblemMetadata(title="X", slug="x"), True)

    assert "number: \n" in document
    assert "tags: []\n" in document
    assert "## Similar questions" not in document


def test_render_russian(two_sum):
    document = render_new_document(
        two_sum, False, [Solution(id="1", code="x")], language=Language.RU
    )

    assert "## Описание\n(описание недоступно или отключено)" in document
    assert "## Моя идея\n(ваш план)" in document
    assert "## Оптимальное решение\n(конспект)" in document
    assert "## Решения\n\n```\nx\n```" in document


def test_unknown_language_falls_back_to_english(two_sum):
    document = render_new_document(two_sum, False, language="de")

    assert "## My idea" in document


def test_render_with_out_of_range_timestamp(two_sum):
    document = render_new_document(
        two_sum, False, [Solution(id="1", code="x", timestamp=1_700_000_000_000)]
    )

    assert document.endswith("## Solutions\n\n```\nx\n```")
