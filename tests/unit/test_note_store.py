"""Unit tests for the file-based note store."""

import pytest

from leetcode_notes.domain.models import ProblemMetadata
from leetcode_notes.infrastructure.errors import (
    NoteNotFoundError,
    NoteStorageError,
    PathConflictError,
)
from leetcode_notes.infrastructure.note_store import NoteStore, sanitize_for_path

TWO_SUM = ProblemMetadata(title="Two Sum", slug="two-sum", number="1", id="1")


@pytest.mark.parametrize(
    "value, expected",
    [
        ("Two Sum", "Two-Sum"),
        ('  a<b>:c"d/e\\f|g?h*  ', "abcdefgh"),
        ("Pow(x, n)", "Pow(x,-n)"),
        ("", ""),
        (None, ""),
    ],
)
def test_sanitize_for_path(value, expected):
    assert sanitize_for_path(value) == expected


def test_build_file_name_default_template(tmp_path):
    assert NoteStore(tmp_path).build_file_name(TWO_SUM) == "1-two-sum"


def test_build_file_name_custom_template(tmp_path):
    store = NoteStore(tmp_path, filename_template="{{title}} ({{number}})")

    assert store.build_file_name(TWO_SUM) == "Two-Sum (1)"


def test_build_file_name_number_falls_back_to_id(tmp_path):
    metadata = ProblemMetadata(title="T", slug="t", id="7")

    assert NoteStore(tmp_path).build_file_name(metadata) == "7-t"


def test_build_file_name_empty_result_falls_back_to_slug(tmp_path):
    store = NoteStore(tmp_path, filename_template="{{number}}")
    metadata = ProblemMetadata(title="T", slug="the-slug")

    assert store.build_file_name(metadata) == "the-slug"


def test_create_writes_note_in_target_folder(tmp_path):
    store = NoteStore(tmp_path, target_folder="LeetCode/Easy")

    path = store.create(TWO_SUM, "content")

    assert path.as_posix() == "LeetCode/Easy/1-two-sum.md"
    assert (tmp_path / path).read_text(encoding="utf-8") == "content"


def test_create_resolves_collisions(tmp_path):
    store = NoteStore(tmp_path)

    first = store.create(TWO_SUM, "a")
    second = store.create(TWO_SUM, "b")
    third = store.create(TWO_SUM, "c")

    assert [p.as_posix() for p in (first, second, third)] == [
        "1-two-sum.md",
        "1-two-sum 1.md",
        "1-two-sum 2.md",
    ]


def test_create_folder_conflict(tmp_path):
    (tmp_path / "LeetCode").write_text("not a folder", encoding="utf-8")
    store = NoteStore(tmp_path, target_folder="LeetCode")

    with pytest.raises(PathConflictError):
        store.create(TWO_SUM, "content")


def test_read_and_write(tmp_path):
    store = NoteStore(tmp_path)
    path = store.create(TWO_SUM, "old")

    store.write(path, "new")

    assert store.read(path) == "new"


def test_read_missing_note(tmp_path):
    with pytest.raises(NoteNotFoundError):
        NoteStore(tmp_path).read("missing.md")


def test_paths_outside_root_are_rejected(tmp_path):
    store = NoteStore(tmp_path / "vault")

    with pytest.raises(NoteStorageError):
        store.read("../secret.md")
