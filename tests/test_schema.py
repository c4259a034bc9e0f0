# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for ShellCheck report validation."""

from __future__ import annotations

import pytest

from pyshlint.linting.schema import ShellCheckSchemaError, assert_shellcheck_result


def test_accepts_empty_comments() -> None:
    result = assert_shellcheck_result({"comments": []})

    assert result.comments == []


def test_accepts_one_valid_comment(make_comment) -> None:
    result = assert_shellcheck_result({"comments": [make_comment()]})

    (comment,) = result.comments
    assert comment.file == "testing/fixtures/comment-doc-on-hover.sh"
    assert (comment.line, comment.end_line, comment.column, comment.end_column) == (43, 43, 1, 7)
    assert comment.level == "warning"
    assert comment.code == 2034
    assert comment.fix is None


def test_accepts_two_valid_comments(make_comment) -> None:
    payload = {
        "comments": [
            make_comment(),
            make_comment(line=45, endLine=45, column=2, endColumn=8, code=2035),
        ],
    }

    result = assert_shellcheck_result(payload)

    assert [comment.code for comment in result.comments] == [2034, 2035]


def test_accepts_fix_object_and_ignores_unknown_keys(make_comment) -> None:
    fix = {"replacements": [{"line": 43, "column": 1, "replacement": '"'}]}

    result = assert_shellcheck_result({"comments": [make_comment(fix=fix, extra="ignored")], "version": 1})

    assert result.comments[0].fix == fix


@pytest.mark.parametrize(
    "payload",
    [
        {"comments": None},
        {"comments": ["foo"]},
        {"comments": "foo"},
        {"comments": {}},
        {},
        [],
        None,
        "comments",
    ],
)
def test_rejects_malformed_envelope(payload) -> None:
    with pytest.raises(ShellCheckSchemaError):
        assert_shellcheck_result(payload)


@pytest.mark.parametrize(
    "tweaks",
    [
        {"file": 9},
        {"line": "9"},
        {"endLine": "9"},
        {"column": "9"},
        {"endColumn": "9"},
        {"level": 9},
        {"code": "9"},
        {"message": 9},
        {"fix": "replace"},
        {"line": True},
    ],
)
def test_rejects_retyped_field(make_comment, tweaks) -> None:
    assert_shellcheck_result({"comments": [make_comment()]})

    with pytest.raises(ShellCheckSchemaError):
        assert_shellcheck_result({"comments": [make_comment(**tweaks)]})


@pytest.mark.parametrize("missing", ["file", "line", "endLine", "column", "endColumn", "level", "code", "message", "fix"])
def test_rejects_missing_field(make_comment, missing: str) -> None:
    comment = make_comment()
    del comment[missing]

    with pytest.raises(ShellCheckSchemaError):
        assert_shellcheck_result({"comments": [comment]})


def test_rejects_whole_report_when_one_comment_is_invalid(make_comment) -> None:
    payload = {"comments": [make_comment(), make_comment(code="2035")]}

    with pytest.raises(ShellCheckSchemaError) as excinfo:
        assert_shellcheck_result(payload)

    assert excinfo.value.errors
    assert excinfo.value.errors[0]["loc"][:2] == ("comments", 1)
    assert "comments.1.code" in str(excinfo.value)
