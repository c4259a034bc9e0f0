# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Translate validated ShellCheck comments into host diagnostics."""

from __future__ import annotations

from typing import Final

from pyshlint.core.models import CodeDescription, Diagnostic, Position, Range
from pyshlint.core.severity import severity_from_level

from .schema import ShellCheckComment, ShellCheckResult

SHELLCHECK_SOURCE: Final[str] = "shellcheck"
SHELLCHECK_CODE_PREFIX: Final[str] = "SC"
SHELLCHECK_WIKI_URL: Final[str] = "https://www.shellcheck.net/wiki/{code}"


def shellcheck_code(code: int) -> str:
    """Return the public identifier for ShellCheck check ``code`` (e.g. ``SC2154``)."""

    return f"{SHELLCHECK_CODE_PREFIX}{code}"


def map_shellcheck_comment(comment: ShellCheckComment) -> Diagnostic:
    """Convert one ShellCheck comment into a zero-based :class:`Diagnostic`.

    Args:
        comment: Comment that already passed schema validation.

    Returns:
        Diagnostic: Host-facing diagnostic covering the same span.

    Raises:
        UnknownShellCheckLevelError: If the comment carries an unrecognised level.
    """

    code = shellcheck_code(comment.code)
    return Diagnostic(
        range=Range(
            start=Position(line=comment.line - 1, character=comment.column - 1),
            end=Position(line=comment.end_line - 1, character=comment.end_column - 1),
        ),
        severity=severity_from_level(comment.level),
        code=code,
        code_description=CodeDescription(href=SHELLCHECK_WIKI_URL.format(code=code)),
        message=comment.message,
        source=SHELLCHECK_SOURCE,
    )


def map_shellcheck_result(result: ShellCheckResult) -> list[Diagnostic]:
    """Map every comment of ``result`` in report order."""

    return [map_shellcheck_comment(comment) for comment in result.comments]


__all__ = [
    "SHELLCHECK_SOURCE",
    "map_shellcheck_comment",
    "map_shellcheck_result",
    "shellcheck_code",
]
