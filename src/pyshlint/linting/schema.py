# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Strict validation of ShellCheck ``json1`` reports."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic_core import ErrorDetails

from pyshlint.core.models import JsonValue


class ShellCheckSchemaError(ValueError):
    """Raised when decoded ShellCheck output does not match the expected report shape."""

    def __init__(self, errors: list[ErrorDetails]) -> None:
        """Initialise the error with the validation failures reported by pydantic.

        Args:
            errors: Structured validation errors describing each mismatch.
        """

        summary = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or '<root>'}: {error['msg']}" for error in errors
        )
        super().__init__(f"ShellCheck output failed validation: {summary}")
        self.errors = errors


class ShellCheckComment(BaseModel):
    """Single issue reported by ShellCheck, with 1-based coordinates."""

    model_config = ConfigDict(strict=True, frozen=True, extra="ignore", populate_by_name=True)

    file: str
    line: int
    end_line: int = Field(alias="endLine")
    column: int
    end_column: int = Field(alias="endColumn")
    level: str
    code: int
    message: str
    # Replacement suggestions; carried through untouched.
    fix: dict[str, Any] | None


class ShellCheckResult(BaseModel):
    """Top-level ShellCheck ``json1`` document."""

    model_config = ConfigDict(strict=True, frozen=True, extra="ignore")

    comments: list[ShellCheckComment]


def assert_shellcheck_result(value: JsonValue) -> ShellCheckResult:
    """Validate an untrusted decoded-JSON ``value`` as a ShellCheck report.

    The whole payload is rejected when any single comment is malformed; valid
    comments are never salvaged from an invalid report.

    Args:
        value: Result of ``json.loads`` applied to ShellCheck's stdout.

    Returns:
        ShellCheckResult: Typed report safe for downstream mapping.

    Raises:
        ShellCheckSchemaError: If ``value`` deviates from the expected shape.
    """

    try:
        return ShellCheckResult.model_validate(value)
    except ValidationError as exc:
        raise ShellCheckSchemaError(exc.errors(include_url=False)) from exc


__all__ = [
    "ShellCheckComment",
    "ShellCheckResult",
    "ShellCheckSchemaError",
    "assert_shellcheck_result",
]
