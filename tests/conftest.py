# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from pyshlint.core.models import JsonValue, TextDocument
from pyshlint.process_utils import CommandOptions, ProcessResult

FIXTURE_FOLDER = Path(__file__).resolve().parent / "fixtures"


@dataclass
class RecordingLogger:
    """Logger double capturing every message by level."""

    warnings: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    debugs: list[str] = field(default_factory=list)

    def warn(self, message: str) -> None:
        self.warnings.append(message)

    def error(self, message: str) -> None:
        self.errors.append(message)

    def debug(self, message: str) -> None:
        self.debugs.append(message)


@dataclass
class FakeRunner:
    """Process runner double returning canned output and recording invocations."""

    stdout: str = '{"comments": []}'
    stderr: str = ""
    returncode: int = 0
    error: BaseException | None = None
    calls: list[tuple[tuple[str, ...], CommandOptions]] = field(default_factory=list)

    async def __call__(self, args: Sequence[str], *, options: CommandOptions) -> ProcessResult:
        self.calls.append((tuple(args), options))
        if self.error is not None:
            raise self.error
        return ProcessResult(args=tuple(args), returncode=self.returncode, stdout=self.stdout, stderr=self.stderr)

    def respond_with(self, payload: JsonValue, *, returncode: int = 1) -> None:
        self.stdout = json.dumps(payload)
        self.returncode = returncode


def _make_comment(**tweaks: JsonValue) -> dict[str, JsonValue]:
    """Return a well-formed ShellCheck comment with ``tweaks`` applied."""

    comment: dict[str, JsonValue] = {
        "file": "testing/fixtures/comment-doc-on-hover.sh",
        "line": 43,
        "endLine": 43,
        "column": 1,
        "endColumn": 7,
        "level": "warning",
        "code": 2034,
        "message": "bork bork",
        "fix": None,
    }
    comment.update(tweaks)
    return comment


@pytest.fixture
def make_comment() -> Callable[..., dict[str, JsonValue]]:
    """Return a factory building well-formed comments with field overrides."""
    return _make_comment


@pytest.fixture
def logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def fixture_folder() -> Path:
    """Return the directory holding the shell script fixtures."""
    return FIXTURE_FOLDER


@pytest.fixture
def source_document() -> TextDocument:
    """Return the fixture script that sources ``shellcheck/sourced.sh``."""
    return TextDocument.from_path(FIXTURE_FOLDER / "shellcheck" / "source.sh")
