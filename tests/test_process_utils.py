# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the asynchronous subprocess wrapper."""

from __future__ import annotations

import asyncio
import shutil
from pathlib import Path

import pytest

from pyshlint.process_utils import (
    CommandOptions,
    ExecutableUnavailableError,
    ProcessTimeoutError,
    WorkingDirectoryError,
    run_process,
)

requires_sh = pytest.mark.skipif(shutil.which("sh") is None, reason="POSIX shell not available")


@pytest.mark.asyncio
async def test_missing_executable_is_unavailable() -> None:
    with pytest.raises(ExecutableUnavailableError) as excinfo:
        await run_process(["77b4d3f6-c87a-11ec-9b62-a3c90f66d29f"])

    assert excinfo.value.executable == "77b4d3f6-c87a-11ec-9b62-a3c90f66d29f"


@pytest.mark.asyncio
async def test_missing_absolute_executable_is_unavailable(tmp_path: Path) -> None:
    with pytest.raises(ExecutableUnavailableError):
        await run_process([str(tmp_path / "shellcheck")])


@pytest.mark.asyncio
async def test_non_executable_file_is_unavailable(tmp_path: Path) -> None:
    script = tmp_path / "shellcheck"
    script.write_text("#!/bin/sh\n", encoding="utf-8")
    script.chmod(0o644)

    with pytest.raises(ExecutableUnavailableError):
        await run_process([str(script)])


@requires_sh
@pytest.mark.asyncio
async def test_feeds_stdin_and_ignores_exit_status(tmp_path: Path) -> None:
    result = await run_process(
        ["sh", "-c", 'cat; pwd; echo oops >&2; exit 3'],
        options=CommandOptions(cwd=tmp_path, stdin_text="echo $foo\n"),
    )

    assert result.returncode == 3
    assert result.stdout.splitlines() == ["echo $foo", str(tmp_path.resolve())]
    assert result.stderr == "oops\n"


@requires_sh
@pytest.mark.asyncio
async def test_timeout_kills_process() -> None:
    with pytest.raises(ProcessTimeoutError) as excinfo:
        await run_process(["sh", "-c", "sleep 5"], options=CommandOptions(timeout=0.1))

    assert excinfo.value.timeout == pytest.approx(0.1)


@requires_sh
@pytest.mark.asyncio
async def test_cancellation_propagates() -> None:
    task = asyncio.create_task(run_process(["sh", "-c", "sleep 5"], options=CommandOptions(timeout=None)))
    await asyncio.sleep(0.1)
    task.cancel()

    with pytest.raises(asyncio.CancelledError):
        await task


@pytest.mark.asyncio
async def test_requires_arguments() -> None:
    with pytest.raises(ValueError):
        await run_process([])


@requires_sh
@pytest.mark.asyncio
async def test_missing_cwd_is_not_an_unavailable_executable(tmp_path: Path) -> None:
    missing = tmp_path / "missing"

    with pytest.raises(WorkingDirectoryError) as excinfo:
        await run_process(["sh", "-c", "true"], options=CommandOptions(cwd=missing))

    assert not isinstance(excinfo.value, ExecutableUnavailableError)
    assert excinfo.value.cwd == missing
