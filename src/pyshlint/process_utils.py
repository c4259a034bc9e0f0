# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Asynchronous wrappers around external tool execution."""

from __future__ import annotations

import asyncio
import contextlib
import shutil

# Bandit: subprocess usage is intentional; we provide a controlled wrapper around
# external tool execution, normalising arguments and never spawning a shell.
import subprocess  # nosec B404
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, runtime_checkable

DEFAULT_TIMEOUT: float = 30.0


class ExecutableUnavailableError(OSError):
    """Raised when the requested executable cannot be located or spawned."""

    def __init__(self, executable: str, reason: str) -> None:
        """Initialise the error with the offending ``executable``.

        Args:
            executable: Executable name or path supplied by the caller.
            reason: Human-readable explanation of the spawn failure.
        """

        super().__init__(f"Executable '{executable}' is unavailable: {reason}")
        self.executable = executable
        self.reason = reason


class ProcessTimeoutError(TimeoutError):
    """Raised when a subprocess exceeds its allotted execution time."""

    def __init__(self, command: Sequence[str], timeout: float) -> None:
        """Initialise the error with the command that was terminated.

        Args:
            command: Normalised command sequence that was executed.
            timeout: Timeout in seconds that elapsed.
        """

        super().__init__(f"Command '{command[0]}' timed out after {timeout:.1f}s")
        self.command = tuple(command)
        self.timeout = timeout


class WorkingDirectoryError(NotADirectoryError):
    """Raised when the requested working directory does not exist."""

    def __init__(self, cwd: Path) -> None:
        super().__init__(f"Working directory '{cwd}' does not exist or is not a directory")
        self.cwd = cwd


@dataclass(slots=True, frozen=True)
class CommandOptions:
    """Immutable command execution options."""

    cwd: Path | None = None
    stdin_text: str | None = None
    timeout: float | None = DEFAULT_TIMEOUT


@dataclass(slots=True, frozen=True)
class ProcessResult:
    """Captured output of a completed subprocess.

    The return code is recorded for reporting only; callers decide success from the
    captured output.
    """

    args: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str


@runtime_checkable
class ProcessRunner(Protocol):
    """Callable executing a command and returning its captured output."""

    async def __call__(self, args: Sequence[str], *, options: CommandOptions) -> ProcessResult:
        """Run ``args`` honouring ``options``."""

        raise NotImplementedError


def _normalize_args(args: Sequence[str]) -> list[str]:
    """Normalise the subprocess argument sequence.

    Args:
        args: Raw command arguments supplied by the caller.

    Returns:
        list[str]: Validated argument list with the executable resolved.

    Raises:
        ValueError: If no arguments are provided.
        ExecutableUnavailableError: If the executable cannot be resolved on ``PATH``.
    """

    if not args:
        msg = "subprocess command requires at least one argument"
        raise ValueError(msg)

    head, *rest = args
    head_path = Path(head)
    if head_path.is_absolute():
        return [str(head_path), *rest]

    resolved = shutil.which(head)
    if resolved is None:
        raise ExecutableUnavailableError(head, "not found on PATH")
    return [resolved, *rest]


def _checked_cwd(cwd: Path | None) -> str | None:
    """Return ``cwd`` as a string once it is known to be an existing directory."""

    if cwd is None:
        return None
    if not cwd.is_dir():
        raise WorkingDirectoryError(cwd)
    return str(cwd)


async def _terminate(proc: asyncio.subprocess.Process) -> None:
    """Kill ``proc`` if it is still running and reap it."""

    if proc.returncode is None:
        with contextlib.suppress(ProcessLookupError):
            proc.kill()
    await proc.wait()


async def run_process(args: Sequence[str], *, options: CommandOptions | None = None) -> ProcessResult:
    """Execute ``args`` and capture its output in full.

    Args:
        args: Command and argument sequence to execute.
        options: Working directory, stdin payload and timeout.

    Returns:
        ProcessResult: Exit status together with decoded stdout and stderr.

    Raises:
        ExecutableUnavailableError: If the executable is missing or cannot be spawned.
        WorkingDirectoryError: If ``options.cwd`` is not an existing directory.
        ProcessTimeoutError: If ``options.timeout`` elapses; the process is killed first.
    """

    resolved_options = options or CommandOptions()
    normalized = _normalize_args(args)
    cwd = _checked_cwd(resolved_options.cwd)

    try:
        # Bandit: arguments come from the linter configuration and are passed as a
        # list without shell expansion.
        proc = await asyncio.create_subprocess_exec(  # nosec B603
            *normalized,
            stdin=subprocess.PIPE,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            cwd=cwd,
        )
    except OSError as exc:
        raise ExecutableUnavailableError(args[0], exc.strerror or str(exc)) from exc

    payload = (resolved_options.stdin_text or "").encode()
    try:
        stdout, stderr = await asyncio.wait_for(proc.communicate(payload), timeout=resolved_options.timeout)
    except TimeoutError as exc:
        await _terminate(proc)
        raise ProcessTimeoutError(normalized, resolved_options.timeout or 0.0) from exc
    except asyncio.CancelledError:
        await _terminate(proc)
        raise

    return ProcessResult(
        args=tuple(normalized),
        returncode=proc.returncode if proc.returncode is not None else 0,
        stdout=stdout.decode(errors="replace"),
        stderr=stderr.decode(errors="replace"),
    )


__all__ = [
    "DEFAULT_TIMEOUT",
    "CommandOptions",
    "ExecutableUnavailableError",
    "ProcessResult",
    "ProcessRunner",
    "ProcessTimeoutError",
    "WorkingDirectoryError",
    "run_process",
]
