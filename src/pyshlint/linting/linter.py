# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""ShellCheck-backed linter producing host diagnostics."""

from __future__ import annotations

import json
import shlex
from collections.abc import Sequence
from typing import Final

from pyshlint.config import LinterConfig
from pyshlint.core.models import Diagnostic, TextDocument, WorkspaceFolder
from pyshlint.core.severity import UnknownShellCheckLevelError
from pyshlint.process_utils import (
    CommandOptions,
    ExecutableUnavailableError,
    ProcessResult,
    ProcessRunner,
    ProcessTimeoutError,
    WorkingDirectoryError,
    run_process,
)

from .dialect import shell_argument
from .mapping import map_shellcheck_result
from .schema import ShellCheckSchemaError, assert_shellcheck_result
from .sources import SourceResolution, resolve_sources

BASE_ARGUMENTS: Final[tuple[str, ...]] = ("--format=json1", "--external-sources")
STDIN_ARGUMENT: Final[str] = "-"
DISABLED_MESSAGE: Final[str] = "ShellCheck: disabling linting as no executable was found at path"


class Linter:
    """Run ShellCheck over in-memory documents.

    Linting is disabled for the lifetime of the instance the first time the
    executable turns out to be missing or unusable. Malformed output and timeouts
    only affect the call that produced them.
    """

    def __init__(self, config: LinterConfig, *, runner: ProcessRunner | None = None) -> None:
        """Initialise the linter.

        Args:
            config: Executable, base directory, logger and invocation limits.
            runner: Process runner override; defaults to :func:`run_process`.
        """

        self._config = config
        self._runner: ProcessRunner = runner or run_process
        self._can_lint = bool(config.executable_path)

    @property
    def can_lint(self) -> bool:
        """Return whether ShellCheck will still be invoked by :meth:`lint`."""

        return self._can_lint

    async def lint(self, document: TextDocument, workspace_folders: Sequence[WorkspaceFolder]) -> list[Diagnostic]:
        """Lint ``document`` and return its diagnostics.

        Failures never propagate: a missing executable disables the linter, while
        malformed output, a timeout, a missing working directory or an unusable
        argument yields an empty list for this call only.

        Args:
            document: Document snapshot whose text is fed to ShellCheck on stdin.
            workspace_folders: Folders offered as additional ``source`` search paths.

        Returns:
            list[Diagnostic]: Diagnostics in the order ShellCheck reported them.
        """

        if not self._can_lint or not self._config.executable_path:
            return []

        shell = shell_argument(document.text)
        if shell is None:
            return []

        resolution = resolve_sources(self._config.cwd, document, workspace_folders)
        command = self._build_command(self._config.executable_path, shell, resolution)
        self._config.logger.debug(f"ShellCheck: running command={shlex.join(command)} cwd={resolution.cwd}")

        try:
            result = await self._runner(
                command,
                options=CommandOptions(
                    cwd=resolution.cwd,
                    stdin_text=document.text,
                    timeout=self._config.timeout,
                ),
            )
        except ExecutableUnavailableError as exc:
            self._disable(exc)
            return []
        except ProcessTimeoutError as exc:
            self._config.logger.warn(f"ShellCheck: {exc}; skipping diagnostics for {document.uri}")
            return []
        except WorkingDirectoryError as exc:
            self._config.logger.error(f"ShellCheck: {exc}; skipping diagnostics for {document.uri}")
            return []
        except ValueError as exc:
            self._config.logger.error(f"ShellCheck: could not run command for {document.uri}: {exc}")
            return []

        return self._diagnostics_from(result, document)

    def _build_command(self, executable: str, shell: str, resolution: SourceResolution) -> list[str]:
        return [
            executable,
            *BASE_ARGUMENTS,
            f"--shell={shell}",
            *resolution.arguments(),
            *self._config.arguments,
            STDIN_ARGUMENT,
        ]

    def _disable(self, exc: ExecutableUnavailableError) -> None:
        # No await between the check and the write, so concurrent callers log once.
        if not self._can_lint:
            return
        self._can_lint = False
        self._config.logger.warn(f"{DISABLED_MESSAGE} '{self._config.executable_path}' ({exc.reason})")

    def _diagnostics_from(self, result: ProcessResult, document: TextDocument) -> list[Diagnostic]:
        try:
            raw = json.loads(result.stdout)
            return map_shellcheck_result(assert_shellcheck_result(raw))
        except (json.JSONDecodeError, ShellCheckSchemaError, UnknownShellCheckLevelError) as exc:
            self._config.logger.error(
                f"ShellCheck: unusable output for {document.uri} (exit {result.returncode}): {exc}\n"
                f"out:\n{result.stdout}\nerr:\n{result.stderr}"
            )
            return []


__all__ = ["DISABLED_MESSAGE", "Linter"]
