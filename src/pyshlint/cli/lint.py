# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command linting shell scripts through ShellCheck."""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from pathlib import Path
from typing import Annotated, Final

import typer

from pyshlint.config import ConfigError, load_settings
from pyshlint.core.logging import ConsoleLinterLogger, fail, ok
from pyshlint.core.models import TextDocument, WorkspaceFolder
from pyshlint.linting.linter import Linter

from ._lint_reporting import FileReport, OutputFormat, has_blocking_diagnostics, render_reports

EXIT_CLEAN: Final[int] = 0
EXIT_DIAGNOSTICS: Final[int] = 1
EXIT_FAILURE: Final[int] = 2


def _load_documents(paths: Sequence[Path], *, use_emoji: bool) -> tuple[list[tuple[Path, TextDocument]], bool]:
    documents: list[tuple[Path, TextDocument]] = []
    failed = False
    for path in paths:
        try:
            documents.append((path, TextDocument.from_path(path)))
        except (OSError, UnicodeDecodeError) as exc:
            fail(f"Unable to read {path}: {exc}", use_emoji=use_emoji)
            failed = True
    return documents, failed


async def _lint_documents(
    linter: Linter,
    documents: Sequence[tuple[Path, TextDocument]],
    folders: Sequence[WorkspaceFolder],
) -> list[FileReport]:
    results = await asyncio.gather(*(linter.lint(document, folders) for _, document in documents))
    return [
        FileReport(path=path, uri=document.uri, diagnostics=diagnostics)
        for (path, document), diagnostics in zip(documents, results, strict=True)
    ]


def lint_command(
    paths: Annotated[list[Path], typer.Argument(help="Shell scripts to lint.")],
    shellcheck_path: Annotated[
        str | None,
        typer.Option("--shellcheck-path", help="ShellCheck executable (overrides SHELLCHECK_PATH)."),
    ] = None,
    cwd: Annotated[
        Path | None,
        typer.Option("--cwd", help="Base directory for resolving sourced files."),
    ] = None,
    workspace_folders: Annotated[
        list[Path] | None,
        typer.Option("--workspace-folder", "-w", help="Additional directory searched for sourced files."),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", case_sensitive=False, help="Diagnostic output format."),
    ] = OutputFormat.TEXT,
    no_emoji: Annotated[bool, typer.Option("--no-emoji", help="Disable emoji in log output.")] = False,
    debug: Annotated[bool, typer.Option("--debug", help="Log the ShellCheck command lines.")] = False,
) -> None:
    """Lint shell scripts and print their diagnostics."""

    use_emoji = not no_emoji
    try:
        settings = load_settings()
    except ConfigError as exc:
        fail(str(exc), use_emoji=use_emoji)
        raise typer.Exit(code=EXIT_FAILURE) from exc
    if shellcheck_path is not None:
        settings.shellcheck_path = shellcheck_path or None

    logger = ConsoleLinterLogger(use_emoji=use_emoji, debug_enabled=debug)
    linter = Linter(settings.to_linter_config(logger=logger, cwd=cwd.resolve() if cwd else None))
    if not linter.can_lint:
        fail("No ShellCheck executable configured.", use_emoji=use_emoji)
        raise typer.Exit(code=EXIT_FAILURE)

    documents, read_failed = _load_documents(paths, use_emoji=use_emoji)
    folders = [WorkspaceFolder.from_path(folder) for folder in workspace_folders or []]
    reports = asyncio.run(_lint_documents(linter, documents, folders))

    if not linter.can_lint:
        raise typer.Exit(code=EXIT_FAILURE)
    render_reports(reports, output_format)
    if read_failed:
        raise typer.Exit(code=EXIT_FAILURE)
    if has_blocking_diagnostics(reports):
        raise typer.Exit(code=EXIT_DIAGNOSTICS)
    if output_format is OutputFormat.TEXT and not any(report.diagnostics for report in reports):
        ok(f"No issues found in {len(reports)} file(s).", use_emoji=use_emoji)
    raise typer.Exit(code=EXIT_CLEAN)


__all__ = ["EXIT_CLEAN", "EXIT_DIAGNOSTICS", "EXIT_FAILURE", "lint_command"]
