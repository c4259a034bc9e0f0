# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Rendering helpers for the lint CLI."""

from __future__ import annotations

import json
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

import typer

from pyshlint.core.models import Diagnostic
from pyshlint.core.severity import DiagnosticSeverity, severity_label


class OutputFormat(str, Enum):
    """Formats supported by ``pyshlint lint``."""

    TEXT = "text"
    JSON = "json"


@dataclass(slots=True, frozen=True)
class FileReport:
    """Diagnostics produced for one linted file."""

    path: Path
    uri: str
    diagnostics: list[Diagnostic]


def format_diagnostic(path: Path, diagnostic: Diagnostic) -> str:
    """Return ``path:line:col: severity [code] message`` with 1-based coordinates."""

    start = diagnostic.range.start
    label = severity_label(diagnostic.severity)
    return f"{path}:{start.line + 1}:{start.character + 1}: {label} [{diagnostic.code}] {diagnostic.message}"


def render_reports(reports: Sequence[FileReport], output_format: OutputFormat) -> None:
    """Write ``reports`` to stdout in ``output_format``."""

    if output_format is OutputFormat.JSON:
        payload = [
            {"uri": report.uri, "diagnostics": [diag.to_lsp() for diag in report.diagnostics]} for report in reports
        ]
        typer.echo(json.dumps(payload, indent=2))
        return
    for report in reports:
        for diagnostic in report.diagnostics:
            typer.echo(format_diagnostic(report.path, diagnostic))


def has_blocking_diagnostics(reports: Sequence[FileReport]) -> bool:
    """Return ``True`` when any diagnostic is an error or a warning."""

    return any(
        diagnostic.severity <= DiagnosticSeverity.WARNING for report in reports for diagnostic in report.diagnostics
    )


__all__ = [
    "FileReport",
    "OutputFormat",
    "format_diagnostic",
    "has_blocking_diagnostics",
    "render_reports",
]
