# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity related types and helpers."""

from __future__ import annotations

from enum import IntEnum
from typing import Final


class DiagnosticSeverity(IntEnum):
    """Severity tiers understood by language-server hosts."""

    ERROR = 1
    WARNING = 2
    INFORMATION = 3
    HINT = 4


class UnknownShellCheckLevelError(ValueError):
    """Raised when ShellCheck reports a level outside the known vocabulary."""

    def __init__(self, level: str) -> None:
        """Initialise the error with the offending ``level``.

        Args:
            level: Level string reported by ShellCheck.
        """

        super().__init__(f"unknown ShellCheck level '{level}'")
        self.level = level


SHELLCHECK_LEVEL_TO_SEVERITY: Final[dict[str, DiagnosticSeverity]] = {
    "error": DiagnosticSeverity.ERROR,
    "warning": DiagnosticSeverity.WARNING,
    "info": DiagnosticSeverity.INFORMATION,
    "style": DiagnosticSeverity.HINT,
}

_SEVERITY_LABELS: Final[dict[DiagnosticSeverity, str]] = {
    DiagnosticSeverity.ERROR: "error",
    DiagnosticSeverity.WARNING: "warning",
    DiagnosticSeverity.INFORMATION: "info",
    DiagnosticSeverity.HINT: "hint",
}


def severity_from_level(level: str) -> DiagnosticSeverity:
    """Translate a ShellCheck ``level`` into a :class:`DiagnosticSeverity`.

    Args:
        level: Level string taken from a validated ShellCheck comment.

    Returns:
        DiagnosticSeverity: Severity tier matching ``level``.

    Raises:
        UnknownShellCheckLevelError: If ``level`` is not part of the known vocabulary.
    """

    try:
        return SHELLCHECK_LEVEL_TO_SEVERITY[level]
    except KeyError as exc:
        raise UnknownShellCheckLevelError(level) from exc


def severity_label(severity: DiagnosticSeverity) -> str:
    """Return the lower-case label used when rendering ``severity``."""

    return _SEVERITY_LABELS[severity]


__all__ = [
    "SHELLCHECK_LEVEL_TO_SEVERITY",
    "DiagnosticSeverity",
    "UnknownShellCheckLevelError",
    "severity_from_level",
    "severity_label",
]
