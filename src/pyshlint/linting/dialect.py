# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shell dialect detection for choosing ShellCheck's ``--shell`` argument."""

from __future__ import annotations

import re
from pathlib import PurePosixPath
from typing import Final

SUPPORTED_DIALECTS: Final[frozenset[str]] = frozenset({"sh", "bash", "dash", "ksh"})
DEFAULT_DIALECT: Final[str] = "bash"

_SHEBANG_RE: Final[re.Pattern[str]] = re.compile(r"^#!\s*(?P<interpreter>\S+)(?:\s+(?P<args>.*))?$")
_DIRECTIVE_RE: Final[re.Pattern[str]] = re.compile(r"^\s*#\s*shellcheck\s+(?:.*\s)?shell=(?P<shell>[\w-]+)")


def _dialect_from_shebang(line: str) -> str | None:
    match = _SHEBANG_RE.match(line.strip())
    if match is None:
        return None
    interpreter = PurePosixPath(match.group("interpreter")).name
    if interpreter == "env":
        # `#!/usr/bin/env -S bash -e` and `#!/usr/bin/env bash` both name the shell
        # as the first non-option argument.
        for token in (match.group("args") or "").split():
            if not token.startswith("-"):
                return PurePosixPath(token).name
        return None
    return interpreter


def _dialect_from_directives(text: str) -> str | None:
    for line in text.splitlines():
        stripped = line.strip()
        if stripped and not stripped.startswith("#"):
            break
        match = _DIRECTIVE_RE.match(stripped)
        if match is not None:
            return match.group("shell")
    return None


def detect_dialect(text: str) -> str | None:
    """Return the shell named by ``text``'s header, if any.

    A ``# shellcheck shell=`` directive in the leading comment block takes
    precedence over the shebang.

    Args:
        text: Full document text.

    Returns:
        str | None: Interpreter name such as ``bash`` or ``zsh``; ``None`` when the
        document does not declare one.
    """

    directive = _dialect_from_directives(text)
    if directive is not None:
        return directive
    first_line = text.split("\n", 1)[0]
    return _dialect_from_shebang(first_line)


def shell_argument(text: str) -> str | None:
    """Return the ShellCheck ``--shell`` value for ``text``.

    Documents without a declared shell are linted as bash.

    Args:
        text: Full document text.

    Returns:
        str | None: Dialect to pass to ShellCheck, or ``None`` when the declared
        shell is one ShellCheck cannot analyse.
    """

    dialect = detect_dialect(text)
    if dialect is None:
        return DEFAULT_DIALECT
    if dialect in SUPPORTED_DIALECTS:
        return dialect
    return None


__all__ = [
    "DEFAULT_DIALECT",
    "SUPPORTED_DIALECTS",
    "detect_dialect",
    "shell_argument",
]
