# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""ShellCheck invocation, validation and diagnostic mapping."""

from __future__ import annotations

from .linter import Linter
from .mapping import map_shellcheck_comment, map_shellcheck_result
from .schema import ShellCheckComment, ShellCheckResult, ShellCheckSchemaError, assert_shellcheck_result

__all__ = [
    "Linter",
    "ShellCheckComment",
    "ShellCheckResult",
    "ShellCheckSchemaError",
    "assert_shellcheck_result",
    "map_shellcheck_comment",
    "map_shellcheck_result",
]
