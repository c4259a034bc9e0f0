# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands."""

from __future__ import annotations

from .lint import lint_command
from .typer_ext import create_typer

app = create_typer(help="ShellCheck adapter producing language-server diagnostics.", no_args_is_help=True)
app.command("lint")(lint_command)


@app.callback()
def main() -> None:
    """Lint shell scripts with ShellCheck."""


__all__ = ["app"]
