# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared logging helpers and the console-backed linter logger."""

from __future__ import annotations

import re
from dataclasses import dataclass

from rich.text import Text

from pyshlint.runtime.console.manager import detect_tty, get_console_manager

from .public import emoji, fail, ok, warn

_KEY_VALUE_RE = re.compile(r"([\w-]+)=(\".*?\"|\S+)")


@dataclass(slots=True)
class ConsoleLinterLogger:
    """Adapter around the console helpers satisfying :class:`LinterLogger`."""

    use_emoji: bool = True
    use_color: bool | None = None
    debug_enabled: bool = False

    def warn(self, message: str) -> None:
        """Log a warning message honouring emoji preferences."""

        warn(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def error(self, message: str) -> None:
        """Log an error message honouring emoji preferences."""

        fail(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def debug(self, message: str) -> None:
        """Emit a debug message when debug logging is enabled.

        Args:
            message: Debug payload rendered with simple key/value highlighting.
        """

        if not self.debug_enabled:
            return
        text = Text("[debug] ", style="bold cyan")
        cursor = 0
        for match in _KEY_VALUE_RE.finditer(message):
            start, end = match.span()
            if start > cursor:
                text.append(message[cursor:start], style="dim")
            key, raw_value = match.group(1), match.group(2)
            text.append(key, style="bold magenta")
            text.append("=", style="dim")
            text.append(raw_value, style="bold blue" if key in {"command", "cmd"} else "bold green")
            cursor = end
        if cursor < len(message):
            text.append(message[cursor:], style="dim")
        color = detect_tty() if self.use_color is None else self.use_color
        get_console_manager().get(color=color, emoji=self.use_emoji).print(text)


__all__ = [
    "ConsoleLinterLogger",
    "emoji",
    "fail",
    "ok",
    "warn",
]
