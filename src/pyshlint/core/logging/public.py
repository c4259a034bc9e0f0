# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Console output for linter status lines written to stderr.

The CLI reports its outcome with :func:`ok` and :func:`fail`, while
:class:`~pyshlint.core.logging.ConsoleLinterLogger` routes ShellCheck warnings
and errors through :func:`warn` and :func:`fail`.
"""

from __future__ import annotations

from rich.text import Text

from pyshlint.runtime.console.manager import detect_tty, get_console_manager


def emoji(symbol: str, enable: bool) -> str:
    """Return ``symbol`` when emoji prefixes are enabled, else an empty string."""

    return symbol if enable else ""


def _print_line(
    msg: str,
    *,
    style: str | None,
    use_emoji: bool,
    use_color: bool | None = None,
) -> None:
    """Write one status line to the shared stderr console.

    Args:
        msg: Line to write, emoji prefix included.
        style: Rich style applied only when colour is active.
        use_emoji: Selects the console preset with emoji rendering.
        use_color: Forces colour on or off; ``None`` follows stderr's TTY state.
    """

    color_enabled = detect_tty() if use_color is None else use_color
    console = get_console_manager().get(color=color_enabled, emoji=use_emoji)
    text = Text(msg)
    if style and color_enabled:
        text.stylize(style)
    console.print(text)


def ok(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Report a clean lint run."""

    prefix = emoji("✅ ", use_emoji)
    _print_line(f"{prefix}{msg}", style="green", use_emoji=use_emoji, use_color=use_color)


def warn(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Report a recoverable linter problem such as a timeout or a disabled executable."""

    prefix = emoji("⚠️ ", use_emoji)
    _print_line(f"{prefix}{msg}", style="yellow", use_emoji=use_emoji, use_color=use_color)


def fail(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Report unusable ShellCheck output, bad settings or an unreadable file."""

    prefix = emoji("❌ ", use_emoji)
    _print_line(f"{prefix}{msg}", style="red", use_emoji=use_emoji, use_color=use_color)
