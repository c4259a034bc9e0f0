# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Logging capability injected into the linter."""

# pylint: disable=too-few-public-methods -- Protocol definitions intentionally expose minimal method surfaces.

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol, runtime_checkable


@runtime_checkable
class LinterLogger(Protocol):
    """Protocol describing the log sinks consumed by :class:`~pyshlint.linting.linter.Linter`."""

    __slots__ = ()

    @abstractmethod
    def warn(self, message: str) -> None:
        """Record a warning ``message``.

        Args:
            message: Message string describing the degraded condition.
        """

    @abstractmethod
    def error(self, message: str) -> None:
        """Record an error ``message``.

        Args:
            message: Message string describing the failure.
        """

    @abstractmethod
    def debug(self, message: str) -> None:
        """Record a debug ``message``.

        Args:
            message: Message string describing internal progress.
        """


__all__ = ["LinterLogger"]
