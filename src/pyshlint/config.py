# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models and helpers for the pyshlint adapter."""

from __future__ import annotations

import math
import os
import shlex
from collections.abc import Mapping
from pathlib import Path
from typing import Final

from pydantic import BaseModel, ConfigDict, Field

from pyshlint.core.logging import ConsoleLinterLogger
from pyshlint.interfaces.logger import LinterLogger
from pyshlint.process_utils import DEFAULT_TIMEOUT

SHELLCHECK_PATH_ENV: Final[str] = "SHELLCHECK_PATH"
SHELLCHECK_ARGUMENTS_ENV: Final[str] = "SHELLCHECK_ARGUMENTS"
SHELLCHECK_TIMEOUT_ENV: Final[str] = "SHELLCHECK_TIMEOUT"
DEFAULT_SHELLCHECK_PATH: Final[str] = "shellcheck"


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class LinterConfig(BaseModel):
    """Construction parameters owned by a single :class:`~pyshlint.linting.linter.Linter`."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    executable_path: str | None = None
    cwd: Path | None = None
    logger: LinterLogger = Field(default_factory=ConsoleLinterLogger)
    arguments: tuple[str, ...] = Field(default_factory=tuple)
    timeout: float | None = Field(default=DEFAULT_TIMEOUT, ge=0)


class LinterSettings(BaseModel):
    """User-facing settings, typically sourced from the environment."""

    model_config = ConfigDict(validate_assignment=True)

    shellcheck_path: str | None = DEFAULT_SHELLCHECK_PATH
    shellcheck_arguments: list[str] = Field(default_factory=list)
    timeout: float | None = Field(default=DEFAULT_TIMEOUT, ge=0)

    def to_linter_config(self, *, logger: LinterLogger, cwd: Path | None = None) -> LinterConfig:
        """Return the :class:`LinterConfig` described by these settings.

        Args:
            logger: Log sink handed to the linter.
            cwd: Optional base directory for resolving sourced files.

        Returns:
            LinterConfig: Immutable construction parameters.
        """

        return LinterConfig(
            executable_path=self.shellcheck_path,
            cwd=cwd,
            logger=logger,
            arguments=tuple(self.shellcheck_arguments),
            timeout=self.timeout,
        )


def _parse_arguments(raw: str) -> list[str]:
    try:
        return shlex.split(raw)
    except ValueError as exc:
        raise ConfigError(f"{SHELLCHECK_ARGUMENTS_ENV} could not be parsed: {exc}") from exc


def _parse_timeout(raw: str) -> float | None:
    text = raw.strip().lower()
    if text in {"", "none", "off"}:
        return None
    try:
        value = float(text)
    except ValueError as exc:
        raise ConfigError(f"{SHELLCHECK_TIMEOUT_ENV} must be a number of seconds, got '{raw}'") from exc
    if value < 0 or not math.isfinite(value):
        raise ConfigError(f"{SHELLCHECK_TIMEOUT_ENV} must be a non-negative finite number, got '{raw}'")
    return value


def load_settings(environ: Mapping[str, str] | None = None) -> LinterSettings:
    """Build :class:`LinterSettings` from environment variables.

    ``SHELLCHECK_PATH`` set to an empty string disables linting. ``SHELLCHECK_ARGUMENTS``
    is split with shell quoting rules. ``SHELLCHECK_TIMEOUT`` accepts seconds or
    ``none`` to disable the bound.

    Args:
        environ: Mapping to read from; defaults to :data:`os.environ`.

    Returns:
        LinterSettings: Settings with defaults applied for unset variables.

    Raises:
        ConfigError: If a variable holds an unparsable value.
    """

    env = os.environ if environ is None else environ
    settings = LinterSettings()
    if SHELLCHECK_PATH_ENV in env:
        settings.shellcheck_path = env[SHELLCHECK_PATH_ENV].strip() or None
    if SHELLCHECK_ARGUMENTS_ENV in env:
        settings.shellcheck_arguments = _parse_arguments(env[SHELLCHECK_ARGUMENTS_ENV])
    if SHELLCHECK_TIMEOUT_ENV in env:
        settings.timeout = _parse_timeout(env[SHELLCHECK_TIMEOUT_ENV])
    return settings


__all__ = [
    "DEFAULT_SHELLCHECK_PATH",
    "ConfigError",
    "LinterConfig",
    "LinterSettings",
    "load_settings",
]
