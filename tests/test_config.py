# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for linter configuration and environment settings."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from pyshlint.config import ConfigError, LinterConfig, LinterSettings, load_settings
from pyshlint.core.logging import ConsoleLinterLogger
from pyshlint.process_utils import DEFAULT_TIMEOUT


def test_defaults_without_environment() -> None:
    settings = load_settings({})

    assert settings.shellcheck_path == "shellcheck"
    assert settings.shellcheck_arguments == []
    assert settings.timeout == DEFAULT_TIMEOUT


def test_reads_environment() -> None:
    settings = load_settings(
        {
            "SHELLCHECK_PATH": "/opt/bin/shellcheck",
            "SHELLCHECK_ARGUMENTS": "--exclude=SC2034 --severity 'warning'",
            "SHELLCHECK_TIMEOUT": "2.5",
        },
    )

    assert settings.shellcheck_path == "/opt/bin/shellcheck"
    assert settings.shellcheck_arguments == ["--exclude=SC2034", "--severity", "warning"]
    assert settings.timeout == 2.5


def test_empty_path_disables_linting() -> None:
    assert load_settings({"SHELLCHECK_PATH": "  "}).shellcheck_path is None


@pytest.mark.parametrize("raw", ["none", "off", ""])
def test_timeout_can_be_disabled(raw: str) -> None:
    assert load_settings({"SHELLCHECK_TIMEOUT": raw}).timeout is None


@pytest.mark.parametrize(
    "environ",
    [
        {"SHELLCHECK_TIMEOUT": "soon"},
        {"SHELLCHECK_TIMEOUT": "-1"},
        {"SHELLCHECK_TIMEOUT": "inf"},
        {"SHELLCHECK_ARGUMENTS": "--exclude 'SC2034"},
    ],
)
def test_invalid_environment_raises_config_error(environ: dict[str, str]) -> None:
    with pytest.raises(ConfigError):
        load_settings(environ)


def test_to_linter_config(logger, tmp_path: Path) -> None:
    settings = LinterSettings(shellcheck_arguments=["-x"], timeout=None)

    config = settings.to_linter_config(logger=logger, cwd=tmp_path)

    assert config.executable_path == "shellcheck"
    assert config.cwd == tmp_path
    assert config.logger is logger
    assert config.arguments == ("-x",)
    assert config.timeout is None


def test_linter_config_is_frozen_and_defaults_logger() -> None:
    config = LinterConfig(executable_path="shellcheck")

    assert isinstance(config.logger, ConsoleLinterLogger)
    with pytest.raises(ValidationError):
        config.executable_path = "other"  # type: ignore[misc]


def test_linter_config_rejects_negative_timeout() -> None:
    with pytest.raises(ValidationError):
        LinterConfig(executable_path="shellcheck", timeout=-1)
