# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data models shared across the pyshlint package."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field
from typing_extensions import TypeAliasType

from pyshlint.core.severity import DiagnosticSeverity

JsonScalar = TypeAliasType("JsonScalar", str | int | float | bool | None)
JsonValue = TypeAliasType("JsonValue", "JsonScalar | list[JsonValue] | dict[str, JsonValue]")


class Position(BaseModel):
    """Zero-based line and character offset within a document."""

    model_config = ConfigDict(frozen=True)

    line: int
    character: int


class Range(BaseModel):
    """Span between two positions using the host's range convention."""

    model_config = ConfigDict(frozen=True)

    start: Position
    end: Position


class CodeDescription(BaseModel):
    """Link to documentation describing a diagnostic code."""

    model_config = ConfigDict(frozen=True)

    href: str


class Diagnostic(BaseModel):
    """Host-facing diagnostic produced from a validated ShellCheck comment."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    range: Range
    severity: DiagnosticSeverity
    code: str
    code_description: CodeDescription = Field(alias="codeDescription")
    message: str
    source: str
    tags: tuple[int, ...] | None = None

    def to_lsp(self) -> dict[str, JsonValue]:
        """Return the camelCase mapping expected by language-server clients.

        Returns:
            dict[str, JsonValue]: JSON-compatible diagnostic payload. ``tags`` is
            omitted while unset.
        """

        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class WorkspaceFolder(BaseModel):
    """Project root advertised by the host for the duration of a call."""

    model_config = ConfigDict(frozen=True)

    uri: str
    name: str

    @classmethod
    def from_path(cls, path: Path, *, name: str | None = None) -> WorkspaceFolder:
        """Build a folder entry from a local directory.

        Args:
            path: Directory on the local filesystem.
            name: Optional display name; defaults to the directory name.

        Returns:
            WorkspaceFolder: Folder addressed through a ``file:`` URI.
        """

        resolved = path.resolve()
        return cls(uri=resolved.as_uri(), name=name or resolved.name)


class TextDocument(BaseModel):
    """In-memory snapshot of a document, including unsaved edits."""

    model_config = ConfigDict(frozen=True)

    uri: str
    text: str
    language_id: str = "shellscript"

    def line_at(self, index: int) -> str:
        """Return the zero-based line ``index`` or an empty string when out of range."""

        lines = self.text.splitlines()
        if 0 <= index < len(lines):
            return lines[index]
        return ""

    @classmethod
    def from_path(cls, path: Path) -> TextDocument:
        """Load ``path`` from disk into a document snapshot.

        Args:
            path: Shell script to read.

        Returns:
            TextDocument: Snapshot addressed through a ``file:`` URI.

        Raises:
            OSError: If the file cannot be read.
        """

        resolved = path.resolve()
        return cls(uri=resolved.as_uri(), text=resolved.read_text(encoding="utf-8"))


__all__ = [
    "CodeDescription",
    "Diagnostic",
    "JsonScalar",
    "JsonValue",
    "Position",
    "Range",
    "TextDocument",
    "WorkspaceFolder",
]
