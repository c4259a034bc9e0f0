# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Working directory and ``--source-path`` resolution for sourced scripts."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import urlparse
from urllib.request import url2pathname

from pyshlint.core.models import TextDocument, WorkspaceFolder

_FILE_SCHEME = "file"


@dataclass(slots=True, frozen=True)
class SourceResolution:
    """Directories handed to ShellCheck for resolving ``source`` directives."""

    cwd: Path
    source_paths: tuple[Path, ...]

    def arguments(self) -> list[str]:
        """Return the ``--source-path`` arguments in resolution order."""

        return [f"--source-path={path}" for path in self.source_paths]


def uri_to_path(uri: str) -> Path | None:
    """Convert a ``file:`` URI into a local path.

    Args:
        uri: URI advertised by the host.

    Returns:
        Path | None: Local path, or ``None`` when ``uri`` does not use the ``file``
        scheme or decodes to a path the operating system cannot represent.
    """

    parsed = urlparse(uri)
    if parsed.scheme != _FILE_SCHEME:
        return None
    netloc = f"//{parsed.netloc}" if parsed.netloc not in ("", "localhost") else ""
    decoded = url2pathname(netloc + parsed.path)
    if "\x00" in decoded:
        return None
    return Path(decoded)


def _document_directory(document: TextDocument) -> Path | None:
    path = uri_to_path(document.uri)
    if path is None:
        return None
    parent = path.parent
    return parent if parent.is_dir() else None


def resolve_sources(
    base_cwd: Path | None,
    document: TextDocument,
    workspace_folders: Sequence[WorkspaceFolder],
) -> SourceResolution:
    """Compute the working directory and search paths for one lint run.

    The working directory is the configured base directory, else the document's
    directory when it exists on disk, else the process working directory. It is
    always the first search path, followed by every ``file:`` workspace folder.

    Args:
        base_cwd: Base directory configured on the linter, if any.
        document: Document being linted.
        workspace_folders: Folders supplied by the host for this call.

    Returns:
        SourceResolution: Working directory and de-duplicated search paths.
    """

    cwd = base_cwd or _document_directory(document) or Path.cwd()
    candidates = [cwd]
    for folder in workspace_folders:
        folder_path = uri_to_path(folder.uri)
        if folder_path is not None:
            candidates.append(folder_path)

    seen: set[Path] = set()
    ordered: list[Path] = []
    for candidate in candidates:
        if candidate in seen:
            continue
        seen.add(candidate)
        ordered.append(candidate)
    return SourceResolution(cwd=cwd, source_paths=tuple(ordered))


__all__ = [
    "SourceResolution",
    "resolve_sources",
    "uri_to_path",
]
