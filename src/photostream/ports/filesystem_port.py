from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class FilesystemPort(Protocol):
    def list_file_names(self) -> list[str]:
        """Return names of regular files in the photos directory."""

    def exists(self, name: str) -> bool:
        """Return True if any entry with this name is present in the photos directory."""

    def rename(self, old_name: str, new_name: str) -> None:
        """Rename a file within the photos directory. Never replaces an existing entry."""

    def write_text(self, path: Path, content: str) -> None:
        """Write a UTF-8 text file at an arbitrary path."""
