from __future__ import annotations

import os
from pathlib import Path

from photostream.domain.errors import IOFailure
from photostream.ports.filesystem_port import FilesystemPort


class LocalFilesystemAdapter(FilesystemPort):
    def __init__(self, directory: Path) -> None:
        self._directory = Path(directory)

    @property
    def directory(self) -> Path:
        return self._directory

    def list_file_names(self) -> list[str]:
        try:
            with os.scandir(self._directory) as entries:
                return sorted(
                    entry.name for entry in entries if entry.is_file(follow_symlinks=False)
                )
        except OSError as exc:
            raise IOFailure(
                f"Failed to list {self._directory} while attempting to scan photos: {exc}"
            ) from exc

    def exists(self, name: str) -> bool:
        return os.path.lexists(self._directory / name)

    def rename(self, old_name: str, new_name: str) -> None:
        source = self._directory / old_name
        target = self._directory / new_name
        context = f"rename {old_name} -> {new_name}"
        if os.path.lexists(target):
            raise IOFailure(f"Target already exists while attempting to {context}.")
        try:
            os.rename(source, target)
        except OSError as exc:
            raise IOFailure(f"Failed while attempting to {context}: {exc}") from exc

    def write_text(self, path: Path, content: str) -> None:
        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise IOFailure(f"Failed while attempting to write {path}: {exc}") from exc
