from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Callable, Iterable

from photostream.domain.config import RenumberConfig
from photostream.domain.manifest import build_manifest, render_manifest
from photostream.domain.models import FileEntry, ManifestEntry
from photostream.ports.filesystem_port import FilesystemPort
from photostream.services.scanner import scan_photos
from photostream.services.time_utils import iso_utc_millis, utc_now


class ManifestService:
    def __init__(
        self,
        filesystem: FilesystemPort,
        config: RenumberConfig,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._filesystem = filesystem
        self._config = config
        self._clock = clock

    def collect(self) -> list[ManifestEntry]:
        """Build manifest entries from a fresh listing of the photos directory."""
        return self.from_entries(scan_photos(self._filesystem, self._config.extensions))

    def from_entries(self, entries: Iterable[FileEntry]) -> list[ManifestEntry]:
        return build_manifest(entries, self._config)

    def render(self, items: list[ManifestEntry]) -> str:
        return render_manifest(items, iso_utc_millis(self._clock()), self._config)

    def write(self, items: list[ManifestEntry]) -> Path:
        path = self._config.manifest_path
        self._filesystem.write_text(path, self.render(items))
        return path
