from __future__ import annotations

from typing import Iterable

from photostream.domain.models import FileEntry
from photostream.domain.naming import is_image
from photostream.ports.filesystem_port import FilesystemPort


def scan_photos(filesystem: FilesystemPort, extensions: Iterable[str]) -> list[FileEntry]:
    extensions = set(extensions)
    return [
        FileEntry.from_name(name)
        for name in filesystem.list_file_names()
        if is_image(name, extensions)
    ]
