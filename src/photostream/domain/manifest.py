from __future__ import annotations

import json
from typing import Iterable

from .config import RenumberConfig
from .models import FileEntry, ManifestEntry

MANIFEST_EXPORT_NAME = "PHOTO_STREAM"


def order_entries(entries: Iterable[FileEntry]) -> list[FileEntry]:
    """
    Numeric names first by value, then everything else in natural order.

    Equal numbers (``1.jpg`` and ``01.png``) fall back to natural order so the
    result is total for any snapshot.
    """
    numbered: list[FileEntry] = []
    other: list[FileEntry] = []
    for entry in entries:
        if entry.number is not None:
            numbered.append(entry)
        else:
            other.append(entry)
    numbered.sort(key=lambda entry: (entry.number, entry.sort_key))
    other.sort(key=lambda entry: entry.sort_key)
    return numbered + other


def build_manifest(entries: Iterable[FileEntry], config: RenumberConfig) -> list[ManifestEntry]:
    return [
        ManifestEntry(src=config.manifest_src(entry.name), label=config.label)
        for entry in order_entries(entries)
    ]


def render_manifest(
    items: list[ManifestEntry], generated_at: str, config: RenumberConfig
) -> str:
    payload = json.dumps(
        [{"src": item.src, "label": item.label} for item in items],
        indent=2,
        ensure_ascii=False,
    )
    lines = [
        "// AUTO-GENERATED FILE. Do not edit manually.",
        f"// Generated at: {generated_at}",
        f"// Protected: {config.protected_range} (unchanged)",
        f"// Renumbered from: {config.start_number} (only non-numeric names)",
        "",
        f"export const {MANIFEST_EXPORT_NAME} = {payload};",
    ]
    return "\n".join(lines) + "\n"
