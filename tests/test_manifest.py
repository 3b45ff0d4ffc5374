from datetime import datetime, timedelta, timezone
from pathlib import Path

from photostream.domain.config import RenumberConfig
from photostream.domain.manifest import build_manifest, order_entries, render_manifest
from photostream.domain.models import FileEntry, ManifestEntry
from photostream.services.time_utils import iso_utc_millis


def _entries(*names: str) -> list[FileEntry]:
    return [FileEntry.from_name(name) for name in names]


def test_order_entries_numeric_first_then_natural() -> None:
    entries = _entries("file10.jpg", "20.jpg", "file9.jpg", "3.jpg", "1.png")

    ordered = [entry.name for entry in order_entries(entries)]

    assert ordered == ["1.png", "3.jpg", "20.jpg", "file9.jpg", "file10.jpg"]


def test_order_entries_is_total_for_equal_numbers() -> None:
    forward = order_entries(_entries("01.png", "1.jpg", "2.gif"))
    backward = order_entries(_entries("2.gif", "1.jpg", "01.png"))

    assert [entry.name for entry in forward] == ["1.jpg", "01.png", "2.gif"]
    assert forward == backward


def test_build_manifest_uses_prefix_and_label() -> None:
    config = RenumberConfig(src_prefix="./photos/", label="x")

    items = build_manifest(_entries("3.jpg", "1.png", "20.jpg"), config)

    assert items == [
        ManifestEntry(src="./photos/1.png", label="x"),
        ManifestEntry(src="./photos/3.jpg", label="x"),
        ManifestEntry(src="./photos/20.jpg", label="x"),
    ]


def test_render_manifest_layout() -> None:
    config = RenumberConfig(manifest_path=Path("out.js"))
    items = [ManifestEntry(src="./photos/1.png", label="❤️")]

    content = render_manifest(items, "2025-01-01T12:00:00.000Z", config)

    assert content == (
        "// AUTO-GENERATED FILE. Do not edit manually.\n"
        "// Generated at: 2025-01-01T12:00:00.000Z\n"
        "// Protected: 1-19 (unchanged)\n"
        "// Renumbered from: 20 (only non-numeric names)\n"
        "\n"
        "export const PHOTO_STREAM = [\n"
        "  {\n"
        '    "src": "./photos/1.png",\n'
        '    "label": "❤️"\n'
        "  }\n"
        "];\n"
    )


def test_render_manifest_empty_directory() -> None:
    content = render_manifest([], "2025-01-01T12:00:00.000Z", RenumberConfig())

    assert content.endswith("export const PHOTO_STREAM = [];\n")


def test_iso_utc_millis_converts_to_utc() -> None:
    kyiv = timezone(timedelta(hours=2))
    moment = datetime(2025, 1, 1, 14, 0, 0, 123456, tzinfo=kyiv)

    assert iso_utc_millis(moment) == "2025-01-01T12:00:00.123Z"
    assert iso_utc_millis(datetime(2025, 1, 1)) == "2025-01-01T00:00:00.000Z"
