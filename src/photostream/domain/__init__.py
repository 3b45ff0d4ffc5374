from .allocator import allocate, target_name
from .classifier import classify, is_numbered, is_protected, reserved_numbers
from .config import DEFAULT_EXTENSIONS, RenumberConfig
from .errors import CollisionDetected, InvalidName, IOFailure
from .manifest import build_manifest, order_entries, render_manifest
from .models import (
    Classification,
    FileEntry,
    ManifestEntry,
    ProtectedRange,
    RenamePair,
    RenameState,
    RenumberPlan,
    RunResult,
    StagedRename,
)
from .naming import format_number, is_image, natural_sort_key, parse_number

__all__ = [
    "Classification",
    "CollisionDetected",
    "DEFAULT_EXTENSIONS",
    "FileEntry",
    "IOFailure",
    "InvalidName",
    "ManifestEntry",
    "ProtectedRange",
    "RenamePair",
    "RenameState",
    "RenumberConfig",
    "RenumberPlan",
    "RunResult",
    "StagedRename",
    "allocate",
    "build_manifest",
    "classify",
    "format_number",
    "is_image",
    "is_numbered",
    "is_protected",
    "natural_sort_key",
    "order_entries",
    "parse_number",
    "render_manifest",
    "reserved_numbers",
    "target_name",
]
