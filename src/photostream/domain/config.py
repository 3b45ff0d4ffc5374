from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .models import ProtectedRange

DEFAULT_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png", ".webp", ".gif", ".avif"})


@dataclass(frozen=True)
class RenumberConfig:
    """
    Settings for a single renumbering run.

    photos_dir is the directory being renumbered. manifest_path is where the
    generated module is written, and each manifest entry references
    ``{src_prefix}/{name}``.
    """

    photos_dir: Path = Path("./photos")
    manifest_path: Path = Path("./photoStream.generated.js")
    src_prefix: str = "./photos"
    label: str = "❤️"
    extensions: frozenset[str] = field(default_factory=lambda: DEFAULT_EXTENSIONS)
    protected_range: ProtectedRange = field(default_factory=lambda: ProtectedRange(1, 19))
    start_number: int = 20
    zero_pad_width: int = 0
    dry_run: bool = False

    def __post_init__(self) -> None:
        if self.start_number < 0:
            raise ValueError(f"start_number must be >= 0, got {self.start_number}")
        if self.zero_pad_width < 0:
            raise ValueError(f"zero_pad_width must be >= 0, got {self.zero_pad_width}")
        if self.start_number in self.protected_range:
            raise ValueError(
                f"start_number {self.start_number} falls inside the protected range "
                f"{self.protected_range}"
            )
        normalized = frozenset(
            cleaned for cleaned in map(_normalize_extension, self.extensions) if cleaned
        )
        if not normalized:
            raise ValueError("At least one image extension is required.")
        object.__setattr__(self, "extensions", normalized)
        object.__setattr__(self, "photos_dir", Path(self.photos_dir))
        object.__setattr__(self, "manifest_path", Path(self.manifest_path))

    def manifest_src(self, name: str) -> str:
        prefix = self.src_prefix.rstrip("/")
        if not prefix:
            return name
        return f"{prefix}/{name}"


def _normalize_extension(ext: str) -> str:
    cleaned = ext.strip().lower()
    if not cleaned:
        return cleaned
    return cleaned if cleaned.startswith(".") else f".{cleaned}"
