from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .errors import InvalidName
from .naming import extension_of, natural_sort_key, parse_number


@dataclass(frozen=True)
class FileEntry:
    name: str
    extension: str
    number: int | None = None

    @classmethod
    def from_name(cls, name: str) -> FileEntry:
        try:
            number: int | None = parse_number(name)
        except InvalidName:
            number = None
        return cls(name=name, extension=extension_of(name), number=number)

    @property
    def sort_key(self) -> tuple:
        return natural_sort_key(self.name)


@dataclass(frozen=True)
class ProtectedRange:
    min: int
    max: int

    def __post_init__(self) -> None:
        if self.min > self.max:
            raise ValueError(f"Protected range is empty: {self.min}-{self.max}")

    def __contains__(self, number: object) -> bool:
        return isinstance(number, int) and self.min <= number <= self.max

    def __str__(self) -> str:
        return f"{self.min}-{self.max}"


@dataclass(frozen=True)
class RenamePair:
    original_name: str
    final_name: str


@dataclass(frozen=True)
class ManifestEntry:
    src: str
    label: str


class RenameState(str, Enum):
    PENDING = "PENDING"
    STAGED = "STAGED"
    COMMITTED = "COMMITTED"


@dataclass
class StagedRename:
    pair: RenamePair
    temp_name: str
    state: RenameState = RenameState.PENDING

    @property
    def current_name(self) -> str:
        """Name the file holds on disk right now."""
        if self.state is RenameState.PENDING:
            return self.pair.original_name
        if self.state is RenameState.STAGED:
            return self.temp_name
        return self.pair.final_name


@dataclass
class Classification:
    protected: list[FileEntry]
    numbered: list[FileEntry]
    candidates: list[FileEntry]


@dataclass
class RenumberPlan:
    entries: list[FileEntry]
    classification: Classification
    pairs: list[RenamePair]


@dataclass
class RunResult:
    protected: list[FileEntry]
    pairs: list[RenamePair]
    manifest: list[ManifestEntry]
    manifest_path: Path
    dry_run: bool = False
