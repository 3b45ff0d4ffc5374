from __future__ import annotations

from typing import Iterable

from .models import Classification, FileEntry, ProtectedRange


def is_numbered(entry: FileEntry) -> bool:
    return entry.number is not None


def is_protected(entry: FileEntry, protected_range: ProtectedRange) -> bool:
    return entry.number is not None and entry.number in protected_range


def reserved_numbers(entries: Iterable[FileEntry]) -> set[int]:
    """Every number already held by a numeric filename, protected or not."""
    return {entry.number for entry in entries if entry.number is not None}


def classify(entries: Iterable[FileEntry], protected_range: ProtectedRange) -> Classification:
    """
    Partition entries into protected, numbered and renumber candidates.

    Numbered files outside the protected range are left where they are; only
    non-numeric names are candidates. Candidates come back in natural order.

    Example:
        entries = [FileEntry.from_name(n) for n in ["5.jpg", "b.jpg", "a.png", "40.gif"]]
        classify(entries, ProtectedRange(1, 19))
        # protected=[5.jpg], numbered=[5.jpg, 40.gif], candidates=[a.png, b.jpg]
    """
    entries = list(entries)
    protected = [entry for entry in entries if is_protected(entry, protected_range)]
    numbered = [entry for entry in entries if is_numbered(entry)]
    candidates = sorted(
        (entry for entry in entries if not is_numbered(entry)),
        key=lambda entry: entry.sort_key,
    )
    return Classification(protected=protected, numbered=numbered, candidates=candidates)
