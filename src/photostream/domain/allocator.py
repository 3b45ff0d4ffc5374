from __future__ import annotations

from typing import Callable, Iterable

from .errors import CollisionDetected
from .models import FileEntry, ProtectedRange, RenamePair
from .naming import format_number


def allocate(
    candidates: Iterable[FileEntry],
    start_number: int,
    reserved: set[int],
    exists: Callable[[str], bool],
    zero_pad_width: int = 0,
    protected_range: ProtectedRange | None = None,
) -> list[RenamePair]:
    """
    Assign ascending free numbers to candidates, in the order given.

    ``reserved`` is updated in place with every number handed out or found
    taken. ``exists`` is consulted for each target name so that a file which
    appeared after scanning is skipped, never overwritten.
    The cursor jumps over ``protected_range`` so new names never land in it.

    Example:
        reserved = {5, 20}
        allocate([beach.jpg, vacation.png], 20, reserved, lambda name: False)
        # [RenamePair('beach.jpg', '21.jpg'), RenamePair('vacation.png', '22.png')]
    """
    pairs: list[RenamePair] = []
    cursor = start_number
    for entry in candidates:
        while True:
            while cursor in reserved or (
                protected_range is not None and cursor in protected_range
            ):
                cursor = _next_free(cursor, protected_range)
            try:
                target = _claim(entry, cursor, exists, zero_pad_width)
            except CollisionDetected as exc:
                reserved.add(exc.number)
                cursor += 1
                continue
            break
        reserved.add(cursor)
        cursor += 1
        pairs.append(RenamePair(original_name=entry.name, final_name=target))
    return pairs


def _next_free(cursor: int, protected_range: ProtectedRange | None) -> int:
    if protected_range is not None and cursor in protected_range:
        return protected_range.max + 1
    return cursor + 1


def target_name(entry: FileEntry, number: int, zero_pad_width: int = 0) -> str:
    return f"{format_number(number, zero_pad_width)}{entry.extension}"


def _claim(
    entry: FileEntry, number: int, exists: Callable[[str], bool], zero_pad_width: int
) -> str:
    name = target_name(entry, number, zero_pad_width)
    if exists(name):
        raise CollisionDetected(name, number)
    return name
