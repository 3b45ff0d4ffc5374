from __future__ import annotations

import os
import re
from typing import Iterable

from .errors import InvalidName

_DIGITS = re.compile(r"[0-9]+")
_CHUNKS = re.compile(r"([0-9]+)")


def split_extension(name: str) -> tuple[str, str]:
    """
    Split a filename into (stem, extension), keeping the dot in the extension.

    Dotfiles have no extension:
        >>> split_extension(".jpg")
        ('.jpg', '')
        >>> split_extension("IMG_1.JPG")
        ('IMG_1', '.JPG')
    """
    return os.path.splitext(name)


def extension_of(name: str) -> str:
    return split_extension(name)[1].lower()


def is_image(name: str, extensions: Iterable[str]) -> bool:
    return extension_of(name) in set(extensions)


def parse_number(name: str) -> int:
    """
    Return the integer value of a purely numeric stem.

    Examples:
        >>> parse_number("001.webp")
        1
        >>> parse_number("photo20.jpg")
        Traceback (most recent call last):
        ...
        photostream.domain.errors.InvalidName: Not a numeric filename: photo20.jpg
    """
    stem, _ = split_extension(name)
    if not _DIGITS.fullmatch(stem):
        raise InvalidName(f"Not a numeric filename: {name}")
    return int(stem)


def format_number(number: int, width: int = 0) -> str:
    """
    Render a number for use as a filename stem.

        >>> format_number(20)
        '20'
        >>> format_number(20, 3)
        '020'
    """
    if not width:
        return str(number)
    return str(number).zfill(width)


def natural_sort_key(name: str) -> tuple:
    """
    Case-insensitive, numeric-aware sort key ("file9" < "file10").

    Digit runs compare by value and sort ahead of text. The raw name is the
    final tiebreak so that the order is total.
    """
    chunks = []
    for part in _CHUNKS.split(name):
        if not part:
            continue
        if _DIGITS.fullmatch(part):
            chunks.append((0, int(part), ""))
        else:
            chunks.append((1, 0, part.casefold()))
    return tuple(chunks), name
