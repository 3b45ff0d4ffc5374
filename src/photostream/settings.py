from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping

from photostream.domain.config import DEFAULT_EXTENSIONS, RenumberConfig
from photostream.domain.models import ProtectedRange

PHOTOS_DIR = "./photos"
MANIFEST_PATH = "./photoStream.generated.js"
MANIFEST_SRC_PREFIX = "./photos"
MANIFEST_LABEL = "❤️"
PROTECT_MIN = 1
PROTECT_MAX = 19
START_NUMBER = 20
# 0 keeps plain names (20.jpg); 3 gives 020.jpg.
ZERO_PAD_WIDTH = 0

_TRUE_VALUES = {"1", "true", "yes", "on"}


def load_config(env: Mapping[str, str] | None = None) -> RenumberConfig:
    """Build the run configuration from environment variables over the defaults above."""
    env = os.environ if env is None else env
    extensions_raw = env.get("IMAGE_EXTENSIONS", "")
    extensions = (
        frozenset(part for part in extensions_raw.split(",") if part.strip())
        if extensions_raw.strip()
        else DEFAULT_EXTENSIONS
    )
    return RenumberConfig(
        photos_dir=Path(env.get("PHOTOS_DIR", PHOTOS_DIR)),
        manifest_path=Path(env.get("MANIFEST_PATH", MANIFEST_PATH)),
        src_prefix=env.get("MANIFEST_SRC_PREFIX", MANIFEST_SRC_PREFIX),
        label=env.get("MANIFEST_LABEL", MANIFEST_LABEL),
        extensions=extensions,
        protected_range=ProtectedRange(
            _get_int(env, "PROTECT_MIN", PROTECT_MIN),
            _get_int(env, "PROTECT_MAX", PROTECT_MAX),
        ),
        start_number=_get_int(env, "START_NUMBER", START_NUMBER),
        zero_pad_width=_get_int(env, "ZERO_PAD_WIDTH", ZERO_PAD_WIDTH),
        dry_run=env.get("DRY_RUN", "").strip().lower() in _TRUE_VALUES,
    )


def _get_int(env: Mapping[str, str], key: str, default: int) -> int:
    raw = env.get(key, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{key} must be an integer, got {raw!r}") from exc
