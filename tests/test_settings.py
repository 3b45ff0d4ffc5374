from pathlib import Path

import pytest

from photostream.domain.config import DEFAULT_EXTENSIONS, RenumberConfig
from photostream.domain.models import ProtectedRange
from photostream.settings import load_config


def test_load_config_defaults() -> None:
    config = load_config({})

    assert config.photos_dir == Path("./photos")
    assert config.manifest_path == Path("./photoStream.generated.js")
    assert config.src_prefix == "./photos"
    assert config.label == "❤️"
    assert config.extensions == DEFAULT_EXTENSIONS
    assert config.protected_range == ProtectedRange(1, 19)
    assert config.start_number == 20
    assert config.zero_pad_width == 0
    assert config.dry_run is False


def test_load_config_reads_overrides() -> None:
    config = load_config(
        {
            "PHOTOS_DIR": "/srv/photos",
            "MANIFEST_PATH": "/srv/web/stream.js",
            "MANIFEST_SRC_PREFIX": "/img",
            "MANIFEST_LABEL": "photo",
            "IMAGE_EXTENSIONS": "JPG, png,,",
            "PROTECT_MIN": "0",
            "PROTECT_MAX": "9",
            "START_NUMBER": "10",
            "ZERO_PAD_WIDTH": "3",
            "DRY_RUN": "yes",
        }
    )

    assert config.photos_dir == Path("/srv/photos")
    assert config.manifest_path == Path("/srv/web/stream.js")
    assert config.manifest_src("1.jpg") == "/img/1.jpg"
    assert config.label == "photo"
    assert config.extensions == frozenset({".jpg", ".png"})
    assert config.protected_range == ProtectedRange(0, 9)
    assert config.start_number == 10
    assert config.zero_pad_width == 3
    assert config.dry_run is True


def test_load_config_rejects_non_integer() -> None:
    with pytest.raises(ValueError, match="START_NUMBER must be an integer"):
        load_config({"START_NUMBER": "twenty"})


def test_load_config_rejects_inverted_range() -> None:
    with pytest.raises(ValueError, match="Protected range is empty"):
        load_config({"PROTECT_MIN": "20", "PROTECT_MAX": "1"})


def test_config_rejects_negative_padding() -> None:
    with pytest.raises(ValueError, match="zero_pad_width"):
        RenumberConfig(zero_pad_width=-1)


def test_empty_src_prefix_yields_bare_names() -> None:
    assert RenumberConfig(src_prefix="").manifest_src("1.jpg") == "1.jpg"


def test_config_rejects_start_number_inside_protected_range() -> None:
    with pytest.raises(ValueError, match="falls inside the protected range 1-19"):
        RenumberConfig(start_number=5)


def test_load_config_rejects_start_number_inside_protected_range() -> None:
    with pytest.raises(ValueError, match="start_number 19"):
        load_config({"START_NUMBER": "19"})
