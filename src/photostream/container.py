from __future__ import annotations

from typing import Any

from photostream.adapters.local_filesystem import LocalFilesystemAdapter
from photostream.domain.config import RenumberConfig
from photostream.services.manifest_service import ManifestService
from photostream.services.rename_service import RenameService
from photostream.services.renumber_service import RenumberService


def build_services(config: RenumberConfig) -> dict[str, Any]:
    filesystem = LocalFilesystemAdapter(config.photos_dir)
    rename_service = RenameService(filesystem)
    manifest_service = ManifestService(filesystem, config)
    return {
        "filesystem": filesystem,
        "rename_service": rename_service,
        "manifest_service": manifest_service,
        "renumber_service": RenumberService(
            filesystem, config, rename_service, manifest_service
        ),
    }
