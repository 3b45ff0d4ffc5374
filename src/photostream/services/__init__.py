from .manifest_service import ManifestService
from .rename_service import RenameBatch, RenameService
from .renumber_service import RenumberService

__all__ = ["ManifestService", "RenameBatch", "RenameService", "RenumberService"]
