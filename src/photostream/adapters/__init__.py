from .local_filesystem import LocalFilesystemAdapter

__all__ = ["LocalFilesystemAdapter"]
