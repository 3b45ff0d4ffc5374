from .filesystem_port import FilesystemPort

__all__ = ["FilesystemPort"]
