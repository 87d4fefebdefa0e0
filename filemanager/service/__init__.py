from .fs_service import FilesystemFacade

__all__ = ["FilesystemFacade"]
