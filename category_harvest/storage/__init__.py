"""Storage backend for persisting the harvest artifact."""

from category_harvest.storage.file_manager import FileManager

__all__ = [
    "FileManager",
]
