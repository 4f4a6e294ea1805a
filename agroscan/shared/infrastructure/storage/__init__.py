"""
Storage infrastructure for uploaded inspection images.
"""

from .file_manager import LocalFileStorage, get_file_storage

__all__ = ["LocalFileStorage", "get_file_storage"]
