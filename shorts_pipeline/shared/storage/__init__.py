"""
Storage module
"""

from .storage_manager import StorageManager, build_filename, sanitize_label

__all__ = ["StorageManager", "build_filename", "sanitize_label"]
