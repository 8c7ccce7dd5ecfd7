"""Trash operations and the deletion policy."""

from .file_service import FileService
from .deletion_service import DeletionService

__all__ = ["FileService", "DeletionService"]
