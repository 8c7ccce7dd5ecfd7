"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

services/deletion_service.py
Removes flagged duplicates, only ever through the trash.
"""
import logging
from typing import List, Optional

from twinfinder.core.interfaces import TrashBackend
from twinfinder.core.models import FileRecord
from twinfinder.services.file_service import FileService

logger = logging.getLogger(__name__)


class DeletionService:
    """
    Applies the removal flags of a scan result.

    If the trash is unavailable nothing is removed at all: there is no
    fallback to permanent deletion.
    """

    def __init__(self, trash: Optional[TrashBackend] = None):
        self.trash = trash or FileService()
        self.last_removed: List[str] = []

    def trash_supported(self) -> bool:
        return self.trash.trash_supported()

    def delete_flagged(self, records: Optional[List[FileRecord]]) -> int:
        """
        Moves every record with marked_for_removal set to the trash.

        Returns:
            Number of files actually moved. Failed moves are not retried and
            do not stop the batch.
        """
        self.last_removed = []
        if not records:
            return 0

        if not self.trash_supported():
            logger.warning("Move to trash is not supported on this platform. No files were deleted.")
            return 0

        for record in records:
            if not record.marked_for_removal:
                continue
            if self.trash.move_to_trash(record.path):
                self.last_removed.append(record.path)
            else:
                logger.warning(f"Could not move {record.path} to trash")

        return len(self.last_removed)
