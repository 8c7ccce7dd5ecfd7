"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

services/file_service.py
Reversible file removal through the system trash (via send2trash).
"""
import os
import sys
import logging
from pathlib import Path
from send2trash import send2trash

logger = logging.getLogger(__name__)


class FileService:
    """
    Cross-platform trash operations.
    Nothing in this class ever deletes a file permanently.
    """

    @staticmethod
    def trash_supported() -> bool:
        """
        Returns True if files can be moved to a trash on this platform.
        On freedesktop systems the home trash must be creatable.
        """
        if sys.platform in ("win32", "darwin"):
            return True

        home = os.path.expanduser("~")
        if not os.path.isdir(home):
            logger.debug(f"No usable home directory ({home}), trash unavailable")
            return False
        return os.access(home, os.W_OK)

    @staticmethod
    def move_to_trash(file_path: str) -> bool:
        """Moves a file to the system trash. Returns False on failure."""
        path = Path(file_path).resolve()

        if not path.exists():
            logger.warning(f"File not found: {path}")
            return False

        try:
            send2trash(str(path))
        except Exception as e:
            logger.warning(f"Failed to move to trash {path}: {e}")
            return False
        return True
