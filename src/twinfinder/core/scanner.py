"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/scanner.py
Collects every regular file below a root directory.
Features:
- Recursive os.walk traversal with names sorted per directory (stable order between runs)
- Symbolic links and special files are skipped
- System trash folders are never entered, so trashed copies are not found again
- Unreadable subdirectories are logged and skipped; an unusable root aborts the scan
"""

import os
import stat
import sys
from pathlib import Path
from typing import List
import logging

logger = logging.getLogger(__name__)

# freedesktop.org home trash; per-volume trashes are matched by name
HOME_TRASH = Path(os.environ.get("XDG_DATA_HOME") or os.path.expanduser("~/.local/share")) / "Trash"


class FileScannerImpl:
    """
    Walks `root_dir` and returns the paths of all regular files.

    Attributes:
        root_dir: Root directory to scan
    """

    def __init__(self, root_dir: str):
        self.root_dir = root_dir

    def scan(self) -> List[str]:
        logger.debug(f"Root directory: {self.root_dir}")

        root_path = Path(self.root_dir)
        if not root_path.exists():
            error_msg = f"Directory does not exist: {self.root_dir}"
            logger.error(error_msg)
            raise RuntimeError(error_msg)
        if not root_path.is_dir():
            error_msg = f"Not a directory: {self.root_dir}"
            logger.error(error_msg)
            raise RuntimeError(error_msg)
        try:
            os.listdir(root_path)
        except OSError as e:
            error_msg = f"Cannot read directory {self.root_dir}: {e}"
            logger.error(error_msg)
            raise RuntimeError(error_msg) from e

        found_files = []
        for root, dirs, files in os.walk(str(root_path), onerror=self._on_walk_error):
            dirs.sort()
            # Pre-filter subdirectories BEFORE os.walk enters them
            dirs[:] = [d for d in dirs if self._prefilter_dirs(Path(root) / d)]

            for filename in sorted(files):
                path = os.path.join(root, filename)
                if self._is_regular_file(path):
                    found_files.append(path)

        logger.debug(f"Collected {len(found_files)} regular files.")
        return found_files

    @staticmethod
    def _on_walk_error(error: OSError) -> None:
        logger.warning(f"Skipping unreadable directory {error.filename}: {error.strerror}")

    @staticmethod
    def _is_regular_file(path: str) -> bool:
        try:
            mode = os.lstat(path).st_mode
        except OSError as e:
            logger.debug(f"Could not stat {path}: {e}")
            return False
        if stat.S_ISLNK(mode):
            logger.debug(f"Skipping symbolic link: {path}")
            return False
        return stat.S_ISREG(mode)

    @staticmethod
    def _is_system_trash(path: Path) -> bool:
        """
        Check if a candidate directory is an OS trash/recycle bin (cross-platform).
        Only the directory's own name and the exact home trash location are
        considered, so a scan root below a folder called ".trash" is walked normally.
        """
        name = path.name
        if sys.platform == "win32":
            return name.lower() in ("$recycle.bin", "recycler")
        if name == ".Trash" or name.startswith(".Trash-"):
            return True
        return path == HOME_TRASH

    def _prefilter_dirs(self, path: Path) -> bool:
        """Skip system trash, symlinked directories and inaccessible locations."""
        if FileScannerImpl._is_system_trash(path):
            logger.debug(f"Skipping system trash directory: {path}")
            return False

        try:
            if path.is_symlink():
                logger.debug(f"Skipping symbolic link: {path}")
                return False
            return path.is_dir()
        except OSError:
            logger.debug(f"Skipping inaccessible directory: {path}")
            return False
