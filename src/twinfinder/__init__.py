"""
TwinFinder — finds byte-identical files and moves the extra copies to trash.

Core features:
- Two-pass detection: size buckets, then 128-bit content fingerprints
- From-scratch chained hash table as the grouping primitive
- Safe deletion to system trash only (via send2trash)
- Optional Qt background worker (install with [gui] extra)
- CLI interface for headless usage
"""

from importlib.metadata import PackageNotFoundError, version as _version

try:
    __version__ = _version("twinfinder")
except PackageNotFoundError:
    __version__ = "0.0.0"

# Public API: only what users should import directly
from twinfinder.commands import ScanCommand
from twinfinder.core import (
    DuplicateScanner, GroupingTable, HasherImpl, FileRecord, DuplicateGroup,
    ScanParams, ScanStats, SortOrder, HashAlgorithmName, fingerprint)
from twinfinder.utils.convert_utils import ConvertUtils
from twinfinder.services import DeletionService, FileService

__all__ = [
    "ScanCommand",
    "DuplicateScanner",
    "GroupingTable",
    "HasherImpl",
    "FileRecord",
    "DuplicateGroup",
    "ScanParams",
    "ScanStats",
    "SortOrder",
    "HashAlgorithmName",
    "fingerprint",
    "ConvertUtils",
    "DeletionService",
    "FileService",
    "__version__",
]
