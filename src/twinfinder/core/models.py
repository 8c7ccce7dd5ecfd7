"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models for scanning, grouping and flagging duplicate files.
"""

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


# =============================
# Enums
# =============================

class HashAlgorithmName(Enum):
    """
    Content fingerprint algorithm used for the second grouping pass.
    """
    TWIN = "twin"
    XXH128 = "xxh128"

    @property
    def display_name(self) -> str:
        """Human-readable name for UI display."""
        mapping = {
            HashAlgorithmName.TWIN: "TwinHash-128",
            HashAlgorithmName.XXH128: "xxHash3-128",
        }
        return mapping.get(self, self.value)

    def __repr__(self) -> str:
        return self.value


class SortOrder(Enum):
    """
    Order of records inside a duplicate group.
    The first record after ordering is the one left unflagged.
    """
    FIRST_FOUND = "first-found"
    SHORTEST_PATH = "shortest-path"
    SHORTEST_FILENAME = "shortest-filename"
    LEXICAL = "lexical"

    @property
    def display_name(self) -> str:
        """Human-readable name for UI display."""
        mapping = {
            SortOrder.FIRST_FOUND: "First Found",
            SortOrder.SHORTEST_PATH: "Shortest Path",
            SortOrder.SHORTEST_FILENAME: "Shortest Filename",
            SortOrder.LEXICAL: "Lexical Path",
        }
        return mapping.get(self, self.value)


# ======================
#  Core Data Models
# ======================

@dataclass
class FileRecord:
    """
    A regular file found during a scan.
    `fingerprint` stays None until the file shares its size with another file.
    `marked_for_removal` is set by the scanner and may be changed by the caller;
    `path` and `size` cannot be reassigned.
    """
    path: str
    size: int  # in bytes
    fingerprint: Optional[str] = None
    marked_for_removal: bool = False

    def __setattr__(self, name, value):
        # path and size are fixed once recorded
        if name in ("path", "size") and name in self.__dict__:
            raise AttributeError(f"FileRecord.{name} is read-only")
        super().__setattr__(name, value)

    @property
    def name(self) -> str:
        return os.path.basename(self.path)

    @property
    def path_depth(self) -> int:
        return self.path.rstrip(os.sep).count(os.sep)

    def __repr__(self):
        return f"<FileRecord path={self.path}, size={self.size}, marked={self.marked_for_removal}>"


@dataclass
class DuplicateGroup:
    """
    Records sharing one fingerprint (and therefore one size).
    """
    fingerprint: str
    size: int
    files: List[FileRecord] = field(default_factory=list)

    @property
    def duplicate_count(self) -> int:
        """How many files are in this group."""
        return len(self.files)

    @property
    def reclaimable_bytes(self) -> int:
        """Bytes freed if every flagged record is removed."""
        return sum(f.size for f in self.files if f.marked_for_removal)

    def is_duplicate(self) -> bool:
        """True if this group contains at least two files."""
        return self.duplicate_count >= 2

    def kept(self) -> List[FileRecord]:
        return [f for f in self.files if not f.marked_for_removal]

    def flagged(self) -> List[FileRecord]:
        return [f for f in self.files if f.marked_for_removal]

    def __repr__(self):
        return f"<DuplicateGroup size={self.size}, count={len(self.files)}>"


@dataclass
class ScanStats:
    """
    Counters collected during one scan.
    """
    files_found: int = 0
    skipped_files: int = 0
    groups_found: int = 0
    duplicates_flagged: int = 0
    reclaimable_bytes: int = 0
    total_time: float = 0.0
    skipped_paths: List[str] = field(default_factory=list)

    def record_skip(self, path: str) -> None:
        self.skipped_files += 1
        self.skipped_paths.append(path)

    def print_summary(self) -> str:
        lines = [
            "📊 Scan Statistics:",
            f"Total Execution Time: {self.total_time:.3f}s",
            f"Files found: {self.files_found}",
            f"Files skipped: {self.skipped_files}",
            f"Duplicate groups: {self.groups_found}",
            f"Files flagged for removal: {self.duplicates_flagged}",
            f"Reclaimable bytes: {self.reclaimable_bytes}",
        ]
        return "\n".join(lines)


"""
DTO for scan parameters with built-in validation.
Interface-agnostic — used by both GUI and CLI.
"""

DEFAULT_CHUNK_SIZE = 4096


@dataclass
class ScanParams:
    """Parameters for a scan operation with validation."""
    root_dir: str
    algorithm: HashAlgorithmName = HashAlgorithmName.TWIN
    chunk_size: int = DEFAULT_CHUNK_SIZE
    sort_order: SortOrder = SortOrder.FIRST_FOUND

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        if not self.root_dir:
            raise ValueError("Root directory cannot be empty")

        if self.chunk_size <= 0:
            raise ValueError("Chunk size must be positive")

        if not isinstance(self.algorithm, HashAlgorithmName):
            self.algorithm = HashAlgorithmName(self.algorithm)

        if not isinstance(self.sort_order, SortOrder):
            self.sort_order = SortOrder(self.sort_order)
