"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the scanning system.
These protocols enforce structural typing using Python's `typing.Protocol` so that
any component can be swapped without touching the pipeline.

Key Components:
---------------
- MultiTable: Associative container used for size and fingerprint bucketing.
- HashState / HashAlgorithm: Incremental hash objects and their factories.
- Hasher: Interface for fingerprinting a file on disk.
- TrashBackend: Platform capability for reversible deletion.
"""

from typing import Callable, Protocol, Iterable, Optional, Tuple, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class MultiTable(Protocol[K, V]):
    """
    Associative container contract used by the scanner stages.
    `append` treats the table as a multimap (key -> list of values).
    """
    def put(self, key: K, value: V) -> None: ...
    def get(self, key: K, default: Optional[V] = None) -> Optional[V]: ...
    def values(self) -> Iterable[V]: ...
    def items(self) -> Iterable[Tuple[K, V]]: ...
    def append(self, key: K, item) -> list: ...
    def __len__(self) -> int: ...


# Builds an empty table for one grouping pass
TableFactory = Callable[[], MultiTable]


class HashState(Protocol):
    """hashlib-style incremental hash object."""
    def update(self, data: bytes) -> None: ...
    def hexdigest(self) -> str: ...


class HashAlgorithm(Protocol):
    """
    Interface for pluggable fingerprint algorithms.

    Allows plugging in different hashing functions without affecting the rest
    of the scanning logic.
    """

    @staticmethod
    def new() -> HashState:
        """Returns a fresh incremental hash object."""
        ...


class Hasher(Protocol):
    """Interface for fingerprinting a whole file."""
    def compute_fingerprint(self, path: str) -> str: ...


class TrashBackend(Protocol):
    """Reversible deletion capability provided by the platform."""
    def trash_supported(self) -> bool: ...
    def move_to_trash(self, path: str) -> bool: ...
