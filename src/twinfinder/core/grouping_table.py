"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/grouping_table.py
Separate-chaining hash table used as the grouping primitive of the scanner.

Each bucket holds a singly linked chain of entries; new entries go to the head
of the chain. The table doubles its capacity before an insertion once the
number of entries has reached capacity * load_factor.
"""

from typing import Generic, Iterator, List, Optional, Tuple, TypeVar

K = TypeVar("K")
V = TypeVar("V")

DEFAULT_CAPACITY = 16
DEFAULT_LOAD_FACTOR = 0.75


class _Entry(Generic[K, V]):
    """Chain node: key, value and link to the next node in the same bucket."""
    __slots__ = ("key", "value", "next")

    def __init__(self, key: K, value: V, next_entry: Optional["_Entry[K, V]"]):
        self.key = key
        self.value = value
        self.next = next_entry


class GroupingTable(Generic[K, V]):
    """
    Hash table mapping a key to a single value, with a multimap helper.

    Keys are compared by equality. `None` is a valid key and always lives in
    bucket 0. Value order returned by `values()` is unspecified and changes
    across resizes.
    """

    def __init__(self, initial_capacity: int = DEFAULT_CAPACITY, load_factor: float = DEFAULT_LOAD_FACTOR):
        if initial_capacity <= 0:
            raise ValueError("Initial capacity must be positive")
        if not 0 < load_factor <= 1:
            raise ValueError("Load factor must be in (0, 1]")
        self._table: List[Optional[_Entry[K, V]]] = [None] * initial_capacity
        self._load_factor = load_factor
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._table)

    @property
    def load_factor(self) -> float:
        return self._load_factor

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: K) -> bool:
        return self._find(key) is not None

    def put(self, key: K, value: V) -> None:
        """Binds `value` to `key`, replacing any previous value."""
        if self._size >= len(self._table) * self._load_factor:
            self._resize()

        index = self._index(key)
        entry = self._table[index]
        while entry is not None:
            if entry.key == key:
                entry.value = value
                return
            entry = entry.next

        self._table[index] = _Entry(key, value, self._table[index])
        self._size += 1

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        """Returns the value bound to `key`, or `default` when absent."""
        entry = self._find(key)
        if entry is None:
            return default
        return entry.value

    def append(self, key: K, item) -> list:
        """
        Treats the table as a multimap: appends `item` to the list bound to
        `key`, creating the list on first use. Returns that list.
        """
        bucket = self.get(key)
        if bucket is None:
            bucket = []
            self.put(key, bucket)
        bucket.append(item)
        return bucket

    def values(self) -> List[V]:
        result = []
        for entry in self._table:
            while entry is not None:
                result.append(entry.value)
                entry = entry.next
        return result

    def items(self) -> Iterator[Tuple[K, V]]:
        for entry in self._table:
            while entry is not None:
                yield entry.key, entry.value
                entry = entry.next

    def _find(self, key: K) -> Optional[_Entry[K, V]]:
        entry = self._table[self._index(key)]
        while entry is not None:
            if entry.key == key:
                return entry
            entry = entry.next
        return None

    def _index(self, key: K) -> int:
        if key is None:
            return 0
        return abs(hash(key)) % len(self._table)

    def _resize(self) -> None:
        old_table = self._table
        self._table = [None] * (len(old_table) * 2)
        self._size = 0  # put() recounts every re-inserted entry

        for entry in old_table:
            while entry is not None:
                self.put(entry.key, entry.value)
                entry = entry.next

    def __repr__(self):
        return f"<GroupingTable size={self._size}, capacity={len(self._table)}>"
