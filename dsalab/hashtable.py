"""Hash tables: separate chaining and a linear-probing telephone book."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


def string_hash(key: str, size: int) -> int:
    """Polynomial (base 31) hash of ``key`` reduced into ``range(size)``."""
    if size <= 0:
        raise ValueError("size must be positive")
    value = 0
    for ch in key:
        value = (value * 31 + ord(ch)) % size
    return value % size


def ascii_key(name: str) -> int:
    """Sum of the character codes of ``name``, modulo 100."""
    return sum(map(ord, name)) % 100


class ChainedHashTable:
    """Hash table mapping strings to values, resolving collisions by chaining."""

    def __init__(self, size: int = 10) -> None:
        if size <= 0:
            raise ValueError("size must be positive")
        self._size = size
        self._buckets: list[list[tuple[str, Any]]] = [[] for _ in range(size)]

    @property
    def size(self) -> int:
        return self._size

    def _bucket(self, key: str) -> list[tuple[str, Any]]:
        return self._buckets[string_hash(key, self._size)]

    def insert(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        bucket = self._bucket(key)
        for position, (existing, _) in enumerate(bucket):
            if existing == key:
                bucket[position] = (key, value)
                return
        bucket.append((key, value))

    def find(self, key: str) -> Any:
        """Return the value stored under ``key``; raise KeyError if absent."""
        for existing, value in self._bucket(key):
            if existing == key:
                return value
        raise KeyError(key)

    def delete(self, key: str) -> bool:
        """Remove ``key``; return whether it was present."""
        bucket = self._bucket(key)
        for position, (existing, _) in enumerate(bucket):
            if existing == key:
                del bucket[position]
                return True
        return False

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return any(existing == key for existing, _ in self._bucket(key))

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)


class TableFullError(Exception):
    """Raised when every slot of an open-addressing table is occupied."""


@dataclass
class _Record:
    name: str
    telephone: str


class TelephoneBook:
    """Name-to-telephone store using open addressing with linear probing."""

    def __init__(self, size: int = 100) -> None:
        if size <= 0:
            raise ValueError("size must be positive")
        self._size = size
        self._slots: list[_Record | None] = [None] * size

    def _probe(self, name: str) -> Iterator[int]:
        start = ascii_key(name) % self._size
        return ((start + step) % self._size for step in range(self._size))

    def _locate(self, name: str) -> int:
        for slot in self._probe(name):
            record = self._slots[slot]
            if record is not None and record.name == name:
                return slot
        raise KeyError(name)

    def create(self, name: str, telephone: str) -> None:
        """Add a record in the first free slot along the probe sequence."""
        for slot in self._probe(name):
            if self._slots[slot] is None:
                self._slots[slot] = _Record(name, telephone)
                return
        raise TableFullError(f"no free slot for {name!r}")

    def search(self, name: str) -> str:
        """Return the telephone number recorded for ``name``."""
        record = self._slots[self._locate(name)]
        assert record is not None
        return record.telephone

    def update(self, name: str, telephone: str) -> None:
        """Replace the telephone number recorded for ``name``."""
        record = self._slots[self._locate(name)]
        assert record is not None
        record.telephone = telephone

    def delete(self, name: str) -> None:
        """Remove the record for ``name``; raise KeyError if absent."""
        self._slots[self._locate(name)] = None

    def records(self) -> Iterator[tuple[str, str]]:
        """Yield ``(name, telephone)`` pairs in slot order."""
        for record in self._slots:
            if record is not None:
                yield record.name, record.telephone

    def __len__(self) -> int:
        return sum(record is not None for record in self._slots)