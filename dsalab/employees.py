"""Employee records in a binary data file with a text index of offsets."""

from __future__ import annotations

import os
import struct
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

_LAYOUT = struct.Struct("<i50s50sf")
RECORD_SIZE = _LAYOUT.size
MAX_EMPLOYEES = 100


class StoreFullError(Exception):
    """Raised when the index already holds the maximum number of employees."""


def _encode(text: str, field_name: str) -> bytes:
    raw = text.encode("utf-8")
    if b"\0" in raw:
        raise ValueError(f"{field_name} must not contain NUL characters")
    if len(raw) >= 50:
        raise ValueError(f"{field_name} must be at most 49 bytes")
    return raw


def _decode(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("utf-8", errors="replace")


@dataclass
class Employee:
    emp_id: int
    name: str
    designation: str
    salary: float

    def pack(self) -> bytes:
        """Encode as one fixed-size record."""
        try:
            return _LAYOUT.pack(
                self.emp_id,
                _encode(self.name, "name"),
                _encode(self.designation, "designation"),
                self.salary,
            )
        except struct.error as exc:
            raise ValueError(f"employee {self.emp_id} does not fit a record") from exc

    @classmethod
    def unpack(cls, data: bytes) -> Employee:
        """Decode one fixed-size record."""
        if len(data) != RECORD_SIZE:
            raise ValueError(f"a record is {RECORD_SIZE} bytes, got {len(data)}")
        emp_id, name, designation, salary = _LAYOUT.unpack(data)
        return cls(emp_id, _decode(name), _decode(designation), salary)


class EmployeeStore:
    """Employee file addressed through an id-to-offset index."""

    def __init__(
        self,
        data_path: str | os.PathLike[str] = "data.txt",
        index_path: str | os.PathLike[str] = "index.txt",
    ) -> None:
        self.data_path = Path(data_path)
        self.index_path = Path(index_path)
        self._index = self._load_index()

    def _load_index(self) -> dict[int, int]:
        try:
            tokens = self.index_path.read_text().split()
        except FileNotFoundError:
            return {}
        index: dict[int, int] = {}
        for id_token, position_token in zip(tokens[::2], tokens[1::2]):
            if len(index) >= MAX_EMPLOYEES:
                break
            try:
                emp_id, position = int(id_token), int(position_token)
            except ValueError:
                break
            index.setdefault(emp_id, position)
        return index

    def _save_index(self) -> None:
        self.index_path.write_text(
            "".join(f"{emp_id} {position}\n" for emp_id, position in self._index.items())
        )

    def add(self, employee: Employee) -> None:
        """Append ``employee``; ValueError if the id is already taken."""
        if employee.emp_id in self._index:
            raise ValueError(f"employee id {employee.emp_id} already exists")
        if len(self._index) >= MAX_EMPLOYEES:
            raise StoreFullError(f"the index holds at most {MAX_EMPLOYEES} employees")
        record = employee.pack()
        with self.data_path.open("ab") as handle:
            handle.seek(0, os.SEEK_END)
            position = handle.tell()
            handle.write(record)
        self._index[employee.emp_id] = position
        self._save_index()

    def get(self, emp_id: int) -> Employee:
        """Read the employee with ``emp_id``; KeyError if not indexed."""
        position = self._index[emp_id]
        with self.data_path.open("rb") as handle:
            handle.seek(position)
            data = handle.read(RECORD_SIZE)
        if len(data) != RECORD_SIZE:
            raise ValueError(f"record for employee {emp_id} is truncated")
        return Employee.unpack(data)

    def delete(self, emp_id: int) -> None:
        """Remove the employee with ``emp_id`` and rebuild the index."""
        if emp_id not in self._index:
            raise KeyError(emp_id)
        kept: list[bytes] = []
        index: dict[int, int] = {}
        for chunk in self._chunks():
            current = Employee.unpack(chunk).emp_id
            if current != emp_id:
                index[current] = len(kept) * RECORD_SIZE
                kept.append(chunk)
        temp = self.data_path.with_name(self.data_path.name + ".tmp")
        with temp.open("wb") as handle:
            handle.writelines(kept)
        os.replace(temp, self.data_path)
        self._index = index
        self._save_index()

    def _chunks(self) -> Iterator[bytes]:
        try:
            handle = self.data_path.open("rb")
        except FileNotFoundError:
            return
        with handle:
            while len(chunk := handle.read(RECORD_SIZE)) == RECORD_SIZE:
                yield chunk

    def __contains__(self, emp_id: object) -> bool:
        return emp_id in self._index

    def __len__(self) -> int:
        return len(self._index)