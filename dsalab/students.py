"""Fixed-size binary student records kept in a flat file."""

from __future__ import annotations

import os
import struct
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

_LAYOUT = struct.Struct("<i10sc10s3x")
RECORD_SIZE = _LAYOUT.size


def _encode(text: str, width: int, field_name: str) -> bytes:
    raw = text.encode("utf-8")
    if b"\0" in raw:
        raise ValueError(f"{field_name} must not contain NUL characters")
    if len(raw) >= width:
        raise ValueError(f"{field_name} must be at most {width - 1} bytes")
    return raw


def _decode(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("utf-8", errors="replace")


@dataclass
class Student:
    name: str
    roll: int
    div: str
    address: str

    def pack(self) -> bytes:
        """Encode as one fixed-size record."""
        div = self.div.encode("utf-8")
        if len(div) != 1:
            raise ValueError("div must be a single one-byte character")
        try:
            return _LAYOUT.pack(
                self.roll,
                _encode(self.name, 10, "name"),
                div,
                _encode(self.address, 10, "address"),
            )
        except struct.error as exc:
            raise ValueError(f"roll {self.roll} does not fit a record") from exc

    @classmethod
    def unpack(cls, data: bytes) -> Student:
        """Decode one fixed-size record."""
        if len(data) != RECORD_SIZE:
            raise ValueError(f"a record is {RECORD_SIZE} bytes, got {len(data)}")
        roll, name, div, address = _LAYOUT.unpack(data)
        return cls(_decode(name), roll, div.decode("latin-1"), _decode(address))


class StudentFile:
    """Append-only file of student records, with search and delete."""

    def __init__(self, path: str | os.PathLike[str] = "stud.dat") -> None:
        self.path = Path(path)

    def _chunks(self) -> Iterator[bytes]:
        try:
            handle = self.path.open("rb")
        except FileNotFoundError:
            return
        with handle:
            while len(chunk := handle.read(RECORD_SIZE)) == RECORD_SIZE:
                yield chunk

    def add(self, student: Student) -> None:
        record = student.pack()
        with self.path.open("ab") as handle:
            handle.write(record)

    def __iter__(self) -> Iterator[Student]:
        return (Student.unpack(chunk) for chunk in self._chunks())

    def find(self, roll: int) -> Student | None:
        """First student with ``roll``, or None."""
        return next((student for student in self if student.roll == roll), None)

    def delete(self, roll: int) -> int:
        """Remove every student with ``roll``; return how many were removed."""
        kept: list[bytes] = []
        removed = 0
        for chunk in self._chunks():
            if Student.unpack(chunk).roll == roll:
                removed += 1
            else:
                kept.append(chunk)
        temp = self.path.with_name(self.path.name + ".tmp")
        with temp.open("wb") as handle:
            handle.writelines(kept)
        os.replace(temp, self.path)
        return removed