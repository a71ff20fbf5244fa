"""On-disk layout of a pack file.

A pack starts with a little-endian 32-bit entry count, followed by one
fixed-size index entry per file, followed by the file contents in index
order. Each index entry records the file name, its size, the path it was
packed from, the absolute offset of its data inside the pack and its
timestamp.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import BinaryIO

NAME_SIZE = 30
PATH_SIZE = 1000

# name[30], 2 bytes padding, size (u32), path[1000], offset (i32), time (i64)
_ENTRY = struct.Struct("<30s2xI1000siq")
_COUNT = struct.Struct("<i")

HEADER_SIZE = _COUNT.size
ENTRY_SIZE = _ENTRY.size

ENCODING = "utf-8"


class PackFormatError(ValueError):
    """Raised when a pack or an index entry cannot be encoded or decoded."""


def _encode_field(value: str, limit: int, what: str) -> bytes:
    raw = value.encode(ENCODING)
    # One byte is kept for the terminating NUL.
    if len(raw) >= limit:
        raise PackFormatError(f"{what} too long ({len(raw)} bytes, at most {limit - 1}): {value!r}")
    return raw


def _decode_field(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode(ENCODING, errors="replace")


@dataclass(frozen=True)
class IndexEntry:
    """One file's record in the pack index."""

    name: str
    size: int
    path: str
    offset: int
    created: int

    def to_bytes(self) -> bytes:
        """Encode the entry into its fixed-size binary form."""
        name = _encode_field(self.name, NAME_SIZE, "file name")
        path = _encode_field(self.path, PATH_SIZE, "file path")
        try:
            return _ENTRY.pack(name, self.size, path, self.offset, self.created)
        except struct.error as exc:
            raise PackFormatError(f"cannot encode entry for {self.name!r}: {exc}") from exc

    @classmethod
    def from_bytes(cls, data: bytes) -> IndexEntry:
        """Decode an entry from exactly ENTRY_SIZE bytes."""
        if len(data) != ENTRY_SIZE:
            raise PackFormatError(f"index entry must be {ENTRY_SIZE} bytes, got {len(data)}")
        name, size, path, offset, created = _ENTRY.unpack(data)
        return cls(_decode_field(name), size, _decode_field(path), offset, created)


def initial_offset(count: int) -> int:
    """Offset of the first file's data in a pack holding ``count`` files."""
    if count < 0:
        raise PackFormatError(f"file count cannot be negative: {count}")
    return HEADER_SIZE + count * ENTRY_SIZE


def write_header(stream: BinaryIO, count: int) -> None:
    """Write the entry count that opens a pack."""
    try:
        stream.write(_COUNT.pack(count))
    except struct.error as exc:
        raise PackFormatError(f"cannot encode file count {count}: {exc}") from exc


def read_index(stream: BinaryIO) -> list[IndexEntry]:
    """Read the entry count and every index entry from the start of a pack."""
    header = stream.read(HEADER_SIZE)
    if len(header) != HEADER_SIZE:
        raise PackFormatError("pack is too short to hold a file count")
    (count,) = _COUNT.unpack(header)
    if count < 0:
        raise PackFormatError(f"pack holds a negative file count: {count}")
    entries = []
    for number in range(count):
        data = stream.read(ENTRY_SIZE)
        if len(data) != ENTRY_SIZE:
            raise PackFormatError(f"pack index is truncated at entry {number} of {count}")
        entries.append(IndexEntry.from_bytes(data))
    return entries