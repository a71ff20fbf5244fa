"""Packing files into a single pack, listing a pack and unpacking it."""

from __future__ import annotations

import os
import sys
import time
from collections.abc import Callable
from pathlib import Path
from typing import TextIO

from packfile.filelist import SourceFile, list_files
from packfile.format import (
    IndexEntry,
    PackFormatError,
    initial_offset,
    read_index,
    write_header,
)

SEPARATOR = "=" * 79
_CHUNK = 1 << 16


def _same_file(a: str | os.PathLike[str], b: str | os.PathLike[str]) -> bool:
    try:
        return os.path.samefile(a, b)
    except OSError:
        return False


def _build_index(files: list[SourceFile]) -> list[IndexEntry]:
    offset = initial_offset(len(files))
    entries = []
    for source in files:
        entries.append(
            IndexEntry(
                name=source.name,
                size=source.size,
                path=source.path,
                offset=offset,
                created=source.mtime,
            )
        )
        offset += source.size
    return entries


def pack_files(pattern: str, pack_path: str | os.PathLike[str]) -> list[IndexEntry]:
    """Pack every file matching ``pattern`` into ``pack_path``.

    Returns the index entries written. Raises FileNotFoundError when the
    pattern selects no file.
    """
    files = [f for f in list_files(pattern) if not _same_file(f.path, pack_path)]
    if not files:
        raise FileNotFoundError(f"no files to pack for pattern: {pattern}")

    entries = _build_index(files)
    with open(pack_path, "wb") as pack:
        write_header(pack, len(entries))
        for entry in entries:
            pack.write(entry.to_bytes())
        for entry in entries:
            remaining = entry.size
            with open(entry.path, "rb") as source:
                while remaining:
                    chunk = source.read(min(_CHUNK, remaining))
                    if not chunk:
                        raise PackFormatError(
                            f"{entry.path} shrank while packing: {remaining} bytes missing"
                        )
                    pack.write(chunk)
                    remaining -= len(chunk)
    return entries


def read_entries(pack_path: str | os.PathLike[str]) -> list[IndexEntry]:
    """Return the index entries stored in a pack."""
    with open(pack_path, "rb") as pack:
        return read_index(pack)


def format_entry(entry: IndexEntry) -> str:
    """One listing row: name, size and creation time."""
    return f"{entry.name}\t\t{entry.size}\t\t{time.ctime(entry.created)}"


def _default_pause() -> None:
    input()


def show_files(
    pack_path: str | os.PathLike[str],
    page_size: int | None = None,
    out: TextIO | None = None,
    pause: Callable[[], object] | None = None,
) -> int:
    """Print the files held in a pack and return how many there are.

    With a positive ``page_size`` the listing stops after every full page
    that has more rows after it and calls ``pause`` before going on.
    """
    if page_size is not None and page_size < 0:
        raise ValueError(f"page size cannot be negative: {page_size}")
    out = sys.stdout if out is None else out
    pause = _default_pause if pause is None else pause

    entries = read_entries(pack_path)
    print("Name\t\tSize\t\tCreated", file=out)
    print(SEPARATOR, file=out)
    for shown, entry in enumerate(entries, start=1):
        print(format_entry(entry), file=out)
        if page_size and shown % page_size == 0 and shown < len(entries):
            out.flush()
            pause()
    print(SEPARATOR, file=out)
    print(f"\t\t\t\t\t\tFile count: {len(entries)}", file=out)
    return len(entries)


def _target_path(unpack_path: str | os.PathLike[str], entry: IndexEntry) -> Path:
    name = entry.name
    if not name or name in {".", ".."} or "/" in name or "\\" in name:
        raise PackFormatError(f"unsafe file name in pack: {name!r}")
    return Path(unpack_path) / name


def _extract(pack, entry: IndexEntry, unpack_path: str | os.PathLike[str]) -> Path:
    target = _target_path(unpack_path, entry)
    pack.seek(entry.offset)
    remaining = entry.size
    with open(target, "wb") as output:
        while remaining:
            chunk = pack.read(min(_CHUNK, remaining))
            if not chunk:
                raise PackFormatError(
                    f"pack data for {entry.name!r} is truncated: {remaining} bytes missing"
                )
            output.write(chunk)
            remaining -= len(chunk)
    return target


def unpack_files(
    pack_path: str | os.PathLike[str], unpack_path: str | os.PathLike[str]
) -> list[Path]:
    """Extract every file in a pack into ``unpack_path``; return the paths written."""
    os.makedirs(unpack_path, exist_ok=True)
    with open(pack_path, "rb") as pack:
        entries = read_index(pack)
        return [_extract(pack, entry, unpack_path) for entry in entries]


def unpack_file(
    pack_path: str | os.PathLike[str], unpack_path: str | os.PathLike[str], index: int
) -> Path:
    """Extract the file at position ``index`` of a pack; return the path written."""
    os.makedirs(unpack_path, exist_ok=True)
    with open(pack_path, "rb") as pack:
        entries = read_index(pack)
        if index < 0 or index >= len(entries):
            raise IndexError(f"file index out of range: {index}")
        return _extract(pack, entries[index], unpack_path)