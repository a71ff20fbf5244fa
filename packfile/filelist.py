"""Listing of the files selected by a search pattern such as ``dir/*.*``."""

from __future__ import annotations

import fnmatch
import os
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

_MATCH_ALL = {"*", "*.*"}


@dataclass(frozen=True)
class SourceFile:
    """A regular file found by a search pattern."""

    name: str
    size: int
    path: str
    mtime: int


def _split_pattern(pattern: str) -> tuple[str, str]:
    """Split a pattern at its last '/' or '\\' into directory and file part."""
    cut = max(pattern.rfind("/"), pattern.rfind("\\"))
    if cut < 0:
        return ".", pattern
    directory = pattern[: cut + 1]
    if len(directory) > 1:
        directory = directory[:-1]
    return directory, pattern[cut + 1 :]


def _has_wildcard(text: str) -> bool:
    return any(ch in text for ch in "*?[")


def _source_file(path: Path) -> SourceFile:
    info = path.stat()
    return SourceFile(name=path.name, size=info.st_size, path=str(path), mtime=int(info.st_mtime))


def list_files(pattern: str) -> list[SourceFile]:
    """Return the regular files matching ``pattern``, sorted by name.

    The part after the last separator may hold shell wildcards; ``*`` and
    ``*.*`` select every file. Without wildcards the pattern names one file.
    """
    directory, file_part = _split_pattern(pattern)
    if not _has_wildcard(file_part):
        target = Path(directory) / file_part
        if not target.exists():
            raise FileNotFoundError(f"no such file: {pattern}")
        return [_source_file(target)] if target.is_file() else []

    folder = Path(directory)
    if not folder.is_dir():
        raise FileNotFoundError(f"no such directory: {directory}")
    match_all = file_part in _MATCH_ALL
    found = []
    with os.scandir(folder) as entries:
        for entry in entries:
            if not entry.is_file():
                continue
            if match_all or fnmatch.fnmatch(entry.name, file_part):
                found.append(_source_file(folder / entry.name))
    found.sort(key=lambda item: item.name)
    return found


class FileList:
    """The files selected by a pattern, indexable and iterable."""

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern
        self.files: tuple[SourceFile, ...] = tuple(list_files(pattern))

    def __len__(self) -> int:
        return len(self.files)

    def __getitem__(self, index: int) -> SourceFile:
        try:
            return self.files[index]
        except IndexError:
            raise IndexError(f"file index out of range: {index}") from None

    def __iter__(self) -> Iterator[SourceFile]:
        return iter(self.files)