"""Command line front end: pack a directory, list a pack or unpack it.

Usage::

    packfile <pattern> <pack>               pack the files matching a pattern
    packfile -l <pack>                      list the files in a pack
    packfile -l<N> <pack>                   list, pausing after every N rows
    packfile -u <pack> <directory>          unpack every file
    packfile -u<N> <pack> <directory>       unpack only the file at index N
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

from packfile.format import PackFormatError
from packfile.packer import pack_files, show_files, unpack_file, unpack_files

USAGE = """\
usage:
  pack:              packfile <pattern> <pack>
  list:              packfile -l <pack>
  list paged:        packfile -l<N> <pack>
  unpack:            packfile -u <pack> <directory>
  unpack one file:   packfile -u<N> <pack> <directory>"""


def parse_number(option: str) -> int:
    """Return the number formed by the digits in an option such as ``-l3``.

    Raises ValueError when the option holds no digit.
    """
    digits = "".join(ch for ch in option if "0" <= ch <= "9")
    if not digits:
        raise ValueError(f"option carries no number: {option!r}")
    return int(digits)


def _fail(message: str) -> int:
    print(message, file=sys.stderr)
    return 1


def _run(args: list[str]) -> int:
    first = args[0]

    if not first.startswith("-"):
        if len(args) < 2:
            return _fail("packing needs a source pattern and a pack path")
        print(f"Source pattern: {first}")
        print(f"Pack path: {args[1]}")
        entries = pack_files(first, args[1])
        for entry in entries:
            print(f"Packed {entry.name}")
        print(f"Packing done: {len(entries)} file(s).")
        return 0

    mode = first[1:2]
    if mode == "l":
        if len(args) < 2:
            return _fail("listing needs a pack path")
        page_size = parse_number(first) if len(first) > 2 else None
        show_files(args[1], page_size)
        return 0

    if mode == "u":
        if len(args) < 3:
            return _fail("unpacking needs a pack path and a target directory")
        if len(first) > 2:
            written = [unpack_file(args[1], args[2], parse_number(first))]
        else:
            written = unpack_files(args[1], args[2])
        for path in written:
            print(f"Unpacked {path.name}")
        print(f"Unpacking done: {len(written)} file(s).")
        return 0

    return _fail(f"unknown option: {first}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; return the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return _fail(USAGE)
    try:
        return _run(args)
    except (OSError, PackFormatError, ValueError, IndexError) as exc:
        return _fail(f"error: {exc}")


if __name__ == "__main__":
    sys.exit(main())