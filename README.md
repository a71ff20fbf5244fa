# packfile

A small command-line archiver. It gathers the regular files that a path
pattern selects into one pack file. The pack starts with an index that records
each file's name, size, source path, data offset and timestamp. You can list a
pack and unpack all of its files or only one of them.

## Installation

```
pip install .
```

## Command-line use

Pack every regular file in a directory:

```
packfile "data/*.*" archive.pack
```

The first argument is a path pattern. The part after its last `/` or `\` may
hold shell wildcards (`*`, `?`, `[...]`). Both `*` and `*.*` select every
regular file in the directory, and `data/*.txt` selects only the matching
files. A part without wildcards names a single file. A pattern without a
separator looks in the current directory. Files are packed in name order. If
the pack file itself matches the pattern, it is left out. If nothing matches,
the command fails.

List what a pack holds. Each row shows the name, the size and the stored
timestamp, and a final line gives the file count:

```
packfile -l archive.pack
```

List it a page at a time. Here the listing waits for Enter after every three
rows when more rows follow:

```
packfile -l3 archive.pack
```

Unpack every file into a directory. The directory is created if it does not
exist:

```
packfile -u archive.pack out/
```

Unpack only the file at index 2 (counting from 0):

```
packfile -u2 archive.pack out/
```

Run with no arguments, packfile prints a usage message. A missing argument, an
unknown option, an index out of range, a damaged pack or a file error prints a
message on standard error. In all of these cases the exit status is 1.

## Library use

```python
from packfile.packer import pack_files, read_entries, show_files, unpack_file, unpack_files

pack_files("data/*", "archive.pack")
for entry in read_entries("archive.pack"):
    print(entry.name, entry.size, entry.offset, entry.created)
show_files("archive.pack", page_size=10, pause=lambda: None)
unpack_files("archive.pack", "out")
unpack_file("archive.pack", "out", 0)
```

- `packfile.filelist.list_files(pattern)` returns the `SourceFile` records a
  pattern selects. `FileList(pattern)` wraps them so they can be indexed and
  iterated.
- `packfile.format` defines `IndexEntry` (`to_bytes`, `from_bytes`),
  `initial_offset`, `write_header` and `read_index`.
- `packfile.cli.parse_number` extracts the number from options such as `-u2`.

Problems with a pack's contents raise `packfile.format.PackFormatError`.
Examples are a truncated index or truncated data, a name or path too long for
its field, and an unsafe file name on unpacking.

## Pack layout

All integers are little-endian:

- a signed 32-bit file count;
- one 1048-byte index entry per file, holding the name (30 bytes, NUL-padded,
  at most 29 UTF-8 bytes), 2 padding bytes, the size (unsigned 32-bit), the
  source path (1000 bytes, at most 999 UTF-8 bytes), the absolute data offset
  (signed 32-bit) and the timestamp in seconds (signed 64-bit; the file's
  modification time when packed);
- the file contents, one after another, in index order.

## What it does not do

packfile does not compress data or walk subdirectories. It packs only the
regular files directly inside the pattern's directory. Unpacking restores file
contents under their stored names. It does not restore timestamps or
directories. A pack cannot be changed in place: to add or remove files, pack
them again.