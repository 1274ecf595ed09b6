"""Command line entry point: list a directory, a file or files matching a pattern."""

from __future__ import annotations

import os
import sys
from typing import Sequence, TextIO

from lsx.layout import FileEntry, print_file_columns

VERSION = "1.0.0"
COLUMNS = 5

_HELP = """\
Usage: myls [options] [path]
Options:
  -v, --version           Show version
  -h, --help              Show this help message
  [path]      \t          Path to list (default: current directory)

Pattern matching:
  *.extension             List files with extension
  path/*.extension        List files with extension in path
  path/filename           Show details for filename

Examples:
  myls
  myls /home/user/documents
  myls *.txt
  myls /var/log/*.log
  myls /etc/passwd
"""


def help_text() -> str:
    """Return the usage message."""
    return _HELP


def _scan(dir_path: str, keep) -> list[FileEntry]:
    with os.scandir(dir_path) as scan:
        found = sorted((entry for entry in scan if keep(entry.name)), key=lambda e: e.name)
    entries = []
    for dir_entry in found:
        try:
            entries.append(FileEntry.from_dir_entry(dir_entry))
        except OSError:
            continue
    return entries


def directory_entries(dir_path: str | os.PathLike[str]) -> list[FileEntry]:
    """Return the non-hidden entries of ``dir_path``, sorted by name."""
    return _scan(os.fspath(dir_path), lambda name: not name.startswith("."))


def entries_with_extension(dir_path: str | os.PathLike[str], ext: str) -> list[FileEntry]:
    """Return the entries of ``dir_path`` whose names end with ``ext``, sorted by name."""
    return _scan(os.fspath(dir_path), lambda name: name.endswith(ext))


def process_pattern(pattern: str, out: TextIO | None = None) -> None:
    """List what ``pattern`` names: an extension glob or a single file."""
    out = out or sys.stdout
    if pattern.startswith("*."):
        print_file_columns(entries_with_extension(".", pattern[1:]), COLUMNS, out)
        return

    parts = pattern.split("/")
    if len(parts) > 1 and parts[-1].endswith(".*"):
        last = parts[-1]
        ext = last[1:] if last.startswith("*") else last
        print_file_columns(entries_with_extension("/".join(parts[:-1]), ext), COLUMNS, out)
        return

    try:
        entry = FileEntry.from_path(pattern)
    except FileNotFoundError:
        out.write(f"Error: No such file or directory: {pattern}\n")
        return
    print_file_columns([entry], 1, out)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the listing and return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    out = sys.stdout

    if args and args[0] in ("-h", "--help"):
        out.write(help_text())
        return 0
    if args and args[0] in ("-v", "--version"):
        out.write(f"Version {VERSION}\n")
        return 0

    path = args[0] if args else "."
    try:
        if os.path.isdir(path):
            print_file_columns(directory_entries(path), COLUMNS, out)
        else:
            process_pattern(path, out)
    except OSError as exc:
        sys.stderr.write(f"lsx: {exc}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())