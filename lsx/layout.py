"""Column layout of file entries with icons and colours."""

from __future__ import annotations

import math
import os
import stat
import sys
from dataclasses import dataclass
from typing import Iterable, TextIO

from lsx.styles import COLORS, COLUMN_GAP, ICONS, MAX_NAME_WIDTH, file_style, truncate

_CONFIG_FILES: dict[str, str] = {
    "tailwind.config.js": "tailwind",
    "vue.config.js": "vue",
    "vite.config.js": "vite",
    "vite.config.ts": "vite",
    "next.config.js": "nextjs",
    "next.config.ts": "nextjs",
    ".eslintrc.js": "eslint",
    ".eslintrc.json": "eslint",
    ".eslintrc.yml": "eslint",
    ".eslintrc.yaml": "eslint",
}

_GIT_DOTFILES = frozenset({".gitignore", ".gitattributes"})


@dataclass(frozen=True)
class FileEntry:
    """The parts of a file's metadata that the listing shows."""

    name: str
    is_dir: bool = False
    is_executable: bool = False

    @classmethod
    def _from_stat(cls, name: str, st: os.stat_result) -> FileEntry:
        return cls(
            name=name,
            is_dir=stat.S_ISDIR(st.st_mode),
            is_executable=bool(st.st_mode & 0o111),
        )

    @classmethod
    def from_path(cls, path: str | os.PathLike[str]) -> FileEntry:
        """Stat ``path`` (following links) and name the entry after its last component."""
        text = os.fspath(path)
        stripped = text.rstrip("/") or "/"
        name = os.path.basename(stripped) or stripped
        return cls._from_stat(name, os.stat(text))

    @classmethod
    def from_dir_entry(cls, entry: os.DirEntry[str]) -> FileEntry:
        """Build an entry from a directory scan result, without following links."""
        return cls._from_stat(entry.name, entry.stat(follow_symlinks=False))


def config_icon_key(name: str) -> str | None:
    """Return the icon key for a framework config file name, or None."""
    return _CONFIG_FILES.get(name)


def _extension(name: str) -> str:
    dot = name.rfind(".")
    return name[dot:].lower() if dot >= 0 else ""


def _style(entry: FileEntry) -> tuple[str, str]:
    key = config_icon_key(entry.name)
    if key is not None:
        colour, icon = COLORS["yellow"], ICONS[key]
    else:
        colour, icon = file_style(
            entry.name, _extension(entry.name), entry.is_dir, entry.is_executable
        )
    if entry.is_dir and entry.name == ".git":
        icon = ICONS["git_folder"]
    if entry.name in _GIT_DOTFILES:
        icon = ICONS[entry.name]
    return colour, icon


def _pad(display: str, visible: str, width: int, last: bool) -> str:
    if last:
        return display
    return display + " " * (width - len(visible) + COLUMN_GAP)


def format_file_columns(entries: Iterable[FileEntry], num_columns: int) -> str:
    """Lay ``entries`` out column by column with icons; long names wrap onto a second line."""
    entries = list(entries)
    if not entries:
        return ""
    if num_columns <= 0:
        raise ValueError("number of columns must be positive")
    num_rows = math.ceil(len(entries) / num_columns)
    columns = [entries[col * num_rows:(col + 1) * num_rows] for col in range(num_columns)]
    widths = [
        max((min(len(entry.name), MAX_NAME_WIDTH) for entry in column), default=0)
        for column in columns
    ]
    reset, white = COLORS["reset"], COLORS["white"]

    lines: list[str] = []
    for row in range(num_rows):
        cells: list[tuple[FileEntry, str, str, str, str] | None] = []
        for column in columns:
            if row >= len(column):
                cells.append(None)
                continue
            entry = column[row]
            colour, icon = _style(entry)
            head = truncate(entry.name, MAX_NAME_WIDTH)
            tail = entry.name[len(head):]
            cells.append((entry, colour, icon, head, tail))

        main_parts = []
        for col, cell in enumerate(cells):
            if cell is None or not cell[3]:
                continue
            entry, colour, icon, head, _ = cell
            label = head + "/" if entry.is_dir else head
            display = f"{colour}{icon} {white}{label}{reset}"
            main_parts.append(_pad(display, label, widths[col], col == num_columns - 1))
        lines.append("".join(main_parts))

        if any(cell is not None and cell[4] for cell in cells):
            tail_parts = []
            for col, cell in enumerate(cells):
                last = col == num_columns - 1
                if cell is not None and cell[4]:
                    entry, colour, _, _, tail = cell
                    overflow = "/" + tail if entry.is_dir else tail
                    if len(overflow) > MAX_NAME_WIDTH:
                        overflow = truncate(overflow, MAX_NAME_WIDTH - 3) + "..."
                    display = f"{colour}  {overflow}{reset}"
                    tail_parts.append(_pad(display, overflow, widths[col], last))
                elif not last:
                    tail_parts.append(" " * (widths[col] + COLUMN_GAP))
            lines.append("".join(tail_parts))

        lines.append("")
    return "\n".join(lines) + "\n"


def print_file_columns(
    entries: Iterable[FileEntry], num_columns: int, file: TextIO | None = None
) -> None:
    """Write ``entries`` in columns to ``file`` (standard output by default)."""
    (file or sys.stdout).write(format_file_columns(entries, num_columns))