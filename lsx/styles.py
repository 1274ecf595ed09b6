"""Icons, colours and column layout for plain text items."""

from __future__ import annotations

import math
import sys
from typing import Iterable, TextIO

MAX_NAME_WIDTH = 20
COLUMN_GAP = 4

ICONS: dict[str, str] = {
    # Folders
    "folder": "\uf07b",
    "open_folder": "\uf07c",
    "git_folder": "\uf1d3",
    # Framework specific
    "tailwind": "\ue8ba",
    "vue": "\ue6a0",
    "vue.config.json": "\ued4a",
    "vite": "\ue8d7",
    "nextjs": "\ue83e",
    "svelte": "\ue8b7",
    "eslint": "\ue74b",
    "package.json": "\uf487",
    # Programming languages
    ".asm": "\ue6ab",
    ".go": "\ue627",
    "go.mod": "\ue65e",
    ".py": "\ue73c",
    ".js": "\ue781",
    ".ts": "\ue628",
    ".jsx": "\ued46",
    ".tsx": "\ued46",
    ".html": "\ue736",
    ".css": "\ue749",
    ".json": "\ue60b",
    ".md": "\ue73e",
    ".java": "\ue738",
    ".c": "\ue61e",
    ".o": "\uf013",
    ".cpp": "\ue61d",
    ".cs": "\uf81a",
    ".rb": "\ue739",
    ".php": "\ue73d",
    ".rs": "\ue7a8",
    ".swift": "\ue755",
    ".scala": "\ue737",
    ".dart": "\ue798",
    ".kt": "\ue634",
    ".ex": "\ue62d",
    ".exs": "\ue62d",
    ".hs": "\ue777",
    ".sh": "\ue795",
    ".pl": "\ue769",
    ".r": "\ue76c",
    ".coffee": "\ue7b1",
    ".d": "\ue7af",
    ".m": "\ue82a",
    ".mat": "\ue82a",
    ".ps1": "\ue7d8",
    ".jil": "\ue80d",
    ".lua": "\ue826",
    ".ml": "\ue62b",
    ".f90": "\ue7de",
    ".vim": "\ue62b",
    ".vimrc": "\ue62b",
    ".bash": "\ue760",
    ".bashrc": "\ue760",
    ".zsh": "\ue760",
    ".zshrc": "\ue760",
    ".ads": "\ue6b5",
    ".cbl": "\ue6b5",
    ".db": "\uf01b",
    ".sql": "\uf1c0",
    ".fs": "\ue7a7",
    ".fsi": "\ue7a7",
    ".rkt": "\ue7d4",
    ".clj": "\ue7d0",
    ".vb": "\ufbe8",
    ".vba": "\ufbe8",
    # Markup and config files
    ".xml": "\ue62c",
    ".yml": "\ue60c",
    ".yaml": "\ue60c",
    ".csv": "\ue60d",
    ".toml": "\ue60e",
    ".ini": "\ue60e",
    ".conf": "\ue615",
    ".tex": "\ue69b",
    # Documents
    ".txt": "\uf15c",
    ".pdf": "\uf1c1",
    ".doc": "\uf1c2",
    ".docx": "\uf1c2",
    ".xls": "\uf1c3",
    ".xlsx": "\uf1c3",
    ".ppt": "\uf1c4",
    ".pptx": "\uf1c4",
    ".odt": "\uf15c",
    ".ods": "\uf1c3",
    ".odp": "\uf1c4",
    ".log": "\uf4ed",
    ".ipynb": "\ue80f",
    # Images
    ".jpg": "\uf1c5",
    ".jpeg": "\uf1c5",
    ".png": "\uf1c5",
    ".gif": "\uf1c5",
    ".svg": "\uf1c5",
    # Archives
    ".zip": "\uf1c6",
    ".tar": "\uf1c6",
    ".gz": "\uf1c6",
    ".rar": "\uf1c6",
    ".7z": "\uf1c6",
    # Video
    ".mp4": "\uf03d",
    ".avi": "\uf03d",
    ".mkv": "\uf03d",
    ".mov": "\uf03d",
    ".flv": "\uf03d",
    # eBooks
    ".epub": "\uf02d",
    ".mobi": "\uf02d",
    # git dotfiles
    ".gitignore": "\ue65d",
    ".gitattributes": "\ue65d",
    # Special files
    "executable": "\ueae8",
    "dockerfile": "\ue7b0",
    "makefile": "\ue70e",
    "cmake": "\ue794",
    # Default
    "default": "\uf15b",
}

COLORS: dict[str, str] = {
    "reset": "\x1b[0m",
    "bold": "\x1b[1m",
    "dim": "\x1b[2m",
    "italic": "\x1b[3m",
    "underline": "\x1b[4m",
    "blink": "\x1b[5m",
    "reverse": "\x1b[7m",
    "hidden": "\x1b[8m",
    "strikethrough": "\x1b[9m",
    "black": "\x1b[30m",
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "blue": "\x1b[34m",
    "magenta": "\x1b[35m",
    "cyan": "\x1b[36m",
    "white": "\x1b[37m",
    "bright_black": "\x1b[90m",
    "bright_red": "\x1b[91m",
    "bright_green": "\x1b[92m",
    "bright_yellow": "\x1b[93m",
    "bright_blue": "\x1b[94m",
    "bright_magenta": "\x1b[95m",
    "bright_cyan": "\x1b[96m",
    "bright_white": "\x1b[97m",
    "BG_black": "\x1b[40m",
    "BG_red": "\x1b[41m",
    "BG_green": "\x1b[42m",
    "BG_yellow": "\x1b[43m",
    "BG_blue": "\x1b[44m",
    "BG_magenta": "\x1b[45m",
    "BG_cyan": "\x1b[46m",
    "BG_white": "\x1b[47m",
    "BG_bright_black": "\x1b[100m",
    "BG_bright_red": "\x1b[101m",
    "BG_bright_green": "\x1b[102m",
    "BG_bright_yellow": "\x1b[103m",
    "BG_bright_blue": "\x1b[104m",
    "BG_bright_magenta": "\x1b[105m",
    "BG_bright_cyan": "\x1b[106m",
    "BG_bright_white": "\x1b[107m",
}

# Each category: (extensions, colour for members without an override, overrides).
# Colours are tuples of COLORS keys, concatenated in order. Earlier categories win.
_CATEGORIES: list[tuple[tuple[str, ...], tuple[str, ...], dict[tuple[str, ...], tuple[str, ...]]]] = [
    (
        (".asm", ".go", ".py", ".js", ".ts", ".jsx", ".tsx", ".java", ".c", ".o",
         ".cpp", ".cs", ".rb", ".php", ".swift", ".rs", ".dart", ".kt", ".scala",
         ".ex", ".exs", ".hs", ".pl", ".r", ".coffee", ".d", ".m", ".mat", ".ps1",
         ".jil", ".lua", ".ml", ".f90", ".vim", ".vimrc", ".bash", ".bashrc",
         ".zsh", ".zshrc", ".ads", ".cbl", ".sql"),
        ("bright_white",),
        {
            ("cyan",): (".java", ".go", ".jsx", ".ex", ".exs", ".f90"),
            ("bright_blue",): (".py", ".asm", ".dart", ".ps1"),
            ("yellow",): (".rs", ".hs", ".ml"),
            ("bright_yellow",): (".js", ".m", ".mat", ".cbl"),
            ("blue",): (".ts", ".tsx", ".lua"),
            ("red",): (".kt", ".jil"),
            ("bright_green",): (".c", ".cpp", ".cs"),
            ("bright_red",): (".rb",),
            ("bright_magenta",): (".php", ".scala", ".ads"),
            ("bright_cyan",): (".pl", ".sql"),
            ("green",): (".r", ".bash", ".zsh", ".vim", ".vimrc"),
            ("magenta",): (".d",),
        },
    ),
    (
        (".html", ".css", ".scss", ".sass", ".less", ".vue"),
        ("yellow",),
        {
            ("yellow", "bold"): (".html",),
            ("bright_magenta",): (".css", ".scss", ".sass", ".less"),
        },
    ),
    ((".json", ".xml", ".yaml", ".yml", ".toml", ".csv"), ("bright_yellow",), {}),
    (
        (".txt", ".md", ".pdf", ".doc", ".docx", ".odt", ".xls", ".xlsx", ".ppt",
         ".pptx", ".log", ".ipynb"),
        ("white",),
        {
            ("bright_red",): (".pdf", ".doc", ".docx", ".odt"),
            ("bright_green",): (".xls", ".xlsx"),
            ("bright_yellow",): (".ppt", ".pptx"),
            ("cyan",): (".log",),
            ("yellow", "bold"): (".ipynb",),
        },
    ),
    ((".jpg", ".jpeg", ".png", ".gif", ".bmp", ".svg", ".webp"), ("bright_cyan",), {}),
    ((".mp3", ".wav", ".ogg", ".flac", ".aac", ".m4a", ".epub", ".mobi"), ("magenta",), {}),
    ((".mp4", ".avi", ".mkv", ".mov", ".wmv", ".flv", ".webm"), ("bright_magenta",), {}),
    ((".zip", ".tar", ".gz", ".bz2", ".7z", ".rar", ".xz"), ("red",), {}),
    (
        (".sh", ".bash", ".zsh", ".fish", ".conf", ".cfg", ".ini", ".dockerfile",
         ".makefile", ".cmake", ".gitignore", ".gitattributes"),
        ("green",),
        {},
    ),
]


def _build_extension_colors() -> dict[str, str]:
    table: dict[str, str] = {}
    for extensions, default, overrides in _CATEGORIES:
        override_for = {ext: keys for keys, exts in overrides.items() for ext in exts}
        for ext in extensions:
            keys = override_for.get(ext, default)
            table.setdefault(ext, "".join(COLORS[key] for key in keys))
    return table


_EXTENSION_COLORS = _build_extension_colors()

# Whole file names with their own style: name -> (colour, icon).
_NAMED_FILES: dict[str, tuple[str, str]] = {
    "go.mod": (COLORS["cyan"], ICONS["go.mod"]),
    "go.sum": (COLORS["cyan"], ICONS["go.mod"]),
    "package.json": (COLORS["bright_green"] + COLORS["bold"], ICONS["package.json"]),
    "tailwind.config.js": (COLORS["bright_blue"], ICONS["tailwind"]),
    "tailwind.config.ts": (COLORS["bright_blue"], ICONS["tailwind"]),
    "vue.config.js": (COLORS["bright_blue"], ICONS.get("vue.config.js", "")),
    ".eslintrc.js": (COLORS["bright_blue"], ICONS["eslint"]),
    ".eslintrc.json": (COLORS["bright_blue"], ICONS["eslint"]),
    ".eslintrc.yml": (COLORS["bright_blue"], ICONS["eslint"]),
    ".eslintrc.yaml": (COLORS["bright_blue"], ICONS["eslint"]),
}


def color_for_extension(ext: str) -> str:
    """Return the ANSI colour sequence used for files with extension ``ext``."""
    return _EXTENSION_COLORS.get(ext, COLORS["dim"])


def file_style(name: str, ext: str, is_dir: bool, is_executable: bool) -> tuple[str, str]:
    """Return ``(colour, icon)`` for a file with the given name and properties."""
    if is_dir:
        return COLORS["blue"], ICONS["folder"]
    if is_executable:
        return COLORS["bright_green"], ICONS["executable"]
    if name in _NAMED_FILES:
        return _NAMED_FILES[name]
    if ext in ICONS:
        return color_for_extension(ext), ICONS[ext]
    return COLORS["dim"], ICONS["default"]


def truncate(text: str, width: int) -> str:
    """Cut ``text`` to at most ``width`` characters."""
    return text if len(text) <= width else text[:width]


def _row_count(total: int, num_columns: int) -> int:
    if num_columns <= 0:
        raise ValueError("number of columns must be positive")
    return math.ceil(total / num_columns)


def _cell(text: str, width: int, last: bool) -> str:
    if last:
        return text
    return text + " " * (width - len(text) + COLUMN_GAP)


def format_columns(items: Iterable[str], num_columns: int) -> str:
    """Lay ``items`` out column by column and return the text, long names wrapped."""
    items = list(items)
    if not items:
        return ""
    num_rows = _row_count(len(items), num_columns)
    columns = [items[col * num_rows:(col + 1) * num_rows] for col in range(num_columns)]
    widths = [max((min(len(item), MAX_NAME_WIDTH) for item in column), default=0)
              for column in columns]

    lines: list[str] = []
    for row in range(num_rows):
        cells = [column[row] if row < len(column) else None for column in columns]
        heads: list[str | None] = []
        tails: list[str] = []
        for item in cells:
            if item is None:
                heads.append(None)
                tails.append("")
            elif len(item) > MAX_NAME_WIDTH:
                head = truncate(item, MAX_NAME_WIDTH)
                heads.append(head)
                tails.append(item[len(head):])
            else:
                heads.append(item)
                tails.append("")

        main = "".join(
            _cell(head, widths[col], col == num_columns - 1)
            for col, head in enumerate(heads)
            if head
        )
        lines.append(main)

        if any(tails):
            parts = []
            for col, tail in enumerate(tails):
                last = col == num_columns - 1
                if tail:
                    if len(tail) > MAX_NAME_WIDTH:
                        tail = truncate(tail, MAX_NAME_WIDTH - 3) + "..."
                    parts.append(_cell(tail, widths[col], last))
                elif not last:
                    parts.append(" " * (widths[col] + COLUMN_GAP))
            lines.append("".join(parts))

        lines.append("")
    return "\n".join(lines) + "\n"


def print_in_columns(items: Iterable[str], num_columns: int, file: TextIO | None = None) -> None:
    """Write ``items`` in columns to ``file`` (standard output by default)."""
    (file or sys.stdout).write(format_columns(items, num_columns))