import io
import os

import pytest

from lsx.layout import (
    FileEntry,
    config_icon_key,
    format_file_columns,
    print_file_columns,
)
from lsx.styles import COLORS, ICONS, MAX_NAME_WIDTH


def test_config_icon_key_known_names():
    assert config_icon_key("tailwind.config.js") == "tailwind"
    assert config_icon_key("vite.config.ts") == "vite"
    assert config_icon_key("next.config.js") == "nextjs"
    assert config_icon_key(".eslintrc.yaml") == "eslint"


def test_config_icon_key_unknown_name():
    assert config_icon_key("main.go") is None


def test_from_path_regular_file(tmp_path):
    target = tmp_path / "notes.txt"
    target.write_text("hello")
    os.chmod(target, 0o644)
    entry = FileEntry.from_path(target)
    assert entry == FileEntry("notes.txt", is_dir=False, is_executable=False)


def test_from_path_directory_with_trailing_slash(tmp_path):
    sub = tmp_path / "sub"
    sub.mkdir()
    entry = FileEntry.from_path(str(sub) + "/")
    assert entry.name == "sub"
    assert entry.is_dir


def test_from_path_executable(tmp_path):
    target = tmp_path / "run"
    target.write_text("#!/bin/sh\n")
    os.chmod(target, 0o755)
    assert FileEntry.from_path(target).is_executable


def test_from_path_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        FileEntry.from_path(tmp_path / "absent")


def test_from_dir_entry(tmp_path):
    (tmp_path / "a.py").write_text("")
    (tmp_path / "d").mkdir()
    with os.scandir(tmp_path) as scan:
        entries = sorted((FileEntry.from_dir_entry(e) for e in scan), key=lambda e: e.name)
    assert [(e.name, e.is_dir) for e in entries] == [("a.py", False), ("d", True)]


def test_empty_input_gives_empty_text():
    assert format_file_columns([], 5) == ""


def test_non_positive_columns_rejected():
    with pytest.raises(ValueError):
        format_file_columns([FileEntry("a")], 0)


def test_single_file_exact_layout():
    text = format_file_columns([FileEntry("main.go")], 1)
    expected = (
        COLORS["cyan"] + ICONS[".go"] + " " + COLORS["white"] + "main.go" + COLORS["reset"] + "\n\n"
    )
    assert text == expected


def test_directory_has_slash_and_folder_icon():
    text = format_file_columns([FileEntry("src", is_dir=True)], 1)
    assert COLORS["blue"] + ICONS["folder"] in text
    assert "src/" in text


def test_git_directory_icon():
    text = format_file_columns([FileEntry(".git", is_dir=True)], 1)
    assert ICONS["git_folder"] in text
    assert ICONS["folder"] not in text


def test_gitignore_icon():
    text = format_file_columns([FileEntry(".gitignore")], 1)
    assert ICONS[".gitignore"] in text
    assert COLORS["green"] in text


def test_framework_config_uses_yellow():
    text = format_file_columns([FileEntry("vue.config.js")], 1)
    assert text.startswith(COLORS["yellow"] + ICONS["vue"])


def test_column_major_order():
    names = ["a1", "a2", "b1", "b2"]
    text = format_file_columns([FileEntry(n) for n in names], 2)
    lines = text.split("\n")
    assert "a1" in lines[0] and "b1" in lines[0]
    assert "a2" in lines[2] and "b2" in lines[2]
    assert lines[1] == "" and lines[3] == ""


def test_long_name_wraps_onto_second_line():
    name = "x" * MAX_NAME_WIDTH + "tail"
    text = format_file_columns([FileEntry(name)], 1)
    lines = text.split("\n")
    assert "x" * MAX_NAME_WIDTH in lines[0]
    assert "tail" not in lines[0]
    assert "  tail" in lines[1]
    assert lines[2] == ""


def test_very_long_overflow_is_ellipsised():
    name = "y" * MAX_NAME_WIDTH + "z" * (MAX_NAME_WIDTH * 2)
    text = format_file_columns([FileEntry(name)], 1)
    overflow_line = text.split("\n")[1]
    assert "z" * (MAX_NAME_WIDTH - 3) + "..." in overflow_line
    assert "z" * (MAX_NAME_WIDTH - 2) not in overflow_line


def test_print_matches_format():
    entries = [FileEntry("a.rs"), FileEntry("b", is_dir=True), FileEntry("c.md")]
    buffer = io.StringIO()
    print_file_columns(entries, 2, buffer)
    assert buffer.getvalue() == format_file_columns(entries, 2)