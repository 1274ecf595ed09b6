import io

import pytest

from lsx.cli import (
    directory_entries,
    entries_with_extension,
    help_text,
    main,
    process_pattern,
)


@pytest.fixture
def tree(tmp_path):
    (tmp_path / "b.txt").write_text("")
    (tmp_path / "a.txt").write_text("")
    (tmp_path / "c.py").write_text("")
    (tmp_path / ".hidden.txt").write_text("")
    (tmp_path / "sub").mkdir()
    return tmp_path


def test_help_text_describes_usage():
    text = help_text()
    assert text.startswith("Usage: myls [options] [path]")
    assert "*.extension             List files with extension" in text


def test_main_help(capsys):
    assert main(["--help"]) == 0
    assert capsys.readouterr().out == help_text()


def test_main_version(capsys):
    assert main(["-v"]) == 0
    assert capsys.readouterr().out == "Version 1.0.0\n"


def test_directory_entries_skips_dotfiles_and_sorts(tree):
    names = [e.name for e in directory_entries(tree)]
    assert names == ["a.txt", "b.txt", "c.py", "sub"]


def test_entries_with_extension_includes_dotfiles(tree):
    names = [e.name for e in entries_with_extension(tree, ".txt")]
    assert names == [".hidden.txt", "a.txt", "b.txt"]


def test_entries_with_extension_missing_dir(tmp_path):
    with pytest.raises(FileNotFoundError):
        entries_with_extension(tmp_path / "nope", ".txt")


def test_process_pattern_missing_file(tmp_path):
    missing = str(tmp_path / "ghost")
    out = io.StringIO()
    process_pattern(missing, out)
    assert out.getvalue() == f"Error: No such file or directory: {missing}\n"


def test_process_pattern_existing_file(tree):
    out = io.StringIO()
    process_pattern(str(tree / "c.py"), out)
    assert "c.py" in out.getvalue()
    assert out.getvalue().endswith("\n\n")


def test_process_pattern_extension_glob(tree, monkeypatch):
    monkeypatch.chdir(tree)
    out = io.StringIO()
    process_pattern("*.txt", out)
    text = out.getvalue()
    assert "a.txt" in text and "b.txt" in text and ".hidden.txt" in text
    assert "c.py" not in text


def test_process_pattern_path_wildcard_suffix(tree):
    out = io.StringIO()
    process_pattern(f"{tree}/*.*", out)
    assert out.getvalue() == ""


def test_main_lists_directory(tree, capsys):
    assert main([str(tree)]) == 0
    text = capsys.readouterr().out
    for name in ("a.txt", "b.txt", "c.py", "sub/"):
        assert name in text
    assert ".hidden.txt" not in text


def test_main_missing_path_reports_error(tmp_path, capsys):
    missing = str(tmp_path / "missing")
    assert main([missing]) == 0
    assert capsys.readouterr().out == f"Error: No such file or directory: {missing}\n"


def test_main_unreadable_glob_dir_fails(tmp_path, capsys):
    assert main([f"{tmp_path}/nodir/*.*"]) == 1
    assert "nodir" in capsys.readouterr().err