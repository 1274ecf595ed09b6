# lsx

`lsx` lists the contents of a directory in columns. Each entry gets an
icon and a colour based on what it is: folders, executables, source
files, documents, media, archives and common framework config files.
Directories get a trailing `/`. Names longer than 20 characters wrap onto
a second line; a continuation that is still too long is cut short and
ends in `...`.

Icons are Nerd Font glyphs, so a terminal with a Nerd Font installed is
needed to see them properly. Colours are ANSI escape sequences and are
always written.

## Installation

```
pip install .
```

## Usage

```
lsx [options] [path]
```

Options:

- `-h`, `--help`: print the usage message
- `-v`, `--version`: print the version

With no path, the current directory is listed. A directory is listed in
five columns, sorted by name; entries whose names begin with a dot are
left out.

Patterns:

```
lsx "*.txt"            # entries in the current directory whose names end in .txt
lsx path/to/file       # show a single file
```

An extension pattern such as `*.txt` matches by name suffix and does
include names that begin with a dot. Quote patterns so that your shell
does not expand them first.

A path that does not exist prints
`Error: No such file or directory: <path>`. Other errors while reading
the file system are reported on standard error as `lsx: <message>`, and
the command exits with status 1.

## Using it from Python

```python
from lsx.cli import main

status = main(["some/directory"])
```

Other entry points:

- `lsx.cli.directory_entries(dir_path)` and
  `lsx.cli.entries_with_extension(dir_path, ext)` return sorted lists of
  `lsx.layout.FileEntry`.
- `lsx.cli.process_pattern(pattern, out)` lists what a pattern names,
  writing to `out`.
- `lsx.layout.FileEntry` holds a name and whether the entry is a
  directory or executable; build one with `FileEntry.from_path(path)` or
  `FileEntry.from_dir_entry(entry)`.
- `lsx.layout.format_file_columns(entries, num_columns)` returns the
  coloured column layout as a string; `print_file_columns` writes it.
- `lsx.styles.format_columns(items, num_columns)` lays out plain strings
  the same way without icons; `print_in_columns` writes it.
- `lsx.styles.file_style(name, ext, is_dir, is_executable)` returns the
  `(colour, icon)` pair for a file, and `color_for_extension(ext)` the
  colour for an extension.

## What it does not do

`lsx` has no long listing: it shows no sizes, permissions, owners or
dates, and offers no sorting or filtering options beyond the patterns
above.

## Running the tests

```
pip install ".[test]"
pytest
```