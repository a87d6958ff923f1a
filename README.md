# feedline

`feedline` is a command-line tool that makes sure every file you give it ends
with a newline. If a file does not end with `\n`, the tool adds one. Empty files
and files that already end with a newline are not changed.

## Installation

```
pip install .
```

## Usage

```
feedline [OPTIONS] [FILES]...
```

You can also run it as `python -m feedline.cli`.

If you give no files on the command line and standard input is not a terminal,
`feedline` reads file paths from standard input, one per line. It ignores blank
lines.

### Options

| Option | Description |
| --- | --- |
| `--color {always,never,auto}` | When to use colored output. The default is `auto`, which uses color only when stdout is a terminal. Case-insensitive. |
| `-v` | Verbose output. May be repeated. |
| `-q`, `--quiet` | Show only errors. Overrides `-v`. |
| `-s`, `--sort BOOL` | Sort results by status (SUCCESS, SKIP, WARN, ERROR, with errors last), then by file name. Accepts `true/false`, `1/0`, `yes/no` and `y/n`, in any case. |
| `--version` | Print the version and exit. |

### Output

`feedline` writes one status line per file to standard error:

- `SUCCESS`: a newline was added.
- `SKIP`: the file is empty or already ends with a newline. Hidden with `-q`.
- `WARN`: the path is a directory or a symlink. Shown only with `-v`.
- `ERROR`: the path does not exist, is not a regular file, or could not be
  read or written. Always shown, even with `-q`.

With `-v`, it first writes the chosen settings to standard error: files, color,
verbosity and sort.

When standard output is not a terminal, `feedline` writes every file name it
was given to standard output, one per line. This lets it sit in the middle of a
pipe.

### Examples

Process a file in verbose mode, with color:

```
feedline -v --color=always file1.txt
```

Pipe in a list of files and sort the report:

```
ls examples/*.txt | feedline --sort true
```

Find files, pipe them through, then filter the report:

```
find ./src/ -type f | feedline --color=never 2>&1 | grep '^SKIP'
```

## Library use

```python
from feedline.fixer import fix_files

for result in fix_files(["a.txt", "b.txt"]):
    print(result.status.name, result.file, result.message)
```

The package contains these modules:

- `feedline.fixer`:
  - `fix_file(path)` and `fix_files(paths)` return `FeedlineResult` values and never raise.
  - `ensure_feedline(path)` does the same check on a regular file, but raises `OSError` when the file cannot be opened, read or written.
- `feedline.result`: `FeedlineResult(status, file, message)` is a frozen, orderable dataclass. `message_parts()` returns the pieces of its report line.
- `feedline.status`: the `Status`, `Verbosity` and `ColorOption` enums.
- `feedline.printer`: `Printer(color_option, verbosity, stdout, stderr)`, a writer that is aware of verbosity and color.
- `feedline.style`: `Styled`, `plain()` and `styled()`, text that renders with or without ANSI color codes.
- `feedline.cli`: `parse_bool`, `read_file_list`, `parse_args` and `main`.