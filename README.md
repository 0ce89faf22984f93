# pipex

`pipex` does the same job as this shell line:

```sh
< infile cmd1 | cmd2 > outfile
```

It opens `infile` for reading and runs `cmd1` with that file as its standard
input. The output of `cmd1` goes through a pipe into `cmd2`, and whatever
`cmd2` prints is written to `outfile`. If `outfile` is missing it is created
with mode `0644`. If it exists it is truncated.

## Installation

```sh
pip install .
```

## Command line

```sh
pipex infile "cmd1 args" "cmd2 args" outfile
```

The same program also runs as `python -m pipex.pipeline`. For example:

```sh
pipex input.txt "grep error" "wc -l" count.txt
```

You must give exactly four arguments. With any other number, `pipex` prints
`Usage: ./pipex infile "cmd1" "cmd2" outfile` to standard error and exits
with status 1.

Each command string is split on spaces. Empty pieces are dropped and quotes
are not treated specially. The first word is looked up as follows:

* If it contains a `/` and names an existing file that is readable and
  executable, that file is run.
* Otherwise the directories in `PATH` are tried in order, and the first
  executable match is used. An empty entry at the end of `PATH` is ignored.
  Any other empty entry stands for the root directory.

Each side of the pipeline is set up on its own. When one side fails, a message
goes to standard error and the other side still runs. A side fails if:

* the input file cannot be opened (`Infile open failed`), or
* the output file cannot be opened (`Outfile open failed`), or
* its command is empty (`Command parsing error`), or
* its command cannot be found (`Command not found`), or
* its command cannot be started (`Exec failed`).

The exit status of `pipex` is 0 once both sides have been handled, whatever
the two commands return. The only other case is a pipe that cannot be
created: `pipex` then reports `Pipe failed` and exits with 1.

## Library use

```python
from pipex.pipeline import run_pipeline, parse_command, PipexError
from pipex.paths import resolve_command, find_path_entry, join_path

statuses = run_pipeline("input.txt", "grep error", "wc -l", "count.txt")
resolve_command("ls", {"PATH": "/usr/bin:/bin"})   # e.g. "/usr/bin/ls"
parse_command("grep -v foo")                        # ["grep", "-v", "foo"]
join_path("/bin", "ls")                             # "/bin/ls"
```

* `run_pipeline` accepts an optional `environ` mapping, which defaults to
  `os.environ`. It returns a tuple with the exit status of each command. A
  side that could not be started counts as 1.
* `parse_command` raises `PipexError` when the command has no words.
* `resolve_command` returns `None` when nothing is found.
* `find_path_entry` returns `None` when `PATH` is unset.

The package also contains small text helpers:

* `pipex.convert` has `atoi`, `atol` and `itoa`. They parse and format
  integers that wrap at 32 or 64 bits.
* `pipex.splitting` has `split`, `charset_split` and `is_word_char`.
  `charset_split` splits on whitespace, commas and slashes.
* `pipex.strtools` has `strnstr`, `strtrim`, `substr`, `strncmp`, `strchr`
  and `strrchr`. The search functions return an index, or `None` when there
  is no match.
* `pipex.printf` has `format_string`, `printf`, `to_hex` and `pointer_repr`.
  They handle the `%c %s %d %i %u %x %X %p %%` conversions. `printf` writes
  to standard output and returns the number of characters written.
* `pipex.linereader` has `LineReader`, which reads bytes from a file
  descriptor one line at a time. `read_line` returns `None` at the end of the
  input, and iterating over a `LineReader` yields each line.

```python
from pipex.printf import format_string
from pipex.linereader import LineReader

format_string("%s has %d items (0x%x)", "box", 42, 255)  # 'box has 42 items (0xff)'

for line in LineReader(fd, 42):
    ...
```

## Limitations

* Only two commands are supported. Longer chains are not.
* Commands are split on spaces only. Shell quoting, escapes, globbing and
  variable expansion are not handled.
* The output file is always truncated. It is never appended to.

## Running the tests

```sh
pip install ".[test]"
pytest
```