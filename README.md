# pipex

`pipex` runs the shell pipeline

```sh
< infile cmd1 | cmd2 > outfile
```

as a single command:

```sh
pipex infile "cmd1 args" "cmd2 args" outfile
```

The first command reads from `infile`, its output is piped into the second
command, and the second command writes to `outfile`. The output file is
created, or truncated if it already exists, with mode `0644`.

## How commands are found

Each command string is split on spaces; runs of spaces are treated as one
separator and there is no quoting or escaping. The first word is joined to
each non-empty directory listed in `PATH`, in order, and the first file that
is executable is run. The name is always looked up this way, so a word such as
`/bin/ls` is searched for under the `PATH` directories rather than run
directly. Without a `PATH` no command is found.

## Exit status

- The exit status of the second command when it runs. A command killed by a
  signal counts as status `0`.
- `127` if the second command is empty or cannot be found in `PATH`.
- `126` if it is found but permission to execute it is denied.
- `1` if the output file cannot be opened, if the command fails to start for
  another reason, if no pipe can be created, or if the number of arguments is
  not four (a usage message is printed).

Errors are reported on standard error. If the input file cannot be opened,
the error is reported, the first command is not started, and the second
command still runs with empty input, as in a shell.

## Installing

```sh
pip install .
```

Install the test extra and run the tests with:

```sh
pip install ".[test]"
pytest
```

## Using it from Python

```python
from pipex.pipeline import run_pipeline, main

status = run_pipeline("input.txt", "grep error", "wc -l", "count.txt")
status = main(["input.txt", "grep error", "wc -l", "count.txt"])
```

`run_pipeline` takes an optional `environ` mapping that is used both for the
`PATH` lookup and as the commands' environment; it defaults to `os.environ`.
`parse_command` splits a command string into words and raises `PipexError`
(whose `status` is `127`) for an empty string.

The package also holds the helpers the pipeline is built on, and a few more:

- `pipex.commands`: `get_paths`, `check_access` and `find_command`, which
  resolve a command name against `PATH`.
- `pipex.linereader`: `LineReader` and `read_lines`, which read a file
  descriptor one line at a time, as bytes with their newline, through a
  fixed-size buffer (42 bytes by default).
- `pipex.formatter`: `format_string` and `printf`, a small printf supporting
  `%c %s %d %i %u %x %X %p %%`, plus `format_hex` and `format_pointer`. An
  unknown conversion prints nothing, a trailing `%` is kept as is, `%s` of
  `None` gives `(null)` and `%p` of `None` or `0` gives `(nil)`.
- `pipex.textops`: `split`, `find_char`, `rfind_char`, `compare_n`,
  `find_substring`, `trim`, `substring`, `join`, `bounded_copy`,
  `bounded_concat`, `map_chars` and `iter_chars`.
- `pipex.charclass`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `to_upper` and `to_lower` for ASCII characters or code points.
- `pipex.numbers`: `atoi` and `itoa` for 32-bit signed integers.
- `pipex.output`: `put_char`, `put_str`, `put_endl` and `put_nbr`, which write
  to a file descriptor.
- `pipex.memory`: `zero`, `calloc`, `mem_find`, `mem_compare`, `mem_copy`,
  `mem_move` and `mem_set` for byte buffers.
- `pipex.linkedlist`: `LinkedList` and `Node`, a singly linked list with
  `push_front`, `push_back`, `last`, `clear`, `for_each` and `map`.

## What it does not do

`pipex` connects exactly two commands. It does not take longer chains of
commands, does not read input from a here-document, does not append to the
output file, and does not interpret shell syntax such as quotes, variables or
redirections inside the command strings.