# pipex

`pipex` runs two commands connected by a pipe. The first command reads from an
input file. The second command writes to an output file. It does the same job
as this shell line:

```sh
< infile cmd1 | cmd2 > outfile
```

## Installation

```sh
pip install .
```

## Usage

```sh
pipex infile "cmd1 args" "cmd2 args" outfile
```

It takes exactly four arguments. Each command is split on spaces, and empty
words are dropped. There is no quoting and no globbing. A command name that
starts with `.` or `/` is used as a path as it stands. Any other name is looked
up in the directories listed in `PATH`. The first directory that holds a file
of that name decides the result: if that file is not executable, the command
fails with "Permission denied".

Example:

```sh
pipex input.txt "grep error" "wc -l" count.txt
```

The output file is created if it does not exist and truncated if it does. It is
created with mode `0666`, minus your umask.

### Exit status

The exit status is the status of the second command. Problems with either
command are reported on standard error.

| Situation                                          | Status |
|----------------------------------------------------|--------|
| wrong number of arguments (nothing is printed)     | 1      |
| output file cannot be opened                       | 1      |
| second command not found, or empty                 | 127    |
| second command exists but is not executable        | 126    |
| second command could not be started                | 1      |
| second command killed by a signal                  | 1      |

If the input file cannot be opened, or the first command cannot be found or
run, the error is reported. The second command still runs with empty input, as
it would in a shell pipeline, and its status is the result.

## Library use

The pipeline can also be run from Python:

```python
import os
from pipex.cli import run_pipeline

status = run_pipeline("input.txt", "grep error", "wc -l", "count.txt", dict(os.environ))
```

If you leave out `env`, the current environment is used.

Other modules:

- `pipex.resolve.resolve_command(words, env)` returns the path of the program
  that a split command line runs. If it cannot, it raises
  `pipex.resolve.CommandError`, which has `message` and `exit_status`
  attributes. `search_path`, `access_level` (returns an `Access` value of
  `MISSING`, `EXISTS` or `EXECUTABLE`) and `is_explicit_path` are the steps it
  is built from.
- `pipex.printf.format_message(fmt, *args)` is a small `%`-style formatter that
  supports `%c %s %d %i %u %x %X %p %%`. It raises `pipex.printf.FormatError`
  for an unknown conversion or a missing argument. `eprint` writes the result
  to standard error and returns its length.
- `pipex.strutil` has string helpers that behave like the C routines:
  `split`, `atoi`, `itoa`, `strtrim`, `strnstr`, `substr` and `strncmp`.

## What it does not do

`pipex` handles exactly two commands and one input file. It has no here-document
mode, no append mode, and no way to chain more than two commands.

## Running the tests

```sh
pip install ".[test]"
pytest
```