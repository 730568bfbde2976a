# pipex

`pipex` runs the shell pipeline

```sh
< infile cmd1 | cmd2 > outfile
```

It opens `infile` and feeds it to the first command. The first command's output goes through a pipe to the second command. The second command's output is written to `outfile`. If `outfile` does not exist it is created with mode `0644`. If it does exist it is truncated.

## Installation

```sh
pip install .
```

## Command line

```sh
pipex infile "cmd1 args" "cmd2 args" outfile
```

Example:

```sh
pipex input.txt "grep error" "wc -l" count.txt
```

Each command is split on spaces. Runs of spaces count as one separator, and quoting is not interpreted. The first word is the program name. It is joined onto each directory listed in the `PATH` environment variable (`directory/name`), and the first result that is executable is started. The full current environment is passed to both commands.

Both commands are always attempted. A failure on one side, such as an input file that cannot be opened, does not stop the other side from running.

Problems are reported on standard error with a one-line message:

| Situation                              | Message                        | Status |
|----------------------------------------|--------------------------------|--------|
| Wrong number of arguments              | `Invalid number of arguments`  | 1      |
| Input or output file cannot be opened  | `no such file or directory`    | 1      |
| `PATH` is not set                      | `PATH not found`               | 1      |
| Empty command, or not found on `PATH`  | `command not found`            | 127    |
| Command found but could not be started | `execve failed`                | 126    |

The `pipex` command exits with status 1 only for a wrong number of arguments. Otherwise it exits with 0 once both commands have finished. The per-command statuses in the table are what `run_pipeline` returns for the side that failed.

## Library use

The pipeline can also be run from Python:

```python
import os
from pipex.cli import run_pipeline

status1, status2 = run_pipeline(
    "input.txt", "grep error", "wc -l", "count.txt", dict(os.environ)
)
```

`run_pipeline` returns a tuple with the exit status of each command. It waits for both commands to finish before returning.

`pipex.cli.main(argv=None)` is the command-line entry point. It takes the four arguments as a list, or reads `sys.argv` when none are given, and returns the exit status.

Command lookup is available on its own in `pipex.resolve`:

```python
from pipex.resolve import CommandError, find_executable, get_path_env, resolve_command

path_value = get_path_env({"PATH": "/usr/bin:/bin"})      # "/usr/bin:/bin"
program = find_executable("ls", path_value.split(":"))    # e.g. "/usr/bin/ls", or None
program, args = resolve_command("ls -l", {"PATH": "/usr/bin:/bin"})
```

- `get_path_env` accepts either a mapping or a list of `NAME=VALUE` strings. It returns the `PATH` value, or `None` if `PATH` is absent.
- `resolve_command` returns the program's path and the argument list.
- If the command cannot be resolved, `resolve_command` raises `CommandError`. The error's `message` and `exit_code` attributes hold the message and status from the table above.

## Helper modules

The package also has small helpers that follow classic C string and memory routines:

- `pipex.chars`: `atoi` and `itoa` with 32-bit signed wrap-around. It also has `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_lower` and `to_upper`, which take a one-character string or a character code.
- `pipex.cstrings`: `split`, `strlen`, `strdup`, `strjoin`, `strchr`, `strrchr`, `strnstr`, `strncmp`, `strlcpy`, `strlcat`, `strtrim`, `substr`, `strmapi` and `striteri`.
  - Searches return an index, or `None` when nothing is found.
  - `strlcpy` and `strlcat` return the resulting text together with the untruncated length.
- `pipex.memory`: `memset`, `bzero`, `calloc`, `memcpy`, `memmove`, `memcmp` and `memchr` on `bytearray` and other bytes-like buffers.
  - A byte count that is negative or longer than a buffer raises `ValueError`.
- `pipex.output`: `putchar_fd`, `putstr_fd`, `putendl_fd` and `putnbr_fd` write to a text stream or to an integer file descriptor.
- `pipex.linked`: `ListNode`, a singly linked list node that can be iterated from itself to the end, and `lstnew` to create one.

## What it does not do

- It runs exactly two commands. Longer chains of commands are not supported, and neither is a here-document input.
- Commands are not passed through a shell. There is no quoting, globbing, variable expansion or redirection inside a command string.
- A program name containing a slash is not run as given. It is still joined onto each `PATH` directory.