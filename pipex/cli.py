"""Run `cmd1 < infile | cmd2 > outfile` from four command-line arguments."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import Mapping, Optional, Sequence, Tuple, Union

from pipex.resolve import CommandError, resolve_command

_Process = Union[subprocess.Popen, int]


def _report(message: str) -> None:
    sys.stderr.write(message + "\n")
    sys.stderr.flush()


def _spawn(cmd: str, env: Mapping[str, str], stdin: int, stdout: int) -> _Process:
    """Start cmd with the given descriptors, or return the exit status of a failure."""
    try:
        program, args = resolve_command(cmd, env)
    except CommandError as exc:
        _report(exc.message)
        return exc.exit_code
    try:
        return subprocess.Popen(
            args, executable=program, stdin=stdin, stdout=stdout, env=dict(env)
        )
    except OSError:
        _report("execve failed")
        return 126


def _wait(process: _Process) -> int:
    if isinstance(process, int):
        return process
    return process.wait()


def run_pipeline(
    infile: str, cmd1: str, cmd2: str, outfile: str, env: Mapping[str, str]
) -> Tuple[int, int]:
    """Feed infile through cmd1 into cmd2 and write the result to outfile.

    Returns the exit statuses of the two commands.  A failure on one side
    does not stop the other from running.
    """
    read_end, write_end = os.pipe()
    try:
        try:
            in_fd = os.open(infile, os.O_RDONLY)
        except OSError:
            _report("no such file or directory")
            first: _Process = 1
        else:
            try:
                first = _spawn(cmd1, env, in_fd, write_end)
            finally:
                os.close(in_fd)
        os.close(write_end)
        write_end = -1

        try:
            out_fd = os.open(outfile, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644)
        except OSError:
            _report("no such file or directory")
            second: _Process = 1
        else:
            try:
                second = _spawn(cmd2, env, read_end, out_fd)
            finally:
                os.close(out_fd)
        os.close(read_end)
        read_end = -1
    finally:
        for fd in (read_end, write_end):
            if fd >= 0:
                os.close(fd)
    return _wait(first), _wait(second)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point: pipex infile cmd1 cmd2 outfile."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4:
        _report("Invalid number of arguments")
        return 1
    infile, cmd1, cmd2, outfile = args
    run_pipeline(infile, cmd1, cmd2, outfile, os.environ)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())