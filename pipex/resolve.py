"""Locate a command on the search path given by an environment."""

from __future__ import annotations

import os
from typing import Iterable, Mapping, Optional, Sequence, Tuple, Union

from pipex.cstrings import split

Environment = Union[Mapping[str, str], Sequence[str]]


class CommandError(Exception):
    """A command could not be prepared to run; carries the exit status to use."""

    def __init__(self, message: str, exit_code: int) -> None:
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code


def get_path_env(env: Environment) -> Optional[str]:
    """Return the PATH value from a mapping or a list of NAME=VALUE strings."""
    if isinstance(env, Mapping):
        return env.get("PATH")
    for entry in env:
        if entry.startswith("PATH="):
            return entry[len("PATH="):]
    return None


def find_executable(name: str, paths: Iterable[str]) -> Optional[str]:
    """Return the first directory/name in paths that is executable, or None."""
    for directory in paths:
        candidate = f"{directory}/{name}"
        if os.access(candidate, os.X_OK):
            return candidate
    return None


def resolve_command(cmd: str, env: Environment) -> Tuple[str, list[str]]:
    """Split cmd on spaces and find its program on PATH.

    Returns the program's path and the argument list.  Raises CommandError
    with status 1 when PATH is missing and 127 when nothing is found.
    """
    args = split(cmd, " ")
    path_env = get_path_env(env)
    if path_env is None:
        raise CommandError("PATH not found", 1)
    if not args:
        raise CommandError("command not found", 127)
    program = find_executable(args[0], split(path_env, ":"))
    if program is None:
        raise CommandError("command not found", 127)
    return program, args