"""Locating the executable that a command line names."""

from __future__ import annotations

import enum
import errno
import os
from collections.abc import Mapping, Sequence

from pipex.strutil import split

NON_COMMAND = 127
NO_PERMISSION = 126


class Access(enum.IntEnum):
    """How far a path can be used as a program."""

    MISSING = 0
    EXISTS = 1
    EXECUTABLE = 2


class CommandError(Exception):
    """A command could not be resolved.

    ``message`` is the diagnostic line to show the user and
    ``exit_status`` is the status the command's process ends with.
    """

    def __init__(self, message: str, exit_status: int) -> None:
        super().__init__(message.rstrip("\n"))
        self.message = message
        self.exit_status = exit_status


def access_level(path: str) -> Access:
    """Tell whether ``path`` is missing, present, or present and executable."""
    if not os.access(path, os.F_OK):
        return Access.MISSING
    if os.access(path, os.X_OK):
        return Access.EXECUTABLE
    return Access.EXISTS


def is_explicit_path(word: str | None) -> bool:
    """Return True if ``word`` is an absolute or dot-relative path."""
    return bool(word) and word[0] in "./"


def _permission_denied(name: str) -> CommandError:
    return CommandError(f"'{name}': Permission denied\n", NO_PERMISSION)


def _not_found(name: str) -> CommandError:
    return CommandError(f"{name} command not found\n", NON_COMMAND)


def search_path(path_value: str, name: str) -> str:
    """Find ``name`` in the colon-separated directories of ``path_value``.

    The first directory holding a file of that name decides: if the file
    is executable its path is returned, otherwise permission is denied.
    """
    for directory in split(path_value, ":"):
        candidate = f"{directory}/{name}"
        level = access_level(candidate)
        if level is Access.EXECUTABLE:
            return candidate
        if level is Access.EXISTS:
            raise _permission_denied(name)
    raise _not_found(name)


def resolve_command(
    words: Sequence[str], env: Mapping[str, str] | None = None
) -> str:
    """Return the path of the program that ``words`` runs.

    Raises CommandError with the status the command should end with.
    """
    if not words:
        raise CommandError("'': command not found\n", NON_COMMAND)
    name = words[0]
    environment = os.environ if env is None else env
    if not is_explicit_path(name):
        path_value = environment.get("PATH")
        if path_value is None:
            raise _not_found(name)
        return search_path(path_value, name)

    level = access_level(name)
    if level is Access.EXECUTABLE:
        return name
    if level is Access.EXISTS:
        raise _permission_denied(name)
    try:
        os.stat(name)
    except OSError as error:
        reason = error.strerror or os.strerror(errno.ENOENT)
    else:
        reason = os.strerror(errno.ENOENT)
    raise CommandError(f"{name}: {reason}\n", NON_COMMAND)