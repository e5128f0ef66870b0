"""Run ``infile | cmd1 | cmd2 > outfile`` without a shell."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Mapping, Sequence

from pipex.printf import eprint
from pipex.resolve import CommandError, resolve_command
from pipex.strutil import split


def _report(label: str, error: OSError) -> None:
    eprint("%s: %s\n", label, error.strerror or str(error))


def _spawn(
    words: Sequence[str], path: str, stdin: int, stdout: int,
    env: Mapping[str, str],
) -> subprocess.Popen | None:
    try:
        return subprocess.Popen(
            list(words), executable=path, stdin=stdin, stdout=stdout,
            env=dict(env),
        )
    except OSError as error:
        _report("execve failed", error)
        return None


def _resolve(command: str, env: Mapping[str, str]) -> tuple[list[str], str]:
    words = split(command, " ")
    return words, resolve_command(words, env)


def _start_first(
    infile: str, command: str, env: Mapping[str, str], write_fd: int
) -> subprocess.Popen | None:
    try:
        in_fd = os.open(infile, os.O_RDONLY)
    except OSError as error:
        _report(infile, error)
        return None
    try:
        words, path = _resolve(command, env)
        return _spawn(words, path, in_fd, write_fd, env)
    except CommandError as error:
        eprint("%s", error.message)
        return None
    finally:
        os.close(in_fd)


def _start_second(
    outfile: str, command: str, env: Mapping[str, str], read_fd: int
) -> tuple[subprocess.Popen | None, int]:
    try:
        out_fd = os.open(outfile, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o666)
    except OSError as error:
        _report(outfile, error)
        return None, 1
    try:
        words, path = _resolve(command, env)
        process = _spawn(words, path, read_fd, out_fd, env)
        return process, 1
    except CommandError as error:
        eprint("%s", error.message)
        return None, error.exit_status
    finally:
        os.close(out_fd)


def _exit_status(returncode: int) -> int:
    return 1 if returncode < 0 else returncode


def run_pipeline(
    infile: str, first: str, second: str, outfile: str,
    env: Mapping[str, str] | None = None,
) -> int:
    """Run ``first`` reading ``infile`` piped into ``second`` writing ``outfile``.

    Returns the exit status of the second command, or 1 if it was killed
    by a signal.
    """
    environment = dict(os.environ if env is None else env)
    read_fd, write_fd = os.pipe()
    try:
        first_process = _start_first(infile, first, environment, write_fd)
    finally:
        os.close(write_fd)
    try:
        second_process, failure_status = _start_second(
            outfile, second, environment, read_fd
        )
    finally:
        os.close(read_fd)
    if first_process is not None:
        first_process.wait()
    if second_process is None:
        return failure_status
    return _exit_status(second_process.wait())


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: pipex infile cmd1 cmd2 outfile."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4:
        return 1
    infile, first, second, outfile = args
    return run_pipeline(infile, first, second, outfile)


if __name__ == "__main__":
    sys.exit(main())