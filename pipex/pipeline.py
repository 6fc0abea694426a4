"""Running `< infile cmd1 | cmd2 > outfile` as two connected processes."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Mapping
from typing import Optional, Union

from .commands import find_command
from .textops import split

USAGE = "Usage: pipex file1 cmd1 cmd2 file2"
STATUS_FAILURE = 1
STATUS_NOT_EXECUTABLE = 126
STATUS_NOT_FOUND = 127


class PipexError(Exception):
    """A failure that ends a command, carrying the exit status it produces."""

    def __init__(self, message: str, status: int = STATUS_FAILURE) -> None:
        super().__init__(message)
        self.status = status


def _report(message: str) -> None:
    print(message, file=sys.stderr)


def _describe(error: OSError) -> str:
    return error.strerror or os.strerror(error.errno or 0)


def parse_command(command: Optional[str]) -> list[str]:
    """Split a command line into its words, separated by single spaces.

    An empty command raises PipexError with status 127. A command made of
    spaces alone gives an empty list.
    """
    if not command:
        raise PipexError("Error: Empty command", STATUS_NOT_FOUND)
    return split(command, " ") or []


def _launch(
    command: str, stdin: int, stdout: int, environ: Mapping[str, str]
) -> Union[subprocess.Popen, int]:
    """Start command, or report why it could not start and return its status."""
    try:
        args = parse_command(command)
    except PipexError as error:
        _report(str(error))
        return error.status
    name = args[0] if args else ""
    path = find_command(name, environ)
    if path is None:
        _report(f"Error: Command not found: {name}")
        return STATUS_NOT_FOUND
    try:
        return subprocess.Popen(
            args, executable=path, stdin=stdin, stdout=stdout, env=dict(environ)
        )
    except PermissionError:
        return STATUS_NOT_EXECUTABLE
    except OSError as error:
        _report(f"Error: Execve failed: {_describe(error)}")
        return STATUS_FAILURE


def _status(process: Union[subprocess.Popen, int]) -> int:
    if isinstance(process, int):
        return process
    code = process.wait()
    # A process killed by a signal did not exit normally and reports 0.
    return code if code >= 0 else 0


def run_pipeline(
    infile: str,
    first: str,
    second: str,
    outfile: str,
    environ: Optional[Mapping[str, str]] = None,
) -> int:
    """Feed infile through first into second and write the result to outfile.

    Returns the exit status of the second command. Failures to open a file
    or to start a command are reported on standard error and give that
    command a failing status. Raises PipexError if no pipe can be made.
    """
    env = os.environ if environ is None else environ
    in_fd: Optional[int] = None
    in_error: Optional[OSError] = None
    try:
        in_fd = os.open(infile, os.O_RDONLY)
    except OSError as error:
        in_error = error
    try:
        read_fd, write_fd = os.pipe()
    except OSError as error:
        if in_fd is not None:
            os.close(in_fd)
        raise PipexError(f"Error: Pipe failed: {_describe(error)}") from error

    try:
        if in_fd is None:
            assert in_error is not None
            _report(f"{infile}: {_describe(in_error)}")
            producer: Union[subprocess.Popen, int] = STATUS_FAILURE
        else:
            producer = _launch(first, in_fd, write_fd, env)
        try:
            out_fd = os.open(outfile, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644)
        except OSError as error:
            _report(f"{outfile}: {_describe(error)}")
            consumer: Union[subprocess.Popen, int] = STATUS_FAILURE
        else:
            try:
                consumer = _launch(second, read_fd, out_fd, env)
            finally:
                os.close(out_fd)
    finally:
        if in_fd is not None:
            os.close(in_fd)
        os.close(read_fd)
        os.close(write_fd)

    _status(producer)
    return _status(consumer)


def main(argv: Optional[list[str]] = None) -> int:
    """Run the pipeline from infile, cmd1, cmd2, outfile; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 4:
        _report(USAGE)
        return STATUS_FAILURE
    try:
        return run_pipeline(*args)
    except PipexError as error:
        _report(str(error))
        return error.status