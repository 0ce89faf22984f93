"""Running two commands joined by a pipe, between an input and output file."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Callable, Mapping, Sequence

from pipex.paths import resolve_command
from pipex.splitting import split

USAGE = 'Usage: ./pipex infile "cmd1" "cmd2" outfile'

_FAILED_STATUS = 1


class PipexError(Exception):
    """A step of the pipeline could not be carried out."""


def parse_command(command: str) -> list[str]:
    """Split a command line on spaces into its arguments.

    Raises PipexError when the command holds no words.
    """
    args = split(command, " ")
    if not args:
        raise PipexError("Command parsing error")
    return args


def _spawn(command: str, env: Mapping[str, str], stdin, stdout) -> subprocess.Popen:
    args = parse_command(command)
    path = resolve_command(args[0], env)
    if path is None:
        raise PipexError("Command not found")
    try:
        return subprocess.Popen(
            args, executable=path, stdin=stdin, stdout=stdout, env=dict(env)
        )
    except OSError as exc:
        raise PipexError("Exec failed") from exc


def _start_reader(
    infile: str, command: str, env: Mapping[str, str], pipe_out: int
) -> subprocess.Popen:
    try:
        source = open(infile, "rb")
    except OSError as exc:
        raise PipexError("Infile open failed") from exc
    with source:
        return _spawn(command, env, source, pipe_out)


def _start_writer(
    outfile: str, command: str, env: Mapping[str, str], pipe_in: int
) -> subprocess.Popen:
    try:
        target = os.open(outfile, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644)
    except OSError as exc:
        raise PipexError("Outfile open failed") from exc
    try:
        return _spawn(command, env, pipe_in, target)
    finally:
        os.close(target)


def _launch(starter: Callable[..., subprocess.Popen], *args) -> subprocess.Popen | None:
    try:
        return starter(*args)
    except PipexError as exc:
        print(exc, file=sys.stderr)
        return None


def _status(process: subprocess.Popen | None) -> int:
    return _FAILED_STATUS if process is None else process.wait()


def run_pipeline(
    infile: str,
    cmd1: str,
    cmd2: str,
    outfile: str,
    environ: Mapping[str, str] | None = None,
) -> tuple[int, int]:
    """Run ``cmd1 < infile | cmd2 > outfile`` and wait for both sides.

    Each side is set up independently: if one fails, its error is written
    to standard error and the other still runs. Returns the exit statuses
    of both sides, with 1 for a side that could not be started. Raises
    PipexError if the pipe itself cannot be created.
    """
    env = dict(os.environ if environ is None else environ)
    try:
        read_fd, write_fd = os.pipe()
    except OSError as exc:
        raise PipexError("Pipe failed") from exc
    try:
        first = _launch(_start_reader, infile, cmd1, env, write_fd)
    finally:
        os.close(write_fd)
    try:
        second = _launch(_start_writer, outfile, cmd2, env, read_fd)
    finally:
        os.close(read_fd)
    return _status(first), _status(second)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the pipeline from command-line arguments; return the exit code."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4:
        print(USAGE, file=sys.stderr)
        return 1
    infile, cmd1, cmd2, outfile = args
    try:
        run_pipeline(infile, cmd1, cmd2, outfile)
    except PipexError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())