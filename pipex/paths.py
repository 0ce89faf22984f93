"""Locating executables through the PATH variable."""

from __future__ import annotations

import os
from collections.abc import Mapping


def find_path_entry(environ: Mapping[str, str] | None = None) -> str | None:
    """Return the value of PATH in ``environ``, or ``None`` if it is unset."""
    env = os.environ if environ is None else environ
    return env.get("PATH")


def join_path(directory: str, command: str) -> str:
    """Join a directory and a command name with a single slash."""
    return f"{directory}/{command}"


def _search_dirs(path_value: str) -> list[str]:
    dirs = path_value.split(":")
    if dirs and not dirs[-1]:
        dirs.pop()
    return dirs


def resolve_command(
    command: str, environ: Mapping[str, str] | None = None
) -> str | None:
    """Return the path to run for ``command``, or ``None`` if none is found.

    A command containing a slash is used as is when it exists and is
    readable and executable. Otherwise each PATH directory is tried in
    order and the first executable candidate wins. An empty trailing PATH
    entry is ignored; other empty entries stand for the root directory.
    """
    if "/" in command and os.access(command, os.F_OK | os.X_OK | os.R_OK):
        return command
    path_value = find_path_entry(environ)
    if path_value is None:
        return None
    for directory in _search_dirs(path_value):
        candidate = join_path(directory, command)
        if os.access(candidate, os.X_OK):
            return candidate
    return None