import os
import stat

import pytest

from pipex.paths import find_path_entry, join_path, resolve_command


def _make_tool(directory, name, executable=True):
    directory.mkdir(parents=True, exist_ok=True)
    tool = directory / name
    tool.write_text("#!/bin/sh\nexit 0\n")
    mode = stat.S_IRUSR | stat.S_IWUSR
    if executable:
        mode |= stat.S_IXUSR
    tool.chmod(mode)
    return tool


def test_find_path_entry_returns_value():
    assert find_path_entry({"HOME": "/home/x", "PATH": "/a:/b"}) == "/a:/b"


def test_find_path_entry_missing():
    assert find_path_entry({"HOME": "/home/x"}) is None


def test_find_path_entry_ignores_similar_names():
    assert find_path_entry({"MYPATH": "/a", "PATHS": "/b"}) is None


def test_join_path_inserts_slash():
    assert join_path("/usr/bin", "ls") == "/usr/bin/ls"


def test_join_path_empty_directory():
    assert join_path("", "ls") == "/ls"


def test_resolve_first_directory_wins(tmp_path):
    first = _make_tool(tmp_path / "one", "tool")
    _make_tool(tmp_path / "two", "tool")
    env = {"PATH": f"{tmp_path / 'one'}:{tmp_path / 'two'}"}
    assert resolve_command("tool", env) == str(first)


def test_resolve_skips_non_executable(tmp_path):
    _make_tool(tmp_path / "one", "tool", executable=False)
    second = _make_tool(tmp_path / "two", "tool")
    env = {"PATH": f"{tmp_path / 'one'}:{tmp_path / 'two'}"}
    assert resolve_command("tool", env) == str(second)


def test_resolve_single_directory(tmp_path):
    tool = _make_tool(tmp_path / "bin", "tool")
    assert resolve_command("tool", {"PATH": str(tmp_path / "bin")}) == str(tool)


def test_resolve_with_trailing_colon(tmp_path):
    tool = _make_tool(tmp_path / "bin", "tool")
    env = {"PATH": f"{tmp_path / 'bin'}:"}
    assert resolve_command("tool", env) == str(tool)


def test_resolve_not_found(tmp_path):
    (tmp_path / "empty").mkdir()
    assert resolve_command("tool", {"PATH": str(tmp_path / "empty")}) is None


def test_resolve_without_path_variable():
    assert resolve_command("tool", {}) is None


def test_resolve_with_empty_path_variable():
    assert resolve_command("tool", {"PATH": ""}) is None


def test_resolve_explicit_path_used_as_is(tmp_path):
    tool = _make_tool(tmp_path / "bin", "tool")
    assert resolve_command(str(tool), {}) == str(tool)


def test_resolve_relative_slash_falls_back_to_path(tmp_path):
    nested = _make_tool(tmp_path / "bin" / "sub", "tool")
    env = {"PATH": str(tmp_path / "bin")}
    cwd = os.getcwd()
    os.chdir(tmp_path)
    try:
        assert resolve_command("sub/tool", env) == str(nested)
    finally:
        os.chdir(cwd)


@pytest.mark.parametrize("executable", [False])
def test_resolve_explicit_non_executable(tmp_path, executable):
    tool = _make_tool(tmp_path / "bin", "tool", executable=executable)
    assert resolve_command(str(tool), {"PATH": str(tmp_path / "bin")}) is None