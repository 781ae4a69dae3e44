from unittest import mock

import pytest

from ftkit.env import execvpe, getenv, getpath

ENVP = ["HOME=/home/user", "PATH=/usr/bin:/bin", "SHELL=/bin/sh"]


class _Executed(Exception):
    """Stands in for a successful exec, which never returns."""


def test_getenv_returns_value_after_prefix():
    assert getenv(ENVP, "PATH=") == "/usr/bin:/bin"
    assert getenv(ENVP, "HOME=") == "/home/user"


def test_getenv_missing_variable():
    assert getenv(ENVP, "EDITOR=") is None


def test_getenv_none_inputs():
    assert getenv(None, "PATH=") is None
    assert getenv(ENVP, None) is None


def test_getenv_first_match_wins():
    assert getenv(["A=1", "A=2"], "A=") == "1"


def test_getpath_appends_slash():
    assert getpath("/usr/bin:/bin") == ["/usr/bin/", "/bin/"]


def test_getpath_drops_empty_components():
    assert getpath("::/opt::") == ["/opt/"]
    assert getpath("") == []


def test_execvpe_direct_path_missing_raises(tmp_path):
    with pytest.raises(OSError):
        execvpe(str(tmp_path / "missing"), ["missing"], ENVP)


def test_execvpe_without_path_raises():
    with pytest.raises(FileNotFoundError):
        execvpe("anything", ["anything"], ["HOME=/home/user"])


def test_execvpe_not_found_in_path_raises(tmp_path):
    envp = [f"PATH={tmp_path}"]
    with pytest.raises(OSError):
        execvpe("no-such-program", ["no-such-program"], envp)


def test_execvpe_runs_program_found_in_path():
    with mock.patch("os.execve", side_effect=_Executed) as fake_execve:
        with pytest.raises(_Executed):
            execvpe("echo", ["echo", "hi"], ["PATH=/bin:/usr/bin"])
    assert fake_execve.call_count == 1
    args = fake_execve.call_args[0]
    assert args[0] == "/bin/echo"
    assert list(args[1]) == ["echo", "hi"]


def test_execvpe_tries_every_path_entry_in_order():
    with mock.patch(
        "os.execve", side_effect=FileNotFoundError("not found")
    ) as fake_execve:
        with pytest.raises(OSError):
            execvpe("prog", ["prog"], ["PATH=/first:/second"])
    tried = [call[0][0] for call in fake_execve.call_args_list]
    assert tried == ["/first/prog", "/second/prog"]