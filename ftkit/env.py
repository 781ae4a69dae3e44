"""Environment lookup and PATH-based program execution."""

from __future__ import annotations

import errno
import os
from typing import Optional, Sequence

from ftkit.strings import split


def getenv(envp: Optional[Sequence[str]], var: Optional[str]) -> Optional[str]:
    """Return what follows ``var`` in the first entry of ``envp`` starting with it.

    ``var`` is a prefix such as ``"PATH="``. Returns None when nothing matches.
    """
    if envp is None or var is None:
        return None
    for entry in envp:
        if entry.startswith(var):
            return entry[len(var):]
    return None


def getpath(path: str) -> list[str]:
    """Split a colon-separated search path into directories ending in ``/``.

    Empty components are dropped.
    """
    return [directory + "/" for directory in split(path, ":")]


def _environment(envp: Sequence[str]) -> dict[str, str]:
    env = {}
    for entry in envp:
        key, sep, value = entry.partition("=")
        if sep:
            env[key] = value
    return env


def execvpe(file: str, argv: Sequence[str], envp: Sequence[str]) -> None:
    """Replace the current process with ``file``, searching ``PATH`` in ``envp``.

    A name containing ``/`` is executed directly. Returns only by raising
    an :class:`OSError` when no program could be started.
    """
    env = _environment(envp)
    if "/" in file:
        os.execve(file, list(argv), env)
    path = getenv(envp, "PATH=")
    if path is None:
        raise FileNotFoundError(errno.ENOENT, "PATH is not set", file)
    last_error: Optional[OSError] = None
    for directory in getpath(path):
        try:
            os.execve(directory + file, list(argv), env)
        except OSError as exc:
            last_error = exc
    if last_error is not None:
        raise last_error
    raise FileNotFoundError(errno.ENOENT, "command not found", file)