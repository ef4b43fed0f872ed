"""Finding and running external programs."""

import os
import signal
import subprocess

from minish.chars import is_sep
from minish.errors import (
    CommandNotFound,
    InvalidPath,
    IsADirectory,
    ShellSyntaxError,
)
from minish.tokens import TokenType


def find_in_path(env, name):
    """Return the first executable called ``name`` in the PATH directories."""
    search = env.get("PATH")
    if not search or not name:
        return None
    for directory in filter(None, search.split(":")):
        candidate = f"{directory}/{name}"
        if os.access(candidate, os.F_OK | os.X_OK):
            return candidate
    return None


def check_absolute(name):
    """Raise IsADirectory for a path that plainly names a directory.

    Such paths are a lone ``.`` or ``/`` and paths whose third character
    starts a run of slashes reaching the end.  Returns ``name`` otherwise.
    """
    if name[:1] in (".", "/"):
        if len(name) == 1:
            raise IsADirectory(name)
        if len(name) > 2 and name[2] == "/" and not name[2:].strip("/"):
            raise IsADirectory(name)
    return name


def resolve_absolute(name, cwd):
    """Return the path to run for a command given as a path."""
    if name.startswith("."):
        return f"{cwd}/{name}"
    return name


def _child_env(env):
    return {entry.name: entry.value for entry in env}


def _reset_signals():
    for signame in ("SIGINT", "SIGQUIT"):
        signum = getattr(signal, signame, None)
        if signum is not None:
            signal.signal(signum, signal.SIG_DFL)


_PREEXEC = _reset_signals if os.name == "posix" else None


def _exit_status(returncode):
    return 128 - returncode if returncode < 0 else returncode


def _prepare(token, env):
    """Return the program path and argument vector for a command token."""
    name = token.args[0] if token.args else ""
    if token.kind is TokenType.ABS:
        check_absolute(name)
        path = resolve_absolute(name, os.getcwd())
        parts = [part for part in name.split("/") if part]
        if not parts:
            raise IsADirectory(name)
        if not os.access(path, os.F_OK | os.X_OK):
            raise InvalidPath(name)
        if os.path.isdir(path):
            raise IsADirectory(name)
        return path, [parts[-1], *token.args[1:]]
    if is_sep(name):
        raise ShellSyntaxError()
    path = find_in_path(env, name)
    if path is None:
        raise CommandNotFound(name)
    return path, list(token.args)


def _spawn(token, env, **options):
    """Run a command token to completion and return the CompletedProcess."""
    path, argv = _prepare(token, env)
    try:
        return subprocess.run(
            argv, executable=path, env=_child_env(env), preexec_fn=_PREEXEC, **options
        )
    except OSError:
        if token.kind is TokenType.ABS:
            raise IsADirectory(token.args[0]) from None
        raise CommandNotFound(token.args[0]) from None


def execute(token, env):
    """Run an external command and return its exit status.

    Raises the ShellError subclass matching why it could not be started.
    """
    return _exit_status(_spawn(token, env).returncode)