"""The commands the shell carries out itself."""

import os
import string

from minish.errors import ShellError

_ALPHA = string.ascii_letters
_UNSET_VALUE = " "
_PREFIX_BUILTINS = ("pwd", "PWD", "cd", "unset", "export", "env")


def echo(args):
    """Return what ``echo`` prints for its argument list.

    Leading ``-n``, ``-nn``... words suppress the newline; a word such as
    ``-nx`` ends option parsing and brings the newline back.
    """
    if len(args) < 2:
        return "\n"
    index = 1
    n_option = -1
    while index < len(args) and args[index].startswith("-n") and n_option != 0:
        n_option = 1
        rest = args[index][1:].lstrip("n")
        if rest and (rest[0].isalnum() or rest[0] == "-"):
            n_option = 0
        else:
            index += 1
    words = args[index:]
    pieces = []
    for position, word in enumerate(words):
        pieces.append(word)
        if position + 1 < len(words) and word:
            pieces.append(" ")
    return "".join(pieces) + ("\n" if n_option <= 0 else "")


def pwd():
    """Return the current working directory."""
    return os.getcwd()


def env_listing(env):
    """Return what ``env`` prints."""
    return env.format_env()


def unset(env, names):
    """Remove, for each name, the first variable whose name begins with it.

    Returns the names of the variables removed.
    """
    removed = []
    if not names or not names[0]:
        return removed
    for name in names:
        if not name:
            continue
        match = next((entry for entry in env if entry.name.startswith(name)), None)
        if match is not None:
            env.remove(match.name)
            removed.append(match.name)
    return removed


def check_export(names):
    """Return an error message for every name that is not a valid identifier."""
    return [
        f"Minishell: export: {name}: not a valid identifier"
        for name in names
        if not name or name[0] not in _ALPHA
    ]


def export_listing(env):
    """Return what ``export`` with no arguments prints."""
    return "".join(f'declare -x {entry.name}="{entry.value}"\n' for entry in env)


def export(env, assignments):
    """Set variables from ``NAME=value`` words and return the text to print.

    With no assignments the listing of all variables is returned.  If any
    name is invalid nothing is set and ShellError is raised.
    """
    if not assignments or not assignments[0]:
        return export_listing(env)
    problems = check_export(assignments)
    if problems:
        raise ShellError("\n".join(problems), 1)
    for assignment in assignments:
        name, separator, value = assignment.partition("=")
        if not separator:
            value = _UNSET_VALUE
        if env.get(name):
            env.update(name, value)
        else:
            env.add(assignment)
    return ""


def cd(env, args):
    """Change directory, to HOME when no directory is given.

    OLDPWD and PWD are updated even when the change fails; a failure with
    an explicit directory raises ShellError.
    """
    previous = os.getcwd()
    target = args[1] if len(args) > 1 else ""
    failure = None
    if not target:
        try:
            os.chdir(env.get("HOME") or "")
        except OSError:
            pass
    else:
        try:
            os.chdir(target)
        except OSError:
            if os.access(target, os.F_OK | os.X_OK):
                reason = "Not a directory"
            else:
                reason = "No such file or directory"
            failure = f"Minishell: cd: {target}: {reason}"
    env.update("OLDPWD", previous)
    env.update("PWD", os.getcwd())
    if failure:
        raise ShellError(failure, 1)


def is_builtin(args):
    """Return True if the command is one the shell runs itself."""
    if not args:
        return False
    name = args[0]
    return name == "echo" or name.startswith(_PREFIX_BUILTINS)


def run_builtin(env, args, out, err):
    """Run a builtin, writing to ``out`` and ``err``.

    Returns its exit status, or None if the command is not a builtin.
    """
    if not is_builtin(args):
        return None
    name = args[0]
    try:
        if name.startswith(("pwd", "PWD")):
            out.write(pwd() + "\n")
        elif name.startswith("cd"):
            cd(env, args)
        elif name.startswith("unset"):
            unset(env, args[1:])
        elif name.startswith("export"):
            out.write(export(env, args[1:]))
        elif name.startswith("env"):
            out.write(env_listing(env))
        else:
            out.write(echo(args))
    except ShellError as error:
        err.write(error.message + "\n")
        return error.status
    return 0