"""Errors the shell reports, each carrying the exit status it sets."""

PROMPT = "Minishell-1.1$ "
HEREDOC_PROMPT = "heredoc > "

SYNTAX_ERROR_STATUS = 258
COMMAND_NOT_FOUND_STATUS = 127
IS_A_DIRECTORY_STATUS = 126


class ShellError(Exception):
    """An error message for stderr together with the resulting status."""

    def __init__(self, message, status):
        super().__init__(message)
        self.message = message
        self.status = status

    def __str__(self):
        return self.message


class ShellSyntaxError(ShellError):
    """The line could not be parsed."""

    def __init__(self):
        super().__init__("Minishell: syntax error", SYNTAX_ERROR_STATUS)


class CommandNotFound(ShellError):
    """No executable of that name was found on PATH."""

    def __init__(self, command):
        super().__init__(
            f"Minishell: {command} : command not found", COMMAND_NOT_FOUND_STATUS
        )
        self.command = command


class IsADirectory(ShellError):
    """A path given as a command names a directory."""

    def __init__(self, path):
        super().__init__(f"Minishell: {path} : is a Directory", IS_A_DIRECTORY_STATUS)
        self.path = path


class InvalidPath(ShellError):
    """A path given as a command does not exist or cannot be run."""

    def __init__(self, path):
        super().__init__(f"Minishell: {path} : No such file or directory", 0)
        self.path = path


def launch_failure_message(env):
    """Return the start-up failure message when the environment is empty."""
    if not env:
        return "Unable to launch Minishell"
    return None