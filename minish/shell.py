"""The interactive shell: reading lines and running pipelines."""

import argparse
import io
import os
import signal
import subprocess
import sys
from contextlib import ExitStack
from dataclasses import dataclass, field

from minish.builtins import is_builtin, run_builtin
from minish.chars import is_empty
from minish.environment import Environment
from minish.errors import (
    HEREDOC_PROMPT,
    PROMPT,
    ShellError,
    ShellSyntaxError,
    launch_failure_message,
)
from minish.executor import _exit_status, _spawn
from minish.parser import ExitRequest, parse
from minish.tokens import Token, TokenType

try:
    import readline
except ImportError:
    readline = None

_REDIRECTS = (">", ">>", "<", "<<")
_INTERRUPTED_STATUS = 130


@dataclass
class _Stage:
    args: list = field(default_factory=list)
    redirects: list = field(default_factory=list)

    def token(self):
        kind = TokenType.ABS if self.args[0][:1] in (".", "/") else TokenType.CMD
        return Token(0, list(self.args), kind=kind)


def _stages(tokens):
    """Group tokens into pipeline stages with their redirections."""
    stages = []
    pending = None
    for token in tokens:
        args = list(token.args)
        if pending is not None:
            if not args:
                raise ShellSyntaxError()
            stages[-1].redirects.append((pending, args[0]))
            stages[-1].args.extend(args[1:])
        else:
            stage = _Stage()
            while len(args) >= 2 and args[0] in _REDIRECTS:
                stage.redirects.append((args[0], args[1]))
                args = args[2:]
            stage.args.extend(args)
            stages.append(stage)
        pending = token.next_sep if token.next_sep in _REDIRECTS else None
    return stages


class Shell:
    """A shell session with its own environment and last exit status."""

    def __init__(self, environ=None, out=None, err=None):
        environ = os.environ if environ is None else environ
        message = launch_failure_message(environ)
        if message:
            raise ShellError(message, 1)
        self.env = Environment.from_mapping(environ)
        self.env.increment_shlvl()
        self.out = sys.stdout if out is None else out
        self.err = sys.stderr if err is None else err
        self.status = 0
        self.running = True
        self._reader = input

    def _report(self, message):
        self.err.write(message + "\n")

    def run_line(self, line):
        """Run one command line and return the resulting exit status."""
        if is_empty(line):
            return self.status
        try:
            parsed = parse(line, self.env, self.status)
            if isinstance(parsed, ExitRequest):
                return self._exit(parsed)
            self.status = self._run_pipeline(parsed)
        except ShellError as error:
            self._report(error.message)
            self.status = error.status
        return self.status

    def _exit(self, request):
        if request.message:
            self._report(request.message)
        if request.status is not None:
            self.status = request.status
        if request.should_exit:
            self.running = False
        return self.status

    def _run_pipeline(self, tokens):
        stages = _stages(tokens)
        data = None
        status = 0
        for position, stage in enumerate(stages):
            last = position == len(stages) - 1
            try:
                status, data = self._run_stage(stage, data, last)
            except ShellError as error:
                self._report(error.message)
                status, data = error.status, b""
            except KeyboardInterrupt:
                self.out.write("\n")
                status, data = _INTERRUPTED_STATUS, b""
        if data:
            self.out.write(data.decode(errors="replace"))
        return status

    def _heredoc(self, delimiter):
        lines = []
        while True:
            try:
                line = self._reader(HEREDOC_PROMPT)
            except EOFError:
                break
            if line == delimiter:
                break
            lines.append(line + "\n")
        return "".join(lines)

    def _run_stage(self, stage, data, last):
        """Run one stage; return its status and the output left to pass on."""
        with ExitStack() as stack:
            sink = None
            for operator, target in stage.redirects:
                if operator == "<":
                    try:
                        with open(target, "rb") as source:
                            data = source.read()
                    except OSError:
                        raise ShellError(
                            f"Minishell: {target} : No such file or directory", 1
                        ) from None
                elif operator == "<<":
                    data = self._heredoc(target).encode()
                else:
                    mode = "wb" if operator == ">" else "ab"
                    try:
                        sink = stack.enter_context(open(target, mode))
                    except OSError as exc:
                        raise ShellError(f"Minishell: {target} : {exc.strerror}", 1) from None
            if not stage.args:
                return 0, b""
            if is_builtin(stage.args):
                buffer = io.StringIO()
                status = run_builtin(self.env, stage.args, buffer, self.err)
                output = buffer.getvalue().encode()
                if sink is not None:
                    sink.write(output)
                    return status, b""
                return status, output
            if sink is not None:
                stdout = sink
            elif last and self.out is sys.stdout:
                self.out.flush()
                stdout = None
            else:
                stdout = subprocess.PIPE
            completed = _spawn(stage.token(), self.env, input=data, stdout=stdout)
            return _exit_status(completed.returncode), completed.stdout or b""

    def repl(self, reader=None):
        """Read and run lines until ``exit`` or end of input; return the status."""
        self._reader = reader or input
        while self.running:
            try:
                line = self._reader(PROMPT)
            except EOFError:
                self.err.write("exit\n")
                break
            except KeyboardInterrupt:
                self.out.write("\n")
                continue
            self.run_line(line)
        return self.status


def _interactive_reader(prompt):
    line = input(prompt)
    if readline is not None and not is_empty(line):
        readline.add_history(line)
    return line


def main(argv=None):
    """Start an interactive shell session."""
    parser = argparse.ArgumentParser(prog="minish", description="A small interactive shell.")
    parser.parse_args(argv)
    if readline is not None:
        readline.set_auto_history(False)
    if hasattr(signal, "SIGQUIT"):
        signal.signal(signal.SIGQUIT, signal.SIG_IGN)
    try:
        shell = Shell()
    except ShellError as error:
        print(error.message, file=sys.stderr)
        return error.status
    return shell.repl(_interactive_reader)


if __name__ == "__main__":
    sys.exit(main())