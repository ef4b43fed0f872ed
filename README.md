# minish

`minish` is a small interactive command shell. It reads a line, splits it
into words while honouring single and double quotes, expands `$NAME` and
`$?`, checks the line for syntax errors, groups the words into commands
joined by pipes and redirections, and then runs builtins in-process or
starts external programs found on `PATH`.

## Installing

```
pip install .
```

## Running

```
minish
```

The prompt is `Minishell-1.1$ `. End the session with `exit` or with
end-of-file (Ctrl-D), which prints `exit`. Ctrl-C at the prompt starts a
fresh line; `SIGQUIT` is ignored by the shell and restored to its default
in the programs it starts. Non-empty lines are added to the readline
history when the `readline` module is available.

If the shell is started with an empty environment it prints
`Unable to launch Minishell` and stops. On start-up `SHLVL` is raised by
one when it is set.

### Builtins

| Command  | Effect |
|----------|--------|
| `echo`   | Prints its arguments; leading `-n`, `-nn`, ... words suppress the newline. |
| `pwd`    | Prints the current directory. |
| `cd`     | Changes directory, to `$HOME` when given no argument; updates `PWD` and `OLDPWD`. |
| `env`    | Lists the environment as `NAME=value`. |
| `export` | Adds or updates `NAME=value` variables; with no argument lists them as `declare -x NAME="value"`. A name not starting with a letter is rejected and nothing is set. |
| `unset`  | For each name, removes the first variable whose name begins with it. |
| `exit`   | Leaves the shell, optionally with a numeric status. A negative status is taken modulo 256; a non-numeric argument gives status 255; more than one argument prints `too many arguments`, sets status 1 and keeps the shell running. |

### Commands, pipes and redirections

Paths starting with `.` or `/` are run directly; other commands are looked
up along `PATH`. Commands may be joined with `|`, and each may use
`> file`, `>> file`, `< file` and `<< DELIMITER` (the here-document is read
with the prompt `heredoc > `).

Exit statuses set by the shell itself:

| Situation | Status |
|-----------|--------|
| Unknown command | 127 |
| Directory given as a command | 126 |
| Syntax error (e.g. `| |`, `>>>`, a trailing `>`) | 258 |
| Interrupted with Ctrl-C while a command runs | 130 |

A line with unbalanced quotes is rejected with `Invalid Input`.

### What it does not do

The stages of a pipeline are run one after another, each receiving the
complete output of the one before; they do not run at the same time.
There is no globbing, no `&&`, `||` or `;`, no background jobs, no command
substitution, and no scripts: the shell reads only interactive lines.

## Using it from Python

```python
import os
import sys

from minish.shell import Shell

shell = Shell(os.environ, sys.stdout, sys.stderr)
shell.run_line("export GREETING=hello")
shell.run_line("echo $GREETING world")   # prints "hello world"
print(shell.status)
```

`Shell.repl(reader)` runs lines from any callable that takes a prompt and
returns a line, raising `EOFError` at the end.

The parts can also be used on their own:

```python
from minish.environment import Environment
from minish.parser import parse
from minish.splitter import split_line

env = Environment.from_mapping({"HOME": "/tmp"})
split_line('echo "a b" | cat')   # ['echo', '"a b"', '|', 'cat']
tokens = parse("echo $HOME", env, 0)
```

`parse` returns a list of `minish.tokens.Token` objects, or a
`minish.parser.ExitRequest` for an `exit` line, and raises
`minish.errors.ShellError` (or its subclass `ShellSyntaxError`) for lines
it rejects. Every `ShellError` carries a `message` and the `status` it sets.

## Running the tests

```
pip install .[test]
pytest
```