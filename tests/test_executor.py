import pytest

from minish.environment import Environment
from minish.errors import (
    CommandNotFound,
    InvalidPath,
    IsADirectory,
    ShellSyntaxError,
)
from minish.executor import check_absolute, execute, find_in_path, resolve_absolute
from minish.tokens import Token, TokenType


def make_script(directory, name, body, mode=0o755):
    path = directory / name
    path.write_text("#!/bin/sh\n" + body + "\n")
    path.chmod(mode)
    return path


def test_find_in_path_searches_in_order(tmp_path):
    make_script(tmp_path, "tool", "exit 0")
    env = Environment([f"PATH={tmp_path}/none:{tmp_path}"])
    assert find_in_path(env, "tool") == f"{tmp_path}/tool"


def test_find_in_path_missing(tmp_path):
    env = Environment([f"PATH={tmp_path}"])
    assert find_in_path(env, "tool") is None


def test_find_in_path_skips_non_executable(tmp_path):
    make_script(tmp_path, "tool", "exit 0", mode=0o644)
    env = Environment([f"PATH={tmp_path}"])
    assert find_in_path(env, "tool") is None


def test_find_in_path_without_path_variable():
    assert find_in_path(Environment(["HOME=/"]), "ls") is None


@pytest.mark.parametrize("name", ["/", ".", "../", ".//", "///"])
def test_check_absolute_directories(name):
    with pytest.raises(IsADirectory) as caught:
        check_absolute(name)
    assert caught.value.status == 126


@pytest.mark.parametrize("name", ["./a.out", "/bin/ls", "ls", "./"])
def test_check_absolute_accepts(name):
    assert check_absolute(name) == name


def test_resolve_absolute():
    assert resolve_absolute("./run", "/work") == "/work/./run"
    assert resolve_absolute("/bin/ls", "/work") == "/bin/ls"


def test_execute_absolute_script(tmp_path):
    script = make_script(tmp_path, "job", "exit 3")
    token = Token(0, [str(script)], kind=TokenType.ABS)
    assert execute(token, Environment(["HOME=/"])) == 3


def test_execute_from_path_passes_arguments(tmp_path):
    target = tmp_path / "result"
    make_script(tmp_path, "tool", f'printf %s "$1" > "{target}"')
    env = Environment([f"PATH={tmp_path}"])
    assert execute(Token(0, ["tool", "hello"], kind=TokenType.CMD), env) == 0
    assert target.read_text() == "hello"


def test_execute_passes_environment(tmp_path):
    target = tmp_path / "result"
    make_script(tmp_path, "tool", f'printf %s "$GREETING" > "{target}"')
    env = Environment([f"PATH={tmp_path}", "GREETING=hi"])
    execute(Token(0, ["tool"], kind=TokenType.CMD), env)
    assert target.read_text() == "hi"


def test_execute_command_not_found(tmp_path):
    env = Environment([f"PATH={tmp_path}"])
    with pytest.raises(CommandNotFound) as caught:
        execute(Token(0, ["nosuch"], kind=TokenType.CMD), env)
    assert caught.value.status == 127


def test_execute_invalid_path():
    with pytest.raises(InvalidPath):
        execute(Token(0, ["/nonexistent/x"], kind=TokenType.ABS), Environment(["A=1"]))


def test_execute_directory(tmp_path):
    with pytest.raises(IsADirectory):
        execute(Token(0, [str(tmp_path)], kind=TokenType.ABS), Environment(["A=1"]))


def test_execute_separator_word():
    with pytest.raises(ShellSyntaxError):
        execute(Token(0, [">"], kind=TokenType.CMD), Environment(["A=1"]))