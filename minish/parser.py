"""Turning a command line into tokens, and the ``exit`` builtin's arguments."""

import string
from dataclasses import dataclass

from minish.chars import WHITESPACE, check_valid_quotes
from minish.errors import ShellError
from minish.expand import dollar_index, expand_word
from minish.splitter import split_line
from minish.syntax import check_input
from minish.tokens import tokenise

NUMERIC_ERROR_STATUS = 255
TOO_MANY_ARGS_STATUS = 1


@dataclass
class ExitRequest:
    """The outcome of an ``exit`` command line.

    ``status`` is None when the last status should be kept.
    """

    status: int | None = None
    should_exit: bool = True
    message: str | None = None


def _leading_int(text):
    text = text.lstrip(WHITESPACE)
    sign = 1
    if text[:1] in ("+", "-"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    digits = ""
    for char in text:
        if char not in string.digits:
            break
        digits += char
    return sign * int(digits) if digits else 0


def _needs_expansion(word):
    if dollar_index(word) != 0:
        return True
    return word[:1] == "$" and len(word) > 1 and word[1] != "$"


def expand_words(words, env, status):
    """Expand variable references in every word that has one."""
    return [
        expand_word(word, env, status) if _needs_expansion(word) else word
        for word in words
    ]


def parse_exit(args):
    """Interpret the arguments of ``exit``."""
    argument = args[1] if len(args) > 1 else ""
    if not argument:
        return ExitRequest()
    if argument[0] == "-" and len(argument) > 1:
        return ExitRequest(status=_leading_int(argument) % 256)
    if argument[0] not in string.digits:
        message = f"exit\nminishell: exit: {argument}: numeric argument required"
        return ExitRequest(status=NUMERIC_ERROR_STATUS, message=message)
    if len(args) > 2 and args[2]:
        return ExitRequest(
            status=TOO_MANY_ARGS_STATUS,
            should_exit=False,
            message="exit\nminishell: exit: too many arguments",
        )
    return ExitRequest(status=_leading_int(argument))


def parse(line, env, status):
    """Parse a line into tokens, or an ExitRequest for ``exit``.

    Raises ShellError for unbalanced quotes and ShellSyntaxError for
    malformed pipes and redirections.
    """
    if not check_valid_quotes(line):
        raise ShellError("Invalid Input", status)
    words = expand_words(split_line(line), env, status)
    check_input(words)
    tokens = tokenise(words)
    if tokens and tokens[0].args and tokens[0].args[0] == "exit":
        return parse_exit(tokens[0].args)
    return tokens