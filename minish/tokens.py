"""Grouping expanded words into commands separated by pipes and redirections."""

from dataclasses import dataclass, field
from enum import IntEnum

from minish.chars import has_quotes, is_sep


class TokenType(IntEnum):
    """What a command token is followed by, or what it is."""

    EMPTY = 0
    CMD = 1
    ARGS = 2
    PIPE = 3
    REDIR_IN = 4
    REDIR_OUT = 5
    ABS = 6
    FILE_OUT = 7
    REDIR_DBL = 9
    REDIR_DBL2 = 10


_SEPARATOR_TYPES = {
    "|": TokenType.PIPE,
    "<<": TokenType.REDIR_DBL2,
    ">>": TokenType.REDIR_DBL,
    "<": TokenType.REDIR_OUT,
    ">": TokenType.REDIR_IN,
}


@dataclass
class Token:
    """One command with its arguments and the separator that follows it."""

    number: int
    args: list = field(default_factory=list)
    next_sep: str | None = None
    kind: TokenType = TokenType.EMPTY


def strip_quotes(text):
    """Remove the quote characters that open and close quoted parts."""
    kept = []
    open_quote = None
    for char in text:
        if open_quote is None and char in "\"'":
            open_quote = char
        elif char == open_quote:
            open_quote = None
        else:
            kept.append(char)
    return "".join(kept)


def classify(token):
    """Set and return the token's type from its separator and first word."""
    if token.next_sep:
        kind = _SEPARATOR_TYPES.get(token.next_sep, token.kind)
    else:
        kind = TokenType.CMD
    first = token.args[0] if token.args else ""
    if first == "<":
        kind = TokenType.REDIR_OUT
    if first == ">":
        kind = TokenType.REDIR_IN
    elif first[:1] in (".", "/"):
        kind = TokenType.ABS
    token.kind = kind
    return kind


def _collect_args(words, index):
    args = []
    if index < len(words) and is_sep(words[index]):
        args.append(words[index])
        index += 1
    while index < len(words) and not is_sep(words[index]):
        word = words[index]
        args.append(strip_quotes(word) if has_quotes(word) else word)
        index += 1
    return args


def _next_sep_index(words, index):
    while index < len(words) and not is_sep(words[index]):
        index += 1
    return index


def _sep_at(words, index):
    return words[index] if index < len(words) else None


def tokenise(words):
    """Build the list of classified tokens for a line's words."""
    words = list(words)
    if not words:
        return []
    first = Token(0, _collect_args(words, 0))
    index = _next_sep_index(words, 0)
    first.next_sep = _sep_at(words, index)
    tokens = [first]
    if index < len(words) and is_sep(words[index]):
        index += 1
    number = 1
    while index < len(words):
        if index and is_sep(words[index]) and index + 1 < len(words):
            index += 1
        start = index
        token = Token(number, _collect_args(words, index))
        number += 1
        index = _next_sep_index(words, index)
        token.next_sep = _sep_at(words, index)
        tokens.append(token)
        if index == start:
            break
    for token in tokens:
        classify(token)
    return tokens