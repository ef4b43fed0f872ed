"""Character and word classification used by the line parser."""

from enum import IntEnum

WHITESPACE = "\t\n\v\f\r "
SEPARATOR_CHARS = "|<>"


class QuoteKind(IntEnum):
    """Which quote character a word uses, if any."""

    NONE = 0
    DOUBLE = 1
    SINGLE = 2


_QUOTES = {'"': QuoteKind.DOUBLE, "'": QuoteKind.SINGLE}


def is_quote(char):
    """Return the kind of quote that ``char`` is."""
    return _QUOTES.get(char, QuoteKind.NONE)


def is_char_sep(char):
    """Return True for the pipe and redirection characters."""
    return len(char) == 1 and char in SEPARATOR_CHARS


def is_space(char):
    """Return True for the whitespace characters the shell recognises."""
    return len(char) == 1 and char in WHITESPACE


def is_sep(text):
    """Return True if an unquoted word holds a pipe or redirection."""
    if not text or text[0] in _QUOTES:
        return False
    return any(char in SEPARATOR_CHARS for char in text)


def is_pipe_sep(text):
    """Return True if an unquoted word holds a pipe."""
    if not text or text[0] in _QUOTES:
        return False
    return "|" in text


def is_empty(text):
    """Return True if a line holds nothing but whitespace."""
    if not text:
        return True
    return text.lstrip(WHITESPACE) == ""


def is_quoted(text):
    """Return the kind of quote the word starts with."""
    if not text:
        return QuoteKind.NONE
    return is_quote(text[0])


def has_quotes(text):
    """Return the kind of the first quote found anywhere in the word."""
    for char in text or "":
        if char in _QUOTES:
            return _QUOTES[char]
    return QuoteKind.NONE


def check_valid_quotes(text):
    """Return True if every opened quote is closed; an empty line is invalid."""
    if not text:
        return False
    open_quote = None
    for char in text:
        if open_quote is None:
            if char in _QUOTES:
                open_quote = char
        elif char == open_quote:
            open_quote = None
    return open_quote is None