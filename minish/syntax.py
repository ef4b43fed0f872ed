"""Checks that reject malformed pipes and redirections."""

from minish.chars import is_pipe_sep, is_sep
from minish.errors import ShellSyntaxError


def pipe_check(words):
    """Return False if two pipe words follow one another."""
    if words is None:
        return False
    run = 0
    for word in words:
        run = run + 1 if word == "|" else 0
        if run > 1:
            return False
    return True


def redir_check(words, char):
    """Return False if ``char`` appears three or more times in a row."""
    return char * 3 not in "".join(words)


def adjacent_sep_check(words):
    """Return False if two separator words are next to each other."""
    if words is None:
        return False
    return not any(is_sep(first) and is_sep(second) for first, second in zip(words, words[1:]))


def check_input(words):
    """Validate the expanded words of a line; raise ShellSyntaxError if bad."""
    if not (
        pipe_check(words)
        and redir_check(words, ">")
        and redir_check(words, "<")
        and adjacent_sep_check(words)
    ):
        raise ShellSyntaxError()
    for word, following in zip(words, [*words[1:], None]):
        if is_sep(word) and not following:
            raise ShellSyntaxError()
        if is_pipe_sep(word) and following and is_pipe_sep(following):
            raise ShellSyntaxError()
    return True