"""Expansion of ``$NAME`` and ``$?`` inside a single word."""

from minish.chars import QuoteKind, has_quotes, is_quote, is_space
from minish.environment import check_part


def dollar_index(text):
    """Return the index of the dollar sign that starts an expansion.

    A run of dollar signs counts as its last one.  Zero means either no
    expansion or a dollar sign at the very start of the word.
    """
    if not text:
        return 0
    index = text.find("$")
    if index < 0:
        return 0
    while index + 1 < len(text) and text[index + 1] == "$":
        index += 1
    if index + 1 >= len(text):
        return 0
    return index


def dollar_length(text):
    """Return how far into the word the expanded part reaches."""
    index = text.find("$")
    if index < 0:
        return len(text)
    while index < len(text) and not is_space(text[index]):
        index += 1
        if index < len(text) and is_quote(text[index]):
            return index + 1
    return index


def _prefix(text):
    """Return the text before the dollar sign, without a leading quote."""
    if dollar_index(text) == 0:
        return ""
    start = 1 if is_quote(text[0]) else 0
    end = text.find("$", start)
    return text[start:] if end < 0 else text[start:end]


def _lookup(text, env):
    """Return the value the expansion stands for."""
    name = check_part(text[dollar_index(text) + 1:])
    if has_quotes(text) < QuoteKind.SINGLE:
        return env.get(name) or ""
    return "$" + (name or "")


def expand_word(text, env, status):
    """Expand the variable reference in a word.

    ``$?`` gives the last exit status; inside single quotes the reference
    is kept as written.
    """
    if len(text) > 1 and text[1] == "?":
        return str(status)
    if len(text) < 2:
        return text
    result = _prefix(text) + _lookup(text, env)
    length = dollar_length(text)
    if result and length < len(text):
        return result + text[length - 1:]
    return result