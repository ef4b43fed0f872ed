"""Splitting a command line into words, pipes and quoted strings."""

_QUOTES = "\"'"


def count_words(line):
    """Return the number of unquoted spaces and pipes in the line.

    Only a quote at the very start of the line is honoured.
    """
    closing = None
    rest = line
    if line and line[0] in _QUOTES:
        closing = line[0]
        rest = line[1:]
    count = 0
    for char in rest:
        if closing is None and char in " |":
            count += 1
        elif char == closing:
            closing = None
    return count


def word_length(line, start):
    """Return the length of the word beginning at ``start``."""
    if start >= len(line):
        return 0
    if line[start] == "|":
        return 1
    length = 0
    open_quote = None
    for char in line[start:]:
        if open_quote is not None:
            if char == open_quote:
                open_quote = None
        elif char in _QUOTES:
            open_quote = char
        elif char in " |":
            break
        length += 1
    return length


def split_line(line):
    """Split a line on unquoted spaces, keeping pipes as words of their own."""
    words = []
    position = 0
    while True:
        while position < len(line) and line[position] == " ":
            position += 1
        length = word_length(line, position)
        if length == 0:
            return words
        words.append(line[position:position + length])
        position += length