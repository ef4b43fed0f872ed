import pytest

from minish.chars import (
    QuoteKind,
    check_valid_quotes,
    has_quotes,
    is_char_sep,
    is_empty,
    is_pipe_sep,
    is_quote,
    is_quoted,
    is_sep,
    is_space,
)


@pytest.mark.parametrize("word", ["|", ">", "<", ">>", "<<", "a|b", "x>y"])
def test_is_sep_true(word):
    assert is_sep(word) is True


@pytest.mark.parametrize("word", ["", "abc", '"a|b"', "'>'", "-n"])
def test_is_sep_false(word):
    assert is_sep(word) is False


def test_is_pipe_sep():
    assert is_pipe_sep("|") is True
    assert is_pipe_sep("a|b") is True
    assert is_pipe_sep(">") is False
    assert is_pipe_sep("'|'") is False
    assert is_pipe_sep("") is False


@pytest.mark.parametrize("word", ["|", "a|b", "'|'", ">", "ls", '"x"', ""])
def test_pipe_sep_implies_sep(word):
    assert (not is_pipe_sep(word)) or is_sep(word)


@pytest.mark.parametrize("line", ["", "   ", "\t\n ", "\v\f\r"])
def test_is_empty_true(line):
    assert is_empty(line) is True


@pytest.mark.parametrize("line", ["|", "  |", "ls", "  echo "])
def test_is_empty_false(line):
    assert is_empty(line) is False


def test_is_quoted():
    assert is_quoted('"x"') == QuoteKind.DOUBLE
    assert is_quoted("'x'") == QuoteKind.SINGLE
    assert is_quoted("x'") == QuoteKind.NONE
    assert is_quoted("") == QuoteKind.NONE


def test_has_quotes_reports_first_quote():
    assert has_quotes('a"b') == QuoteKind.DOUBLE
    assert has_quotes("a'b\"") == QuoteKind.SINGLE
    assert has_quotes("abc") == QuoteKind.NONE
    assert has_quotes("") == QuoteKind.NONE


@pytest.mark.parametrize(
    "line", ['echo "a b"', "echo 'a'", "'a\"b'", '"it\'s"', "plain"]
)
def test_valid_quotes(line):
    assert check_valid_quotes(line) is True


@pytest.mark.parametrize("line", ['"a', "'a", "'a' \"b", ""])
def test_invalid_quotes(line):
    assert check_valid_quotes(line) is False


def test_is_quote():
    assert is_quote('"') == QuoteKind.DOUBLE
    assert is_quote("'") == QuoteKind.SINGLE
    assert is_quote("a") == QuoteKind.NONE


def test_is_char_sep():
    assert all(is_char_sep(c) for c in "|<>")
    assert not any(is_char_sep(c) for c in "a -$")


def test_is_space():
    assert all(is_space(c) for c in "\t\n\v\f\r ")
    assert not any(is_space(c) for c in "a|_")
    assert is_space("") is False