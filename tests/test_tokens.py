import pytest

from minish.tokens import Token, TokenType, classify, strip_quotes, tokenise


def test_pipeline_tokens():
    tokens = tokenise(["ls", "-l", "|", "wc"])
    assert [token.args for token in tokens] == [["ls", "-l"], ["wc"]]
    assert tokens[0].next_sep == "|"
    assert tokens[0].kind is TokenType.PIPE
    assert tokens[1].next_sep is None
    assert tokens[1].kind is TokenType.CMD


def test_tokens_are_numbered_in_order():
    tokens = tokenise(["a", "|", "b", "|", "c"])
    assert [token.number for token in tokens] == list(range(len(tokens)))
    assert [token.args for token in tokens] == [["a"], ["b"], ["c"]]


@pytest.mark.parametrize(
    "sep, kind",
    [
        ("|", TokenType.PIPE),
        (">", TokenType.REDIR_IN),
        (">>", TokenType.REDIR_DBL),
        ("<", TokenType.REDIR_OUT),
        ("<<", TokenType.REDIR_DBL2),
    ],
)
def test_separator_types(sep, kind):
    tokens = tokenise(["cat", sep, "target"])
    assert tokens[0].kind is kind
    assert tokens[1].args == ["target"]


@pytest.mark.parametrize("command", ["./run", "/bin/ls"])
def test_path_commands_are_absolute(command):
    tokens = tokenise([command])
    assert tokens[0].kind is TokenType.ABS


def test_leading_redirection_keeps_separator():
    tokens = tokenise([">", "out"])
    assert tokens[0].args == [">", "out"]
    assert tokens[0].kind is TokenType.REDIR_IN


def test_quoted_words_are_unquoted():
    tokens = tokenise(["echo", '"a b"', "'c'"])
    assert tokens[0].args == ["echo", "a b", "c"]


def test_strip_quotes_keeps_inner_other_quote():
    assert strip_quotes("'a\"b'") == 'a"b'


def test_strip_quotes_of_plain_text_is_identity():
    text = "plain"
    assert strip_quotes(text) == text


def test_no_words_no_tokens():
    assert tokenise([]) == []


def test_classify_without_separator_is_command():
    token = Token(0, ["ls"])
    assert classify(token) is TokenType.CMD
    assert token.kind is TokenType.CMD