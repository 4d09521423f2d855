import pytest

from minish.lexer import lex, remove_quotes, split_tokens, squeeze_spaces
from minish.syntax import ShellSyntaxError

SAMPLES = [
    "echo  $  \"$USER\" '$this is' a test",
    "  ls \t -la   ",
    'echo "a   b"   c',
    "cat < in | grep x > out",
    "",
    "   ",
]


def test_squeeze_pinned():
    assert squeeze_spaces("  echo \t  hi  ") == "echo hi"


def test_squeeze_keeps_quoted_blanks():
    result = squeeze_spaces('echo   "a \t  b"')
    assert '"a \t  b"' in result
    assert result.startswith("echo ")


@pytest.mark.parametrize("text", SAMPLES)
def test_squeeze_invariants(text):
    result = squeeze_spaces(text)
    assert result == result.strip(" \t")
    assert squeeze_spaces(result) == result


def test_squeeze_blank_only():
    assert squeeze_spaces(" \t ") == ""


def test_remove_quotes():
    text = "echo \"$USER\" $ '$this is' a test"
    result = remove_quotes(text)
    assert '"' not in result
    assert result.count("'") == text.count("'")
    assert len(result) == len(text) - text.count('"')


@pytest.mark.parametrize("text", SAMPLES)
def test_split_rejoins_to_squeezed(text):
    tokens = split_tokens(text, " ")
    assert " ".join(tokens) == squeeze_spaces(text)
    assert all(token for token in tokens)


def test_split_keeps_quoted_token_whole():
    tokens = split_tokens("echo  $  \"$USER\" '$this is' a test", " ")
    assert "'$this is'" in tokens
    assert '"$USER"' in tokens
    assert tokens[0] == "echo"


def test_split_other_separator():
    tokens = split_tokens("a:b::'c:d'", ":")
    assert tokens[-1] == "'c:d'"
    assert tokens[:2] == ["a", "b"]


def test_lex_empty():
    assert lex("") == []
    assert lex(None) == []
    assert lex("   ") == []


def test_lex_tokens():
    line = 'echo "x  y" | cat'
    tokens = lex(line)
    assert tokens[-2:] == ["|", "cat"]
    assert " ".join(tokens) == squeeze_spaces(line)


@pytest.mark.parametrize("line", ["echo 'x", "a ; b", "| a", "a > ", "a && b"])
def test_lex_rejects(line):
    with pytest.raises(ShellSyntaxError):
        lex(line)