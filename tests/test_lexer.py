import pytest

from minishell.config import Settings
from minishell.core.lexer import Lexer, tokenize
from minishell.core.types import Token, TokenKind


def _kinds(tokens: list[Token]) -> list[TokenKind]:
    return [token.kind for token in tokens]


def _words(tokens: list[Token]) -> list[str]:
    return [token.text for token in tokens if token.kind is TokenKind.WORD]


def test_pipe_splits_words_without_spaces() -> None:
    assert tokenize("a|b") == [
        Token(TokenKind.WORD, "a"),
        Token(TokenKind.PIPE, "|"),
        Token(TokenKind.WORD, "b"),
        Token(TokenKind.END_OF_INPUT, "EOF"),
    ]


def test_heredoc_operator_is_never_split() -> None:
    assert tokenize("a<<b") == [
        Token(TokenKind.WORD, "a"),
        Token(TokenKind.HEREDOC, "<<"),
        Token(TokenKind.WORD, "b"),
        Token(TokenKind.END_OF_INPUT, "EOF"),
    ]


def test_all_operators_use_canonical_symbols() -> None:
    tokens = tokenize("a < b << c > d >> e & ; |")
    operators = [(token.kind, token.text) for token in tokens if token.kind is not TokenKind.WORD]
    assert operators == [
        (TokenKind.REDIRECT_IN, "<"),
        (TokenKind.HEREDOC, "<<"),
        (TokenKind.REDIRECT_OUT, ">"),
        (TokenKind.APPEND_OUT, ">>"),
        (TokenKind.BACKGROUND, "&"),
        (TokenKind.SEQUENCE, ";"),
        (TokenKind.PIPE, "|"),
        (TokenKind.END_OF_INPUT, "EOF"),
    ]


def test_three_angle_brackets_munch_longest_first() -> None:
    assert _kinds(tokenize(">>>")) == [TokenKind.APPEND_OUT, TokenKind.REDIRECT_OUT, TokenKind.END_OF_INPUT]


def test_whitespace_only_line_yields_only_end_marker() -> None:
    assert tokenize(" \t  ") == [Token(TokenKind.END_OF_INPUT, "EOF")]
    assert tokenize("") == [Token(TokenKind.END_OF_INPUT, "EOF")]


@pytest.mark.parametrize("word", ["ls", "-la", "/usr/bin/env", "file.txt", "a=b", "x" * 255])
def test_plain_word_text_is_unchanged(word: str) -> None:
    tokens = tokenize(word)
    assert tokens[0] == Token(TokenKind.WORD, word)
    assert len(tokens) == 2


def test_quoted_words_keep_spaces_and_operators() -> None:
    tokens = tokenize("echo \"hello world\" 'a|b > c'")
    assert _words(tokens) == ["echo", "hello world", "a|b > c"]
    assert TokenKind.PIPE not in _kinds(tokens)


def test_quote_styles_are_treated_alike() -> None:
    assert _words(tokenize("'$HOME'")) == _words(tokenize('"$HOME"')) == ["$HOME"]


def test_other_quote_character_is_literal_inside_quotes() -> None:
    assert _words(tokenize("\"it's\"")) == ["it's"]


def test_empty_quotes_produce_empty_word() -> None:
    assert tokenize('""') == [Token(TokenKind.WORD, ""), Token(TokenKind.END_OF_INPUT, "EOF")]


def test_backslash_is_not_an_escape() -> None:
    assert _words(tokenize('"a\\"b')) == ["a\\", "b"]


def test_unterminated_quote_ends_at_end_of_line() -> None:
    tokens = tokenize('echo "abc | def')
    assert _words(tokens) == ["echo", "abc | def"]
    assert tokens[-1].kind is TokenKind.END_OF_INPUT


def test_quote_inside_bare_word_is_ordinary() -> None:
    assert _words(tokenize('ab"c d"')) == ['ab"c', 'd"']


def test_long_bare_word_is_truncated_and_scan_continues() -> None:
    settings = Settings(max_word_length=4)
    assert _words(tokenize("abcdefg hij", settings)) == ["abcd", "hij"]


def test_long_quoted_word_is_truncated_and_scan_continues() -> None:
    settings = Settings(max_word_length=4)
    assert _words(tokenize('"abc defg" x', settings)) == ["abc ", "x"]


def test_default_word_cap_drops_excess_characters() -> None:
    tokens = tokenize("y" * 300)
    assert tokens[0].text == "y" * 255


def test_token_cap_counts_end_marker_and_drops_rest() -> None:
    settings = Settings(max_tokens=3)
    assert tokenize("a b c d", settings) == [
        Token(TokenKind.WORD, "a"),
        Token(TokenKind.WORD, "b"),
        Token(TokenKind.END_OF_INPUT, "EOF"),
    ]


def test_token_cap_of_one_keeps_only_end_marker() -> None:
    assert tokenize("ls -l", Settings(max_tokens=1)) == [Token(TokenKind.END_OF_INPUT, "EOF")]


def test_default_token_cap() -> None:
    tokens = tokenize(" ".join(["w"] * 500))
    assert len(tokens) == 128
    assert tokens[-1].kind is TokenKind.END_OF_INPUT


def test_operator_reader_rejects_non_operator() -> None:
    lexer = Lexer("a", Settings())
    with pytest.raises(ValueError):
        lexer._read_operator()
