import pytest

from minilang.lexer import (
    LexicalError,
    Lexer,
    Token,
    TokenKind,
    format_token,
    tokenize,
)


def kinds(text):
    return [t.kind for t in tokenize(text)]


def test_punctuation_and_operators():
    assert kinds("( ) { } ; , + - * / = == != > >= &&") == [
        TokenKind.LPAREN,
        TokenKind.RPAREN,
        TokenKind.LBRACE,
        TokenKind.RBRACE,
        TokenKind.SEMICOLON,
        TokenKind.COMMA,
        TokenKind.PLUS,
        TokenKind.MINUS,
        TokenKind.TIMES,
        TokenKind.DIVIDE,
        TokenKind.ASSIGN,
        TokenKind.EQUAL,
        TokenKind.NOT_EQUAL,
        TokenKind.GREATER,
        TokenKind.GREATER_EQUAL,
        TokenKind.AND,
        TokenKind.EOS,
    ]


@pytest.mark.parametrize(
    "word",
    ["char", "else", "if", "int", "main", "readint", "void", "while", "writeint"],
)
def test_reserved_words(word):
    first = tokenize(word)[0]
    assert first.kind.label == word
    assert first.kind is not TokenKind.ID


def test_identifier_value():
    tokens = tokenize("_abc1 x")
    assert [t.kind for t in tokens] == [TokenKind.ID, TokenKind.ID, TokenKind.EOS]
    assert [t.value for t in tokens[:2]] == ["_abc1", "x"]


def test_identifier_length_limit():
    name = "a" * 15
    assert tokenize(name)[0].value == name
    with pytest.raises(LexicalError):
        tokenize("a" * 16)


def test_hex_constant():
    hex_source = "0x1F"
    first = tokenize(hex_source)[0]
    assert first.kind is TokenKind.INTCONST
    assert first.value == 0x1F


def test_lowercase_hex_digits_become_identifier():
    tokens = tokenize("0xff")
    assert [t.kind for t in tokens] == [TokenKind.ID, TokenKind.EOS]
    assert tokens[0].value == "ff"


@pytest.mark.parametrize("text", ["0", "0x", "5", "0x;"])
def test_bad_numbers(text):
    with pytest.raises(LexicalError):
        tokenize(text)


def test_char_constant():
    char_source = "'a'"
    first = tokenize(char_source)[0]
    assert first.kind is TokenKind.CHARCONST
    assert first.value == "a"


@pytest.mark.parametrize("text", ["'ab'", "'\n'", "'", "'a"])
def test_bad_char_constants(text):
    with pytest.raises(LexicalError):
        tokenize(text)


def test_comments():
    assert kinds("/* x */ // y\n a") == [
        TokenKind.COMMENT,
        TokenKind.COMMENT,
        TokenKind.ID,
        TokenKind.EOS,
    ]


@pytest.mark.parametrize("text", ["// no newline", "/* open", "/* a *"])
def test_unterminated_comments(text):
    with pytest.raises(LexicalError):
        tokenize(text)


@pytest.mark.parametrize("text", ["<", "|", "||", "!", "&", "#", "a & b"])
def test_unsupported_characters(text):
    with pytest.raises(LexicalError):
        tokenize(text)


def test_line_numbers_follow_newlines():
    text = "a\nb\n\n\nc"
    tokens = tokenize(text)
    lines = [t.line for t in tokens]
    assert lines == sorted(lines)
    assert tokens[0].line == 1
    assert tokens[-1].line == text.count("\n") + 1


def test_block_comment_counts_lines():
    text = "/* one\ntwo\nthree */ x"
    tokens = tokenize(text)
    assert tokens[0].kind is TokenKind.COMMENT
    assert tokens[1].line == text.count("\n") + 1


def test_error_carries_line():
    text = "a\n\n<"
    with pytest.raises(LexicalError) as info:
        tokenize(text)
    assert info.value.line == text.count("\n") + 1
    assert str(info.value) == "Erro na analise lexica"


def test_format_token():
    assert format_token(Token(TokenKind.ID, 1, "abc")) == "#   1:id | abc"
    assert format_token(Token(TokenKind.LPAREN, 1)) == "#   1:abre_par | "
    assert format_token(Token(TokenKind.CHARCONST, 1, "z")) == "#   1:charconst | z"


def test_log_receives_each_token():
    lines = []
    lexer = Lexer("void main", lines.append)
    tokens = list(lexer)
    assert lines == [format_token(t) for t in tokens]
    assert [t.kind for t in tokens] == [TokenKind.VOID, TokenKind.MAIN, TokenKind.EOS]


def test_iteration_stops_at_eos_and_eos_repeats():
    lexer = Lexer("x")
    tokens = list(lexer)
    assert tokens[-1].kind is TokenKind.EOS
    assert lexer.next_token().kind is TokenKind.EOS


def test_text_ends_at_null_character():
    assert kinds("a\0b") == [TokenKind.ID, TokenKind.EOS]