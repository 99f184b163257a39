"""Lexical analysis: turns program text into a stream of tokens."""

from __future__ import annotations

import string
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from enum import IntEnum

_LETTERS = frozenset(string.ascii_letters + "_")
_IDENT_CHARS = _LETTERS | frozenset(string.digits)
_HEX_DIGITS = frozenset(string.digits + "ABCDEF")
_WHITESPACE = frozenset(" \n\r\t")
_MAX_IDENT_LENGTH = 15


class TokenKind(IntEnum):
    """Every kind of token the lexer can produce."""

    ID = 1
    COMMENT = 2
    LPAREN = 3
    RPAREN = 4
    LBRACE = 5
    RBRACE = 6
    SEMICOLON = 7
    ASSIGN = 8
    NOT_EQUAL = 9
    COMMA = 10
    EQUAL = 11
    GREATER = 12
    GREATER_EQUAL = 13
    LESS = 14
    LESS_EQUAL = 15
    INTCONST = 16
    CHARCONST = 17
    PLUS = 18
    MINUS = 19
    TIMES = 20
    DIVIDE = 21
    OR = 22
    AND = 23
    EOS = 24
    CHAR = 25
    ELSE = 26
    IF = 27
    INT = 28
    MAIN = 29
    READINT = 30
    VOID = 31
    WHILE = 32
    WRITEINT = 33

    @property
    def label(self) -> str:
        """Name of the kind as it appears in the token log."""
        return _LABELS[self]


_LABELS = {
    TokenKind.ID: "id",
    TokenKind.COMMENT: "comentario",
    TokenKind.LPAREN: "abre_par",
    TokenKind.RPAREN: "fechar_par",
    TokenKind.LBRACE: "abre_chaves",
    TokenKind.RBRACE: "fecha_chaves",
    TokenKind.SEMICOLON: "ponto_virgula",
    TokenKind.ASSIGN: "atribuicao",
    TokenKind.NOT_EQUAL: "diferente",
    TokenKind.COMMA: "virgula",
    TokenKind.EQUAL: "igual",
    TokenKind.GREATER: "maior",
    TokenKind.GREATER_EQUAL: "maior_igual",
    TokenKind.LESS: "menor",
    TokenKind.LESS_EQUAL: "menor_igual",
    TokenKind.INTCONST: "intconst",
    TokenKind.CHARCONST: "charconst",
    TokenKind.PLUS: "soma",
    TokenKind.MINUS: "subtracao",
    TokenKind.TIMES: "multiplicacao",
    TokenKind.DIVIDE: "divisao",
    TokenKind.OR: "or",
    TokenKind.AND: "and",
    TokenKind.EOS: "eos",
    TokenKind.CHAR: "char",
    TokenKind.ELSE: "else",
    TokenKind.IF: "if",
    TokenKind.INT: "int",
    TokenKind.MAIN: "main",
    TokenKind.READINT: "readint",
    TokenKind.VOID: "void",
    TokenKind.WHILE: "while",
    TokenKind.WRITEINT: "writeint",
}

_KEYWORDS = {
    "char": TokenKind.CHAR,
    "else": TokenKind.ELSE,
    "if": TokenKind.IF,
    "int": TokenKind.INT,
    "main": TokenKind.MAIN,
    "readint": TokenKind.READINT,
    "void": TokenKind.VOID,
    "while": TokenKind.WHILE,
    "writeint": TokenKind.WRITEINT,
}

_SINGLE_CHAR = {
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    ";": TokenKind.SEMICOLON,
    ",": TokenKind.COMMA,
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.TIMES,
}

_END = "\0"


@dataclass(frozen=True)
class Token:
    """A token with the line it ends on and its attribute, if any."""

    kind: TokenKind
    line: int
    value: str | int | None = None


class LexicalError(Exception):
    """Raised when the text holds something that is not a valid token."""

    def __init__(self, line: int) -> None:
        super().__init__("Erro na analise lexica")
        self.line = line


def format_token(token: Token) -> str:
    """Render a token as one line of the token log."""
    text = f"#   {token.line}:{token.kind.label} | "
    if token.kind in (TokenKind.ID, TokenKind.INTCONST, TokenKind.CHARCONST):
        text += str(token.value)
    return text


class Lexer:
    """Reads tokens one at a time from program text."""

    def __init__(self, text: str, log: Callable[[str], object] | None = None) -> None:
        self._text = text.split(_END, 1)[0]
        self._pos = 0
        self._log = log
        self.line = 1

    def _peek(self) -> str:
        return self._text[self._pos] if self._pos < len(self._text) else _END

    def _error(self) -> LexicalError:
        return LexicalError(self.line)

    def next_token(self) -> Token:
        """Scan and return the next token; raise LexicalError on bad input."""
        while (ch := self._peek()) in _WHITESPACE:
            if ch == "\n":
                self.line += 1
            self._pos += 1
        kind, value = self._scan()
        token = Token(kind, self.line, value)
        if self._log is not None:
            self._log(format_token(token))
        return token

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            yield token
            if token.kind is TokenKind.EOS:
                return

    def _scan(self) -> tuple[TokenKind, str | int | None]:
        ch = self._peek()
        if ch in _SINGLE_CHAR:
            self._pos += 1
            return _SINGLE_CHAR[ch], None
        if ch == _END:
            return TokenKind.EOS, None
        if ch == "'":
            return self._char_constant()
        if ch == "/":
            return self._comment_or_divide()
        if ch == "=":
            return self._pair("=", TokenKind.EQUAL, TokenKind.ASSIGN)
        if ch == ">":
            return self._pair("=", TokenKind.GREATER_EQUAL, TokenKind.GREATER)
        if ch == "!":
            return self._pair("=", TokenKind.NOT_EQUAL, None)
        if ch == "&":
            return self._pair("&", TokenKind.AND, None)
        if ch == "0":
            return self._number()
        if ch in _LETTERS:
            return self._identifier()
        raise self._error()

    def _pair(
        self, second: str, both: TokenKind, alone: TokenKind | None
    ) -> tuple[TokenKind, None]:
        self._pos += 1
        if self._peek() == second:
            self._pos += 1
            return both, None
        if alone is None:
            raise self._error()
        return alone, None

    def _char_constant(self) -> tuple[TokenKind, str]:
        self._pos += 1
        ch = self._peek()
        if ch in (_END, "\n"):
            raise self._error()
        self._pos += 1
        if self._peek() != "'":
            raise self._error()
        self._pos += 1
        return TokenKind.CHARCONST, ch

    def _comment_or_divide(self) -> tuple[TokenKind, None]:
        self._pos += 1
        ch = self._peek()
        if ch == "*":
            self._pos += 1
            self._block_comment()
            return TokenKind.COMMENT, None
        if ch == "/":
            self._pos += 1
            self._line_comment()
            return TokenKind.COMMENT, None
        return TokenKind.DIVIDE, None

    def _block_comment(self) -> None:
        while True:
            while (ch := self._peek()) != "*":
                if ch == _END:
                    raise self._error()
                if ch == "\n":
                    self.line += 1
                self._pos += 1
            self._pos += 1
            ch = self._peek()
            if ch == "/":
                self._pos += 1
                return
            if ch == _END:
                raise self._error()
            if ch == "\n":
                self.line += 1
            self._pos += 1

    def _line_comment(self) -> None:
        while (ch := self._peek()) != "\n":
            if ch == _END:
                raise self._error()
            self._pos += 1
        self.line += 1
        self._pos += 1

    def _number(self) -> tuple[TokenKind, str | int]:
        start = self._pos
        self._pos += 1
        result: tuple[TokenKind, str | int] | None = None
        if self._peek() == "x":
            self._pos += 1
            if self._peek() in _HEX_DIGITS:
                while self._peek() in _HEX_DIGITS:
                    self._pos += 1
                result = TokenKind.INTCONST, int(self._text[start + 2 : self._pos], 16)
        # A letter right after the number start begins an identifier instead.
        if self._peek() in _LETTERS:
            return self._identifier()
        if result is None:
            raise self._error()
        return result

    def _identifier(self) -> tuple[TokenKind, str | None]:
        start = self._pos
        self._pos += 1
        while self._peek() in _IDENT_CHARS:
            self._pos += 1
        word = self._text[start : self._pos]
        if len(word) > _MAX_IDENT_LENGTH:
            raise self._error()
        keyword = _KEYWORDS.get(word)
        if keyword is not None:
            return keyword, word
        return TokenKind.ID, word


def tokenize(text: str) -> list[Token]:
    """Return every token of the text, comments included, ending with EOS."""
    return list(Lexer(text))