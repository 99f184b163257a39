"""Recursive-descent syntax analysis over the lexer's token stream."""

from __future__ import annotations

from collections.abc import Callable

from minilang.lexer import Lexer, TokenKind

_DESCRIPTIONS = {
    TokenKind.ID: "Identificador",
    TokenKind.COMMENT: "Comentário",
    TokenKind.LPAREN: "(",
    TokenKind.RPAREN: ")",
    TokenKind.LBRACE: "{",
    TokenKind.RBRACE: "}",
    TokenKind.SEMICOLON: ";",
    TokenKind.ASSIGN: "=",
    TokenKind.NOT_EQUAL: "!=",
    TokenKind.COMMA: ",",
    TokenKind.EQUAL: "==",
    TokenKind.GREATER: ">",
    TokenKind.GREATER_EQUAL: ">=",
    TokenKind.LESS: "<",
    TokenKind.LESS_EQUAL: "<=",
    TokenKind.INTCONST: "Número",
    TokenKind.CHARCONST: "String",
    TokenKind.PLUS: "+",
    TokenKind.MINUS: "-",
    TokenKind.TIMES: "*",
    TokenKind.DIVIDE: "/",
    TokenKind.OR: "||",
    TokenKind.AND: "&&",
    TokenKind.EOS: "EOS",
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

_STATEMENT_STARTS = frozenset(
    {
        TokenKind.ID,
        TokenKind.LBRACE,
        TokenKind.IF,
        TokenKind.WHILE,
        TokenKind.WRITEINT,
        TokenKind.READINT,
    }
)

_RELATIONS = frozenset(
    {
        TokenKind.LESS,
        TokenKind.LESS_EQUAL,
        TokenKind.EQUAL,
        TokenKind.NOT_EQUAL,
        TokenKind.GREATER,
        TokenKind.GREATER_EQUAL,
    }
)

# The additive loop accepts "+" and, as the grammar was defined, the "char" keyword.
_ADDITIVE = frozenset({TokenKind.PLUS, TokenKind.CHAR})
_MULTIPLICATIVE = frozenset({TokenKind.TIMES, TokenKind.DIVIDE})
_DECLARATION_TYPES = frozenset({TokenKind.INT, TokenKind.CHAR})


class ParseError(Exception):
    """Raised when a token does not fit the grammar."""

    def __init__(self, expected: TokenKind, found: TokenKind, line: int) -> None:
        super().__init__(
            f"erro sintatico, esperado [{_DESCRIPTIONS[expected]}] "
            f"encontrado [{_DESCRIPTIONS[found]}]"
        )
        self.expected = expected
        self.found = found
        self.line = line


class Parser:
    """Checks that the tokens of a lexer form a valid program."""

    def __init__(self, lexer: Lexer) -> None:
        self._lexer = lexer
        self._lookahead: TokenKind | None = None

    def parse(self) -> int:
        """Parse a whole program and return the number of lines read."""
        self._advance()
        self._program()
        return self._lexer.line

    def _advance(self) -> None:
        self._lookahead = self._lexer.next_token().kind

    def _consume(self, kind: TokenKind) -> None:
        if self._lookahead is TokenKind.COMMENT:
            self._advance()
        if self._lookahead is not kind:
            raise ParseError(kind, self._lookahead, self._lexer.line)
        self._advance()

    def _program(self) -> None:
        for kind in (
            TokenKind.VOID,
            TokenKind.MAIN,
            TokenKind.LPAREN,
            TokenKind.VOID,
            TokenKind.RPAREN,
        ):
            self._consume(kind)
        self._compound_stmt()

    def _compound_stmt(self) -> None:
        self._consume(TokenKind.LBRACE)
        self._var_decl()
        while self._lookahead in _STATEMENT_STARTS:
            self._stmt()
        self._consume(TokenKind.RBRACE)

    def _var_decl(self) -> None:
        if self._lookahead in _DECLARATION_TYPES:
            self._type_specifier()
            self._var_decl_list()
            self._consume(TokenKind.SEMICOLON)

    def _type_specifier(self) -> None:
        if self._lookahead is TokenKind.INT:
            self._consume(TokenKind.INT)
        else:
            self._consume(TokenKind.CHAR)

    def _var_decl_list(self) -> None:
        self._variable_id()
        while self._lookahead is TokenKind.COMMA:
            self._consume(TokenKind.COMMA)
            self._variable_id()

    def _variable_id(self) -> None:
        self._consume(TokenKind.ID)
        if self._lookahead is TokenKind.ASSIGN:
            self._consume(TokenKind.ASSIGN)
            self._expr()

    def _stmt(self) -> None:
        match self._lookahead:
            case TokenKind.LBRACE:
                self._compound_stmt()
            case TokenKind.ID:
                self._assign_stmt()
            case TokenKind.IF:
                self._cond_stmt()
            case TokenKind.WHILE:
                self._while_stmt()
            case TokenKind.READINT:
                self._consume(TokenKind.READINT)
                self._consume(TokenKind.LPAREN)
                self._consume(TokenKind.ID)
                self._consume(TokenKind.RPAREN)
                self._consume(TokenKind.SEMICOLON)
            case _:
                self._consume(TokenKind.WRITEINT)
                self._consume(TokenKind.LPAREN)
                self._expr()
                self._consume(TokenKind.RPAREN)
                self._consume(TokenKind.SEMICOLON)

    def _assign_stmt(self) -> None:
        self._consume(TokenKind.ID)
        self._consume(TokenKind.ASSIGN)
        self._expr()
        self._consume(TokenKind.SEMICOLON)

    def _cond_stmt(self) -> None:
        self._consume(TokenKind.IF)
        self._consume(TokenKind.LPAREN)
        self._expr()
        self._consume(TokenKind.RPAREN)
        self._stmt()
        if self._lookahead is TokenKind.ELSE:
            self._consume(TokenKind.ELSE)
            self._stmt()

    def _while_stmt(self) -> None:
        self._consume(TokenKind.WHILE)
        self._consume(TokenKind.LPAREN)
        self._expr()
        self._consume(TokenKind.RPAREN)
        self._stmt()

    def _expr(self) -> None:
        self._conjunction()
        while self._lookahead is TokenKind.OR:
            self._consume(TokenKind.OR)
            self._conjunction()

    def _conjunction(self) -> None:
        self._comparison()
        while self._lookahead is TokenKind.AND:
            self._consume(TokenKind.AND)
            self._comparison()

    def _comparison(self) -> None:
        self._sum()
        if self._lookahead in _RELATIONS:
            self._consume(self._lookahead)
            self._sum()

    def _sum(self) -> None:
        self._term()
        while self._lookahead in _ADDITIVE:
            self._consume(self._lookahead)
            self._term()

    def _term(self) -> None:
        self._factor()
        while self._lookahead in _MULTIPLICATIVE:
            self._consume(self._lookahead)
            self._factor()

    def _factor(self) -> None:
        if self._lookahead in (TokenKind.INTCONST, TokenKind.CHARCONST, TokenKind.ID):
            self._consume(self._lookahead)
        else:
            self._consume(TokenKind.LPAREN)
            self._expr()
            self._consume(TokenKind.RPAREN)


def analyze(text: str, log: Callable[[str], object] | None = None) -> int:
    """Check a program's syntax and return the number of lines analysed."""
    return Parser(Lexer(text, log)).parse()