# minilang

A lexical and syntactic analyzer for a small C-like language. It checks
programs that have this shape:

```
void main(void) {
    int x = 0x1A, y;
    readint(y);
    if (x > y && y != 0x0) writeint(x);
    else { writeint(y); }
    while (x >= 0x1) x = x + 0x1;
}
```

A program is `void main(void)` followed by a block. A block may open with one
declaration (`int` or `char`, then a comma-separated list of names, each with
an optional `= expression`), followed by statements: assignments, blocks,
`if`/`else`, `while`, `readint(name);` and `writeint(expression);`.

Expressions are built from identifiers, integer constants, character
constants (`'a'`) and parentheses, combined with `*`, `/`, `+`, one of the
comparisons `>`, `>=`, `==`, `!=`, and `&&`. Integer constants are written in
hexadecimal with a `0x` prefix and upper-case digits (`0x0`, `0x1F`).
Identifiers start with a letter or underscore and hold at most 15 characters.

Comments are either `// ...` up to the end of the line (the line must end with
a newline) or `/* ... */`. A comment is skipped when it stands just before a
token the grammar requires; where the grammar is choosing between
alternatives, a comment is reported as a syntax error.

The lexer recognises `-`, but the grammar has no place for it, so using it in
an expression is a syntax error. The characters `<` and `|` are not
recognised and give a lexical error.

## Installing

```
pip install .
```

## Command line

```
minilang program.txt
```

The command prints the text it read, then one line for each token as it is
read (line number, token kind and, for identifiers and constants, the value),
and ends with `N linhas analisadas, programa sintaticamente correto` when the
program is correct. Messages are in Portuguese.

- A lexical error prints `Erro na analise lexica` and exits with status 1.
- A syntax error prints
  `erro sintatico, esperado [...] encontrado [...]` and exits with status 1.
- A file that cannot be opened is reported on standard error, exit status 1.
- With no file name, a usage message is printed and the exit status is -1.

## Library use

```python
from minilang.lexer import Lexer, TokenKind, tokenize, format_token, LexicalError
from minilang.parser import Parser, ParseError, analyze

for token in tokenize("void main(void) { }"):
    print(format_token(token))

lines = analyze("void main(void) { int x; x = 0x10; }", log=None)
```

- `tokenize(text)` returns a list of `Token` values up to and including the
  `TokenKind.EOS` token, and raises `LexicalError` on text it cannot
  recognise.
- `Token` has `kind` (a `TokenKind`), `line` and `value`: the name for
  identifiers and keywords, the integer for integer constants, the character
  for character constants, otherwise `None`.
- `format_token(token)` renders a token as one line of the token log.
- `Lexer(text, log=None)` produces tokens one at a time through
  `next_token()` or by iteration, which stops after the EOS token. `log` is a
  callable that receives each formatted token as it is read, or `None`. Its
  `line` attribute is the current line number.
- `Parser(lexer).parse()` checks the whole program, returns the number of
  lines read and raises `ParseError` (with `expected`, `found` and `line`)
  when a token is not the one the grammar expects.
- `analyze(text, log=None)` runs both stages and returns the number of lines
  analysed.
- `LexicalError` carries the `line` where the error was found.

## What it does not do

The package only checks that a program is lexically and syntactically
correct. It builds no syntax tree, checks no types or declarations, and
neither runs nor compiles programs.

## Running the tests

```
pip install ".[test]"
pytest
```