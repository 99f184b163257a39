"""Command line entry point: analyse a program file."""

from __future__ import annotations

import sys

from minilang.lexer import LexicalError
from minilang.parser import ParseError, analyze


def main(argv: list[str] | None = None) -> int:
    """Read the file named in argv, print its token log and the verdict."""
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        print("Numero de argumento invalido. Use minilang <nome_arquivo>")
        return -1

    try:
        with open(argv[0], encoding="utf-8") as handle:
            content = handle.read()
    except OSError as exc:
        print(f"Erro abrindo o arquivo!: {exc.strerror}", file=sys.stderr)
        return 1

    print(f"Conteúdo lido:\n[{content}]")
    try:
        lines = analyze(content, log=print)
    except LexicalError as exc:
        print(exc)
        return 1
    except ParseError as exc:
        print(exc)
        return 1
    print(f"{lines} linhas analisadas, programa sintaticamente correto")
    return 0


if __name__ == "__main__":
    sys.exit(main())