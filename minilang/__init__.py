"""Lexical and syntactic analysis for a small C-like teaching language."""

__version__ = "0.1.0"
__all__ = ["lexer", "parser", "cli"]