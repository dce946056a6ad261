"""Shell-style command line lexing: quote checks, tokens, expansion, quote
removal, and small string, buffer, list, output and line-reading helpers."""

__version__ = "0.1.0"
__all__ = [
    "chars",
    "convert",
    "expand",
    "linereader",
    "lists",
    "memory",
    "output",
    "printf",
    "quotes",
    "strings",
    "tokenizer",
]