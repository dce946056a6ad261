"""Split a raw command line into word and operator tokens."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

_BLANKS = frozenset(" \t")

_OPERATORS = {
    "|": "PIPE",
    "<": "REDIR_IN",
    ">": "REDIR_OUT",
    "<<": "HEREDOC",
    ">>": "REDIR_APP",
}


class TokenType(enum.Enum):
    """Kind of a token produced by the tokenizer."""

    WORD = enum.auto()
    PIPE = enum.auto()
    REDIR_IN = enum.auto()
    REDIR_OUT = enum.auto()
    REDIR_APP = enum.auto()
    HEREDOC = enum.auto()
    VOID = enum.auto()


@dataclass
class Token:
    """A single token: its kind, its text and where it starts in the line."""

    type: TokenType
    text: str
    pos: int
    was_quoted: bool = False


@dataclass
class ParsedInput:
    """A raw input line together with the tokens it was split into."""

    raw: str
    tokens: list[Token] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.tokens)

    def __iter__(self):
        return iter(self.tokens)


def operator_length(text: str, pos: int = 0) -> int:
    """Return the length (1 or 2) of the operator at ``pos``, or 0 if none."""
    if pos >= len(text):
        return 0
    ch = text[pos]
    if ch == "|":
        return 1
    if ch in "<>":
        return 2 if text[pos + 1 : pos + 2] == ch else 1
    return 0


def operator_type(operator: str) -> TokenType:
    """Map operator text to its token type; anything else is a word."""
    name = _OPERATORS.get(operator)
    return TokenType[name] if name else TokenType.WORD


def skip_blanks(text: str, pos: int) -> int:
    """Return the first index at or after ``pos`` that is not a space or tab."""
    while pos < len(text) and text[pos] in _BLANKS:
        pos += 1
    return pos


def scan_word_end(text: str, pos: int) -> int:
    """Return the index just past the word that starts at ``pos``.

    Quoted sections are consumed whole; outside quotes the word ends at a
    blank or at the start of an operator.
    """
    in_single = False
    in_double = False
    while pos < len(text):
        ch = text[pos]
        if in_single:
            if ch == "'":
                in_single = False
        elif in_double:
            if ch == '"':
                in_double = False
        else:
            if ch in _BLANKS or operator_length(text, pos) > 0:
                break
            if ch == "'":
                in_single = True
            elif ch == '"':
                in_double = True
        pos += 1
    return pos


def _iter_tokens(line: str):
    pos = skip_blanks(line, 0)
    while pos < len(line):
        length = operator_length(line, pos)
        if length:
            text = line[pos : pos + length]
            yield Token(operator_type(text), text, pos)
            pos += length
        else:
            end = scan_word_end(line, pos)
            yield Token(TokenType.WORD, line[pos:end], pos)
            pos = end
        pos = skip_blanks(line, pos)


def tokenize(line: str) -> list[Token]:
    """Split ``line`` into tokens.

    Tokens are separated by spaces or tabs outside quotes; the operators
    ``|``, ``<``, ``>``, ``<<`` and ``>>`` always form tokens of their own.
    """
    if line is None:
        raise TypeError("line must be a string, not None")
    return list(_iter_tokens(line))


def parse_input_line(line: str) -> ParsedInput:
    """Tokenize ``line`` and keep the raw text alongside the tokens."""
    if line is None:
        raise TypeError("line must be a string, not None")
    return ParsedInput(raw=line, tokens=tokenize(line))