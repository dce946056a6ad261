"""Expansion of ``$?`` and ``$VAR`` inside word tokens."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import replace
from typing import Union

from mshlex.tokenizer import Token, TokenType

Environment = Union[Mapping[str, str], Iterable[str]]

_ASCII_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
_ASCII_DIGITS = frozenset("0123456789")


def is_valid_start_char(char: str) -> bool:
    """Return True if ``char`` may start a variable name (letter or '_')."""
    return char == "_" or char in _ASCII_LETTERS


def is_valid_cont_char(char: str) -> bool:
    """Return True if ``char`` may continue a variable name."""
    return is_valid_start_char(char) or char in _ASCII_DIGITS


def _as_mapping(env: Environment | None) -> Mapping[str, str]:
    """Turn ``env`` into a mapping; for ``KEY=VALUE`` entries the first wins."""
    if env is None:
        return {}
    if isinstance(env, Mapping):
        return env
    table: dict[str, str] = {}
    for entry in env:
        key, sep, value = entry.partition("=")
        if sep and key not in table:
            table[key] = value
    return table


class _QuoteTracker:
    """Tracks quote state; quote characters themselves are kept in the output."""

    def __init__(self) -> None:
        self.in_single = False
        self.in_double = False

    def consume(self, ch: str) -> bool:
        """Toggle state if ``ch`` is an active quote; return True if it was."""
        if ch == "'" and not self.in_double:
            self.in_single = not self.in_single
            return True
        if ch == '"' and not self.in_single:
            self.in_double = not self.in_double
            return True
        return False


def expand_status(text: str | None, last_status: int) -> str:
    """Replace every ``$?`` outside single quotes with ``last_status``."""
    if text is None:
        return ""
    status = str(last_status)
    quotes = _QuoteTracker()
    out: list[str] = []
    i = 0
    while i < len(text):
        ch = text[i]
        if quotes.consume(ch):
            out.append(ch)
            i += 1
        elif not quotes.in_single and ch == "$" and text[i + 1 : i + 2] == "?":
            out.append(status)
            i += 2
        else:
            out.append(ch)
            i += 1
    return "".join(out)


def expand_variable(text: str | None, env: Environment | None) -> str:
    """Replace ``$NAME`` outside single quotes with its value from ``env``.

    ``env`` is a mapping or an iterable of ``KEY=VALUE`` strings. An
    undefined name expands to nothing; a ``$`` not followed by a valid name
    start is kept. Outside any quotes, a ``$`` directly before a quote is
    dropped.
    """
    if text is None:
        return ""
    table = _as_mapping(env)
    quotes = _QuoteTracker()
    out: list[str] = []
    i = 0
    while i < len(text):
        ch = text[i]
        if quotes.consume(ch):
            out.append(ch)
            i += 1
            continue
        nxt = text[i + 1 : i + 2]
        if ch == "$" and not quotes.in_single:
            if not quotes.in_double and nxt in ("'", '"') and nxt:
                i += 1
                continue
            if nxt and is_valid_start_char(nxt):
                end = i + 1
                while end < len(text) and is_valid_cont_char(text[end]):
                    end += 1
                value = table.get(text[i + 1 : end])
                if value is not None:
                    out.append(value)
                i = end
                continue
        out.append(ch)
        i += 1
    return "".join(out)


def expand_tokens(
    tokens: Iterable[Token], last_status: int, env: Environment | None
) -> list[Token]:
    """Expand ``$?`` and then ``$NAME`` in every word token.

    A word that directly follows a heredoc operator is its delimiter and is
    left untouched, as are all non-word tokens.
    """
    table = _as_mapping(env)
    result: list[Token] = []
    previous: TokenType | None = None
    for token in tokens:
        if token.type is TokenType.WORD and previous is not TokenType.HEREDOC:
            text = expand_status(token.text, last_status)
            text = expand_variable(text, table)
            result.append(replace(token, text=text))
        else:
            result.append(token)
        previous = token.type
    return result