"""Quote balance checking and outer-quote removal."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable

from mshlex.tokenizer import Token, TokenType

SYNTAX_ERROR_STATUS = 2


class UnclosedQuoteError(ValueError):
    """Raised when a line has a single or double quote that is never closed."""

    def __init__(self, line: str):
        super().__init__("unclosed quote")
        self.line = line
        self.status = SYNTAX_ERROR_STATUS


def _quote_states(text: str):
    """Yield (char, is_outer_quote) while tracking quote nesting."""
    in_single = False
    in_double = False
    for ch in text:
        if ch == "'" and not in_double:
            in_single = not in_single
            yield ch, True, (in_single, in_double)
        elif ch == '"' and not in_single:
            in_double = not in_double
            yield ch, True, (in_single, in_double)
        else:
            yield ch, False, (in_single, in_double)


def quotes_unbalanced(text: str | None) -> bool:
    """Return True if ``text`` leaves a single or double quote open."""
    if text is None:
        return False
    state = (False, False)
    for _, _, state in _quote_states(text):
        pass
    return any(state)


def check_quote_balance(line: str) -> str:
    """Return ``line`` unchanged, or raise UnclosedQuoteError if unbalanced."""
    if line is None:
        raise TypeError("line must be a string, not None")
    if quotes_unbalanced(line):
        raise UnclosedQuoteError(line)
    return line


def strip_outer_quotes(text: str | None) -> tuple[str, bool]:
    """Remove outer quotes from ``text``.

    Returns the unquoted text and whether any outer quote was removed.
    """
    if text is None:
        return "", False
    kept = []
    was_quoted = False
    for ch, is_outer, _ in _quote_states(text):
        if is_outer:
            was_quoted = True
        else:
            kept.append(ch)
    return "".join(kept), was_quoted


def remove_quotes(tokens: Iterable[Token]) -> list[Token]:
    """Return the tokens with outer quotes stripped from every word.

    A word that becomes empty without having held any quotes turns into a
    VOID token; other tokens are passed through unchanged.
    """
    result = []
    for token in tokens:
        if token.type is not TokenType.WORD:
            result.append(token)
            continue
        text, quoted = strip_outer_quotes(token.text)
        was_quoted = token.was_quoted or quoted
        kind = TokenType.VOID if text == "" and not was_quoted else TokenType.WORD
        result.append(replace(token, type=kind, text=text, was_quoted=was_quoted))
    return result