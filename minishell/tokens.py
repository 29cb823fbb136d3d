"""Classification of shell words into tokens."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum


class TokenType(IntEnum):
    """Kinds of token a word can be."""

    WORD = 0
    CMD = 1
    ARG = 2
    PIPE = 3
    REDIR_IN = 4
    REDIR_OUT = 5
    REDIR_APPEND = 6
    HEREDOC = 7
    FILE = 8
    VAR = 9


_OPERATORS = {
    "|": TokenType.PIPE,
    ">": TokenType.REDIR_OUT,
    "<": TokenType.REDIR_IN,
    ">>": TokenType.REDIR_APPEND,
    "<<": TokenType.HEREDOC,
}


@dataclass(frozen=True)
class Token:
    """A word together with its classification."""

    value: str
    type: TokenType


def token_type(word: str) -> TokenType:
    """Return the token type of a single word."""
    operator = _OPERATORS.get(word)
    if operator is not None:
        return operator
    if word.startswith("$") and len(word) > 1:
        return TokenType.VAR
    return TokenType.WORD


def tokenize(words: Iterable[str]) -> list[Token]:
    """Turn a sequence of words into tokens, preserving order."""
    return [Token(word, token_type(word)) for word in words]