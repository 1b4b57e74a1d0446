"""Turns source text into a stream of tokens."""

import string
from collections.abc import Iterator
from dataclasses import dataclass

from crawllang.constants import KEYWORDS, SINGLE_CHAR_TOKENS, STRING_QUOTE, TokenType

_END = "\0"
_WHITESPACE = frozenset(" \t\n\r")
_LETTERS = frozenset(string.ascii_letters)
_DIGITS = frozenset(string.digits)


@dataclass(frozen=True)
class Token:
    """A single lexical token."""

    type: TokenType
    literal: str = ""


def is_letter(ch: str) -> bool:
    """Return True if ch is a single ASCII letter."""
    return len(ch) == 1 and ch in _LETTERS


def is_digit(ch: str) -> bool:
    """Return True if ch is a single ASCII digit."""
    return len(ch) == 1 and ch in _DIGITS


class Lexer:
    """Reads tokens one at a time from a source string.

    A NUL character, like the end of the input, yields an EOF token.
    Once the input is exhausted every further call yields EOF.
    """

    def __init__(self, source: str) -> None:
        self._input = source
        self._position = 0
        self._read_position = 0
        self._ch = _END
        self._read_char()

    def _read_char(self) -> None:
        if self._read_position >= len(self._input):
            self._ch = _END
        else:
            self._ch = self._input[self._read_position]
        self._position = self._read_position
        self._read_position += 1

    def next_token(self) -> Token:
        """Return the next token and advance past it."""
        self._skip_whitespace()
        ch = self._ch

        if ch == STRING_QUOTE:
            return Token(TokenType.STRING, self._read_string())

        kind = SINGLE_CHAR_TOKENS.get(ch)
        if kind is not None:
            self._read_char()
            return Token(kind, ch)

        if ch == _END:
            self._read_char()
            return Token(TokenType.EOF)

        if is_letter(ch):
            literal = self._read_while(is_letter)
            return Token(KEYWORDS.get(literal, TokenType.VAR), literal)

        if is_digit(ch):
            return Token(TokenType.NUMBER, self._read_while(is_digit))

        self._read_char()
        return Token(TokenType.ILLEGAL, ch)

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including the first EOF."""
        while True:
            token = self.next_token()
            yield token
            if token.type is TokenType.EOF:
                return

    def _skip_whitespace(self) -> None:
        while self._ch in _WHITESPACE:
            self._read_char()

    def _read_while(self, predicate) -> str:
        start = self._position
        while predicate(self._ch):
            self._read_char()
        return self._input[start:self._position]

    def _read_string(self) -> str:
        self._read_char()  # opening quote
        start = self._position
        while self._ch not in (STRING_QUOTE, _END):
            self._read_char()
        end = self._position
        self._read_char()  # closing quote
        return self._input[start:end]


def tokenize(source: str) -> list[Token]:
    """Return all tokens of source, ending with the first EOF token."""
    return list(Lexer(source))