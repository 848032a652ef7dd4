# Copyright 2026 parenlex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical scanner for parenthesized expressions.

Converts a text buffer into a pull-based stream of tokens. Each call to
:meth:`Tokenizer.next_token` returns exactly one token or raises exactly one
:class:`LexerError`; the stream ends with a single EOF token.
"""

from collections.abc import Iterator

from parenlex.lexer.chars import is_identifier_continue, is_letter, is_whitespace
from parenlex.lexer.errors import (
    LexerError,
    TokenizerStateError,
    UnexpectedCharacterError,
    UnterminatedStringError,
)
from parenlex.lexer.reader import RuneReader
from parenlex.lexer.tokens import Token, TokenType

# ###############
# Public Interface
# ###############


class Tokenizer:
    """Produce tokens on demand from one input buffer.

    A tokenizer is single-use: once it has returned the EOF token or raised a
    :class:`LexerError`, any further call to :meth:`next_token` raises
    :class:`TokenizerStateError`. Build a fresh tokenizer to lex again.
    """

    def __init__(self, source: str | bytes) -> None:
        self._reader = RuneReader(source)
        self._exhausted = False

    @property
    def position(self) -> int:
        """Code-point offset of the next unconsumed character."""
        return self._reader.position

    @property
    def exhausted(self) -> bool:
        """Whether the token stream has terminated with EOF or an error."""
        return self._exhausted

    def next_token(self) -> Token:
        """Scan and return the next token.

        Raises:
            LexerError: On invalid UTF-8, an unterminated string literal, or a
                character that starts no token.
            TokenizerStateError: If the stream has already terminated.
        """
        if self._exhausted:
            raise TokenizerStateError("next_token() called after the token stream terminated")
        try:
            token = self._scan_token()
        except LexerError:
            self._exhausted = True
            raise
        if token.type == TokenType.EOF:
            self._exhausted = True
        return token

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including EOF."""
        while True:
            token = self.next_token()
            yield token
            if token.type == TokenType.EOF:
                return

    # ------------------------------------------------------------------
    # Sub-scanners
    # ------------------------------------------------------------------

    def skip_whitespace(self) -> str | None:
        """Consume whitespace and return the next code point without consuming it.

        Returns None when the input is exhausted.
        """
        while True:
            ch = self._reader.peek()
            if ch is None or not is_whitespace(ch):
                return ch
            self._reader.read()

    def read_identifier(self) -> str:
        """Scan an identifier whose first character has been peeked but not consumed."""
        start = self._reader.offset
        while True:
            ch = self._reader.peek()
            if ch is None or not (is_letter(ch) or is_identifier_continue(ch)):
                break
            self._reader.read()
        return self._reader.text_between(start, self._reader.offset)

    def read_string(self) -> str:
        """Scan a double-quoted string literal and return its contents without quotes.

        No escape sequences are recognized: the literal ends at the next '"'.

        Raises:
            UnterminatedStringError: If the input ends before the closing quote.
        """
        opened_at = self._reader.position
        self._reader.read()  # opening "
        start = self._reader.offset
        while True:
            ch = self._reader.peek()
            if ch is None:
                raise UnterminatedStringError(self._reader.position, _QUOTE, opened_at)
            if ch == _QUOTE:
                end = self._reader.offset
                self._reader.read()  # closing "
                return self._reader.text_between(start, end)
            self._reader.read()

    # ------------------------------------------------------------------
    # Token scanning dispatcher
    # ------------------------------------------------------------------

    def _scan_token(self) -> Token:
        """Dispatch on the next non-whitespace code point."""
        ch = self.skip_whitespace()
        position = self._reader.position

        if ch is None:
            return Token(TokenType.EOF, position)
        if ch in _DELIMITERS:
            self._reader.read()
            return Token(_DELIMITERS[ch], position)
        if ch == _QUOTE:
            return Token(TokenType.STRING, position, self.read_string())
        if is_letter(ch):
            return Token(TokenType.IDENTIFIER, position, self.read_identifier())
        raise UnexpectedCharacterError(position, ch)


def tokenize(source: str | bytes) -> list[Token]:
    """Tokenize a complete buffer.

    Args:
        source: The text to scan, as a string or as UTF-8 encoded bytes.

    Returns:
        A list of Token objects ending with a single EOF token.

    Raises:
        LexerError: On the first invalid encoding, unterminated string literal,
            or unexpected character.
    """
    return list(Tokenizer(source))


# ################
# Implementation
# ################

_QUOTE = '"'

_DELIMITERS: dict[str, TokenType] = {
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
}
