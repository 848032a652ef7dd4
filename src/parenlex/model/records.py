# Copyright 2026 parenlex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Serializable records of a lexed token stream."""

from __future__ import annotations

from pydantic import BaseModel
from pydantic import Field as _Field

from parenlex.lexer.errors import ErrorKind, LexerError
from parenlex.lexer.tokens import Token, TokenType

# ###############
# Public Interface
# ###############


class TokenRecord(BaseModel):
    """One token as it appears in a dump. Parentheses and EOF carry no text."""

    type: TokenType
    position: int = _Field(ge=0)
    text: str | None = None

    @classmethod
    def from_token(cls, token: Token) -> TokenRecord:
        if token.type in (TokenType.STRING, TokenType.IDENTIFIER):
            return cls(type=token.type, position=token.position, text=token.text)
        return cls(type=token.type, position=token.position)

    def to_token(self) -> Token:
        return Token(self.type, self.position, self.text or "")


class ErrorRecord(BaseModel):
    """The lexer failure that terminated a token stream."""

    kind: ErrorKind
    position: int = _Field(ge=0)
    message: str

    @classmethod
    def from_error(cls, error: LexerError) -> ErrorRecord:
        return cls(kind=error.kind, position=error.position, message=error.message)


class TokenStream(BaseModel):
    """All tokens lexed from one input, and the error that stopped lexing, if any.

    Attributes:
        source: Label of the input, such as a file path or ``<stdin>``.
        tokens: Tokens in input order. Ends with EOF unless ``error`` is set.
        error: The lexer failure, or None if the input was lexed completely.
    """

    source: str
    tokens: list[TokenRecord] = _Field(default_factory=list)
    error: ErrorRecord | None = None

    @property
    def complete(self) -> bool:
        """Whether lexing reached EOF without an error."""
        return self.error is None and bool(self.tokens) and self.tokens[-1].type == TokenType.EOF
