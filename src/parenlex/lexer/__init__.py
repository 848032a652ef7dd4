# Copyright 2026 parenlex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Rune reader and tokenizer for parenthesized expressions."""

from parenlex.lexer.chars import is_identifier_continue, is_letter, is_whitespace
from parenlex.lexer.errors import (
    ErrorKind,
    InvalidEncodingError,
    LexerError,
    TokenizerStateError,
    UnexpectedCharacterError,
    UnterminatedStringError,
)
from parenlex.lexer.reader import RuneReader
from parenlex.lexer.tokenizer import Tokenizer, tokenize
from parenlex.lexer.tokens import Token, TokenType

__all__ = [
    "ErrorKind",
    "InvalidEncodingError",
    "LexerError",
    "RuneReader",
    "Token",
    "TokenType",
    "Tokenizer",
    "TokenizerStateError",
    "UnexpectedCharacterError",
    "UnterminatedStringError",
    "is_identifier_continue",
    "is_letter",
    "is_whitespace",
    "tokenize",
]
