# Copyright 2026 parenlex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Errors raised by the rune reader and the tokenizer.

Every scan failure is a :class:`LexerError` subclass tagged with an
:class:`ErrorKind`, so callers can either catch the base class or match on
``error.kind``. Reaching the end of the input is never an error.
"""

import enum

# ###############
# Public Interface
# ###############


class ErrorKind(enum.Enum):
    """The closed set of lexer failure kinds."""

    INVALID_ENCODING = "invalid-encoding"
    UNTERMINATED_STRING = "unterminated-string"
    UNEXPECTED_CHARACTER = "unexpected-character"


class LexerError(Exception):
    """Base class for all scan failures.

    Attributes:
        kind: The failure kind.
        position: 0-based code-point offset at which the failure was detected.
        message: Human-readable description without the position prefix.
    """

    kind: ErrorKind

    def __init__(self, message: str, position: int) -> None:
        super().__init__(f"Position {position}: {message}")
        self.message = message
        self.position = position


class InvalidEncodingError(LexerError):
    """Raised when the next bytes do not decode to a valid UTF-8 code point.

    Attributes:
        offset: Byte offset of the first undecodable byte.
    """

    kind = ErrorKind.INVALID_ENCODING

    def __init__(self, position: int, offset: int) -> None:
        super().__init__(f"Invalid UTF-8 sequence at byte offset {offset}", position)
        self.offset = offset


class UnterminatedStringError(LexerError):
    """Raised when the input ends inside a string literal.

    Attributes:
        expected: The character that was expected before the end of input.
        opened_at: Code-point offset of the opening quote.
    """

    kind = ErrorKind.UNTERMINATED_STRING

    def __init__(self, position: int, expected: str, opened_at: int) -> None:
        super().__init__(
            f"Unterminated string literal opened at position {opened_at}, expected {expected!r}",
            position,
        )
        self.expected = expected
        self.opened_at = opened_at


class UnexpectedCharacterError(LexerError):
    """Raised when a code point starts none of the recognized token forms."""

    kind = ErrorKind.UNEXPECTED_CHARACTER

    def __init__(self, position: int, character: str) -> None:
        super().__init__(f"Unexpected character: {character!r}", position)
        self.character = character


class TokenizerStateError(RuntimeError):
    """Raised when a tokenizer is used after its token stream has terminated."""
