# Copyright 2026 parenlex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Token types and token values produced by the lexer."""

import enum
from dataclasses import dataclass

# ###############
# Public Interface
# ###############


class TokenType(enum.Enum):
    """All token types produced by the parenlex tokenizer."""

    # Delimiters
    LPAREN = "("
    RPAREN = ")"

    # Literals
    STRING = "STRING"

    # Identifiers
    IDENTIFIER = "IDENTIFIER"

    # End of input
    EOF = "EOF"


@dataclass(frozen=True)
class Token:
    """A lexical token with its source position.

    Attributes:
        type: The kind of token.
        position: 0-based code-point offset of the token's defining character
            (the opening quote, the parenthesis, or the first identifier character).
            For EOF this is the code-point length of the consumed input.
        text: Identifier text or string contents without the surrounding quotes.
            Empty for parentheses and EOF.
    """

    type: TokenType
    position: int
    text: str = ""

    def __str__(self) -> str:
        if self.type in (TokenType.STRING, TokenType.IDENTIFIER):
            return f"{self.type.name}({self.text!r})@{self.position}"
        return f"{self.type.name}@{self.position}"
