# Copyright 2026 parenlex Contributors
# SPDX-License-Identifier: Apache-2.0

"""JSON and text renderings of a lexed token stream.

JSON dumps are compact and versioned so consumers can detect format changes.
Text dumps list one token per line and are meant for people.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import ValidationError
from yachalk import chalk

from parenlex.lexer.errors import ErrorKind, LexerError
from parenlex.lexer.tokenizer import Tokenizer
from parenlex.lexer.tokens import TokenType
from parenlex.model.records import ErrorRecord, TokenRecord, TokenStream

# ###############
# Public Interface
# ###############

DUMP_FORMAT_VERSION = "1"


def collect(source: str | bytes, label: str) -> TokenStream:
    """Lex a complete buffer into a TokenStream.

    Tokens are recorded up to and including EOF. If lexing fails, the tokens
    before the failure are kept and the failure is stored in ``error``.
    """
    stream = TokenStream(source=label)
    try:
        for token in Tokenizer(source):
            stream.tokens.append(TokenRecord.from_token(token))
    except LexerError as exc:
        stream.error = ErrorRecord.from_error(exc)
    return stream


def serialize(stream: TokenStream) -> str:
    """Serialize a TokenStream to a compact JSON string."""
    return json.dumps(_stream_to_dict(stream), separators=(",", ":"), ensure_ascii=False)


def deserialize(data: str) -> TokenStream:
    """Deserialize a TokenStream from a JSON string.

    Args:
        data: JSON string produced by :func:`serialize`.

    Returns:
        The reconstructed :class:`TokenStream`.

    Raises:
        ValueError: If the format version is not recognised or the payload is malformed.
    """
    obj = json.loads(data)
    if not isinstance(obj, dict):
        raise ValueError("Token dump must be a JSON object")
    version = obj.get("v")
    if version != DUMP_FORMAT_VERSION:
        raise ValueError(f"Unsupported token dump format version: {version!r}")
    try:
        return _stream_from_dict(obj)
    except (KeyError, TypeError, ValidationError) as exc:
        raise ValueError(f"Malformed token dump: {exc}") from exc


def format_text(stream: TokenStream, color: bool = False, text: str | None = None) -> list[str]:
    """Render a TokenStream as human-readable lines.

    Args:
        stream: The stream to render.
        color: Whether to colorize the output with ANSI escapes.
        text: The decoded input. When given, the error line also reports the
            1-based line and column of the failure.

    Returns:
        One line per token, followed by one line for the error, if any.
    """
    lines = format_tokens(stream, color)
    error_line = format_error(stream, color, text)
    if error_line is not None:
        lines.append(error_line)
    return lines


def format_tokens(stream: TokenStream, color: bool = False) -> list[str]:
    """Render each token of a stream as ``POSITION TYPE [text]``."""
    lines: list[str] = []
    for record in stream.tokens:
        type_name = _paint(chalk.blue, f"{record.type.name:<10}", color)
        line = f"{record.position:>6}  {type_name}"
        if record.text is not None:
            line += " " + _paint(chalk.green, repr(record.text), color)
        lines.append(line.rstrip())
    return lines


def format_error(stream: TokenStream, color: bool = False, text: str | None = None) -> str | None:
    """Render the error of a stream as a ``source[:line:column]: error: message`` line."""
    if stream.error is None:
        return None
    location = stream.source
    if text is not None:
        line_no, column = line_column(text, stream.error.position)
        location = f"{location}:{line_no}:{column}"
    return _paint(chalk.red, f"{location}: error: {stream.error.message}", color)


def line_column(text: str, position: int) -> tuple[int, int]:
    """Return the 1-based line and column of a code-point position in *text*."""
    prefix = text[:position]
    line_no = prefix.count("\n") + 1
    column = position - (prefix.rfind("\n") + 1) + 1
    return line_no, column


# ################
# Implementation
# ################


def _paint(style: Any, value: str, color: bool) -> str:
    return style(value) if color else value


def _stream_to_dict(stream: TokenStream) -> dict[str, Any]:
    d: dict[str, Any] = {
        "v": DUMP_FORMAT_VERSION,
        "source": stream.source,
        "tokens": [_token_to_dict(t) for t in stream.tokens],
    }
    if stream.error is not None:
        d["error"] = _error_to_dict(stream.error)
    return d


def _stream_from_dict(obj: dict[str, Any]) -> TokenStream:
    error = obj.get("error")
    return TokenStream(
        source=obj["source"],
        tokens=[_token_from_dict(t) for t in obj.get("tokens", [])],
        error=_error_from_dict(error) if error is not None else None,
    )


def _token_to_dict(record: TokenRecord) -> dict[str, Any]:
    d: dict[str, Any] = {"type": record.type.name, "pos": record.position}
    if record.text is not None:
        d["text"] = record.text
    return d


def _token_from_dict(obj: dict[str, Any]) -> TokenRecord:
    type_name = obj["type"]
    if type_name not in TokenType.__members__:
        raise ValueError(f"Unknown token type: {type_name!r}")
    token_type = TokenType[type_name]
    return TokenRecord(type=token_type, position=obj["pos"], text=obj.get("text"))


def _error_to_dict(record: ErrorRecord) -> dict[str, Any]:
    return {"kind": record.kind.value, "pos": record.position, "message": record.message}


def _error_from_dict(obj: dict[str, Any]) -> ErrorRecord:
    return ErrorRecord(kind=ErrorKind(obj["kind"]), position=obj["pos"], message=obj["message"])
