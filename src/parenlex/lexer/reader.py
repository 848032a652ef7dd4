# Copyright 2026 parenlex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Code-point reader with one code point of lookahead.

The reader decodes a UTF-8 buffer lazily, one code point per call, so that an
invalid byte sequence is reported at the point where the tokenizer reaches it
rather than when the buffer is handed over.
"""

from __future__ import annotations

from dataclasses import dataclass

from parenlex.lexer.errors import InvalidEncodingError

# ###############
# Public Interface
# ###############


class RuneReader:
    """Read code points from an immutable UTF-8 buffer.

    ``read`` consumes the next code point, ``peek`` returns it without consuming
    it. Both return ``None`` at the end of the input. The decoded lookahead is
    cached in a single slot, so any number of consecutive ``peek`` calls return
    the same code point and leave the cursor untouched.

    Attributes:
        position: Number of code points consumed so far.
    """

    def __init__(self, source: str | bytes) -> None:
        if isinstance(source, str):
            # Lone surrogates survive encoding and are reported lazily by the decoder.
            source = source.encode("utf-8", "surrogatepass")
        self._data = bytes(source)
        self._offset = 0
        self._lookahead: _Decoded | None = None
        self.position = 0

    @property
    def offset(self) -> int:
        """Byte offset of the next unconsumed code point."""
        return self._offset

    @property
    def at_end(self) -> bool:
        """Whether every byte of the buffer has been consumed."""
        return self._offset >= len(self._data)

    def read(self) -> str | None:
        """Consume and return the next code point, or None at end of input.

        Raises:
            InvalidEncodingError: If the next bytes are not valid UTF-8. The
                cursor still advances past the first offending byte.
        """
        decoded = self._fill()
        self._lookahead = None
        if decoded is None:
            return None
        self._offset += decoded.width
        if decoded.char is None:
            raise InvalidEncodingError(self.position, self._offset - decoded.width)
        self.position += 1
        return decoded.char

    def peek(self) -> str | None:
        """Return the next code point without consuming it, or None at end of input.

        Raises:
            InvalidEncodingError: If the next bytes are not valid UTF-8. The
                cursor does not move.
        """
        decoded = self._fill()
        if decoded is None:
            return None
        if decoded.char is None:
            raise InvalidEncodingError(self.position, self._offset)
        return decoded.char

    def text_between(self, start: int, end: int) -> str:
        """Decode the buffer between two byte offsets previously read from ``offset``."""
        return self._data[start:end].decode("utf-8")

    def _fill(self) -> _Decoded | None:
        """Decode into the lookahead slot if it is empty and return its contents."""
        if self._lookahead is None and not self.at_end:
            self._lookahead = _decode_at(self._data, self._offset)
        return self._lookahead


# ################
# Implementation
# ################


@dataclass(frozen=True)
class _Decoded:
    """One decoded unit: a code point and its byte width, or an invalid byte."""

    char: str | None
    width: int


def _sequence_length(lead: int) -> int:
    """Return the UTF-8 sequence length announced by a lead byte, or 0 if invalid."""
    if lead < 0x80:
        return 1
    if 0xC2 <= lead <= 0xDF:
        return 2
    if 0xE0 <= lead <= 0xEF:
        return 3
    if 0xF0 <= lead <= 0xF4:
        return 4
    return 0


def _decode_at(data: bytes, offset: int) -> _Decoded:
    """Decode the code point starting at *offset*."""
    length = _sequence_length(data[offset])
    if length == 0:
        return _Decoded(None, 1)
    try:
        char = data[offset : offset + length].decode("utf-8")
    except UnicodeDecodeError:
        # Covers truncated tails, bad continuation bytes, overlongs and surrogates.
        return _Decoded(None, 1)
    return _Decoded(char, length)
