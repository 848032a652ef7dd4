# Copyright 2026 parenlex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the code-point reader."""

import pytest

from parenlex.lexer import InvalidEncodingError, RuneReader

# ###############
# Reading
# ###############


class TestRead:
    def test_reads_code_points_in_order(self) -> None:
        reader = RuneReader("ab")
        assert reader.read() == "a"
        assert reader.read() == "b"
        assert reader.read() is None

    def test_position_counts_code_points(self) -> None:
        reader = RuneReader("ab")
        reader.read()
        assert reader.position == 1
        reader.read()
        assert reader.position == 2

    def test_end_of_input_is_repeatable(self) -> None:
        reader = RuneReader("")
        assert reader.read() is None
        assert reader.read() is None
        assert reader.position == 0

    def test_multibyte_code_points(self) -> None:
        reader = RuneReader("é€😀")
        assert [reader.read(), reader.read(), reader.read()] == ["é", "€", "😀"]
        assert reader.position == 3
        assert reader.offset == 9
        assert reader.at_end

    def test_bytes_input(self) -> None:
        reader = RuneReader("ñ".encode())
        assert reader.read() == "ñ"
        assert reader.read() is None

    def test_offset_tracks_bytes(self) -> None:
        reader = RuneReader("aé b")
        reader.read()
        assert reader.offset == 1
        reader.read()
        assert reader.offset == 3


# ###############
# Lookahead
# ###############


class TestPeek:
    def test_peek_does_not_consume(self) -> None:
        reader = RuneReader("xy")
        assert reader.peek() == "x"
        assert reader.read() == "x"
        assert reader.read() == "y"

    def test_peek_is_idempotent(self) -> None:
        reader = RuneReader("名x")
        results = [reader.peek() for _ in range(5)]
        assert results == ["名"] * 5
        assert reader.position == 0
        assert reader.offset == 0

    def test_peek_after_read(self) -> None:
        reader = RuneReader("xy")
        reader.read()
        assert reader.peek() == "y"
        assert reader.position == 1

    def test_peek_at_end(self) -> None:
        reader = RuneReader("x")
        reader.read()
        assert reader.peek() is None
        assert reader.peek() is None


# ###############
# Invalid Encoding
# ###############


class TestInvalidEncoding:
    def test_peek_raises_without_advancing(self) -> None:
        reader = RuneReader(b"\xffa")
        for _ in range(2):
            with pytest.raises(InvalidEncodingError) as exc_info:
                reader.peek()
            assert exc_info.value.offset == 0
        assert reader.offset == 0

    def test_read_skips_invalid_byte(self) -> None:
        reader = RuneReader(b"\xffa")
        with pytest.raises(InvalidEncodingError) as exc_info:
            reader.read()
        assert exc_info.value.position == 0
        assert exc_info.value.offset == 0
        assert reader.offset == 1
        assert reader.position == 0
        assert reader.read() == "a"
        assert reader.position == 1

    def test_truncated_sequence(self) -> None:
        reader = RuneReader(b"\xe2\x82")
        with pytest.raises(InvalidEncodingError):
            reader.read()
        with pytest.raises(InvalidEncodingError) as exc_info:
            reader.read()
        assert exc_info.value.offset == 1
        assert reader.read() is None

    @pytest.mark.parametrize(
        "data",
        [
            b"\x80",  # continuation byte without a lead
            b"\xc0\xaf",  # overlong encoding of '/'
            b"\xed\xa0\x80",  # UTF-16 surrogate
            b"\xf4\x90\x80\x80",  # above U+10FFFF
            b"\xc3\x28",  # bad continuation byte
        ],
    )
    def test_rejected_sequences(self, data: bytes) -> None:
        with pytest.raises(InvalidEncodingError):
            RuneReader(data).read()

    def test_lone_surrogate_in_str(self) -> None:
        reader = RuneReader("a\ud800")
        assert reader.read() == "a"
        with pytest.raises(InvalidEncodingError) as exc_info:
            reader.read()
        assert exc_info.value.position == 1


# ###############
# Slicing
# ###############


def test_text_between_offsets() -> None:
    reader = RuneReader("(héllo)")
    reader.read()
    start = reader.offset
    for _ in range(5):
        reader.read()
    assert reader.text_between(start, reader.offset) == "héllo"
