# Copyright 2026 parenlex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Unicode character classification used by the tokenizer."""

import unicodedata

# Latin-1 whitespace; above U+00FF the White_Space property is the Z* categories.
_LATIN1_WHITESPACE: frozenset[str] = frozenset("\t\n\v\f\r \x85\xa0")

_SPACE_CATEGORIES: frozenset[str] = frozenset({"Zs", "Zl", "Zp"})


def is_whitespace(char: str) -> bool:
    """Return True for any Unicode space character."""
    if char in _LATIN1_WHITESPACE:
        return True
    if char <= "\xff":
        return False
    return unicodedata.category(char) in _SPACE_CATEGORIES


def is_letter(char: str) -> bool:
    """Return True for any Unicode letter or the underscore."""
    return char == "_" or unicodedata.category(char).startswith("L")


def is_identifier_continue(char: str) -> bool:
    """Return True for any Unicode letter, Unicode decimal digit, or the underscore."""
    if char == "_":
        return True
    cat = unicodedata.category(char)
    return cat.startswith("L") or cat == "Nd"
