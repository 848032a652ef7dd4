# Copyright 2026 parenlex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Token stream dumps."""

from parenlex.output.dump import (
    DUMP_FORMAT_VERSION,
    collect,
    deserialize,
    format_error,
    format_text,
    format_tokens,
    line_column,
    serialize,
)

__all__ = [
    "DUMP_FORMAT_VERSION",
    "collect",
    "deserialize",
    "format_error",
    "format_text",
    "format_tokens",
    "line_column",
    "serialize",
]
