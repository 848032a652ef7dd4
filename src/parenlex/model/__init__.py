# Copyright 2026 parenlex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Serializable token stream model."""

from parenlex.model.records import ErrorRecord, TokenRecord, TokenStream

__all__ = [
    "ErrorRecord",
    "TokenRecord",
    "TokenStream",
]
