"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
SwissKnife, a product of Garudex Labs

Helper extensions: JSON-over-HTTP POST, strings and single-value sequences.
"""

from swissknife.extensions.http import (
    DEFAULT_TRUNCATION_LIMIT,
    NO_BODY,
    apost_json,
    build_async_client,
    build_client,
    post_json,
    resolve_url,
)
from swissknife.extensions.sequences import yield_one, yield_one_async
from swissknife.extensions.strings import is_set, repeat, truncate

__all__ = [
    "DEFAULT_TRUNCATION_LIMIT",
    "NO_BODY",
    "apost_json",
    "build_async_client",
    "build_client",
    "post_json",
    "resolve_url",
    "yield_one",
    "yield_one_async",
    "is_set",
    "repeat",
    "truncate",
]
