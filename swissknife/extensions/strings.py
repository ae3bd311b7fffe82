"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
SwissKnife, a product of Garudex Labs

String helpers: repeat, truncate and is_set.
"""

from typing import Optional

from swissknife.exceptions import ArgumentError, ArgumentOutOfRangeError

ELLIPSIS = "..."


def repeat(text: str, count: int) -> str:
    """
    Repeat ``text`` ``count`` times with no separator.

    Args:
        text: Text to repeat
        count: Number of repetitions, must be at least 1

    Returns:
        The concatenated text

    Raises:
        ArgumentError: If count is zero or negative
    """
    if count <= 0:
        raise ArgumentError(f"count must be greater than zero, got {count}")
    return text * count


def truncate(text: str, max_length: int) -> str:
    """
    Cut ``text`` down to ``max_length`` characters, marking the cut with "...".

    Text no longer than ``max_length`` is returned unchanged. Longer text is
    returned as its first ``max_length`` characters followed by the ellipsis,
    so the result is ``max_length + 3`` characters long.

    Raises:
        ArgumentOutOfRangeError: If max_length is zero or negative
    """
    if max_length <= 0:
        raise ArgumentOutOfRangeError(
            "max_length",
            max_length,
            f"max_length (maxLength) must be greater than zero, got {max_length}",
        )
    if len(text) <= max_length:
        return text
    return text[:max_length] + ELLIPSIS


def is_set(text: Optional[str]) -> bool:
    """True unless ``text`` is None or empty. Whitespace counts as set."""
    return text is not None and len(text) > 0
