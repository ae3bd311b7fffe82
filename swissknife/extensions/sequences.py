"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
SwissKnife, a product of Garudex Labs

Adapters that wrap a single value into a one-element sequence.
"""

from typing import AsyncIterator, Iterator, TypeVar

T = TypeVar("T")


def yield_one(value: T) -> Iterator[T]:
    """Yield ``value`` once. Each call returns a fresh iterator."""
    yield value


async def yield_one_async(value: T) -> AsyncIterator[T]:
    """
    Yield ``value`` once under ``async for``.

    No I/O is performed; this only adapts a plain value for code that
    consumes async iterators. Each call returns a fresh async generator.
    """
    yield value
