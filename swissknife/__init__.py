"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
SwissKnife, a product of Garudex Labs

SwissKnife - small helpers used throughout a codebase

Provides a JSON-over-HTTP POST helper built on httpx, string conveniences
(repeat, truncate, is_set) and single-value sequence adapters.
"""

from swissknife._version import __version__

__all__ = ["__version__"]
