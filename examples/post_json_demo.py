#!/usr/bin/env python
"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
SwissKnife, a product of Garudex Labs

Demonstration of the JSON-over-HTTP POST helper.

This script shows how to:
1. Load configuration and set up logging
2. Build a client from configuration
3. POST with a relative and an absolute address
4. Handle the failure types
"""

from typing import Any, Dict

import httpx

from swissknife.config import load_config
from swissknife.exceptions import HttpRequestFailedError, ResponseParseError
from swissknife.extensions import build_client, post_json, truncate
from swissknife.logging_config import setup_logging_from_config


def main():
    """Run POST helper demonstration."""
    config = load_config()
    if not config.http.base_url:
        config.http.base_url = "https://postman-echo.com/"
    config.logging.json_format = False
    setup_logging_from_config(config.logging)

    with build_client(config.http) as client:
        echoed = post_json(
            client, "post?foo1=bar1", {"blade": "main"}, response_type=Dict[str, Any]
        )
        print("Query args:", echoed["args"])
        print("Echoed body:", echoed["json"])

        # An httpx.URL is used verbatim, whatever the base_url says
        echoed = post_json(client, httpx.URL("https://postman-echo.com/post?foo2=bar2"))
        print("Absolute address args:", echoed["args"])

        try:
            post_json(client, "status/404", truncation_limit=40)
        except HttpRequestFailedError as e:
            print(f"HTTP {e.status_code}: {e.body}")

        try:
            post_json(client, "https://postman-echo.com/status/200", response_type=Dict[str, str])
        except ResponseParseError as e:
            print("Unexpected shape:", truncate(e.body, 60))


if __name__ == "__main__":
    main()
