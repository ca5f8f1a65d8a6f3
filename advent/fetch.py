"""Download puzzle input for a given day."""

from __future__ import annotations

import datetime
import time
import urllib.request
from typing import BinaryIO

__all__ = ["BASE_URL", "fetch_input", "fetch_test_input"]

BASE_URL = "https://adventofcode.com"


def fetch_input(year: int, day: str, session_id: str) -> BinaryIO:
    """Fetch the input for ``day`` of ``year``, authenticated by a session cookie.

    Returns the open response body; the caller closes it.
    """
    request = urllib.request.Request(
        f"{BASE_URL}/{year}/day/{day}/input",
        headers={"Cookie": f"session={session_id}"},
        method="GET",
    )
    start = time.perf_counter()
    try:
        response = urllib.request.urlopen(request)
    except OSError as error:
        print("input fetched in", f"{time.perf_counter() - start:.6f}s")
        print(f"encountered an error fetching Day {day} input: {error}")
        raise
    print("input fetched in", f"{time.perf_counter() - start:.6f}s")
    return response


def fetch_test_input(day: str, session_id: str) -> BinaryIO:
    """Fetch the input for ``day`` of the current year."""
    return fetch_input(datetime.date.today().year, day, session_id)