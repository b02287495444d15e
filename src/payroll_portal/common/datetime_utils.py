from __future__ import annotations

from datetime import datetime, time


def parse_clock(value: str) -> time:
    """Parse an HH:MM:SS (or HH:MM) clock string as sent by the API."""
    fmt = "%H:%M:%S" if value.count(":") == 2 else "%H:%M"
    return datetime.strptime(value, fmt).time()


def format_clock(value: datetime) -> str:
    return value.strftime("%H:%M:%S")


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
