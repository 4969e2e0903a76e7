"""Subtitle timestamp parsing."""

from __future__ import annotations

from wwdcsearch.exceptions import InvalidTimestampError


def time_to_seconds(timestamp: str) -> int:
    """Convert an ``HH:MM:SS`` or ``MM:SS`` timestamp into seconds.

    Args:
        timestamp: Timestamp string from a subtitle segment

    Returns:
        Total number of seconds

    Raises:
        InvalidTimestampError: If the value is not two or three
            colon-separated non-negative integers
    """
    if not isinstance(timestamp, str):
        raise InvalidTimestampError(timestamp)

    parts = timestamp.strip().split(":")
    if len(parts) not in (2, 3) or not all(part.isdecimal() for part in parts):
        raise InvalidTimestampError(timestamp)

    numbers = [int(part) for part in parts]
    if len(numbers) == 3:
        hours, minutes, seconds = numbers
        return hours * 3600 + minutes * 60 + seconds
    minutes, seconds = numbers
    return minutes * 60 + seconds
