from __future__ import annotations

import typing as tp

from pytimeparse.timeparse import timeparse

HEADERS_ENCODING = "iso-8859-1"


def parse_duration(value: str) -> tp.Optional[int]:
    """
    Convert a human-readable duration into a whole number of seconds.

    Args:
        value: A duration such as "1m", "2h30m" or "1d", or a bare number of seconds such as "300".

    Returns:
        The number of seconds, or None when the value is not a duration,
        is negative, or does not land on a whole second.

    Examples:
        >>> parse_duration("1m")
        60
        >>> parse_duration("1d")
        86400
        >>> parse_duration("300")
        300
        >>> parse_duration("unknown") is None
        True
    """
    value = value.strip()
    if value.isascii() and value.isdigit():
        return int(value)

    seconds = timeparse(value)
    if seconds is None:
        return None
    if isinstance(seconds, float):
        if not seconds.is_integer():
            return None
        seconds = int(seconds)
    if seconds < 0:
        return None
    return seconds
