"""Date helpers: the current time and date-to-timestamp substitution."""

from __future__ import annotations

import calendar
import re
from datetime import datetime
from typing import Callable

DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"
DATETIME_ZONE_FORMAT = "%Y-%m-%d %H:%M:%S %z"
UTC_FORMAT = "%Y-%m-%dT%H:%M:%S"
DATE_FORMAT = "%Y-%m-%d"
SIMPLE_DATE_FORMAT = "%Y.%m.%d"


def date_now() -> str:
    """Current local time as `YYYY-MM-DD HH:MM:SS`."""
    return datetime.now().strftime(DATETIME_FORMAT)


def _naive_timestamp(value: datetime) -> int:
    return calendar.timegm(value.timetuple())


def _seconds_prefix(fmt: str) -> Callable[[str], int]:
    # fractional seconds never change the whole-second timestamp
    return lambda text: _naive_timestamp(datetime.strptime(text[:19], fmt))


def _whole(fmt: str) -> Callable[[str], int]:
    return lambda text: _naive_timestamp(datetime.strptime(text, fmt))


def _zoned(text: str) -> int:
    return int(datetime.strptime(text, DATETIME_ZONE_FORMAT).timestamp())


# Longest forms first, so shorter patterns do not eat parts of longer ones.
_PATTERNS: tuple[tuple[re.Pattern[str], Callable[[str], int]], ...] = (
    (re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{1,8}Z"), _seconds_prefix(UTC_FORMAT)),
    (re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z"), _seconds_prefix(UTC_FORMAT)),
    (re.compile(r"\d{4}-\d{2}-\d{2}\s\d{2}:\d{2}:\d{2}\.\d{1,8}"), _seconds_prefix(DATETIME_FORMAT)),
    (re.compile(r"\d{4}-\d{2}-\d{2}\s\d{2}:\d{2}:\d{2}\s\+\d{2}:\d{2}"), _zoned),
    (re.compile(r"\d{4}-\d{2}-\d{2}\s\d{2}:\d{2}:\d{2}"), _whole(DATETIME_FORMAT)),
    (re.compile(r"\d{4}-\d{2}-\d{2}"), _whole(DATE_FORMAT)),
    (re.compile(r"\d{4}\.\d{2}\.\d{2}"), _whole(SIMPLE_DATE_FORMAT)),
)


def replace_to_unix(text: str) -> str:
    """Replace every recognised date or time in the text by its Unix timestamp.

    Times without a zone are taken as UTC. Raises ValueError for a value that
    has the shape of a date but is not a valid one.
    """
    result = text
    for pattern, to_timestamp in _PATTERNS:
        for match in pattern.finditer(text):
            found = match.group(0)
            result = result.replace(found, str(to_timestamp(found)))
    return result