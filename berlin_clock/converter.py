from __future__ import annotations

import logging
from typing import Optional

from berlin_clock.clock_time import ParsedTime, parse_hhmmss
from berlin_clock.lamps import BerlinClockRows, encode, encode_rows

logger = logging.getLogger(__name__)


class InvalidTimeFormat(ValueError):
    """Raised when a time string is neither HH:mm:ss nor a 24:00 literal."""

    def __init__(self, value: Optional[str]) -> None:
        self.value = value
        super().__init__(f"'{value}' is not in an acceptable format.")


def _parse_or_raise(time_string: Optional[str]) -> ParsedTime:
    parsed = parse_hhmmss(time_string)
    if not parsed.valid:
        logger.debug("rejected time string %r", time_string)
        raise InvalidTimeFormat(time_string)
    return parsed


def convert_time_rows(time_string: Optional[str]) -> BerlinClockRows:
    parsed = _parse_or_raise(time_string)
    return encode_rows(parsed.hour, parsed.minute, parsed.second)


def convert_time(time_string: Optional[str]) -> str:
    """
    Convert "HH:mm:ss" (or "24:00:00" / "24:00") to the Berlin Clock string.

    Returns five lines separated by "\\n":
    seconds lamp, 5-hour row, 1-hour row, 5-minute row, 1-minute row.

    Raises:
        InvalidTimeFormat: the input is not in an accepted format.
    """
    parsed = _parse_or_raise(time_string)
    return encode(parsed.hour, parsed.minute, parsed.second)


class TimeConverter:
    """Stateless converter object; one instance may be shared freely."""

    def convert_time(self, time_string: Optional[str]) -> str:
        return convert_time(time_string)
