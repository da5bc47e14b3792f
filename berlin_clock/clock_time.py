from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any


# The 24th hour is a valid Berlin Clock reading but not a valid time of day.
MIDNIGHT_LITERALS = ("24:00:00", "24:00")

_HHMMSS_PATTERN = re.compile(r"([0-9]{2}):([0-9]{2}):([0-9]{2})")


@dataclass(frozen=True)
class ParsedTime:
    hour: int = 0
    minute: int = 0
    second: int = 0
    valid: bool = False


INVALID = ParsedTime()


def parse_hhmmss(value: Any) -> ParsedTime:
    """
    Parse "HH:mm:ss" (zero-padded, 24-hour) or one of the "24:00" literals.

    Never raises; failure (including non-str input) is reported by
    ParsedTime.valid and the other fields must not be read in that case.
    """
    if not isinstance(value, str):
        return INVALID

    if value in MIDNIGHT_LITERALS:
        return ParsedTime(hour=24, minute=0, second=0, valid=True)

    match = _HHMMSS_PATTERN.fullmatch(value)
    if not match:
        return INVALID

    hour, minute, second = (int(g) for g in match.groups())
    if not (0 <= hour <= 23):
        return INVALID
    if not (0 <= minute <= 59):
        return INVALID
    if not (0 <= second <= 59):
        return INVALID

    return ParsedTime(hour=hour, minute=minute, second=second, valid=True)
