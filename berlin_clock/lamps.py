from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


OFF = "O"
YELLOW = "Y"
RED = "R"

ROW_SEPARATOR = "\n"

HOURS_ALL_ON = RED * 4
FIVE_MINUTES_ALL_ON = "YYRYYRYYRYY"  # red lamps mark the quarters
SINGLE_MINUTES_ALL_ON = YELLOW * 4


@dataclass(frozen=True)
class BerlinClockRows:
    seconds: str
    five_hours: str
    single_hours: str
    five_minutes: str
    single_minutes: str

    def lines(self) -> Tuple[str, str, str, str, str]:
        return (
            self.seconds,
            self.five_hours,
            self.single_hours,
            self.five_minutes,
            self.single_minutes,
        )


def light_row(all_on: str, on_count: int) -> str:
    """
    Return `all_on` with everything after the first `on_count` lamps off.

    Lamps fill from the left, so the trailing `len(all_on) - on_count`
    positions become OFF and the rest keep their template colour.
    """
    if not (0 <= on_count <= len(all_on)):
        raise ValueError(f"on_count must be 0..{len(all_on)}")

    off_count = len(all_on) - on_count
    if off_count == 0:
        return all_on
    return all_on[:on_count] + OFF * off_count


def second_lamp(second: int) -> str:
    # Blinks off on odd seconds.
    return OFF if second % 2 else YELLOW


def hour_rows(hour: int) -> Tuple[str, str]:
    top_on = hour // 5
    bottom_on = hour - top_on * 5
    return light_row(HOURS_ALL_ON, top_on), light_row(HOURS_ALL_ON, bottom_on)


def minute_rows(minute: int) -> Tuple[str, str]:
    top_on = minute // 5
    bottom_on = minute - top_on * 5
    return (
        light_row(FIVE_MINUTES_ALL_ON, top_on),
        light_row(SINGLE_MINUTES_ALL_ON, bottom_on),
    )


def encode_rows(hour: int, minute: int, second: int) -> BerlinClockRows:
    if not (0 <= hour <= 24):
        raise ValueError("hour must be 0..24")
    if not (0 <= minute <= 59):
        raise ValueError("minute must be 0..59")
    if not (0 <= second <= 59):
        raise ValueError("second must be 0..59")

    five_hours, single_hours = hour_rows(hour)
    five_minutes, single_minutes = minute_rows(minute)
    return BerlinClockRows(
        seconds=second_lamp(second),
        five_hours=five_hours,
        single_hours=single_hours,
        five_minutes=five_minutes,
        single_minutes=single_minutes,
    )


def encode(hour: int, minute: int, second: int) -> str:
    """
    Encode a time as the five Berlin Clock rows joined by ROW_SEPARATOR.
    """
    return ROW_SEPARATOR.join(encode_rows(hour, minute, second).lines())
