from __future__ import annotations

import json
from typing import Any, Dict

from berlin_clock.lamps import ROW_SEPARATOR, BerlinClockRows


def to_data(rows: BerlinClockRows) -> Dict[str, Any]:
    """
    Convert encoded rows into a plain dict grouped by unit.
    """
    if rows is None:
        raise ValueError("rows is None")

    return {
        "seconds": rows.seconds,
        "hours": [rows.five_hours, rows.single_hours],
        "minutes": [rows.five_minutes, rows.single_minutes],
    }


def render_text(rows: BerlinClockRows) -> str:
    return ROW_SEPARATOR.join(rows.lines()) + "\n"


def render_json(data: Dict[str, Any]) -> str:
    return json.dumps(data, ensure_ascii=True, indent=2, sort_keys=True) + "\n"
