"""Open-now heuristic over the upstream free-text ``Horario`` field.

Typical values are ``"L-D: 24H"``, ``"L-D: 06:00-22:00"`` or
``"L-V: 07:00-21:00; S: 08:00-14:00"``.  Only the first time window is
considered; split shifts and per-day windows are not modelled and any
schedule the rules cannot decide on counts as open.
"""

from __future__ import annotations

import re
from datetime import datetime

_WINDOW_RE = re.compile(r"(\d{2}):(\d{2})-(\d{2}):(\d{2})")

_SATURDAY = 5
_SUNDAY = 6


def _is_served_today(schedule: str, weekday: int) -> bool:
    """*schedule* must already be upper-cased with whitespace removed."""
    if "L-D" in schedule or "LUNES-DOMINGO" in schedule:
        return True
    if weekday < _SATURDAY and "L-V" in schedule:
        return True
    if weekday == _SATURDAY and "S" in schedule:
        return True
    return weekday == _SUNDAY and "D" in schedule


def is_open_now(schedule: str | None, now: datetime) -> bool:
    """Return whether a station with *schedule* is open at local time *now*.

    Rules, first match wins:

    1. no schedule → open
    2. mentions ``24`` → open (``"L-D: 24H"``)
    3. today not covered by ``L-D`` / ``L-V`` / ``S`` / ``D`` → closed
    4. first ``HH:MM-HH:MM`` window decides, bounds inclusive
    5. no window → open
    """
    if not schedule or "24" in schedule:
        return True

    compact = re.sub(r"\s+", "", schedule).upper()
    if not _is_served_today(compact, now.weekday()):
        return False

    match = _WINDOW_RE.search(compact)
    if match is None:
        return True

    open_h, open_m, close_h, close_m = (int(group) for group in match.groups())
    current = now.hour * 60 + now.minute
    return open_h * 60 + open_m <= current <= close_h * 60 + close_m
