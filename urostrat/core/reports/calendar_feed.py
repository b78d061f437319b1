"""
Calendar Feed Export

Serialises a surveillance schedule as an iCalendar (VCALENDAR 2.0) document
with one VEVENT per visit.  Each event starts and ends at midnight UTC on the
visit date.
"""
from __future__ import annotations

from datetime import date, datetime, time, timezone
from typing import List, Optional, Sequence

from urostrat.utils.logging import get_logger

logger = get_logger(__name__)

CALENDAR_MEDIA_TYPE = "text/calendar;charset=utf-8"

EVENT_SUMMARY = "Bladder Cancer Surveillance Visit"
EVENT_DESCRIPTION = "Scheduled surveillance cystoscopy"

_CALENDAR_HEADER = (
    "BEGIN:VCALENDAR",
    "VERSION:2.0",
    "CALSCALE:GREGORIAN",
)
_CALENDAR_FOOTER = "END:VCALENDAR"


def format_utc_timestamp(visit: date) -> str:
    """Midnight UTC on `visit` as a compact iCalendar date-time, e.g. 20250101T000000Z."""
    if isinstance(visit, datetime):
        visit = visit.date()
    moment = datetime.combine(visit, time.min, tzinfo=timezone.utc)
    # strftime does not zero-pad years below 1000 on every platform
    return (
        f"{moment.year:04d}{moment.month:02d}{moment.day:02d}"
        f"T{moment.hour:02d}{moment.minute:02d}{moment.second:02d}Z"
    )


def _event_lines(visit: date) -> List[str]:
    stamp = format_utc_timestamp(visit)
    return [
        "BEGIN:VEVENT",
        f"SUMMARY:{EVENT_SUMMARY}",
        f"DTSTART:{stamp}",
        f"DTEND:{stamp}",
        f"DESCRIPTION:{EVENT_DESCRIPTION}",
        "END:VEVENT",
    ]


def to_calendar_feed(schedule: Sequence[date]) -> Optional[str]:
    """
    Build the .ics document for `schedule`, preserving its order.

    Returns None for an empty schedule: there is nothing to export and the
    caller should not offer a download.
    """
    if not schedule:
        logger.debug("to_calendar_feed: empty schedule, no document produced")
        return None

    lines = list(_CALENDAR_HEADER)
    for visit in schedule:
        lines.extend(_event_lines(visit))
    lines.append(_CALENDAR_FOOTER)
    return "\n".join(lines)
