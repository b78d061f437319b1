"""
Report Export Module

Two independent serializers:
- Plain-text treatment report (.txt) and clipboard summary
- Surveillance calendar feed (.ics)
"""
from .plain_text import (
    REPORT_MEDIA_TYPE,
    REPORT_TITLE,
    to_clipboard_text,
    to_plain_text_report,
)
from .calendar_feed import (
    CALENDAR_MEDIA_TYPE,
    EVENT_DESCRIPTION,
    EVENT_SUMMARY,
    format_utc_timestamp,
    to_calendar_feed,
)

__all__ = [
    "REPORT_MEDIA_TYPE",
    "REPORT_TITLE",
    "to_clipboard_text",
    "to_plain_text_report",
    "CALENDAR_MEDIA_TYPE",
    "EVENT_DESCRIPTION",
    "EVENT_SUMMARY",
    "format_utc_timestamp",
    "to_calendar_feed",
]
