"""
Surveillance Module

Follow-up cystoscopy calendar anchored to the TURBT date.
"""
from .schedule import (
    SURVEILLANCE_OFFSETS,
    add_months,
    format_visit,
    generate_schedule,
    months_after_anchor,
    months_between,
    parse_anchor,
    surveillance_offsets,
)

__all__ = [
    "SURVEILLANCE_OFFSETS",
    "add_months",
    "format_visit",
    "generate_schedule",
    "months_after_anchor",
    "months_between",
    "parse_anchor",
    "surveillance_offsets",
]
