"""
Surveillance Schedule Generator

Derives the follow-up cystoscopy calendar from the TURBT date and the risk
category.  Each visit is the anchor advanced by a whole number of calendar
months taken from the category's offset table.

Month overflow is clamped to the last day of the target month, so a
31 January anchor gives 30 April at +3 months and 29 February in leap years
at +13 months.
"""
from __future__ import annotations

from datetime import date, datetime
from typing import Dict, Optional, Tuple, Union

from dateutil.relativedelta import relativedelta

from urostrat.core.clinical.base import RiskCategory
from urostrat.utils.exceptions import InvalidArgumentError
from urostrat.utils.logging import get_logger

logger = get_logger(__name__)

AnchorLike = Union[date, datetime, str, None]

ANCHOR_FORMAT = "%Y-%m-%d"
VISIT_DISPLAY_FORMAT = "%a %b %d %Y"   # "Tue Apr 01 2025"

# Months after TURBT, ascending
SURVEILLANCE_OFFSETS: Dict[RiskCategory, Tuple[int, ...]] = {
    RiskCategory.LOW:          (3, 12, 24, 36, 48, 60),
    RiskCategory.INTERMEDIATE: (3, 6, 12, 18, 24, 30, 36, 48, 60),
    RiskCategory.HIGH:         (3, 6, 9, 12, 18, 24, 30, 36, 48, 60),
}


def surveillance_offsets(category: RiskCategory) -> Tuple[int, ...]:
    """Month offsets used for `category`."""
    if not isinstance(category, RiskCategory):
        raise InvalidArgumentError(
            f"Unknown risk category: {category!r}",
            argument="category",
            details={"allowed": [c.value for c in RiskCategory]},
        )
    return SURVEILLANCE_OFFSETS[category]


def parse_anchor(anchor: AnchorLike) -> date:
    """
    Normalise the TURBT date.

    Accepts a `date`, a `datetime` (its date part) or a `YYYY-MM-DD` string.

    Raises:
        InvalidArgumentError: the anchor is missing or cannot be parsed.
    """
    if anchor is None or anchor == "":
        raise InvalidArgumentError("TURBT date is required to build a schedule", argument="anchor")
    if isinstance(anchor, datetime):
        return anchor.date()
    if isinstance(anchor, date):
        return anchor
    if isinstance(anchor, str):
        try:
            return datetime.strptime(anchor.strip(), ANCHOR_FORMAT).date()
        except ValueError:
            raise InvalidArgumentError(
                f"Unparseable TURBT date {anchor!r}; expected YYYY-MM-DD",
                argument="anchor",
                details={"value": anchor},
            ) from None
    raise InvalidArgumentError(
        f"Unsupported TURBT date type: {type(anchor).__name__}",
        argument="anchor",
    )


def add_months(anchor: date, months: int) -> date:
    return anchor + relativedelta(months=months)


def generate_schedule(anchor: AnchorLike, category: RiskCategory) -> Tuple[date, ...]:
    """
    Build the ordered surveillance calendar.

    Args:
        anchor: TURBT date (date, datetime or "YYYY-MM-DD").
        category: Risk category selecting the offset table.

    Returns:
        Visit dates in ascending order, one per table offset
        (6 / 9 / 10 visits for low / intermediate / high risk).
    """
    start = parse_anchor(anchor)
    offsets = surveillance_offsets(category)
    try:
        schedule = tuple(add_months(start, months) for months in offsets)
    except (ValueError, OverflowError):
        raise InvalidArgumentError(
            f"TURBT date {start.isoformat()} is too late to schedule {offsets[-1]} months of surveillance",
            argument="anchor",
            details={"value": start.isoformat()},
        ) from None
    logger.debug(
        f"generate_schedule: {category.value} from {start.isoformat()} -> "
        f"{len(schedule)} visits ({schedule[0].isoformat()} .. {schedule[-1].isoformat()})"
    )
    return schedule


def months_between(anchor: date, visit: date) -> int:
    """Whole calendar months from `anchor` to `visit`."""
    delta = relativedelta(visit, anchor)
    return delta.years * 12 + delta.months


def months_after_anchor(anchor: date, visit: date) -> int:
    """
    Table offset that produced `visit`.

    Unlike `months_between`, a visit clamped to the end of a short month
    still maps back to its offset (31 Jan → 30 Apr reports 3, not 2).
    """
    months = months_between(anchor, visit)
    # a month past December 9999 cannot exist, so nothing was clamped
    if (anchor.year * 12 + anchor.month + months + 1) > (date.max.year * 12 + date.max.month):
        return months
    if add_months(anchor, months + 1) == visit:
        return months + 1
    return months


def format_visit(visit: date, fmt: Optional[str] = None) -> str:
    """Human-readable visit date, e.g. "Tue Apr 01 2025"."""
    return visit.strftime(fmt or VISIT_DISPLAY_FORMAT)
