"""
Assessment Service

Runs one form submission through the decision core: classify the case,
look up the treatment plan, and build the surveillance schedule when a
TURBT date was supplied.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, Optional, Tuple

from urostrat.core.clinical import CaseDescriptor, RiskCategory, explain, recommend
from urostrat.core.reports import to_calendar_feed, to_clipboard_text, to_plain_text_report
from urostrat.core.surveillance import (
    format_visit,
    generate_schedule,
    months_after_anchor,
    parse_anchor,
)
from urostrat.core.surveillance.schedule import AnchorLike
from urostrat.utils import EmptyInputError, get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class AssessmentResult:
    """Outcome of a single submission."""
    case: CaseDescriptor
    category: RiskCategory
    treatment: str
    triggering_factors: Tuple[str, ...] = ()
    turbt_date: Optional[date] = None
    schedule: Tuple[date, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "case": self.case.to_dict(),
            "risk_category": self.category.value,
            "treatment": self.treatment,
            "triggering_factors": list(self.triggering_factors),
            "turbt_date": self.turbt_date.isoformat() if self.turbt_date else None,
            "schedule": [
                {
                    "date": visit.isoformat(),
                    "display": format_visit(visit),
                    "months_after_turbt": months_after_anchor(self.turbt_date, visit),
                }
                for visit in self.schedule
            ],
        }


class AssessmentService:
    """
    Stateless façade over the decision core, shared by the API handlers.
    """

    def assess(self, case: CaseDescriptor, turbt_date: AnchorLike = None) -> AssessmentResult:
        """
        Classify `case` and derive its treatment and schedule.

        No TURBT date means no schedule; a date that is present but
        malformed raises InvalidArgumentError.
        """
        classification = explain(case)
        treatment = recommend(classification.category)

        anchor: Optional[date] = None
        schedule: Tuple[date, ...] = ()
        if turbt_date is not None and turbt_date != "":
            anchor = parse_anchor(turbt_date)
            schedule = generate_schedule(anchor, classification.category)

        logger.info(
            f"AssessmentService: {classification.category.value} "
            f"({len(schedule)} surveillance visit(s))"
        )
        return AssessmentResult(
            case=case,
            category=classification.category,
            treatment=treatment,
            triggering_factors=classification.triggering_factors,
            turbt_date=anchor,
            schedule=schedule,
        )

    @staticmethod
    def plain_text_report(result: AssessmentResult) -> str:
        return to_plain_text_report(result.category, result.treatment)

    @staticmethod
    def clipboard_text(result: AssessmentResult) -> str:
        return to_clipboard_text(result.category, result.treatment)

    @staticmethod
    def calendar_feed(result: AssessmentResult) -> str:
        """
        Raises:
            EmptyInputError: the result has no schedule to export.
        """
        document = to_calendar_feed(result.schedule)
        if document is None:
            raise EmptyInputError(
                "No surveillance schedule to export; supply a TURBT date first",
                export_type="calendar",
            )
        return document
