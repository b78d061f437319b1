"""
Bladder Tumour Risk Classification Rules

Maps a CaseDescriptor onto a RiskCategory.

Rules are evaluated in order and the first match wins:
  1. Low risk:       low grade, < 3 cm, single, primary (no recurrence), no CIS.
                     All five criteria must be present.
  2. High risk:      high grade OR concomitant CIS, regardless of the rest.
  3. Intermediate:   everything else, including incomplete selections.

Design principles:
  - Each rule is a pure predicate over the descriptor.
  - Unset fields never raise; they just fail the criteria that test them.
  - Stage is deliberately not consulted.
"""
from __future__ import annotations

from typing import List

from urostrat.utils.logging import get_logger
from .base import (
    Answer,
    CaseDescriptor,
    Classification,
    Grade,
    RiskCategory,
    TumourCount,
    TumourSize,
)

logger = get_logger(__name__)

# ── Rule 1 criteria: (field, required value) ─────────────────────────────────
LOW_RISK_CRITERIA = (
    ("grade",      Grade.LOW),
    ("size",       TumourSize.UNDER_3CM),
    ("number",     TumourCount.SINGLE),
    ("recurrence", Answer.NO),
    ("cis",        Answer.NO),
)


def _factor(name: str, value) -> str:
    return f"{name}={value.value}"


# ── Rule 1: Low risk ──────────────────────────────────────────────────────────

def rule_low_risk(case: CaseDescriptor) -> bool:
    """True when every low-risk criterion is met."""
    return all(getattr(case, name) == required for name, required in LOW_RISK_CRITERIA)


# ── Rule 2: High risk ─────────────────────────────────────────────────────────

def high_risk_factors(case: CaseDescriptor) -> List[str]:
    """High-risk features present in the case (high grade, CIS)."""
    factors = []
    if case.grade == Grade.HIGH:
        factors.append(_factor("grade", case.grade))
    if case.cis == Answer.YES:
        factors.append(_factor("cis", case.cis))
    return factors


def rule_high_risk(case: CaseDescriptor) -> bool:
    return bool(high_risk_factors(case))


# ── Entry points ──────────────────────────────────────────────────────────────

def explain(case: CaseDescriptor) -> Classification:
    """
    Classify a case and report which attributes decided the outcome.

    The intermediate tier has no triggering factors: it is reached only
    because neither of the other rules matched.
    """
    if rule_low_risk(case):
        result = Classification(
            category=RiskCategory.LOW,
            triggering_factors=tuple(_factor(name, required) for name, required in LOW_RISK_CRITERIA),
        )
    elif rule_high_risk(case):
        result = Classification(
            category=RiskCategory.HIGH,
            triggering_factors=tuple(high_risk_factors(case)),
        )
    else:
        result = Classification(category=RiskCategory.INTERMEDIATE)

    logger.debug(
        f"classify: {case.to_dict()} -> {result.category.value} "
        f"[{', '.join(result.triggering_factors) or 'catch-all'}]"
    )
    return result


def classify(case: CaseDescriptor) -> RiskCategory:
    """Return the risk category for `case`."""
    return explain(case).category
