"""
Adjuvant treatment recommendations per risk category.
"""
from __future__ import annotations

from typing import Dict

from urostrat.utils.exceptions import InvalidArgumentError
from .base import RiskCategory

TREATMENT_PLANS: Dict[RiskCategory, str] = {
    RiskCategory.LOW: (
        "single-dose intravesical chemotherapy within 24 hours of resection; "
        "no induction immunotherapy."
    ),
    RiskCategory.INTERMEDIATE: (
        "six-week induction immunotherapy course plus one year of maintenance, "
        "or six weekly chemotherapy instillations."
    ),
    RiskCategory.HIGH: (
        "six-week induction immunotherapy course plus maintenance therapy "
        "for up to three years."
    ),
}


def recommend(category: RiskCategory) -> str:
    """
    Return the fixed treatment recommendation for `category`.

    Raises:
        InvalidArgumentError: `category` is not a RiskCategory member.
    """
    if not isinstance(category, RiskCategory):
        raise InvalidArgumentError(
            f"Unknown risk category: {category!r}",
            argument="category",
            details={"allowed": [c.value for c in RiskCategory]},
        )
    return TREATMENT_PLANS[category]
