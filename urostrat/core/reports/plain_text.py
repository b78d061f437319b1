"""
Plain-Text Treatment Report

Fixed-layout summary of the risk category and treatment plan, downloaded as
`bladder_treatment_plan.txt`, plus the short form copied to the clipboard.
"""
from urostrat.core.clinical.base import RiskCategory
from urostrat.utils.exceptions import InvalidArgumentError

REPORT_TITLE = "Bladder Cancer Risk Stratification"
REPORT_MEDIA_TYPE = "text/plain;charset=utf-8"


def _label(category: RiskCategory) -> str:
    if not isinstance(category, RiskCategory):
        raise InvalidArgumentError(f"Unknown risk category: {category!r}", argument="category")
    return category.value


def to_plain_text_report(category: RiskCategory, treatment_text: str) -> str:
    """
    Render the downloadable report:

        Bladder Cancer Risk Stratification

        Risk Category: High Risk

        Treatment Plan:
        <treatment text>
    """
    return (
        f"{REPORT_TITLE}\n\n"
        f"Risk Category: {_label(category)}\n\n"
        f"Treatment Plan:\n{treatment_text}"
    )


def to_clipboard_text(category: RiskCategory, treatment_text: str) -> str:
    """Two-line summary suitable for pasting into a clinical note."""
    return f"Risk: {_label(category)}\nTreatment: {treatment_text}"
