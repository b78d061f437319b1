"""
Clinical Decision Layer

Risk stratification and treatment lookup for non-muscle-invasive bladder tumours.

Usage:
    from urostrat.core.clinical import CaseDescriptor, classify, recommend

    case = CaseDescriptor.from_form({"grade": "high", "cis": "no"})
    category = classify(case)          # RiskCategory.HIGH
    plan = recommend(category)
"""
from .base import (
    Answer,
    CaseDescriptor,
    Classification,
    Grade,
    RiskCategory,
    Stage,
    TumourCount,
    TumourSize,
)
from .classification import classify, explain
from .treatment import TREATMENT_PLANS, recommend

__all__ = [
    "Answer",
    "CaseDescriptor",
    "Classification",
    "Grade",
    "RiskCategory",
    "Stage",
    "TumourCount",
    "TumourSize",
    "classify",
    "explain",
    "recommend",
    "TREATMENT_PLANS",
]
