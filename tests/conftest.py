"""
Pytest Configuration and Fixtures

Shared fixtures for risk stratification tests.
"""
import pytest
from datetime import date
from pathlib import Path
import sys

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from urostrat.core.clinical import CaseDescriptor


@pytest.fixture
def low_risk_form() -> dict:
    """Form selections meeting every low-risk criterion."""
    return {
        "grade": "low",
        "stage": "Ta",
        "size": "<3cm",
        "number": "single",
        "recurrence": "no",
        "cis": "no",
    }


@pytest.fixture
def low_risk_case(low_risk_form) -> CaseDescriptor:
    return CaseDescriptor.from_form(low_risk_form)


@pytest.fixture
def high_grade_case() -> CaseDescriptor:
    return CaseDescriptor.from_form({
        "grade": "high",
        "stage": "T1",
        "size": ">3cm",
        "number": "multiple",
        "recurrence": "yes",
        "cis": "no",
    })


@pytest.fixture
def turbt_date() -> date:
    return date(2025, 1, 1)
