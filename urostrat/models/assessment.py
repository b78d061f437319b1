"""
API request/response models for risk assessment.
"""
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

from urostrat.core.clinical import CaseDescriptor


class AssessmentRequest(BaseModel):
    """Form selections for one case. Unselected controls may be omitted or sent as ""."""
    grade: Optional[Literal["low", "high"]] = Field(default=None, description="Histological grade")
    stage: Optional[Literal["Ta", "T1", "CIS"]] = Field(default=None, description="T stage (not used in classification)")
    size: Optional[Literal["<3cm", ">3cm"]] = Field(default=None, description="Largest tumour diameter")
    number: Optional[Literal["single", "multiple"]] = Field(default=None, description="Number of tumours")
    recurrence: Optional[Literal["yes", "no"]] = Field(default=None, description="Prior recurrence")
    cis: Optional[Literal["yes", "no"]] = Field(default=None, description="Concomitant carcinoma in situ")
    turbt_date: Optional[str] = Field(
        default=None,
        description="Date of TURBT (YYYY-MM-DD); anchors the surveillance schedule",
        examples=["2025-01-01"],
    )

    @field_validator("grade", "stage", "size", "number", "recurrence", "cis", "turbt_date", mode="before")
    @classmethod
    def _blank_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def to_case(self) -> CaseDescriptor:
        return CaseDescriptor.from_form(self.model_dump(exclude={"turbt_date"}))


class SurveillanceVisit(BaseModel):
    date: str
    display: str
    months_after_turbt: int


class AssessmentResponse(BaseModel):
    risk_category: str
    treatment: str
    triggering_factors: List[str] = Field(default_factory=list)
    turbt_date: Optional[str] = None
    schedule: List[SurveillanceVisit] = Field(default_factory=list)


class SurveillanceReferenceResponse(BaseModel):
    """Month offsets per risk category."""
    offsets: Dict[str, List[int]]


class HealthResponse(BaseModel):
    status: str
    version: str
    timestamp: str
    uptime_seconds: float
    copyright: str
