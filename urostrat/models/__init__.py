from .assessment import (
    AssessmentRequest,
    AssessmentResponse,
    HealthResponse,
    SurveillanceReferenceResponse,
    SurveillanceVisit,
)

__all__ = [
    "AssessmentRequest",
    "AssessmentResponse",
    "HealthResponse",
    "SurveillanceReferenceResponse",
    "SurveillanceVisit",
]
