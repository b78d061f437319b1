from .assessment import AssessmentResult, AssessmentService

__all__ = ["AssessmentResult", "AssessmentService"]
