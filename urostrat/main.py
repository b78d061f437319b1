"""
UroStrat - FastAPI Application

API endpoints for:
- Risk stratification of a bladder-tumour case
- Treatment plan and surveillance schedule
- Plain-text report, clipboard summary and calendar (.ics) downloads
"""
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from datetime import datetime

from urostrat import __version__, config
from urostrat.core.clinical import RiskCategory
from urostrat.core.reports import CALENDAR_MEDIA_TYPE, REPORT_MEDIA_TYPE
from urostrat.core.surveillance import surveillance_offsets
from urostrat.models import (
    AssessmentRequest,
    AssessmentResponse,
    HealthResponse,
    SurveillanceReferenceResponse,
)
from urostrat.services import AssessmentResult, AssessmentService
from urostrat.utils import (
    EmptyInputError,
    InvalidArgumentError,
    get_logger,
    setup_logging,
)

setup_logging(config.LOG_LEVEL, config.LOG_FILE or None)
logger = get_logger(__name__)


# ---- FastAPI Application ----

app = FastAPI(
    title="UroStrat API",
    description="Bladder Cancer Risk Stratification & Treatment Planner",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

START_TIME = datetime.now()
_assessment_service = AssessmentService()


# ---- Error Handlers ----

@app.exception_handler(InvalidArgumentError)
async def invalid_argument_handler(request: Request, exc: InvalidArgumentError):
    logger.warning(f"{request.url.path}: {exc.message}")
    return JSONResponse(status_code=422, content=exc.to_dict())


@app.exception_handler(EmptyInputError)
async def empty_input_handler(request: Request, exc: EmptyInputError):
    logger.info(f"{request.url.path}: {exc.message}")
    return Response(status_code=204)


# ---- Utility Functions ----

def _run_assessment(request: AssessmentRequest) -> AssessmentResult:
    return _assessment_service.assess(request.to_case(), request.turbt_date)


def _attachment(content: str, media_type: str, filename: str) -> Response:
    return Response(
        content=content.encode("utf-8"),
        media_type=media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


def _health() -> HealthResponse:
    now = datetime.now()
    return HealthResponse(
        status="healthy",
        version=__version__,
        timestamp=now.isoformat(),
        uptime_seconds=(now - START_TIME).total_seconds(),
        copyright=f"© {now.year} {config.PRODUCT_NAME}. Built for education and clinical guidance.",
    )


# ---- API Endpoints ----

@app.get("/", response_model=HealthResponse, tags=["Health"])
async def root():
    """API root - health check."""
    return _health()


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return _health()


@app.post("/api/v1/assessment", response_model=AssessmentResponse, tags=["Assessment"])
async def run_assessment(request: AssessmentRequest):
    """
    Classify the case and return its treatment plan and, when a TURBT date
    is given, the surveillance schedule.
    """
    result = _run_assessment(request)
    return AssessmentResponse(**result.to_dict())


@app.post("/api/v1/assessment/summary", response_class=PlainTextResponse, tags=["Export"])
async def assessment_summary(request: AssessmentRequest):
    """Two-line risk/treatment summary for the clipboard."""
    result = _run_assessment(request)
    return PlainTextResponse(_assessment_service.clipboard_text(result))


@app.post("/api/v1/assessment/report", tags=["Export"])
async def download_report(request: AssessmentRequest):
    """Treatment plan as a .txt download."""
    result = _run_assessment(request)
    return _attachment(
        _assessment_service.plain_text_report(result),
        REPORT_MEDIA_TYPE,
        config.REPORT_FILENAME,
    )


@app.post("/api/v1/assessment/calendar", tags=["Export"])
async def download_calendar(request: AssessmentRequest):
    """
    Surveillance schedule as an .ics download.

    Responds 204 No Content when there is no schedule (no TURBT date).
    """
    result = _run_assessment(request)
    return _attachment(
        _assessment_service.calendar_feed(result),
        CALENDAR_MEDIA_TYPE,
        config.CALENDAR_FILENAME,
    )


@app.get("/api/v1/reference/surveillance", response_model=SurveillanceReferenceResponse, tags=["Reference"])
async def surveillance_reference():
    """Months after TURBT at which each risk category is reviewed."""
    return SurveillanceReferenceResponse(
        offsets={category.value: list(surveillance_offsets(category)) for category in RiskCategory}
    )


# ---- Run with uvicorn ----
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
