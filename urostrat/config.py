"""
UroStrat — Configuration
========================
Runtime settings for the API layer. Loads overrides from the project-level
.env file; every value has a working default.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# ── Paths ───────────────────────────────────────────────────────────────
PROJECT_ROOT = Path(__file__).resolve().parent.parent

# ── Load .env ───────────────────────────────────────────────────────────
load_dotenv(PROJECT_ROOT / ".env")

# ── Logging ─────────────────────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("UROSTRAT_LOG_LEVEL", "INFO")
LOG_FILE: str = os.getenv("UROSTRAT_LOG_FILE", "")

# ── API ─────────────────────────────────────────────────────────────────
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("UROSTRAT_CORS_ORIGINS", "*").split(",")
    if origin.strip()
]

# ── Export filenames ────────────────────────────────────────────────────
REPORT_FILENAME: str = os.getenv("UROSTRAT_REPORT_FILENAME", "bladder_treatment_plan.txt")
CALENDAR_FILENAME: str = os.getenv("UROSTRAT_CALENDAR_FILENAME", "bladder_surveillance_schedule.ics")

PRODUCT_NAME = "UroStrat™"
