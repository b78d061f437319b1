"""
Integration Tests for the FastAPI Backend

Tests for assessment, export and reference endpoints.
Uses async httpx for ASGI app testing.
"""
import pytest
import httpx

from urostrat.main import app


@pytest.fixture
async def async_client():
    """Create async test client."""
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app),
        base_url="http://test"
    ) as client:
        yield client


@pytest.mark.asyncio
class TestHealthEndpoints:

    async def test_root_endpoint(self, async_client):
        response = await async_client.get("/")
        assert response.status_code == 200

        data = response.json()
        assert data["status"] == "healthy"
        assert "version" in data
        assert "UroStrat" in data["copyright"]

    async def test_health_endpoint(self, async_client):
        response = await async_client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


@pytest.mark.asyncio
class TestAssessmentEndpoint:

    async def test_low_risk_with_schedule(self, async_client, low_risk_form):
        response = await async_client.post(
            "/api/v1/assessment",
            json={**low_risk_form, "turbt_date": "2025-01-01"},
        )
        assert response.status_code == 200

        data = response.json()
        assert data["risk_category"] == "Low Risk"
        assert data["treatment"].startswith("single-dose intravesical chemotherapy")
        assert [v["date"] for v in data["schedule"]] == [
            "2025-04-01", "2026-01-01", "2027-01-01",
            "2028-01-01", "2029-01-01", "2030-01-01",
        ]

    async def test_blank_form_is_intermediate(self, async_client):
        response = await async_client.post(
            "/api/v1/assessment",
            json={"grade": "", "size": "", "turbt_date": ""},
        )
        assert response.status_code == 200

        data = response.json()
        assert data["risk_category"] == "Intermediate Risk"
        assert data["schedule"] == []

    async def test_cis_makes_high_risk(self, async_client):
        response = await async_client.post(
            "/api/v1/assessment",
            json={"grade": "low", "cis": "yes", "turbt_date": "2025-01-01"},
        )
        data = response.json()
        assert data["risk_category"] == "High Risk"
        assert len(data["schedule"]) == 10

    async def test_invalid_enum_rejected(self, async_client):
        response = await async_client.post("/api/v1/assessment", json={"grade": "medium"})
        assert response.status_code == 422

    async def test_invalid_turbt_date(self, async_client):
        response = await async_client.post(
            "/api/v1/assessment",
            json={"grade": "high", "turbt_date": "31/01/2025"},
        )
        assert response.status_code == 422
        assert response.json()["error"] == "INVALID_ARGUMENT"


    async def test_turbt_date_beyond_calendar_range(self, async_client):
        response = await async_client.post(
            "/api/v1/assessment",
            json={"grade": "high", "turbt_date": "9996-01-01"},
        )
        assert response.status_code == 422
        assert response.json()["details"]["argument"] == "anchor"


@pytest.mark.asyncio
class TestExportEndpoints:

    async def test_summary(self, async_client):
        response = await async_client.post("/api/v1/assessment/summary", json={"grade": "high"})
        assert response.status_code == 200
        assert response.text.startswith("Risk: High Risk\nTreatment: ")

    async def test_report_download(self, async_client, low_risk_form):
        response = await async_client.post("/api/v1/assessment/report", json=low_risk_form)
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert "bladder_treatment_plan.txt" in response.headers["content-disposition"]
        assert response.text.splitlines()[2] == "Risk Category: Low Risk"

    async def test_calendar_download(self, async_client):
        response = await async_client.post(
            "/api/v1/assessment/calendar",
            json={"grade": "low", "size": ">3cm", "turbt_date": "2025-01-01"},
        )
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/calendar")
        assert "bladder_surveillance_schedule.ics" in response.headers["content-disposition"]
        assert response.text.startswith("BEGIN:VCALENDAR")
        assert response.text.endswith("END:VCALENDAR")
        assert response.text.count("BEGIN:VEVENT") == 9

    async def test_calendar_without_date_is_no_content(self, async_client):
        response = await async_client.post("/api/v1/assessment/calendar", json={"grade": "high"})
        assert response.status_code == 204
        assert response.content == b""


@pytest.mark.asyncio
async def test_surveillance_reference(async_client):
    response = await async_client.get("/api/v1/reference/surveillance")
    assert response.status_code == 200

    offsets = response.json()["offsets"]
    assert offsets["Low Risk"] == [3, 12, 24, 36, 48, 60]
    assert len(offsets["Intermediate Risk"]) == 9
    assert len(offsets["High Risk"]) == 10
