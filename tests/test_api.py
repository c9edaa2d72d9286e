"""
Tests for the FastAPI app — integration tests through TestClient.
"""

import httpx
import pytest
from fastapi.testclient import TestClient

from riskcheck.api.dependencies import get_geo_client, get_lead_log, get_notifier
from riskcheck.audit.logger import LeadLog
from riskcheck.config import Settings
from riskcheck.core.catalog import QUESTIONS
from riskcheck.geo.geocoding import GeoClient
from riskcheck.main import app
from riskcheck.notify.notifier import LeadNotifier


def _geo_handler(request: httpx.Request) -> httpx.Response:
    if request.url.host == "api.zippopotam.us":
        if request.url.path.endswith("/80331"):
            return httpx.Response(200, json={"places": [{"place name": "München", "state": "Bayern"}]})
        return httpx.Response(404, json={})
    if request.url.host == "maps.googleapis.com":
        return httpx.Response(200, json={
            "status": "OK",
            "results": [{
                "formatted_address": "Marienplatz 1, 80331 München",
                "geometry": {"location": {"lat": 48.137, "lng": 11.575}},
            }],
        })
    return httpx.Response(200, json=[])


@pytest.fixture
def lead_log(tmp_path):
    return LeadLog(str(tmp_path / "leads.jsonl"))


@pytest.fixture
def client(lead_log):
    notifier = LeadNotifier(
        Settings(_env_file=None),
        transport=httpx.MockTransport(lambda r: httpx.Response(200)),
    )
    app.dependency_overrides[get_notifier] = lambda: notifier
    app.dependency_overrides[get_lead_log] = lambda: lead_log
    app.dependency_overrides[get_geo_client] = lambda: GeoClient(
        transport=httpx.MockTransport(_geo_handler)
    )
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health_check(client):
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["questions"] == len(QUESTIONS)


def test_questions_catalog(client):
    data = client.get("/questions").json()
    assert [q["id"] for q in data["questions"]] == [q.id for q in QUESTIONS]
    assert data["categories"]["perimeter"] == "Grundstück & Perimeter"
    assert len(data["categories"]) == 7


def test_assessment_all_safe(client):
    answers = [
        {"question_id": q.id, "value": "no" if q.risk_answer else "yes"}
        for q in QUESTIONS
    ]
    response = client.post("/assessment", json={"answers": answers})
    assert response.status_code == 200
    data = response.json()
    assert data["result"]["total_score"] == 0
    assert data["result"]["risk_level"] == "Low"
    assert data["result"]["top_risks"] == []
    assert data["region"] is None


def test_assessment_empty_is_critical(client):
    data = client.post("/assessment", json={"answers": []}).json()
    assert data["result"]["total_score"] == 100
    assert data["result"]["risk_level"] == "Critical"
    assert len(data["result"]["top_risks"]) == 5
    assert set(data["result"]["category_scores"]) == {
        "perimeter", "lighting", "access", "mechanics",
        "electronics", "organization", "valuables",
    }


def test_assessment_accepts_legacy_boolean_values_and_plz_answer(client):
    answers = [{"question_id": q.id, "value": not q.risk_answer} for q in QUESTIONS]
    answers[0]["value"] = None
    answers.append({"question_id": "plz_input", "value": True, "extra": "80331"})

    data = client.post("/assessment", json={"answers": answers}).json()
    # q_per_1 unknown: 3 / 55
    assert data["result"]["total_score"] == 5
    assert data["result"]["plz"] == "80331"
    assert data["region"]["plz"] == "80331"
    assert data["region"]["risk_score"] == 8


def test_assessment_rejects_bad_value(client):
    response = client.post("/assessment", json={"answers": [{"question_id": "q_per_1", "value": "maybe"}]})
    assert response.status_code == 422


def test_assessment_rejects_bad_plz(client):
    response = client.post("/assessment", json={"answers": [], "plz": "8033"})
    assert response.status_code == 422


def test_region_stats(client):
    data = client.get("/region/82256").json()
    assert data == {"plz": "82256", "burglary_trend": 8, "risk_score": 6, "incidents_last_year": 326}


def test_region_rejects_non_five_digit_plz(client):
    assert client.get("/region/abc").status_code == 422


def test_region_location(client):
    data = client.get("/region/80331/location").json()
    assert data == {"city": "München", "state": "Bayern"}


def test_region_location_not_found(client):
    assert client.get("/region/99999/location").status_code == 404


def test_geo_coordinates_include_map_urls(client):
    data = client.get("/geo/coordinates", params={"address": "Marienplatz 1"}).json()
    assert data["lat"] == 48.137
    assert "maptype=satellite" in data["satellite_image_url"]
    assert "maptype=roadmap" in data["map_image_url"]


def test_geo_search_short_query(client):
    assert client.get("/geo/search", params={"q": "ab"}).json() == []


def test_submit_lead_is_logged(client, lead_log, sample_lead_payload):
    response = client.post(
        "/leads",
        json=sample_lead_payload,
        headers={"User-Agent": "Mozilla/5.0 (iPhone; CPU iPhone OS 17_0 like Mac OS X)"},
    )
    assert response.status_code == 200
    assert response.json() == {"status": "logged", "channel": "log"}

    entries = lead_log.read_recent()
    assert len(entries) == 1
    entry = entries[0]
    assert entry.form_type == "contact-form"
    assert entry.name == "Max Mustermann"
    assert entry.plz == "80331"
    assert entry.device_type == "iPhone"
    assert entry.notification.status == "logged"
    assert entry.notification.channel == "log"
    assert entry.received_at.tzinfo is not None


def test_submit_lead_requires_contact_fields(client):
    response = client.post("/leads", json={"form_type": "contact-form", "email": "x@y.de"})
    assert response.status_code == 422


def test_shutdown_closes_shared_http_clients():
    geo_client = get_geo_client()
    notifier = get_notifier()
    try:
        with TestClient(app) as c:
            assert c.get("/health").status_code == 200
        assert geo_client._http.is_closed
        assert notifier._http.is_closed
        assert get_geo_client.cache_info().currsize == 0
        assert get_notifier.cache_info().currsize == 0
    finally:
        get_geo_client.cache_clear()
        get_notifier.cache_clear()


def test_shutdown_without_requests_creates_no_clients():
    get_geo_client.cache_clear()
    get_notifier.cache_clear()
    with TestClient(app):
        pass
    assert get_geo_client.cache_info().currsize == 0
    assert get_notifier.cache_info().currsize == 0


@pytest.mark.parametrize("extra", ["abc", "8033", "803310", " 80331", "80331\n"])
def test_assessment_ignores_malformed_plz_answer(client, extra):
    answers = [{"question_id": "plz_input", "value": True, "extra": extra}]
    data = client.post("/assessment", json={"answers": answers}).json()
    assert data["result"]["plz"] is None
    assert data["region"] is None


def test_assessment_uses_latest_valid_plz_answer(client):
    answers = [
        {"question_id": "plz_input", "value": True, "extra": "80331"},
        {"question_id": "plz_input", "value": True, "extra": "not-a-plz"},
    ]
    data = client.post("/assessment", json={"answers": answers}).json()
    assert data["result"]["plz"] == "80331"
    assert data["region"]["plz"] == "80331"
