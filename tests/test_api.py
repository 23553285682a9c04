"""
HTTP tests for the news analysis endpoints
"""

import pytest
from fastapi.testclient import TestClient

from app.dependencies import get_news_service
from app.exceptions import AppError
from app.main import app
from app.news.scorer import SentimentScorer
from app.news.service import NewsAnalysisService
from tests.conftest import StaticAdapter, make_record


class _ExplodingService:
    def __init__(self, exc: Exception) -> None:
        self._exc = exc

    async def analyze(self, coin_name, coin_symbol):
        raise self._exc


@pytest.fixture
def client(offline_client_factory):
    records = [
        make_record("https://news.test/1", title="Bitcoin surges on ETF approval"),
        make_record("https://news.test/2", title="Bitcoin holds steady"),
    ]
    service = NewsAnalysisService(
        adapters=[StaticAdapter("static", records)],
        scorer=SentimentScorer(),
        client_factory=offline_client_factory,
    )
    app.dependency_overrides[get_news_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_analyze_returns_report(client):
    response = client.post("/api/v1/news/analyze", json={"coinName": "Bitcoin", "coinSymbol": "BTC"})

    assert response.status_code == 200
    data = response.json()
    assert data["overall"] == "BULLISH"
    assert data["signal"] == "BUY"
    assert data["bullishCount"] == 1
    assert data["neutralCount"] == 1
    assert data["bearishCount"] == 0
    assert 0 <= data["confidence"] <= 100
    assert data["sources"][0] == {
        "title": "Bitcoin surges on ETF approval",
        "url": "https://news.test/1",
        "source": "Test",
        "date": "2026-10-01T12:00:00+00:00",
        "snippet": "Bitcoin surges on ETF approval",
    }


def test_legacy_function_path(client):
    response = client.post(
        "/functions/v1/analyze-coin-news", json={"coinName": "Bitcoin", "coinSymbol": "BTC"}
    )

    assert response.status_code == 200
    assert response.json()["signal"] == "BUY"


def test_missing_field_returns_error_envelope(client):
    response = client.post("/api/v1/news/analyze", json={"coinName": "Bitcoin"})

    assert response.status_code == 400
    assert response.json() == {"error": "coinName and coinSymbol are required"}


def test_malformed_body_returns_error_envelope(client):
    response = client.post(
        "/api/v1/news/analyze",
        content=b"{not json",
        headers={"content-type": "application/json"},
    )

    assert response.status_code == 400
    assert "error" in response.json()


def test_preflight_allows_any_origin(client):
    response = client.options(
        "/api/v1/news/analyze",
        headers={
            "Origin": "https://dashboard.example",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "content-type, apikey",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"


def test_cors_header_on_response(client):
    response = client.post(
        "/api/v1/news/analyze",
        json={"coinName": "Bitcoin", "coinSymbol": "BTC"},
        headers={"Origin": "https://dashboard.example"},
    )

    assert response.headers["access-control-allow-origin"] == "*"


def test_app_error_returns_500_envelope():
    app.dependency_overrides[get_news_service] = lambda: _ExplodingService(
        AppError("upstream exploded")
    )
    try:
        response = TestClient(app).post(
            "/api/v1/news/analyze", json={"coinName": "Bitcoin", "coinSymbol": "BTC"}
        )
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json() == {"error": "upstream exploded"}


def test_unexpected_error_returns_500_envelope():
    app.dependency_overrides[get_news_service] = lambda: _ExplodingService(RuntimeError("boom"))
    try:
        response = TestClient(app).post(
            "/api/v1/news/analyze",
            json={"coinName": "Bitcoin", "coinSymbol": "BTC"},
            headers={"Origin": "https://dashboard.example"},
        )
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json() == {"error": "boom"}
    assert response.headers["access-control-allow-origin"] == "*"


def test_health():
    response = TestClient(app).get("/api/v1/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}
