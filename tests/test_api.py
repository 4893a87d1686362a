"""
API tests using FastAPI's TestClient
"""
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from ledger_ocr import __version__
from ledger_ocr.api.endpoints import parse
from ledger_ocr.api.main import app
from ledger_ocr.parsing.pipeline import OCRTextPipeline


@pytest.fixture
def client(monkeypatch):
    # Default vocabularies regardless of the environment the router was imported in.
    monkeypatch.setattr(parse, "pipeline", OCRTextPipeline())
    return TestClient(app)


@pytest.fixture
def parsed(client, fixed_today):
    text = "пятница, 1 августа\nDuży Ben 29,99 PLN\nROSSMANN 8,99 PLN"
    response = client.post("/api/parse/", json={"text": text, "reference_year": 2025})
    return response.json()['transactions']


class TestHealth:

    def test_health(self, client):
        response = client.get("/api/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "app": "Ledger OCR", "version": __version__}
        assert "X-Request-ID" in response.headers

    def test_caller_request_id_is_reused(self, client):
        response = client.get("/api/health", headers={"X-Request-ID": "upload-42"})
        assert response.headers["X-Request-ID"] == "upload-42"


class TestParseEndpoint:

    def test_parse_list(self, client, fixed_today):
        text = "пятница, 1 августа\nDuży Ben 29,99 PLN\nROSSMANN 8,99 PLN"
        response = client.post("/api/parse/", json={"text": text, "reference_year": 2025})

        assert response.status_code == 200
        body = response.json()
        assert body['method'] == "list"
        assert body['count'] == 2
        assert body['transactions'][0]['merchant'] == "Duży Ben"
        assert body['transactions'][0]['date'] == "2025-08-01"

    def test_parse_empty(self, client):
        response = client.post("/api/parse/", json={"text": ""})

        assert response.status_code == 200
        assert response.json() == {"transactions": [], "method": "empty", "count": 0}

    def test_configured_placeholder_amount(self, client, monkeypatch, fixed_today):
        monkeypatch.setattr(parse, "pipeline", OCRTextPipeline(placeholder_amount=-25.0))
        response = client.post("/api/parse/", json={"text": "Lorem ipsum"})

        body = response.json()
        assert body['method'] == "manual"
        assert body['transactions'][0]['amount'] == -25.0

    def test_rule_files_are_not_reloaded_per_request(self, client, fixed_today):
        with patch('ledger_ocr.api.endpoints.parse.RuleRegistry') as registry_cls:
            client.post("/api/parse/", json={"text": "Uber 25,00 PLN"})
            client.post("/api/parse/categorize", json={"merchant": "Uber"})

        registry_cls.assert_not_called()

    def test_missing_text(self, client):
        assert client.post("/api/parse/", json={}).status_code == 422


class TestCategorizeEndpoint:

    def test_categorize(self, client):
        response = client.post("/api/parse/categorize", json={"merchant": "ROSSMANN"})

        assert response.status_code == 200
        assert response.json() == {"category": "Health"}

    def test_categorize_unknown(self, client):
        response = client.post("/api/parse/categorize", json={"merchant": "Netflix", "description": "subscription"})
        assert response.json() == {"category": "Other"}


class TestUpdateEndpoint:

    def test_update(self, client, parsed):
        target = parsed[1]['id']
        response = client.post("/api/parse/update", json={
            "transactions": parsed,
            "id": target,
            "updates": {"category": "Food", "id": "hijacked"},
        })

        assert response.status_code == 200
        updated = response.json()['transactions']
        assert updated[0] == parsed[0]
        assert updated[1]['category'] == "Food"
        assert updated[1]['id'] == target

    def test_invalid_update(self, client, parsed):
        response = client.post("/api/parse/update", json={
            "transactions": parsed,
            "id": parsed[0]['id'],
            "updates": {"amount": 0},
        })
        assert response.status_code == 422

    def test_unknown_field(self, client, parsed):
        response = client.post("/api/parse/update", json={
            "transactions": parsed,
            "id": parsed[0]['id'],
            "updates": {"colour": "red"},
        })
        assert response.status_code == 422
