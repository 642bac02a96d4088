"""Tests for the HTTP routes."""
import json
import pytest
from fastapi.testclient import TestClient
from app.main import app


@pytest.fixture
def client():
    return TestClient(app)


class TestRootRoutes:
    """Test cases for the application-level endpoints."""

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["status"] == "running"

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy"}

    def test_router_health(self, client):
        assert client.get("/api/responses/health").json()["service"] == "responses"
        assert client.get("/api/exports/health").json()["service"] == "exports"


class TestResponseRoutes:
    """Test cases for the normalization endpoints."""

    def test_normalize_json(self, client):
        response = client.post(
            "/api/responses/normalize",
            content=json.dumps({"response": {"text": "hi", "suggestions": ["more?"]}}),
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["data"]["response"]["answer"] == "hi"
        assert body["data"]["response"]["recommendations"] == ["more?"]
        assert body["data"]["html"] == "<p>hi</p>"

    def test_normalize_text(self, client):
        response = client.post(
            "/api/responses/normalize",
            content="Intro\n- a\n- b",
            headers={"Content-Type": "text/plain"},
        )
        data = response.json()["data"]
        assert data["response"]["answer"] == "Intro\n\n- a\n- b"
        assert "<li>a</li>" in data["html"]

    def test_normalize_invalid_json(self, client):
        response = client.post(
            "/api/responses/normalize",
            content="oops {",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 200
        assert response.json()["data"]["response"]["answer"] == "oops {"

    def test_render(self, client):
        response = client.post(
            "/api/responses/render",
            json={"answer": "Call [ICON:phone] <script>x()</script>"},
        )
        assert response.status_code == 200
        html = response.json()["data"]["html"]
        assert "<svg" in html
        assert "<script" not in html

    def test_icons(self, client):
        response = client.get("/api/responses/icons")
        assert response.json()["data"]["icons"] == ["email", "location", "mobile", "phone"]


class TestExportRoutes:
    """Test cases for the export endpoints."""

    def test_list_formats(self, client):
        response = client.get("/api/exports")
        assert response.json()["data"]["formats"] == ["markdown", "docx", "html"]

    def test_export_markdown(self, client):
        response = client.post(
            "/api/exports/markdown",
            json={"query": "Q", "response": {"answer": "A"}},
        )
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/markdown")
        assert 'filename="chat-response.md"' in response.headers["content-disposition"]
        assert response.text == "# Q\n\nA\n"

    def test_export_docx(self, client):
        response = client.post("/api/exports/docx", json={"response": {"answer": "A"}})
        assert response.status_code == 200
        assert response.content[:2] == b"PK"
        assert 'filename="chat-response.docx"' in response.headers["content-disposition"]

    def test_export_html(self, client):
        response = client.post("/api/exports/html", json={"query": "Q", "response": {"answer": "A"}})
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "<h1>Q</h1>" in response.text

    def test_export_unknown_format(self, client):
        response = client.post("/api/exports/pdf", json={"response": {"answer": "A"}})
        assert response.status_code == 404

    def test_export_requires_response(self, client):
        response = client.post("/api/exports/markdown", json={"query": "Q"})
        assert response.status_code == 422
