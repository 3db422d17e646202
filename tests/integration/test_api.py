"""Integration tests for the FastAPI REST API."""

from __future__ import annotations

from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

from elmerlint.api.app import create_app
from elmerlint.api.deps import init_validation_service, reset_validation_service
from elmerlint.service.validation_service import ValidationService
from elmerlint.settings import Settings
from tests.conftest import KEYWORDS_YAML, SAMPLE_SIF

URI = "file:///work/case.sif"


def _make_app(settings: Settings):
    app = create_app(settings=settings)
    # Manually init the service (ASGITransport doesn't trigger lifespan)
    init_validation_service(ValidationService.from_settings(settings))
    return app


@pytest.fixture
def app():
    yield _make_app(Settings())
    reset_validation_service()


@pytest.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------


class TestHealthEndpoint:
    async def test_health(self, client: AsyncClient) -> None:
        response = await client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["dictionary_loaded"] is True
        assert "version" in data
        assert "x-request-duration-ms" in response.headers

    async def test_health_degraded(self, tmp_path: Path) -> None:
        app = _make_app(Settings(keywords_file=tmp_path / "missing.json"))
        try:
            transport = ASGITransport(app=app)
            async with AsyncClient(transport=transport, base_url="http://test") as c:
                response = await c.get("/health")
        finally:
            reset_validation_service()
        assert response.status_code == 200
        assert response.json()["status"] == "degraded"
        assert response.json()["dictionary_loaded"] is False


# ---------------------------------------------------------------------------
# Documents
# ---------------------------------------------------------------------------


class TestDocumentEndpoints:
    async def test_validate_document(self, client: AsyncClient) -> None:
        response = await client.post(
            "/documents/validate",
            json={"uri": URI, "text": "Simulation\n  Foo Bar = 1\nEnd\n"},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["uri"] == URI
        assert data["validated"] is True
        assert len(data["diagnostics"]) == 1
        diagnostic = data["diagnostics"][0]
        assert diagnostic["message"] == 'Unknown keyword "Foo Bar" in SIMULATION section'
        assert diagnostic["severity"] == "warning"
        assert diagnostic["source"] == "elmer"
        assert diagnostic["range"] == {
            "start": {"line": 1, "character": 2},
            "end": {"line": 1, "character": 9},
        }

    async def test_other_language_not_validated(self, client: AsyncClient) -> None:
        response = await client.post(
            "/documents/validate",
            json={"uri": URI, "text": SAMPLE_SIF, "language_id": "plaintext"},
        )
        assert response.status_code == 200
        assert response.json() == {"uri": URI, "validated": False, "diagnostics": []}
        response = await client.get("/documents/diagnostics", params={"uri": URI})
        assert response.status_code == 404

    async def test_get_diagnostics_after_validate(self, client: AsyncClient) -> None:
        await client.post("/documents/validate", json={"uri": URI, "text": SAMPLE_SIF})
        response = await client.get("/documents/diagnostics", params={"uri": URI})
        assert response.status_code == 200
        assert len(response.json()["diagnostics"]) == 1

    async def test_revalidate_replaces_findings(self, client: AsyncClient) -> None:
        await client.post("/documents/validate", json={"uri": URI, "text": SAMPLE_SIF})
        await client.post("/documents/validate", json={"uri": URI, "text": ""})
        response = await client.get("/documents/diagnostics", params={"uri": URI})
        assert response.json()["diagnostics"] == []

    async def test_close_document(self, client: AsyncClient) -> None:
        await client.post("/documents/validate", json={"uri": URI, "text": SAMPLE_SIF})
        response = await client.delete("/documents", params={"uri": URI})
        assert response.status_code == 204
        response = await client.get("/documents/diagnostics", params={"uri": URI})
        assert response.status_code == 404

    async def test_missing_text_rejected(self, client: AsyncClient) -> None:
        response = await client.post("/documents/validate", json={"uri": URI})
        assert response.status_code == 422


# ---------------------------------------------------------------------------
# Reference
# ---------------------------------------------------------------------------


class TestReferenceEndpoints:
    @pytest.fixture
    def app(self):
        yield _make_app(Settings(keywords_file=KEYWORDS_YAML))
        reset_validation_service()

    async def test_list_sections(self, client: AsyncClient) -> None:
        response = await client.get("/reference/sections")
        assert response.status_code == 200
        sections = {s["name"]: s["keyword_count"] for s in response.json()["sections"]}
        assert sections == {"bc": 3, "material": 2, "simulation": 3, "solver": 4}

    async def test_section_keywords(self, client: AsyncClient) -> None:
        response = await client.get("/reference/sections/solver")
        assert response.status_code == 200
        assert response.json()["keywords"] == [
            "equation",
            "exported variable 1",
            "linear system solver",
            "procedure",
        ]

    async def test_unknown_section(self, client: AsyncClient) -> None:
        response = await client.get("/reference/sections/component")
        assert response.status_code == 404
