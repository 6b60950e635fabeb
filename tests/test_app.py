"""
Application bootstrap tests - liveness, health, docs toggle, error envelope
"""

from fastapi.testclient import TestClient

from adoptme.app import create_app
from adoptme.config.settings import Settings

from fakes import InMemoryStore


class TestBootstrap:

    def test_liveness_is_plain_text(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text == "¡Servidor funcionando correctamente!"

    def test_lifespan_connects_and_closes_store(self, settings, store):
        app = create_app(settings, store=store)

        with TestClient(app):
            assert store.connected

        assert not store.connected

    def test_health_reports_database(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["database"] == "connected"

    def test_health_unavailable_without_connection(self, settings):
        app = create_app(settings, store=InMemoryStore())

        # No lifespan, so the store never connects
        response = TestClient(app).get("/health")

        assert response.status_code == 503
        assert response.json()["error"] == "Health check failed"

    def test_docs_enabled(self, client):
        assert client.get("/api-docs").status_code == 200
        schema = client.get("/openapi.json").json()
        assert "/api/users/{user_id}" in schema["paths"]
        assert "/api/mocks/mockingpets" in schema["paths"]

    def test_docs_disabled(self, store):
        settings = Settings(mongodb_url="mongodb://localhost/test", docs_enabled=False)

        with TestClient(create_app(settings, store=store)) as client:
            assert client.get("/api-docs").status_code == 404
            assert client.get("/openapi.json").status_code == 404

    def test_trace_id_header(self, client):
        response = client.get("/api/users")

        assert len(response.headers["X-Trace-ID"]) == 8

    def test_unknown_route(self, client):
        response = client.get("/api/owners")

        assert response.status_code == 404
        assert response.json()["error"] == "HTTP 404"

    def test_non_object_body_is_a_creation_failure(self, client):
        response = client.post("/api/users", json=["not", "an", "object"])

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "Error al crear el usuario."
        assert body["error_type"] == "CONSTRAINT_VIOLATION"
