"""
Unit tests for API service endpoints.

Tests ping/health, the three generation endpoints and document download.
"""

import logging
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from resume_builder.generation import ContentGenerationService, NarrativeGenerator


@pytest.fixture
def client():
    """Create test client for the API service."""
    from api_service.app import app
    return TestClient(app)


@pytest.fixture
def failing_client():
    """Test client whose narrative generator always raises."""
    from api_service.app import app, get_generation_service

    generator = MagicMock(spec=NarrativeGenerator)
    generator.generate = AsyncMock(side_effect=RuntimeError("model offline"))
    app.dependency_overrides[get_generation_service] = lambda: ContentGenerationService(generator=generator)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def settings_env(monkeypatch):
    """Clear the cached settings around a test that changes the environment."""
    from api_service.config import get_settings
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


class TestHealthEndpoints:
    """Tests for /api/ping and /health."""

    def test_ping_default_message(self, client, settings_env):
        """Test ping answers 'ping' when PING_MESSAGE is unset."""
        settings_env.delenv("PING_MESSAGE", raising=False)
        response = client.get("/api/ping")
        assert response.status_code == 200
        assert response.json() == {"message": "ping"}

    def test_ping_message_is_configurable(self, client, settings_env):
        """Test ping echoes PING_MESSAGE."""
        settings_env.setenv("PING_MESSAGE", "hello from tests")
        response = client.get("/api/ping")
        assert response.json() == {"message": "hello from tests"}

    def test_health(self, client):
        """Test health check returns status, version and timestamp."""
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == "0.1.0"
        assert "timestamp" in data

    def test_cors_allows_any_origin_by_default(self, client):
        """Test CORS_ORIGINS=* allows any origin."""
        response = client.get("/api/ping", headers={"Origin": "http://localhost:8080"})
        assert response.headers["access-control-allow-origin"] == "*"


class TestGenerateEndpoint:
    """Tests for POST /api/generate."""

    def test_returns_resume_and_cover_letter(self, client, full_profile):
        """Test a full profile yields both resume and cover-letter content."""
        response = client.post("/api/generate", json=full_profile.model_dump())
        assert response.status_code == 200
        data = response.json()
        assert data["resume"]["summary"].startswith("Dynamic Backend Engineer")
        assert len(data["resume"]["enhancedExperience"]) == 2
        assert data["resume"]["enhancedProjects"][0]["impact"]
        assert len(data["coverLetter"]["bodyParagraphs"]) == 3

    def test_missing_full_name_is_400(self, client, minimal_profile):
        """Test blank fullName is rejected with 400."""
        body = minimal_profile.model_dump()
        body["personal"]["fullName"] = ""
        response = client.post("/api/generate", json=body)
        assert response.status_code == 400
        assert "fullName" in response.json()["detail"]

    def test_missing_title_is_400(self, client, minimal_profile):
        """Test blank jobRole.title is rejected with the combined message."""
        body = minimal_profile.model_dump()
        body["jobRole"]["title"] = ""
        response = client.post("/api/generate", json=body)
        assert response.status_code == 400
        assert response.json()["detail"] == (
            "Missing required fields: personal.fullName and jobRole.title are required"
        )

    def test_null_personal_is_400(self, client):
        """Test a null personal section reads as empty and is rejected with 400."""
        response = client.post("/api/generate", json={"personal": None, "jobRole": {"title": "Dev"}})
        assert response.status_code == 400
        assert "fullName" in response.json()["detail"]

    def test_null_job_role_is_400(self, client):
        """Test a null jobRole section reads as empty and is rejected with 400."""
        response = client.post("/api/generate", json={"personal": {"fullName": "Jane"}, "jobRole": None})
        assert response.status_code == 400

    def test_partial_body_uses_defaults(self, client):
        """Test omitted sections default to empty."""
        response = client.post(
            "/api/generate",
            json={"personal": {"fullName": "Jane"}, "jobRole": {"title": "Dev"}},
        )
        assert response.status_code == 200

    def test_malformed_body_is_422(self, client):
        """Test a section of the wrong shape is a validation error."""
        response = client.post("/api/generate", json={"skills": {"technical": "Go"}})
        assert response.status_code == 422

    def test_same_input_same_output(self, client, full_profile):
        """Test generation is deterministic."""
        first = client.post("/api/generate", json=full_profile.model_dump()).json()
        second = client.post("/api/generate", json=full_profile.model_dump()).json()
        assert first == second

    def test_generation_failure_is_500(self, failing_client, minimal_profile):
        """Test generator errors become a generic 500."""
        response = failing_client.post("/api/generate", json=minimal_profile.model_dump())
        assert response.status_code == 500
        assert response.json()["detail"] == "Failed to generate AI content. Please try again."


class TestGenerateResumeEndpoint:
    """Tests for POST /api/generate/resume."""

    def test_title_not_required(self, client):
        """Test resume generation needs only fullName."""
        response = client.post("/api/generate/resume", json={"personal": {"fullName": "Jane"}})
        assert response.status_code == 200
        assert set(response.json()) == {"resume"}

    def test_missing_name_is_400(self, client):
        """Test an empty body is rejected for the missing fullName."""
        response = client.post("/api/generate/resume", json={})
        assert response.status_code == 400
        assert response.json()["detail"] == "Missing required field: personal.fullName is required"

    def test_failure_is_500(self, failing_client, minimal_profile):
        """Test generator errors become a 500."""
        response = failing_client.post("/api/generate/resume", json=minimal_profile.model_dump())
        assert response.status_code == 500


class TestGenerateCoverLetterEndpoint:
    """Tests for POST /api/generate/cover-letter."""

    def test_content_mentions_title(self, client, minimal_profile):
        """Test the letter text names the target title."""
        response = client.post("/api/generate/cover-letter", json=minimal_profile.model_dump())
        assert response.status_code == 200
        data = response.json()
        assert set(data) == {"coverLetter"}
        assert "Backend Engineer" in data["coverLetter"]["content"]

    def test_missing_title_is_400(self, client):
        """Test a cover letter requires jobRole.title."""
        response = client.post("/api/generate/cover-letter", json={"personal": {"fullName": "Jane"}})
        assert response.status_code == 400


class TestDownloadEndpoint:
    """Tests for POST /api/download/pdf."""

    def test_resume_download(self, client, minimal_profile):
        """Test resume download is an HTML attachment named after the candidate."""
        response = client.post(
            "/api/download/pdf",
            json={"type": "resume", "data": minimal_profile.model_dump()},
        )
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert response.headers["content-disposition"] == 'attachment; filename="Jane_Doe_Resume.html"'
        assert '<div class="name">Jane Doe</div>' in response.text

    def test_cover_letter_download(self, client, minimal_profile):
        """Test cover letter download carries the subject line."""
        response = client.post(
            "/api/download/pdf",
            json={"type": "cover-letter", "data": minimal_profile.model_dump()},
        )
        assert response.status_code == 200
        assert response.headers["content-disposition"] == 'attachment; filename="Jane_Doe_Cover_Letter.html"'
        assert "Re: Application for Backend Engineer Position" in response.text

    def test_both_downloads_resume(self, client, minimal_profile):
        """Test type 'both' serves the resume."""
        response = client.post(
            "/api/download/pdf",
            json={"type": "both", "data": minimal_profile.model_dump()},
        )
        assert response.status_code == 200
        assert response.headers["content-disposition"].endswith('_Resume.html"')

    def test_uses_generated_content(self, client, full_profile):
        """Test generated content is rendered when supplied."""
        generated = client.post("/api/generate", json=full_profile.model_dump()).json()
        response = client.post(
            "/api/download/pdf",
            json={"type": "resume", "data": full_profile.model_dump(), "aiContent": generated},
        )
        assert response.status_code == 200
        assert "Professional Summary" in response.text
        assert "• Enhanced: Led the payments team" in response.text

    def test_partial_generated_content(self, client, minimal_profile):
        """Test a cover-letter-only aiContent is accepted."""
        response = client.post(
            "/api/download/pdf",
            json={
                "type": "cover-letter",
                "data": minimal_profile.model_dump(),
                "aiContent": {"coverLetter": {"content": "Custom letter"}},
            },
        )
        assert response.status_code == 200
        assert '<div class="generated">Custom letter</div>' in response.text

    def test_invalid_type_is_400(self, client, minimal_profile):
        """Test an unknown document type is rejected with 400."""
        response = client.post(
            "/api/download/pdf",
            json={"type": "portfolio", "data": minimal_profile.model_dump()},
        )
        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid type. Must be one of: resume, cover-letter, both"

    def test_missing_type_is_400(self, client):
        """Test an absent type is rejected like an unknown one."""
        response = client.post("/api/download/pdf", json={"data": {"personal": {"fullName": "Jane"}}})
        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid type. Must be one of: resume, cover-letter, both"

    def test_null_type_is_400(self, client, minimal_profile):
        """Test a null type is rejected like an unknown one."""
        response = client.post("/api/download/pdf", json={"type": None, "data": minimal_profile.model_dump()})
        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid type. Must be one of: resume, cover-letter, both"

    def test_null_data_is_400(self, client):
        """Test null data reads as an empty profile and fails on fullName."""
        response = client.post("/api/download/pdf", json={"type": "resume", "data": None})
        assert response.status_code == 400
        assert "fullName" in response.json()["detail"]

    def test_missing_name_is_400(self, client):
        """Test download requires fullName."""
        response = client.post("/api/download/pdf", json={"type": "resume", "data": {}})
        assert response.status_code == 400
        assert "fullName" in response.json()["detail"]

    def test_cover_letter_without_title_is_400(self, client):
        """Test cover letter download requires jobRole.title."""
        response = client.post(
            "/api/download/pdf",
            json={"type": "cover-letter", "data": {"personal": {"fullName": "Jane"}}},
        )
        assert response.status_code == 400
        assert response.json()["detail"] == "Missing required field: jobRole.title is required for cover letter"

    def test_rejection_logged_with_request_tags(self, client, minimal_profile, caplog):
        """Test rejected downloads are logged with request and component tags."""
        with caplog.at_level(logging.WARNING, logger="api_service.app"):
            client.post("/api/download/pdf", json={"type": "zip", "data": minimal_profile.model_dump()})
        messages = [record.getMessage() for record in caplog.records if record.name == "api_service.app"]
        assert len(messages) == 1
        assert messages[0].startswith("[req:")
        assert "] [api] Rejected download request: Invalid type" in messages[0]

    def test_render_failure_is_500(self, client, minimal_profile):
        """Test unexpected render errors become a generic 500."""
        with patch("api_service.app.render", side_effect=RuntimeError("template exploded")):
            response = client.post(
                "/api/download/pdf",
                json={"type": "resume", "data": minimal_profile.model_dump()},
            )
        assert response.status_code == 500
        assert response.json()["detail"] == "Failed to generate PDF content. Please try again."
