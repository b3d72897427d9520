"""Tests for health probes and settings parsing."""

from app.core.config import DEFAULT_CORS_ORIGINS, Settings


def test_live_probe(client):
    response = client.get("/health/live")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_ready_probe_checks_database(client):
    response = client.get("/health/ready")

    assert response.status_code == 200
    assert response.json()["checks"]["database"]["status"] == "healthy"


def test_postgres_scheme_is_rewritten_for_psycopg():
    settings = Settings(database_url="postgres://u:p@db.example.com:5432/padaria")

    assert settings.database_url == "postgresql+psycopg://u:p@db.example.com:5432/padaria"


def test_cors_origins_are_split_and_trimmed():
    settings = Settings(cors_origins_raw=" https://a.example.com/ ,https://b.example.com,, ")

    assert settings.cors_origins == ["https://a.example.com", "https://b.example.com"]


def test_cors_origins_fall_back_to_defaults():
    assert Settings(cors_origins_raw="  ").cors_origins == DEFAULT_CORS_ORIGINS


def test_api_base_url_and_log_level_are_normalized():
    settings = Settings(api_base_url="http://api.local:8000/", log_level="debug")

    assert settings.api_base_url == "http://api.local:8000"
    assert settings.log_level == "DEBUG"
