# File: backend/tests/test_config.py
# Version: v0.1.0
"""Settings parsing."""
from backend.app.core.config import Settings


def test_cors_origins_list():
    assert Settings(CORS_ORIGINS="*").cors_origins_list == ["*"]
    assert Settings(CORS_ORIGINS="http://a, http://b ,").cors_origins_list == ["http://a", "http://b"]


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("USER_HEADER", "X-Owner")
    monkeypatch.setenv("SCHEMA_AUTOHEAL", "false")
    s = Settings()
    assert s.USER_HEADER == "X-Owner"
    assert s.SCHEMA_AUTOHEAL is False


def test_test_suite_uses_temporary_database():
    from backend.app.db.session import engine

    assert engine.url.get_backend_name() == "sqlite"
    assert "biotool-tests-" in str(engine.url)
