from __future__ import annotations

from finplan.app import create_app
from finplan.config import Config, TestingConfig, resolve_log_level


def test_env_is_read_when_the_app_is_created(monkeypatch):
    monkeypatch.setenv("FINPLAN_CORS_ORIGINS", "https://plan.example.com, https://other.example.com")
    monkeypatch.setenv("FINPLAN_LOG_LEVEL", "warning")

    app = create_app(Config)
    assert app.config["CORS_ORIGINS"] == ["https://plan.example.com", "https://other.example.com"]
    assert app.config["LOG_LEVEL"] == "WARNING"


def test_unset_env_keeps_config_defaults(monkeypatch):
    monkeypatch.delenv("FINPLAN_CORS_ORIGINS", raising=False)
    monkeypatch.delenv("FINPLAN_LOG_LEVEL", raising=False)

    app = create_app(TestingConfig)
    assert app.config["CORS_ORIGINS"] == Config.CORS_ORIGINS
    assert app.config["LOG_LEVEL"] == "DEBUG"


def test_unknown_log_level_falls_back_to_info(monkeypatch):
    monkeypatch.setenv("FINPLAN_LOG_LEVEL", "verbose")

    app = create_app(Config)
    assert app.config["LOG_LEVEL"] == "INFO"
    assert app.test_client().get("/api/ping").status_code == 200


def test_resolve_log_level():
    assert resolve_log_level(" debug ") == "DEBUG"
    assert resolve_log_level("nonsense") == "INFO"
