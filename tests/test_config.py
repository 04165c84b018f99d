from __future__ import annotations

import pytest
from pydantic import ValidationError

from calculator.config import Settings


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.port == 5000
    assert settings.log_level == "INFO"
    assert "http://localhost:5173" in settings.cors_origins


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("CALCULATOR_PORT", "8080")
    monkeypatch.setenv("CALCULATOR_LOG_LEVEL", "debug")
    monkeypatch.setenv("CALCULATOR_APP_NAME", "Savings Helper")

    settings = Settings(_env_file=None)

    assert settings.port == 8080
    assert settings.log_level == "DEBUG"
    assert settings.app_name == "Savings Helper"


def test_unknown_log_level_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, log_level="chatty")


def test_app_name_reaches_page():
    from calculator.app import create_app

    app = create_app(Settings(_env_file=None, app_name="Savings Helper", log_level="WARNING"))
    with app.test_client() as client:
        html = client.get("/").get_data(as_text=True)

    assert "<title>Savings Helper</title>" in html
