"""
Settings and prompt tests.
"""

import logging

import pytest

from app.config import Environment, Settings
from domain.enums import Confidence
from domain.prompts import MEAL_ESTIMATION_SYSTEM_PROMPT
from test_fixtures import make_client


def test_settings_defaults(monkeypatch):
    for name in ("PORT", "GROQ_API_KEY", "USDA_API_KEY", "GROQ_MODEL", "ENVIRONMENT"):
        monkeypatch.delenv(name, raising=False)

    config = Settings(_env_file=None)
    assert config.port == 3000
    assert config.groq_api_key == ""
    assert config.usda_api_key == "DEMO_KEY"
    assert config.groq_base_url == "https://api.groq.com/openai/v1"
    assert config.groq_model == "llama-3.3-70b-versatile"
    assert config.groq_temperature == 0.3
    assert config.rate_limit_max_requests == 30
    assert config.rate_limit_window_sec == 60
    assert config.has_completion_credentials() is False


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("GROQ_API_KEY", "gsk_live")
    monkeypatch.setenv("USDA_API_KEY", "usda-key")
    monkeypatch.setenv("ENVIRONMENT", "PRODUCTION")

    config = Settings(_env_file=None)
    assert config.port == 8080
    assert config.groq_api_key == "gsk_live"
    assert config.usda_api_key == "usda-key"
    assert config.environment == Environment.PRODUCTION
    assert config.is_production()
    assert config.has_completion_credentials()


def test_invalid_port_rejected():
    with pytest.raises(ValueError):
        Settings(_env_file=None, port=0)


def test_prompt_describes_schema():
    for field in (
        '"description"',
        '"items"',
        '"name"',
        '"quantity"',
        '"calories"',
        '"protein"',
        '"carbs"',
        '"fat"',
        '"total_calories"',
        '"confidence"',
        '"assumptions"',
    ):
        assert field in MEAL_ESTIMATION_SYSTEM_PROMPT


def test_prompt_lists_confidence_levels_and_decomposition_rule():
    for level in Confidence:
        assert f'"{level.value}"' in MEAL_ESTIMATION_SYSTEM_PROMPT
    assert "Always break down meals into individual items" in MEAL_ESTIMATION_SYSTEM_PROMPT
    assert "{{" not in MEAL_ESTIMATION_SYSTEM_PROMPT


def test_startup_and_shutdown_logs_use_app_name(caplog):
    caplog.set_level(logging.INFO, logger="macrorelay.main")

    with make_client(app_name="NutriGate", port=4100) as client:
        assert client.get("/health").status_code == 200

    messages = [record.getMessage() for record in caplog.records]
    assert any(m.startswith("Starting NutriGate ") for m in messages)
    assert "Server running on port 4100" in messages
    assert "Shutting down NutriGate" in messages


def test_prompt_sandwich_example_is_consistent():
    assert '"peanut butter sandwich" should have 2 items' in MEAL_ESTIMATION_SYSTEM_PROMPT
    assert "the second slice of bread belongs to the bread item" in MEAL_ESTIMATION_SYSTEM_PROMPT
