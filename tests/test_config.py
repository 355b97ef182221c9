from __future__ import annotations

import pytest

from carbon_headlines.config import ENV_TIMEOUT, ENV_USER_AGENT, default_config, load_config
from carbon_headlines.exceptions import ConfigError
from carbon_headlines.models import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT


def test_defaults_when_env_is_empty():
    cfg = load_config({})
    assert cfg == default_config()
    assert cfg.timeout == DEFAULT_TIMEOUT
    assert cfg.user_agent == DEFAULT_USER_AGENT


def test_values_from_env():
    cfg = load_config({ENV_TIMEOUT: "12.5", ENV_USER_AGENT: "bot/2.0"})
    assert cfg.timeout == 12.5
    assert cfg.user_agent == "bot/2.0"


@pytest.mark.parametrize("raw", ["abc", "0", "-3"])
def test_invalid_timeout_is_config_error(raw):
    with pytest.raises(ConfigError):
        load_config({ENV_TIMEOUT: raw})


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv(ENV_TIMEOUT, "7")
    monkeypatch.delenv(ENV_USER_AGENT, raising=False)
    cfg = load_config()
    assert cfg.timeout == 7.0
    assert cfg.user_agent == DEFAULT_USER_AGENT


def test_config_is_immutable():
    cfg = default_config()
    with pytest.raises(AttributeError):
        cfg.timeout = 1.0
