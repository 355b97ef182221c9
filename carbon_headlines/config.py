from __future__ import annotations

import os
from typing import Mapping, Optional

from dotenv import load_dotenv

from .exceptions import ConfigError
from .models import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, HeadlineSourceConfig


DEFAULT_PER_SOURCE = 30

ENV_TIMEOUT = "CARBON_HEADLINES_TIMEOUT"
ENV_USER_AGENT = "CARBON_HEADLINES_USER_AGENT"


def default_config() -> HeadlineSourceConfig:
    return HeadlineSourceConfig(timeout=DEFAULT_TIMEOUT, user_agent=DEFAULT_USER_AGENT)


def load_config(env: Optional[Mapping[str, str]] = None) -> HeadlineSourceConfig:
    """
    Build the run configuration from the environment.

    A `.env` file in the working directory is loaded first (without overriding
    variables already set). Pass `env` to read from an explicit mapping instead.
    """
    if env is None:
        load_dotenv()
        env = os.environ

    raw_timeout = (env.get(ENV_TIMEOUT) or "").strip()
    timeout = DEFAULT_TIMEOUT
    if raw_timeout:
        try:
            timeout = float(raw_timeout)
        except ValueError as e:
            raise ConfigError(f"{ENV_TIMEOUT} must be a number of seconds, got {raw_timeout!r}") from e
        if timeout <= 0:
            raise ConfigError(f"{ENV_TIMEOUT} must be positive, got {raw_timeout!r}")

    user_agent = (env.get(ENV_USER_AGENT) or "").strip() or DEFAULT_USER_AGENT
    return HeadlineSourceConfig(timeout=timeout, user_agent=user_agent)
