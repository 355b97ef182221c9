from __future__ import annotations

import pytest

from carbon_headlines.models import HeadlineSourceConfig


@pytest.fixture
def cfg() -> HeadlineSourceConfig:
    return HeadlineSourceConfig(timeout=5.0, user_agent="carbon-headlines-test/1.0")
