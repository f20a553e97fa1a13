"""Shared test fixtures and configuration."""
from typing import Iterator

import pytest

PROXY_URL = "https://proxy.test/api/gemini-generate-emoji"


@pytest.fixture(autouse=True)
def set_required_env_vars(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Point the generation proxy at a test URL and reset cached settings."""
    monkeypatch.setenv("GENERATION_PROXY_URL", PROXY_URL)
    from emojigen.core.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
