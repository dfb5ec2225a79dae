"""Shared fixtures for integration tests."""

import os

import pytest

from literature_screener.config import get_settings


@pytest.fixture(autouse=True)
def require_api_key():
    """Integration tests talk to the real Anthropic API."""
    if not (get_settings().anthropic_api_key or os.environ.get("ANTHROPIC_API_KEY")):
        pytest.skip("ANTHROPIC_API_KEY not set — skipping LLM integration test")
