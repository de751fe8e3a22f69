"""Shared fixtures for integration tests."""

import os

import pytest


@pytest.fixture
def sharepoint_settings() -> dict[str, str]:
    """Site, token and list for live tests, taken from the environment."""
    settings = {
        "site_url": os.environ.get("SPKIT_SITE_URL", ""),
        "access_token": os.environ.get("SHAREPOINT_ACCESS_TOKEN", ""),
        "list": os.environ.get("SPKIT_LIST", ""),
    }
    missing = [name for name, value in settings.items() if not value]
    if missing:
        pytest.skip(f"Missing live settings: {', '.join(missing)}")
    return settings
