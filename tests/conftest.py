"""
Pytest configuration and shared fixtures for nav-index tests.

This module provides common fixtures and utilities used across all test modules.
"""

import contextlib
from typing import Any, Dict, List

import pytest
from loguru import logger

from navindex.model import MenuNode


# ==============================================================================
# Menu Tree Fixtures
# ==============================================================================


@pytest.fixture
def scenario_tree() -> List[MenuNode]:
    """Fixture providing a home page and an administration section."""
    return [
        MenuNode(id="home", text="Home", url="/"),
        MenuNode(
            id="cfg",
            text="Administration",
            url="/admin",
            children=[MenuNode(id="datasources", text="Data sources", url="/datasources")],
        ),
    ]


@pytest.fixture
def admin_tree_dicts() -> List[Dict[str, Any]]:
    """
    Fixture providing a boot-config menu tree with every administration page.

    Returns:
        List of camelCase node dicts as found in boot data.
    """
    return [
        {"id": "home", "text": "Home", "url": "/"},
        {
            "id": "dashboards",
            "text": "Dashboards",
            "url": "/dashboards",
            "children": [
                {"id": "dashboards/browse", "text": "Browse", "url": "/dashboards"},
            ],
        },
        {
            "id": "cfg",
            "text": "Administration",
            "subTitle": "Organization: Main Org.",
            "icon": "cog",
            "url": "/admin",
            "children": [
                {"id": "datasources", "text": "Data sources", "url": "/datasources"},
                {"id": "correlations", "text": "Correlations", "url": "/datasources/correlations"},
                {"id": "users", "text": "Users", "url": "/org/users"},
                {"id": "teams", "text": "Teams", "url": "/org/teams"},
                {"id": "plugins", "text": "Plugins", "url": "/plugins"},
                {"id": "org-settings", "text": "Preferences", "url": "/org"},
                {"id": "apikeys", "text": "API keys", "url": "/org/apikeys"},
            ],
        },
    ]


# ==============================================================================
# Logging Fixtures
# ==============================================================================


@pytest.fixture
def log_records():
    """Fixture capturing loguru records emitted during a test."""
    records: List[dict] = []
    logger.enable("navindex")
    handler_id = logger.add(lambda message: records.append(message.record), level="TRACE")
    yield records
    with contextlib.suppress(ValueError):
        logger.remove(handler_id)
    logger.disable("navindex")


# ==============================================================================
# Settings Fixtures
# ==============================================================================


@pytest.fixture
def temp_settings_file(tmp_path):
    """Fixture providing a settings file path inside a temporary directory."""
    return tmp_path / "config" / "settings.json"


@pytest.fixture
def sample_settings_data() -> Dict[str, Any]:
    """Fixture providing stored settings values."""
    return {
        "nav_tree_path": "/etc/nav-index/nav.json",
        "organization_name": "Acme",
    }
