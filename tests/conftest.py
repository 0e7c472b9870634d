"""Pytest configuration and shared fixtures.

Log output is redirected to a temporary directory before any project module
configures loguru.
"""

import os
import tempfile

os.environ.setdefault("SHELL_MODELS_LOG_DIR", tempfile.mkdtemp(prefix="shell-models-logs-"))

import pytest  # noqa: E402
from PySide6.QtCore import QCoreApplication  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def qt_app() -> QCoreApplication:
    """Single QCoreApplication shared by every test."""
    return QCoreApplication.instance() or QCoreApplication([])


@pytest.fixture
def alert_add():
    """Factory for alert add messages."""

    def _make(timestamp, modal=False, **extra):
        message = {"alertInfo": {"timestamp": timestamp, "modal": modal}}
        message.update(extra)
        return message

    return _make


@pytest.fixture
def apps_snapshot() -> dict:
    """Sample /listApps snapshot keyed by application id."""
    return {
        "returnValue": True,
        "apps": {
            "com.webos.app.browser": {"id": "com.webos.app.browser", "icon": "/usr/share/icons/browser.png"},
            "com.webos.app.settings": {"id": "com.webos.app.settings", "icon": "/usr/share/icons/settings.png"},
            "com.example.app.notes": {"id": "com.example.app.notes", "icon": "/media/apps/notes/icon.png"},
        },
    }


@pytest.fixture
def packages_snapshot() -> dict:
    """Sample package snapshot with two installable packages."""
    return {
        "packages": {
            "pkg1": {
                "id": "org.example.weather",
                "version": "2.1.0",
                "size": 1048576,
                "loc_name": "Weather",
                "vendor": "Example Corp",
                "vendorUrl": "https://example.org",
                "icon": "/media/packages/weather/icon.png",
                "miniIcon": "/media/packages/weather/mini.png",
                "userInstalled": True,
            },
            "pkg0": {
                "id": "org.example.clock",
                "version": "1.0.3",
                "size": 20480,
                "loc_name": "Clock",
                "vendor": "Example Corp",
                "vendorUrl": "https://example.org/clock",
                "icon": "/media/packages/clock/icon.png",
                "miniIcon": "/media/packages/clock/mini.png",
                "userInstalled": False,
            },
        }
    }
