"""Shared pytest configuration and fixtures for all tests."""

import pytest

from cleanpath.api.config.SystemContext import SystemContext
from cleanpath.api.config.UserRecord import UserRecord


def pytest_configure(config):
    """Register the markers applied by location."""
    config.addinivalue_line("markers", "unit: fast tests of single API functions")
    config.addinivalue_line("markers", "integration: tests driving the CLI end to end")
    for domain in ("path", "text", "config", "pipeline", "logging"):
        config.addinivalue_line("markers", f"{domain}: tests of the cleanpath {domain} domain")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


@pytest.fixture(autouse=True)
def _plain_terminal(monkeypatch):
    """Keep rich output free of ANSI codes regardless of the CI environment."""
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("TTY_COMPATIBLE", raising=False)
    monkeypatch.delenv("CLEANPATH_LOG_FILE", raising=False)
    monkeypatch.delenv("CLEANPATH_LOG_LEVEL", raising=False)


# =============================================================================
# System Context Helpers
# =============================================================================

FAKE_USERS = {
    "me": UserRecord("me", "/home/me"),
    "bob": UserRecord("bob", "/home/bob"),
}


def fake_environ() -> dict:
    """Environment snapshot used by fake_context, in a fixed order."""
    return {"HOME": "/home/me", "A": "foo", "B": "foobar", "EMPTY": ""}


@pytest.fixture
def fake_context() -> SystemContext:
    """SystemContext for user 'me' in /work/dir, with users 'me' and 'bob'."""
    return SystemContext(
        environ=fake_environ(),
        getcwd=lambda: "/work/dir",
        current_user=lambda: FAKE_USERS["me"],
        lookup_user=FAKE_USERS.get,
    )
