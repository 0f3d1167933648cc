"""
Global pytest configuration for the vitals checker.

Provides output capture and sleep stubs so alert animations run instantly.
"""

import pytest


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "critical_safety: Range boundary tests that must NEVER fail"
    )
    config.addinivalue_line(
        "markers", "unit: Unit tests for individual components"
    )


def pytest_collection_modifyitems(config, items):
    """Add the unit marker to everything under tests/unit."""
    for item in items:
        if "unit" in item.nodeid:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def captured_output():
    """List that collects every message passed to the output writer."""
    return []


@pytest.fixture
def mock_writer(captured_output):
    """Output writer appending to captured_output."""
    return captured_output.append


@pytest.fixture
def no_sleep(monkeypatch):
    """Replace time.sleep in the display module and record requested delays."""
    delays = []
    monkeypatch.setattr("vitals_checker.services.display.time.sleep", delays.append)
    return delays
