"""Pytest configuration and fixtures.

Provides logging configuration for safe-await's debug records. Markers are
registered in ``pyproject.toml``.
"""

from __future__ import annotations

import logging

import pytest

# =============================================================================
# Logging
# =============================================================================


@pytest.fixture
def debug_records(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """Capture DEBUG records from the ``safe_await`` logger tree."""
    caplog.set_level(logging.DEBUG, logger="safe_await")
    return caplog
