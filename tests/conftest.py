from __future__ import annotations

import pytest

from xmldoclet.reporting import CollectingReporter


@pytest.fixture
def reporter() -> CollectingReporter:
    """Provide a reporter that records diagnostics for assertions."""
    return CollectingReporter()
