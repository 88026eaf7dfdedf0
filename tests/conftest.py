"""Pytest configuration and fixtures.

Provides call-counting test doubles and logging capture for the library
logger. Fixtures here are opt-in unless noted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Any

import pytest

# =============================================================================
# Test Doubles
# =============================================================================


@dataclass
class CallSpy:
    """Callable test double that records every call and returns a canned value.

    Use to verify how many times a combinator invokes a caller-supplied
    function, and with which payload.
    """

    returns: Any = None
    calls: list[tuple[Any, ...]] = field(default_factory=list)

    def __call__(self, *args: Any) -> Any:
        self.calls.append(args)
        return self.returns

    @property
    def call_count(self) -> int:
        return len(self.calls)


@pytest.fixture
def make_spy():
    """Return a factory for fresh ``CallSpy`` instances."""

    def _make(returns: Any = None) -> CallSpy:
        return CallSpy(returns=returns)

    return _make


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture
def library_debug_logs(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """Capture DEBUG records from the ``tagged_result`` logger."""
    caplog.set_level(logging.DEBUG, logger="tagged_result")
    return caplog
