"""conftest.py for benchmarks.

Benchmarks use the ``benchmark`` fixture from pytest-benchmark and are
collected from ``bench_*.py`` files.
"""

from __future__ import annotations

import logging

import pytest
import structlog


@pytest.fixture(autouse=True)
def _quiet_logging():
    """Keep debug log rendering out of the measured loop."""
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING))
    yield
    structlog.reset_defaults()
