"""Shared test fixtures for all test modules."""

import pytest

from emflog import UNIT_COUNT, MetricLog

FIXED_TIMESTAMP = 1600000000000


@pytest.fixture
def metric_log() -> MetricLog:
    """Provide an empty metric log with a fixed timestamp."""
    return MetricLog("TestNamespace", timestamp=FIXED_TIMESTAMP)


@pytest.fixture
def minimal_log() -> MetricLog:
    """Provide the smallest log that passes validation."""
    log = MetricLog("N", timestamp=FIXED_TIMESTAMP)
    log.put_dimension("Service", "API")
    log.add_dimension_set(["Service"])
    log.put_metric("Count", 1, UNIT_COUNT)
    return log

