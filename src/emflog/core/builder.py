"""Fluent builder over MetricLog."""

from collections.abc import Sequence

from emflog.core.metric_log import MetricLog
from emflog.core.models import JsonScalar


class MetricLogBuilder:
    """Chainable facade over a MetricLog.

    Each method performs one operation on the underlying log immediately
    and returns the builder. The builder holds nothing but the log.

    Example:
        ```python
        log = (
            MetricLog("MyApp")
            .builder()
            .dimension("Service", "API")
            .dimension_set(["Service"])
            .metric("Latency", 42.0, UNIT_MILLISECONDS)
            .build()
        )
        ```
    """

    def __init__(self, metric_log: MetricLog) -> None:
        self._metric_log = metric_log

    def dimension(self, key: str, value: str) -> "MetricLogBuilder":
        """Set a dimension value."""
        self._metric_log.put_dimension(key, value)
        return self

    def dimension_set(self, dimensions: Sequence[str]) -> "MetricLogBuilder":
        """Add a set of dimension names metrics are rolled up by."""
        self._metric_log.add_dimension_set(dimensions)
        return self

    def metric(
        self, name: str, value: int | float, unit: str | None = None
    ) -> "MetricLogBuilder":
        """Add a metric value and definition."""
        self._metric_log.put_metric(name, value, unit)
        return self

    def metric_with_resolution(
        self, name: str, value: int | float, unit: str | None, resolution: int
    ) -> "MetricLogBuilder":
        """Add a metric with a storage resolution.

        Use STORAGE_RESOLUTION_STANDARD (60) for standard resolution and
        STORAGE_RESOLUTION_HIGH (1) for high resolution.
        """
        self._metric_log.put_metric_with_resolution(name, value, unit, resolution)
        return self

    def property(self, key: str, value: JsonScalar) -> "MetricLogBuilder":
        """Add a property that appears in the log but is not reported as a metric."""
        self._metric_log.put_property(key, value)
        return self

    def build(self) -> MetricLog:
        return self._metric_log
