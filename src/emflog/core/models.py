"""Core domain models for EMF metric logs."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

# Flat values only ever hold JSON scalars or null.
JsonScalar = str | int | float | bool | None


@dataclass(frozen=True)
class MetricDefinition:
    """Metadata describing one metric (not its value).

    Attributes:
        name: Metric name, also the key of its value in the flat value map.
        unit: Optional unit string (e.g., "Milliseconds", "Count").
        storage_resolution: Optional resolution, 1 (high) or 60 (standard).
    """

    name: str
    unit: str | None = None
    storage_resolution: int | None = None


@dataclass(frozen=True)
class MetricLogSnapshot:
    """Read-only view of a MetricLog at one point in time.

    Attributes:
        namespace: CloudWatch namespace for all metrics in the log.
        timestamp: Epoch milliseconds captured when the log was created.
        dimension_sets: Dimension sets in insertion order.
        metric_definitions: Metric definitions in insertion order.
        values: Read-only flat mapping of dimension values, metric values and
            properties.
    """

    namespace: str
    timestamp: int
    dimension_sets: tuple[tuple[str, ...], ...] = ()
    metric_definitions: tuple[MetricDefinition, ...] = ()
    values: Mapping[str, JsonScalar] = field(
        default_factory=lambda: MappingProxyType({})
    )
