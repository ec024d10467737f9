"""Mutable metric log aggregate."""

from __future__ import annotations

import time
from collections.abc import Sequence
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from emflog.core.encoding.emf import encode_document, encode_json
from emflog.core.models import JsonScalar, MetricDefinition, MetricLogSnapshot
from emflog.core.validation import ValidationError, find_violation, validate

if TYPE_CHECKING:
    from emflog.core.builder import MetricLogBuilder


class MetricLog:
    """An EMF log holding one metrics directive and its values.

    Mutators never validate; rules are checked each time the log is
    validated or serialized, so the log may pass through invalid states
    while it is being assembled.

    Example:
        ```python
        from emflog import MetricLog, UNIT_MILLISECONDS

        log = MetricLog("MyApp")
        log.put_dimension("Service", "API")
        log.add_dimension_set(["Service"])
        log.put_metric("Latency", 42.0, UNIT_MILLISECONDS)
        print(log.to_json())
        ```
    """

    def __init__(self, namespace: str, timestamp: int | None = None) -> None:
        """Create a log for the given namespace.

        Args:
            namespace: CloudWatch namespace, 1-1024 characters.
            timestamp: Epoch milliseconds. Defaults to the current time.
        """
        self._namespace = namespace
        self._timestamp = (
            timestamp if timestamp is not None else int(time.time() * 1000)
        )
        self._dimension_sets: list[tuple[str, ...]] = []
        self._metric_definitions: list[MetricDefinition] = []
        self._values: dict[str, JsonScalar] = {}

    @property
    def namespace(self) -> str:
        return self._namespace

    @property
    def timestamp(self) -> int:
        """Epoch milliseconds captured at construction."""
        return self._timestamp

    @property
    def dimension_sets(self) -> tuple[tuple[str, ...], ...]:
        return tuple(self._dimension_sets)

    @property
    def metric_definitions(self) -> tuple[MetricDefinition, ...]:
        return tuple(self._metric_definitions)

    @property
    def values(self) -> dict[str, JsonScalar]:
        """Copy of the flat value map."""
        return dict(self._values)

    def put_dimension(self, key: str, value: str) -> MetricLog:
        """Set the value of a dimension. A later call for the same key wins."""
        self._values[key] = value
        return self

    def add_dimension_set(self, dimensions: Sequence[str]) -> MetricLog:
        """Append a dimension set.

        Empty and duplicate sets are accepted here and reported (if at all)
        during validation.
        """
        self._dimension_sets.append(tuple(dimensions))
        return self

    with_dimension_set = add_dimension_set

    def put_metric(
        self, name: str, value: int | float, unit: str | None = None
    ) -> MetricLog:
        """Record a metric value and append its definition.

        Calling this twice with the same name appends a second definition
        while the value is overwritten.
        """
        self._values[name] = value
        self._metric_definitions.append(MetricDefinition(name=name, unit=unit))
        return self

    def put_metric_with_resolution(
        self, name: str, value: int | float, unit: str | None, resolution: int
    ) -> MetricLog:
        """Record a metric value with a storage resolution (1 or 60)."""
        self._values[name] = value
        self._metric_definitions.append(
            MetricDefinition(name=name, unit=unit, storage_resolution=resolution)
        )
        return self

    def put_property(self, key: str, value: JsonScalar) -> MetricLog:
        """Set a free-form property that is neither a metric nor a dimension."""
        self._values[key] = value
        return self

    def builder(self) -> MetricLogBuilder:
        """Return a fluent builder bound to this log."""
        from emflog.core.builder import MetricLogBuilder

        return MetricLogBuilder(self)

    def snapshot(self) -> MetricLogSnapshot:
        """Capture the current state as an immutable snapshot."""
        return MetricLogSnapshot(
            namespace=self._namespace,
            timestamp=self._timestamp,
            dimension_sets=tuple(self._dimension_sets),
            metric_definitions=tuple(self._metric_definitions),
            values=MappingProxyType(dict(self._values)),
        )

    def validate(self) -> None:
        """Raise ValidationError if the current state violates an EMF rule."""
        validate(self.snapshot())

    def find_violation(self) -> ValidationError | None:
        """Return the first violated rule, or None if the log is valid."""
        return find_violation(self.snapshot())

    def is_valid(self) -> bool:
        return self.find_violation() is None

    def to_document(self) -> dict[str, Any]:
        """Validate and return the EMF document as a dict."""
        return encode_document(self.snapshot())

    def to_json(self) -> str:
        """Validate and return the EMF document as a JSON string."""
        return encode_json(self.snapshot())

    def __str__(self) -> str:
        return self.to_json()

    def __repr__(self) -> str:
        return (
            f"MetricLog(namespace={self._namespace!r}, "
            f"timestamp={self._timestamp}, "
            f"metrics={len(self._metric_definitions)}, "
            f"dimension_sets={len(self._dimension_sets)})"
        )
