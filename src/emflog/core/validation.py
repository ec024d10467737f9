"""Structural validation of metric logs against EMF rules.

Validation is fail-fast: checks run in a fixed order and the first
violation found is reported. The checks never mutate the snapshot.
"""

from enum import StrEnum

from emflog.core.constants import (
    MAX_DIMENSION_NAME_LENGTH,
    MAX_DIMENSION_SET_SIZE,
    MAX_METRIC_NAME_LENGTH,
    MAX_NAMESPACE_LENGTH,
    MIN_DIMENSION_SETS,
    MIN_METRIC_NAME_LENGTH,
    MIN_NAMESPACE_LENGTH,
    STORAGE_RESOLUTION_HIGH,
    STORAGE_RESOLUTION_STANDARD,
    VALID_STORAGE_RESOLUTIONS,
    VALID_UNITS,
)
from emflog.core.models import MetricDefinition, MetricLogSnapshot


class ValidationErrorKind(StrEnum):
    """Machine-readable category of a validation failure."""

    NAMESPACE_LENGTH = "namespace-length"
    NO_METRICS = "no-metrics"
    NO_DIMENSION_SETS = "no-dimension-sets"
    EMPTY_DIMENSION_SET = "empty-dimension-set"
    METRIC_NAME_LENGTH = "metric-name-length"
    METRIC_VALUE_MISSING = "metric-value-missing"
    INVALID_UNIT = "invalid-unit"
    INVALID_STORAGE_RESOLUTION = "invalid-storage-resolution"
    DIMENSION_SET_TOO_LARGE = "dimension-set-too-large"
    DIMENSION_NAME_LENGTH = "dimension-name-length"
    DIMENSION_VALUE_MISSING = "dimension-value-missing"


class ValidationError(ValueError):
    """Raised when a metric log violates an EMF rule.

    Attributes:
        kind: Which rule was violated.
        message: Human-readable description.
        subject: Offending namespace, metric or dimension name, if any.
        index: Position of the offending dimension set, if any.
    """

    def __init__(
        self,
        kind: ValidationErrorKind,
        message: str,
        subject: str | None = None,
        index: int | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.subject = subject
        self.index = index

    def __repr__(self) -> str:
        return f"ValidationError(kind={self.kind.value!r}, message={self.message!r})"


def _check_namespace(namespace: str) -> ValidationError | None:
    if len(namespace) < MIN_NAMESPACE_LENGTH:
        return ValidationError(
            ValidationErrorKind.NAMESPACE_LENGTH,
            f"namespace length must be at least {MIN_NAMESPACE_LENGTH} characters",
            subject=namespace,
        )
    if len(namespace) > MAX_NAMESPACE_LENGTH:
        return ValidationError(
            ValidationErrorKind.NAMESPACE_LENGTH,
            f"namespace length must be at most {MAX_NAMESPACE_LENGTH} characters",
            subject=namespace,
        )
    return None


def _check_metric(
    metric: MetricDefinition, snapshot: MetricLogSnapshot
) -> ValidationError | None:
    name = metric.name
    if len(name) < MIN_METRIC_NAME_LENGTH:
        return ValidationError(
            ValidationErrorKind.METRIC_NAME_LENGTH,
            f"metric name '{name}' length must be at least "
            f"{MIN_METRIC_NAME_LENGTH} characters",
            subject=name,
        )
    if len(name) > MAX_METRIC_NAME_LENGTH:
        return ValidationError(
            ValidationErrorKind.METRIC_NAME_LENGTH,
            f"metric name '{name}' length must be at most "
            f"{MAX_METRIC_NAME_LENGTH} characters",
            subject=name,
        )
    if name not in snapshot.values:
        return ValidationError(
            ValidationErrorKind.METRIC_VALUE_MISSING,
            f"metric '{name}' is defined but no value is provided",
            subject=name,
        )
    if metric.unit is not None and metric.unit not in VALID_UNITS:
        return ValidationError(
            ValidationErrorKind.INVALID_UNIT,
            f"invalid unit '{metric.unit}' for metric '{name}'",
            subject=name,
        )
    if (
        metric.storage_resolution is not None
        # bool is an int subclass; True must not pass as resolution 1
        and (
            isinstance(metric.storage_resolution, bool)
            or metric.storage_resolution not in VALID_STORAGE_RESOLUTIONS
        )
    ):
        return ValidationError(
            ValidationErrorKind.INVALID_STORAGE_RESOLUTION,
            f"invalid storage resolution for metric '{name}'. Must be either "
            f"{STORAGE_RESOLUTION_STANDARD} (standard) or "
            f"{STORAGE_RESOLUTION_HIGH} (high resolution)",
            subject=name,
        )
    return None


def _check_dimension_set(
    index: int, dimension_set: tuple[str, ...], snapshot: MetricLogSnapshot
) -> ValidationError | None:
    if len(dimension_set) > MAX_DIMENSION_SET_SIZE:
        return ValidationError(
            ValidationErrorKind.DIMENSION_SET_TOO_LARGE,
            f"dimension set {index} exceeds maximum size of {MAX_DIMENSION_SET_SIZE}",
            index=index,
        )
    for dimension in dimension_set:
        if len(dimension) > MAX_DIMENSION_NAME_LENGTH:
            return ValidationError(
                ValidationErrorKind.DIMENSION_NAME_LENGTH,
                f"dimension name '{dimension}' exceeds maximum length of "
                f"{MAX_DIMENSION_NAME_LENGTH}",
                subject=dimension,
                index=index,
            )
        if dimension not in snapshot.values:
            return ValidationError(
                ValidationErrorKind.DIMENSION_VALUE_MISSING,
                f"dimension '{dimension}' is referenced but no value is provided",
                subject=dimension,
                index=index,
            )
    return None


def find_violation(snapshot: MetricLogSnapshot) -> ValidationError | None:
    """Return the first rule the snapshot violates.

    Checks run in this order: namespace length, metric presence, dimension
    set presence, empty dimension sets, each metric definition, then each
    dimension set.

    Args:
        snapshot: Read-only view of the metric log.

    Returns:
        The first ValidationError found, or None if the snapshot is valid.
    """
    error = _check_namespace(snapshot.namespace)
    if error is not None:
        return error

    if not snapshot.metric_definitions:
        return ValidationError(
            ValidationErrorKind.NO_METRICS, "at least one metric must be defined"
        )

    if len(snapshot.dimension_sets) < MIN_DIMENSION_SETS:
        return ValidationError(
            ValidationErrorKind.NO_DIMENSION_SETS,
            "at least one dimension set must be defined",
        )

    for index, dimension_set in enumerate(snapshot.dimension_sets):
        if not dimension_set:
            return ValidationError(
                ValidationErrorKind.EMPTY_DIMENSION_SET,
                f"dimension set {index} is empty, must contain at least one dimension",
                index=index,
            )

    for metric in snapshot.metric_definitions:
        error = _check_metric(metric, snapshot)
        if error is not None:
            return error

    for index, dimension_set in enumerate(snapshot.dimension_sets):
        error = _check_dimension_set(index, dimension_set, snapshot)
        if error is not None:
            return error

    return None


def validate(snapshot: MetricLogSnapshot) -> None:
    """Validate a snapshot, raising on the first violated rule.

    Args:
        snapshot: Read-only view of the metric log.

    Raises:
        ValidationError: If any rule is violated.
    """
    error = find_violation(snapshot)
    if error is not None:
        raise error
