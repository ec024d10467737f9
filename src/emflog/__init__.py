"""emflog - build and validate CloudWatch Embedded Metric Format logs."""

from emflog.adapters.logging import EmfFormatter, log_metric_log
from emflog.core.builder import MetricLogBuilder
from emflog.core.constants import (
    AWS_METADATA_KEY,
    MAX_DIMENSION_NAME_LENGTH,
    MAX_DIMENSION_SET_SIZE,
    MAX_METRIC_NAME_LENGTH,
    MAX_NAMESPACE_LENGTH,
    MIN_DIMENSION_SETS,
    MIN_METRIC_NAME_LENGTH,
    MIN_NAMESPACE_LENGTH,
    STORAGE_RESOLUTION_HIGH,
    STORAGE_RESOLUTION_STANDARD,
    UNIT_BITS,
    UNIT_BITS_PER_SECOND,
    UNIT_BYTES,
    UNIT_BYTES_PER_SECOND,
    UNIT_COUNT,
    UNIT_COUNT_PER_SECOND,
    UNIT_GIGABITS,
    UNIT_GIGABITS_PER_SECOND,
    UNIT_GIGABYTES,
    UNIT_GIGABYTES_PER_SECOND,
    UNIT_KILOBITS,
    UNIT_KILOBITS_PER_SECOND,
    UNIT_KILOBYTES,
    UNIT_KILOBYTES_PER_SECOND,
    UNIT_MEGABITS,
    UNIT_MEGABITS_PER_SECOND,
    UNIT_MEGABYTES,
    UNIT_MEGABYTES_PER_SECOND,
    UNIT_MICROSECONDS,
    UNIT_MILLISECONDS,
    UNIT_NONE,
    UNIT_PERCENT,
    UNIT_SECONDS,
    UNIT_TERABITS,
    UNIT_TERABITS_PER_SECOND,
    UNIT_TERABYTES,
    UNIT_TERABYTES_PER_SECOND,
    VALID_STORAGE_RESOLUTIONS,
    VALID_UNITS,
)
from emflog.core.encoding.emf import encode_document, encode_json
from emflog.core.metric_log import MetricLog
from emflog.core.models import JsonScalar, MetricDefinition, MetricLogSnapshot
from emflog.core.validation import (
    ValidationError,
    ValidationErrorKind,
    find_violation,
    validate,
)

__all__ = [
    # Models
    "JsonScalar",
    "MetricDefinition",
    "MetricLog",
    "MetricLogBuilder",
    "MetricLogSnapshot",
    # Validation
    "ValidationError",
    "ValidationErrorKind",
    "find_violation",
    "validate",
    # Encoding
    "encode_document",
    "encode_json",
    # Logging
    "EmfFormatter",
    "log_metric_log",
    # Constants
    "AWS_METADATA_KEY",
    "MAX_DIMENSION_NAME_LENGTH",
    "MAX_DIMENSION_SET_SIZE",
    "MAX_METRIC_NAME_LENGTH",
    "MAX_NAMESPACE_LENGTH",
    "MIN_DIMENSION_SETS",
    "MIN_METRIC_NAME_LENGTH",
    "MIN_NAMESPACE_LENGTH",
    "STORAGE_RESOLUTION_HIGH",
    "STORAGE_RESOLUTION_STANDARD",
    "VALID_STORAGE_RESOLUTIONS",
    "VALID_UNITS",
    "UNIT_BITS",
    "UNIT_BITS_PER_SECOND",
    "UNIT_BYTES",
    "UNIT_BYTES_PER_SECOND",
    "UNIT_COUNT",
    "UNIT_COUNT_PER_SECOND",
    "UNIT_GIGABITS",
    "UNIT_GIGABITS_PER_SECOND",
    "UNIT_GIGABYTES",
    "UNIT_GIGABYTES_PER_SECOND",
    "UNIT_KILOBITS",
    "UNIT_KILOBITS_PER_SECOND",
    "UNIT_KILOBYTES",
    "UNIT_KILOBYTES_PER_SECOND",
    "UNIT_MEGABITS",
    "UNIT_MEGABITS_PER_SECOND",
    "UNIT_MEGABYTES",
    "UNIT_MEGABYTES_PER_SECOND",
    "UNIT_MICROSECONDS",
    "UNIT_MILLISECONDS",
    "UNIT_NONE",
    "UNIT_PERCENT",
    "UNIT_SECONDS",
    "UNIT_TERABITS",
    "UNIT_TERABITS_PER_SECOND",
    "UNIT_TERABYTES",
    "UNIT_TERABYTES_PER_SECOND",
]
