"""EMF JSON encoder for metric logs."""

import json
from typing import Any

from emflog.core.constants import AWS_METADATA_KEY
from emflog.core.models import MetricDefinition, MetricLogSnapshot
from emflog.core.validation import validate


def _encode_metric(metric: MetricDefinition) -> dict[str, Any]:
    obj: dict[str, Any] = {"Name": metric.name}
    if metric.unit is not None:
        obj["Unit"] = metric.unit
    if metric.storage_resolution is not None:
        obj["StorageResolution"] = metric.storage_resolution
    return obj


def encode_document(snapshot: MetricLogSnapshot) -> dict[str, Any]:
    """Encode a snapshot to the EMF document structure.

    The snapshot is validated first. The metadata object is always the
    first key; flat values follow in insertion order. A flat value keyed
    by the reserved metadata key is never allowed to replace it.

    Args:
        snapshot: Read-only view of the metric log.

    Returns:
        Dict ready for JSON serialization.

    Raises:
        ValidationError: If the snapshot violates an EMF rule.
    """
    validate(snapshot)

    document: dict[str, Any] = {
        AWS_METADATA_KEY: {
            "Timestamp": snapshot.timestamp,
            "CloudWatchMetrics": [
                {
                    "Namespace": snapshot.namespace,
                    "Dimensions": [list(ds) for ds in snapshot.dimension_sets],
                    "Metrics": [_encode_metric(m) for m in snapshot.metric_definitions],
                }
            ],
        }
    }
    for key, value in snapshot.values.items():
        if key == AWS_METADATA_KEY:
            continue
        document[key] = value
    return document


def encode_json(snapshot: MetricLogSnapshot) -> str:
    """Encode a snapshot to an EMF JSON string.

    Args:
        snapshot: Read-only view of the metric log.

    Returns:
        Single-line JSON document.

    Raises:
        ValidationError: If the snapshot violates an EMF rule.
        ValueError: If a flat value is NaN or infinite.
    """
    return json.dumps(encode_document(snapshot), allow_nan=False)
