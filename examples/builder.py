"""Builder example: assemble an EMF log in one fluent expression.

Run with:
    python examples/builder.py
"""

import logging
import uuid

from emflog import (
    STORAGE_RESOLUTION_STANDARD,
    UNIT_BYTES,
    UNIT_COUNT,
    UNIT_MILLISECONDS,
    EmfFormatter,
    MetricLog,
    ValidationError,
    log_metric_log,
)

handler = logging.StreamHandler()
handler.setFormatter(EmfFormatter())
logger = logging.getLogger("metrics")
logger.addHandler(handler)
logger.setLevel(logging.INFO)
logger.propagate = False


def build_order_metrics(order_id: str) -> MetricLog:
    """Build the metric log for one processed order."""
    return (
        MetricLog("OrderProcessing")
        .builder()
        .dimension("Service", "PaymentService")
        .dimension("Region", "us-west-2")
        .dimension_set(["Service"])
        .dimension_set(["Service", "Region"])
        .metric("ProcessingTime", 123.45, UNIT_MILLISECONDS)
        .metric("SuccessCount", 1, UNIT_COUNT)
        .metric_with_resolution(
            "PayloadSize", 2048, UNIT_BYTES, STORAGE_RESOLUTION_STANDARD
        )
        .property("OrderId", order_id)
        .property("RequestId", str(uuid.uuid4()))
        .build()
    )


if __name__ == "__main__":
    log_metric_log(build_order_metrics("ord-12345"), logger=logger)

    # A log referencing a dimension without a value is rejected
    broken = MetricLog("OrderProcessing").builder().dimension_set(["Service"])
    broken.metric("SuccessCount", 1, UNIT_COUNT)
    try:
        broken.build().to_json()
    except ValidationError as e:
        print(f"rejected ({e.kind}): {e}")
