"""Basic example: build an EMF log with direct calls and log it.

Run with:
    python examples/basic.py

The document is written to stdout through the standard logging module,
which is all CloudWatch needs when running in AWS Lambda.
"""

import logging

from emflog import (
    STORAGE_RESOLUTION_HIGH,
    UNIT_COUNT,
    UNIT_MILLISECONDS,
    EmfFormatter,
    MetricLog,
    log_metric_log,
)

handler = logging.StreamHandler()
handler.setFormatter(EmfFormatter())
logger = logging.getLogger("metrics")
logger.addHandler(handler)
logger.setLevel(logging.INFO)
logger.propagate = False

metric_log = MetricLog("MyApplicationMetrics")

# Dimension values
metric_log.put_dimension("ServiceName", "UserService")
metric_log.put_dimension("Environment", "Production")

# Dimensions metrics are rolled up by
metric_log.add_dimension_set(["ServiceName"])
metric_log.add_dimension_set(["ServiceName", "Environment"])

metric_log.put_metric("Latency", 42.0, UNIT_MILLISECONDS)
metric_log.put_metric("RequestCount", 1, UNIT_COUNT)
metric_log.put_metric_with_resolution(
    "DetailedLatency", 12.3, UNIT_MILLISECONDS, STORAGE_RESOLUTION_HIGH
)

if __name__ == "__main__":
    log_metric_log(metric_log, logger=logger)
