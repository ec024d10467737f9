"""Python logging adapter for emflog.

This adapter bridges MetricLog to Python's standard library logging
module, so EMF documents can be written wherever log records already go
(stdout in a Lambda function, a file picked up by the CloudWatch agent).
"""

import logging

from emflog.core.metric_log import MetricLog

_default_logger = logging.getLogger(__name__)


def log_metric_log(
    metric_log: MetricLog,
    logger: logging.Logger | None = None,
    level: int = logging.INFO,
) -> str:
    """Serialize a metric log and write it as a single log record.

    The log is validated and serialized before the record is created; on
    failure the ValidationError propagates to the caller and no record is
    emitted. Later mutation of the log does not affect the record.

    Args:
        metric_log: The log to emit.
        logger: Target logger. Defaults to this module's logger.
        level: Logging level of the record (default INFO).

    Returns:
        The JSON document that was logged.
    """
    document = metric_log.to_json()
    target = logger if logger is not None else _default_logger
    target.log(level, "%s", document)
    return document


class EmfFormatter(logging.Formatter):
    """Formatter that renders the bare record message.

    Documents written by log_metric_log() stay parseable JSON, with no
    timestamp or level prefix added by the handler.

    Example:
        ```python
        import logging
        from emflog import EmfFormatter, log_metric_log

        handler = logging.StreamHandler()
        handler.setFormatter(EmfFormatter())
        emf_logger = logging.getLogger("emf")
        emf_logger.addHandler(handler)
        log_metric_log(metric_log, logger=emf_logger)
        ```
    """

    def __init__(self) -> None:
        super().__init__(fmt="%(message)s")
