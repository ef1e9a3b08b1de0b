import logging
import os
import sys

from pythonjsonlogger import jsonlogger


def setup_logging(level: str | None = None):
    """
    Configures and sets up structured JSON logging for the application.

    Initializes a JSON formatter that includes timestamp, level, logger name,
    message, trace_id and span_id. Replaces the default handlers of the root
    logger and the Uvicorn loggers with a single stdout stream handler so that
    every log line of the service shares one format.

    Args:
        level: Log level name. Falls back to the LOG_LEVEL environment
            variable, then INFO.

    Returns:
        logging.Logger: The configured root logger instance.
    """
    level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()

    formatter = jsonlogger.JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s"
    )
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = []
    root_logger.addHandler(stream_handler)

    for logger_name in ["uvicorn", "uvicorn.access", "uvicorn.error"]:
        u_logger = logging.getLogger(logger_name)
        u_logger.setLevel(level)

        u_logger.handlers = []

        u_logger.addHandler(stream_handler)

        u_logger.propagate = False

    return root_logger
