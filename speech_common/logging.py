import logging
import sys

from pythonjsonlogger.json import JsonFormatter

SERVICE_NAME = "speech-analytics"
HANDLER_NAME = "speech-analytics-json"
UVICORN_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error")


def _json_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(
        JsonFormatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s",
            rename_fields={"asctime": "timestamp", "levelname": "level"},
            static_fields={"service": SERVICE_NAME},
        )
    )
    return handler


def _installed_handler(logger: logging.Logger) -> logging.Handler | None:
    for handler in logger.handlers:
        if handler.get_name() == HANDLER_NAME:
            return handler
    return None


def setup_logging(level: str | int | None = None) -> logging.Logger:
    """
    Routes application and Uvicorn logs through one JSON stdout handler.

    Safe to call from every module at import: the handler is installed once
    and later calls reuse it. Handlers added by others (test capture, APM
    agents) are left in place.

    Args:
        level: Log level name or number. When omitted, the current level is
            kept, starting from INFO on first setup.

    Returns:
        logging.Logger: The root logger.
    """
    root_logger = logging.getLogger()
    handler = _installed_handler(root_logger)
    if handler is None:
        handler = _json_handler()
        root_logger.addHandler(handler)
        root_logger.setLevel(logging.INFO)

        for logger_name in UVICORN_LOGGERS:
            u_logger = logging.getLogger(logger_name)
            u_logger.handlers = [handler]
            u_logger.propagate = False
            u_logger.setLevel(logging.INFO)

    if level is not None:
        root_logger.setLevel(level)
        for logger_name in UVICORN_LOGGERS:
            logging.getLogger(logger_name).setLevel(level)

    return root_logger
