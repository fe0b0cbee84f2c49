import logging
import os
from collections import OrderedDict
from logging import Logger
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

import structlog

from globpath.config import get_globpath_config


def ifnone(val, default):
    """Return the given value if it is not None, else return the default."""
    return val if val is not None else default


def default_formatter(fmt: Optional[str] = None) -> logging.Formatter:
    """Returns a logging formatter with a default format if none is specified."""
    default_fmt = "[%(asctime)s] %(levelname)s: %(name)s: %(message)s"
    return logging.Formatter(fmt or default_fmt)


def setup_logger(
    name: str = "globpath",
    *,
    log_dir: Optional[Path] = None,
    logger_level: int = logging.DEBUG,
    stream_level: int = logging.ERROR,
    add_stream_handler: bool = True,
    file_level: int = logging.DEBUG,
    file_mode: str = "a",
    add_file_handler: bool = True,
    propagate: bool = False,
    max_bytes: int = 10 * 1024 * 1024,  # 10 MB
    backup_count: int = 5,
    use_structlog: Optional[bool] = None,
    structlog_json: Optional[bool] = True,
    structlog_bind: Optional[object] = None,
) -> Logger | structlog.BoundLogger:
    """Configure and initialize logging for portal components programmatically.

    Sets up a rotating file handler and a console handler on the given logger.
    Log file defaults to ~/.cache/globpath/{name}.log.

    Args:
        name: Logger name, defaults to "globpath".
        log_dir: Custom directory for log file.
        logger_level: Overall logger level.
        stream_level: StreamHandler level (e.g., ERROR).
        add_stream_handler: Whether to add a stream handler.
        file_level: FileHandler level (e.g., DEBUG).
        file_mode: Mode for file handler, default is 'a' (append).
        add_file_handler: Whether to add a file handler.
        propagate: Whether the logger should propagate messages to ancestor loggers.
        max_bytes: Maximum size in bytes before rotating log file.
        backup_count: Number of backup files to retain.
        use_structlog: Optional bool. If True, configure and return a structlog BoundLogger.
        structlog_json: Optional bool. If True, render JSON; otherwise use console/dev renderer.
        structlog_bind: Optional dict or callable(name)->dict to bind fields.

    Returns:
        Logger | structlog.BoundLogger: Configured logger instance.
    """
    config = get_globpath_config()
    use_structlog = ifnone(use_structlog, config.USE_STRUCTLOG)

    if name == "globpath":
        child_log_path = f"{name}.log"
    else:
        child_log_path = os.path.join("modules", f"{name}.log")

    root_dir = log_dir if log_dir else os.path.expanduser(config.LOG_DIR)
    log_file_path = os.path.join(root_dir, child_log_path)
    os.makedirs(Path(log_file_path).parent, exist_ok=True)

    logger = logging.getLogger(name)
    logger.handlers.clear()
    logger.setLevel(logger_level)
    logger.propagate = propagate

    if not use_structlog:
        if add_stream_handler:
            stream_handler = logging.StreamHandler()
            stream_handler.setLevel(stream_level)
            stream_handler.setFormatter(default_formatter())
            logger.addHandler(stream_handler)

        if add_file_handler:
            file_handler = RotatingFileHandler(
                filename=str(log_file_path), maxBytes=max_bytes, backupCount=backup_count, mode=file_mode
            )
            file_handler.setLevel(file_level)
            file_handler.setFormatter(default_formatter())
            logger.addHandler(file_handler)

        return logger

    renderer = structlog.processors.JSONRenderer() if structlog_json else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="ISO"),
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            _enforce_key_order_processor(["timestamp", "event", "level", "logger"]),
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # Structlog renders the full line, handlers only pass it through
    if add_stream_handler:
        stream_handler = logging.StreamHandler()
        stream_handler.setLevel(stream_level)
        stream_handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(stream_handler)

    if add_file_handler:
        file_handler = RotatingFileHandler(
            filename=str(log_file_path), maxBytes=max_bytes, backupCount=backup_count, mode=file_mode
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(file_handler)

    bound_logger = structlog.get_logger(name)
    if structlog_bind is not None:
        bind_dict = structlog_bind(name) if callable(structlog_bind) else dict(structlog_bind)
        if bind_dict:
            bound_logger = bound_logger.bind(**bind_dict)

    return bound_logger


def _enforce_key_order_processor(key_order: list[str]):
    def _processor(_logger, _method_name, event_dict):
        ordered = OrderedDict()
        for key in key_order:
            if key in event_dict:
                ordered[key] = event_dict.pop(key)
        for k in sorted(event_dict.keys()):
            ordered[k] = event_dict[k]
        return ordered

    return _processor


def get_logger(name: str | None = "globpath", use_structlog: bool | None = None, **kwargs):
    """Create or retrieve a named portal logger.

    Names are placed under the ``globpath`` namespace, so ``get_logger("auth_flow")``
    configures ``globpath.auth_flow``. The level comes from ``LOG_LEVEL`` unless
    ``logger_level`` is passed explicitly.

    Example:
        .. code-block:: python

            from globpath.core.logger import get_logger

            logger = get_logger("services.auth_api")
            logger.info("Session check returned no user")
    """
    if not name:
        name = "globpath"

    full_name = name if name.startswith("globpath") else f"globpath.{name}"
    kwargs.setdefault("propagate", True)
    kwargs.setdefault("logger_level", logging.getLevelName(get_globpath_config().LOG_LEVEL))
    return setup_logger(full_name, use_structlog=use_structlog, **kwargs)
