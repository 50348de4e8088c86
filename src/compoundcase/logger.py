from __future__ import annotations

import logging
import sys
from typing import NoReturn, Optional, Union

import colorlog

from .config import TRACE, Settings, load_settings
from .errors import CompoundTokenizationError


class AppLogger(logging.Logger):
    def trace(self, message: str, *args, **kwargs) -> None:
        if self.isEnabledFor(TRACE):
            self._log(TRACE, message, args, **kwargs)

    def reject(
        self,
        message: str,
        *,
        exc: Optional[Union[BaseException, type[BaseException]]] = None,
    ) -> NoReturn:
        """
        Record a rejected argument at DEBUG level and raise.
        If ``exc`` is omitted a CompoundTokenizationError carrying ``message`` is raised.
        """
        self.debug(message, stacklevel=2)
        if exc is None:
            raise CompoundTokenizationError(message)
        if isinstance(exc, type):
            raise exc(message)
        raise exc


class ContextFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.classname = record.module
        record.funcname = record.funcName
        return True


def _ensure_trace_level() -> None:
    if logging.getLevelName(TRACE) != "TRACE":
        logging.addLevelName(TRACE, "TRACE")


def _build_formatter(settings: Settings) -> logging.Formatter:
    base_format = "[%(levelname)s] %(asctime)s - %(classname)s:%(lineno)d %(funcname)s(): %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"
    if not settings.log_colors:
        return logging.Formatter(fmt=base_format, datefmt=date_format)
    return colorlog.ColoredFormatter(
        fmt="%(log_color)s" + base_format,
        datefmt=date_format,
        log_colors={
            "TRACE": "white",
            "DEBUG": "cyan",
            "INFO": "green",
            "WARNING": "yellow",
            "ERROR": "red",
            "CRITICAL": "bold_red",
        },
    )


def setup_logger(name: str, settings: Settings | None = None) -> AppLogger:
    _ensure_trace_level()
    previous = logging.getLoggerClass()
    logging.setLoggerClass(AppLogger)
    try:
        logger = logging.getLogger(name)
    finally:
        logging.setLoggerClass(previous)
    if getattr(logger, "_logger_initialized", False):  # type: ignore[attr-defined]
        return logger  # type: ignore[return-value]

    settings = settings or load_settings()
    logger.setLevel(settings.level)
    logger.propagate = False

    formatter = _build_formatter(settings)

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setLevel(logging.NOTSET)
    stdout_handler.addFilter(lambda record: record.levelno < logging.ERROR)
    stdout_handler.setFormatter(formatter)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(logging.ERROR)
    stderr_handler.setFormatter(formatter)

    logger.addHandler(stdout_handler)
    logger.addHandler(stderr_handler)
    logger.addFilter(ContextFilter())
    logger._logger_initialized = True  # type: ignore[attr-defined]
    return logger  # type: ignore[return-value]


logger: AppLogger = setup_logger("compoundcase")

__all__ = ["logger", "setup_logger", "AppLogger"]
