from __future__ import annotations

import logging
import os
import sys

import structlog

LOG_LEVEL_ENV = "PRICE_SLICE_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


def _level_from_env() -> int:
  name = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).strip().upper()
  return logging.getLevelNamesMapping().get(name, logging.WARNING)


def setup_logging() -> None:
  """Configure logging for the application."""
  level = _level_from_env()
  structlog.configure(
    processors=[
      structlog.contextvars.merge_contextvars,
      structlog.processors.add_log_level,
      structlog.processors.TimeStamper(fmt="%H:%M:%S"),
      structlog.dev.ConsoleRenderer(),
    ],
    wrapper_class=structlog.make_filtering_bound_logger(level),
    logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    cache_logger_on_first_use=True,
  )
  structlog.get_logger().debug(
    "Logging initialized from environment", level=logging.getLevelName(level)
  )
