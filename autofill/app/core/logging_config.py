"""
Logging configuration for the matching engine.
The engine itself never configures logging; host processes call setup_logging once.
"""
import logging
import sys

from autofill.app.core.config import settings

# Per-rule candidate scores are emitted here at DEBUG
MATCH_TRACE_LOGGER = "autofill.services.field_matcher"


def setup_logging(level: str | None = None, match_trace: bool | None = None) -> logging.Logger:
    """
    Configure engine logging. Returns the package logger.

    With match tracing on (argument, else AUTOFILL_MATCH_TRACE_LOGGING), the field
    matcher logger is opened to DEBUG whatever the package level is.
    """
    level_val = level or settings.log_level
    logging.basicConfig(
        level=getattr(logging, level_val.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    trace = settings.match_trace_logging if match_trace is None else match_trace
    if trace:
        settings.match_trace_logging = True
        logging.getLogger(MATCH_TRACE_LOGGER).setLevel(logging.DEBUG)
    return logging.getLogger("autofill")


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the engine namespace, e.g. get_logger("services.field_matcher")."""
    return logging.getLogger(f"autofill.{name}")
