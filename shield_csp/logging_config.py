"""structlog output for the ``shield_csp`` loggers.

Only the ``shield_csp`` stdlib logger is given a handler; the host
application's root logger is left alone.
"""

from __future__ import annotations

import logging
import sys

import structlog

from shield_csp.config.loader import CspSettings, get_settings

LOGGER_NAME = "shield_csp"


def _add_header_mode(
    logger: logging.Logger, method_name: str, event_dict: dict
) -> dict:
    """Tag header events with ``report_only`` so both header kinds can be filtered apart."""
    header = event_dict.get("header")
    if header is not None:
        event_dict["report_only"] = header.endswith("-Report-Only")
    return event_dict


def _processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        _add_header_mode,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.format_exc_info,
    ]


def setup_logging(settings: CspSettings | None = None) -> logging.Logger:
    """Route ``shield_csp`` events through structlog per ``CSP_LOG_LEVEL`` / ``CSP_LOG_JSON``.

    Safe to call more than once; the handler is replaced, not stacked.
    """
    settings = settings or get_settings()

    if settings.log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[*_processors(), structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    csp_logger = logging.getLogger(LOGGER_NAME)
    csp_logger.handlers[:] = [handler]
    csp_logger.propagate = False
    csp_logger.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))
    return csp_logger
