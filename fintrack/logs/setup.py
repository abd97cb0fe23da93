"""
Structured Logging

DESIGN DECISION: All modules log through structlog, routed via the
standard library so the level filter and handlers are configured once.

The logger:
- Renders JSON lines by default (console rendering for local debugging)
- Is configured once per process; later calls are no-ops unless forced
- Never raises into the caller
"""

import logging
import sys
from typing import Optional

import structlog

from fintrack.config import get_settings


_CONFIGURED = False


def configure_logging(
    level: Optional[str] = None,
    json_output: Optional[bool] = None,
    force: bool = False,
) -> None:
    """
    Configure structlog and the stdlib root handler.

    Args:
        level: Minimum level; defaults to the ``log_level`` setting, or
               DEBUG in debug mode.
        json_output: JSON lines when True, coloured console otherwise;
                     defaults to the ``log_json`` setting.
        force: Reconfigure even if already configured.
    """
    global _CONFIGURED
    if _CONFIGURED and not force:
        return

    app_settings = get_settings().app
    level = (level or app_settings.effective_log_level).upper()
    if json_output is None:
        json_output = app_settings.log_json

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level, logging.INFO),
        force=force,
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    _CONFIGURED = True


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a named structured logger."""
    return structlog.get_logger(name)
