"""structlog setup driven by :class:`FormgridSettings`.

Everything goes to stderr so stdout stays reserved for command results.
Only the ``formgrid`` logger tree follows ``--verbose``/``--quiet``; other
libraries stay at WARNING.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from formgrid.config.settings import FormgridSettings

LOGGER_NAME = "formgrid"


def log_level(settings: FormgridSettings) -> int:
    """Level of the ``formgrid`` logger: DEBUG when verbose, ERROR when quiet."""
    if settings.verbose:
        return logging.DEBUG
    if settings.quiet:
        return logging.ERROR
    return logging.WARNING


def _pre_chain() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]


def _final_processors(log_json: bool) -> list[structlog.types.Processor]:
    if log_json:
        return [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    return [structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())]


def configure_logging(settings: FormgridSettings) -> None:
    """Route structlog and stdlib records through one stderr handler.

    Safe to call once per CLI invocation: the root handler is replaced, not
    stacked.
    """
    pre_chain = _pre_chain()
    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                *_final_processors(settings.log_json),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.WARNING)
    logging.getLogger(LOGGER_NAME).setLevel(log_level(settings))
