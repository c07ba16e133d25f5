"""structlog configuration for matchkit.

matchkit modules only emit through ``logging.getLogger(__name__)`` and never
configure logging on import. A test suite that wants to see what matchkit is
doing (failed assertions, exceptions captured by ``throws``, plugin loading)
calls :func:`configure_logging` once, typically from ``conftest.py``::

    from matchkit import configure_logging

    configure_logging()                # verbose/log_json from MatchkitSettings
    configure_logging(verbose=True)    # explicit override

Records are rendered by structlog to stderr, either for humans (console
renderer) or as JSON lines.
"""

from __future__ import annotations

import logging
import sys

import structlog

MATCHKIT_LOGGER = "matchkit"

_SHARED_PROCESSORS: tuple[structlog.types.Processor, ...] = (
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
)


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def _stderr_handler(log_json: bool) -> logging.Handler:
    """A stderr handler that renders both structlog and stdlib records."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=list(_SHARED_PROCESSORS),
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )
    return handler


def configure_logging(
    *,
    verbose: bool | None = None,
    log_json: bool | None = None,
) -> None:
    """Route matchkit's log records through structlog to stderr.

    Calling it again replaces the previous configuration.

    Args:
        verbose: Show matchkit DEBUG records; otherwise WARNING and above.
            None takes ``verbose`` from :class:`MatchkitSettings`.
        log_json: Render JSON lines instead of console output. None takes
            ``log_json`` from :class:`MatchkitSettings`.
    """
    if verbose is None or log_json is None:
        from matchkit.config.settings import get_settings

        settings = get_settings()
        verbose = settings.verbose if verbose is None else verbose
        log_json = settings.log_json if log_json is None else log_json

    structlog.configure(
        processors=[
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(_stderr_handler(log_json))
    root_logger.setLevel(logging.WARNING)

    logging.getLogger(MATCHKIT_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
    logging.getLogger("pluggy").setLevel(logging.WARNING)
