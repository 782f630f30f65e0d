"""Logging setup shared by the CLI and library callers.

structlog events and stdlib records (joblib workers log through the
latter) are rendered by one ``ProcessorFormatter`` on a single handler.
"""

import logging
import sys
from typing import TextIO

import structlog

from grappolo.errors import InvalidInputError

# Third-party loggers that are chatty at DEBUG during parallel scoring.
QUIET_LOGGERS = ("joblib", "loky")


def _level_number(log_level: str) -> int:
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise InvalidInputError(f"unknown log level {log_level!r}")
    return level


def _pre_chain() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


def _renderer(json_output: bool, stream: TextIO) -> structlog.types.Processor:
    if json_output:
        return structlog.processors.JSONRenderer(sort_keys=True)
    return structlog.dev.ConsoleRenderer(colors=stream.isatty())


def configure_logging(
    json_output: bool = False,
    log_level: str = "INFO",
    stream: TextIO | None = None,
) -> None:
    """Install a single root handler rendering structlog and stdlib records.

    Args:
        json_output: Emit one JSON object per line instead of console text.
        log_level: Root level name such as ``"DEBUG"`` or ``"warning"``.
        stream: Destination, ``sys.stderr`` by default. Cluster reports go
            to stdout and must not be interleaved with log lines.

    Raises:
        InvalidInputError: If ``log_level`` is not a known level name.
    """
    level = _level_number(log_level)
    out = stream if stream is not None else sys.stderr
    pre_chain = _pre_chain()

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(out)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(json_output, out),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
