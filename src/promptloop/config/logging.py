"""structlog configuration for promptloop.

Logs never share a stream with answers: records go to stderr (or an
explicit stream) in one of two renderings:
- Human (default): console renderer, colored when the stream is a TTY
- JSON (--log-json): one structured JSON object per line

Library modules log through stdlib ``logging.getLogger(__name__)``.  The
reader binds ``prompt`` and ``secure`` with :func:`reader_context`, and the
shared processor chain merges them into every record it emits.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TextIO

import structlog

LOGGER_NAME = "promptloop"


@contextmanager
def reader_context(*, prompt: str | None, secure: bool) -> Iterator[None]:
    """Bind the active prompt to every log record emitted inside the block.

    Prompts of hidden reads are still logged; typed input never is.
    """
    with structlog.contextvars.bound_contextvars(prompt=prompt, secure=secure):
        yield


def _level_for(*, verbose: bool, quiet: bool) -> int:
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.ERROR
    return logging.WARNING


def configure_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    log_json: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Configure structlog processors and route ``promptloop`` records.

    Args:
        verbose: DEBUG-level output, including one record per read attempt.
            Wins over *quiet*.
        quiet: Only ERROR and above.
        log_json: Use the JSON renderer instead of the console renderer.
        stream: Destination; defaults to the current ``sys.stderr``.
    """
    target = stream if stream is not None else sys.stderr

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=target.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(target)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger(LOGGER_NAME).setLevel(_level_for(verbose=verbose, quiet=quiet))
