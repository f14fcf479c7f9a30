import logging
import sys
from contextlib import contextmanager
from typing import Any, Iterator

import structlog


def configure_logging(level: int | str = logging.INFO, *, json_output: bool | None = None) -> None:
    """Configure structlog/standard logging bridge.

    JSON lines by default when stderr is not a terminal, coloured console output otherwise.
    """

    if isinstance(level, str):
        level = level.upper()
    if json_output is None:
        json_output = not sys.stderr.isatty()

    renderer: Any = (
        structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(level=level, format="%(message)s", stream=sys.stderr)


@contextmanager
def bind_context(**kwargs: Any) -> Iterator[structlog.stdlib.BoundLogger]:
    """Bind fields to every log line emitted inside the block.

    The fields are unbound on exit, including when the block raises.
    """

    with structlog.contextvars.bound_contextvars(**kwargs):
        yield structlog.get_logger()
