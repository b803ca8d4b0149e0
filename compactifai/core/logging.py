"""Request-scoped logging for the client.

Every client call binds a short request ID to the current context so that
the debug and warning lines of one call can be told apart when many calls
run concurrently. ``setup_logging`` is an opt-in convenience for scripts; it
only touches the ``compactifai`` logger and leaves the host application's
logging configuration alone.
"""

import logging
import sys
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, TextIO

LOGGER_NAME = "compactifai"
LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(request_id)s] %(name)s - %(message)s"

request_id_var: ContextVar[str] = ContextVar("request_id", default="-")

# Handler installed by setup_logging, replaced on repeated calls
_handler: logging.Handler | None = None


class RequestIDFilter(logging.Filter):
    """Stamp each record with the ID of the client call that emitted it."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get("-")  # type: ignore[attr-defined]
        return True


def generate_request_id() -> str:
    return uuid.uuid4().hex[:12]


@contextmanager
def bind_request_id(request_id: str | None = None) -> Iterator[str]:
    """Bind a request ID to the current context for the duration of a call."""
    rid = request_id or generate_request_id()
    token = request_id_var.set(rid)
    try:
        yield rid
    finally:
        request_id_var.reset(token)


def setup_logging(level: int | str = "INFO", stream: TextIO | None = None) -> logging.Logger:
    """Send the client's log records to a stream, tagged with request IDs.

    Calling this again replaces the handler installed by the previous call.
    Handlers on the root logger or on any other logger are not touched, and
    the ``compactifai`` logger stops propagating so records are not printed
    twice.

    Args:
        level: A logging constant or a level name such as "DEBUG"
        stream: Destination stream; defaults to stderr

    Returns:
        The configured ``compactifai`` logger
    """
    global _handler

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.addFilter(RequestIDFilter())

    logger = logging.getLogger(LOGGER_NAME)
    if _handler is not None:
        logger.removeHandler(_handler)
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    _handler = handler
    return logger
