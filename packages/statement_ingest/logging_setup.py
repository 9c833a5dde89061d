"""Package-root logging for ``statement_ingest``.

Entrypoints call :func:`configure_logging` once with the resolved
:class:`~statement_ingest.config.IngestSettings`; the level comes from
``settings.log_level`` and nothing here reads the environment. Library modules
only call :func:`get_logger` with a dotted name under ``statement_ingest`` and
never attach handlers of their own, so an embedding application that skips
``configure_logging`` sees no output and no "no handler" warnings.
"""

from __future__ import annotations

import logging
import sys
from typing import IO

from .config import IngestSettings

_ROOT = "statement_ingest"
DEFAULT_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"

# Handler installed by configure_logging; None until then.
_handler: logging.Handler | None = None


def configure_logging(
    settings: IngestSettings | None = None,
    *,
    fmt: str = DEFAULT_FORMAT,
    stream: IO[str] | None = None,
) -> logging.Logger:
    """Send package logs to ``stream`` (stderr when omitted) at the settings' level.

    Later calls are no-ops until :func:`reset_logging`. Records stop
    propagating to the root logger so a host's own handlers don't print them
    twice.
    """

    global _handler
    root = logging.getLogger(_ROOT)
    if _handler is not None:
        return root

    level = (settings or IngestSettings()).log_level
    for h in [h for h in root.handlers if isinstance(h, logging.NullHandler)]:
        root.removeHandler(h)

    _handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    _handler.setFormatter(logging.Formatter(fmt))
    root.addHandler(_handler)
    root.setLevel(level)
    root.propagate = False
    return root


def reset_logging() -> None:
    """Undo :func:`configure_logging` and drop any placeholder handler."""

    global _handler
    root = logging.getLogger(_ROOT)
    for h in list(root.handlers):
        root.removeHandler(h)
    root.setLevel(logging.NOTSET)
    root.propagate = True
    _handler = None


def get_logger(name: str) -> logging.Logger:
    root = logging.getLogger(_ROOT)
    if _handler is None and not root.handlers:
        root.addHandler(logging.NullHandler())
    return logging.getLogger(name)


__all__ = ["DEFAULT_FORMAT", "configure_logging", "get_logger", "reset_logging"]
