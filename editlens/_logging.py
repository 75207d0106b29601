"""
Opt-in logging for the matching and hunk-building algorithms.

These functions run synchronously inside UI callbacks, so they stay silent
unless the caller asks otherwise:

    from editlens._logging import resolve_logger

    def find_something(..., logger=None, log: bool = False):
        log = resolve_logger(logger=logger, enabled=log, name=__name__)
        log.debug("scanning %d lines", n)  # no-op unless enabled or logger passed

Orchestration modules use a plain module-level ``logging.getLogger(__name__)``.
"""
from __future__ import annotations

import logging


class NoopLogger:
    def debug(self, *args, **kwargs):  # type: ignore[no-untyped-def]
        pass

    info = warning = error = exception = critical = debug


def _ensure_default_handler(lg: logging.Logger) -> None:
    # Let logs bubble to the root so host handlers (and pytest's caplog) see them.
    # No handler of our own, to avoid duplicate output.
    lg.propagate = True


def resolve_logger(
    logger: logging.Logger | None = None,
    *,
    enabled: bool = False,
    name: str | None = None,
    level: int = logging.DEBUG,
) -> logging.Logger | NoopLogger:
    """
    Pick the logger a call should write to.

    - A caller-supplied `logger` always wins.
    - Else, when `enabled` is True, return the named stdlib logger at `level`.
    - Else return a NoopLogger.
    """
    if logger is not None:
        return logger
    if enabled:
        lg = logging.getLogger(name or "editlens")
        lg.setLevel(level)
        _ensure_default_handler(lg)
        return lg
    return NoopLogger()
