"""Logging utilities.

Purpose:
    Centralize logging configuration for the package.

Key responsibilities:
    - Provide helper to obtain package loggers.
    - Allow optional verbose/debug modes.

Notes/Edge cases:
    - :func:`configure_logging` is idempotent; calling it again only adjusts
      the level of the handler installed the first time.
    - The handler looks up ``sys.stderr`` on every record, so callers that
      swap stderr (test runners, CLI harnesses) are followed without ever
      touching a stream they have already closed.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

ROOT_LOGGER = "styledpdf"

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_HANDLER_ATTR = "_styledpdf_handler"


class _StderrHandler(logging.StreamHandler):
    """Stream handler bound to whatever ``sys.stderr`` is at emit time."""

    @property  # type: ignore[override]
    def stream(self) -> TextIO:
        return sys.stderr

    @stream.setter
    def stream(self, value: TextIO) -> None:
        pass


def get_logger(name: str) -> logging.Logger:
    """Return a logger below the package root logger."""

    if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a single stderr handler to the package root logger."""

    root = logging.getLogger(ROOT_LOGGER)
    level = logging.DEBUG if verbose else logging.INFO
    handler = next((h for h in root.handlers if getattr(h, _HANDLER_ATTR, False)), None)
    if handler is None:
        handler = _StderrHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        setattr(handler, _HANDLER_ATTR, True)
        root.addHandler(handler)
    handler.setLevel(level)
    root.setLevel(level)
    return root


__all__ = ["ROOT_LOGGER", "get_logger", "configure_logging"]
