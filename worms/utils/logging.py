"""Console logging for the server and the headless demo."""

from __future__ import annotations

import logging
import sys

# Per-request access lines drown out turn logs below DEBUG.
_CHATTY = ("uvicorn.access",)


def setup_logging(level: str = "INFO") -> None:
    """Route every logger to stdout as ``time level logger | message``."""
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)-7s %(name)s | %(message)s", "%H:%M:%S"))

    root = logging.getLogger()
    for old in list(root.handlers):
        root.removeHandler(old)
    root.addHandler(handler)
    root.setLevel(numeric_level)

    quiet = numeric_level if numeric_level <= logging.DEBUG else max(numeric_level, logging.WARNING)
    for name in _CHATTY:
        logging.getLogger(name).setLevel(quiet)
