"""Operator log.

Every line reads ``[  1.234s F000042] [TAG] message``: seconds since start,
then the number of frames the main loop has drawn so far. Failures use a
``[TAG][ERR]`` prefix via ``log_error``.
"""

from __future__ import annotations
import sys
import time
from typing import Optional, TextIO


class Logger:
    """Writes tagged lines to a stream (stdout unless one is given)."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream
        self.started = time.perf_counter()
        self.frame = 0

    def write(self, msg: str) -> None:
        elapsed = time.perf_counter() - self.started
        line = f"[{elapsed:7.3f}s F{self.frame:06d}] {msg}\n"
        try:
            out = self.stream or sys.stdout
            out.write(line)
            out.flush()
        except (OSError, ValueError):
            # stdout closed or detached (e.g. launched without a console)
            sys.stderr.write(line)


_logger: Optional[Logger] = None


def get_logger() -> Logger:
    global _logger
    if _logger is None:
        _logger = Logger()
    return _logger


def set_logger(logger: Optional[Logger]) -> None:
    """Install ``logger`` globally. ``None`` goes back to a fresh stdout logger."""
    global _logger
    _logger = logger


def log(msg: str) -> None:
    get_logger().write(msg)


def log_error(tag: str, err: object) -> None:
    """Log a failure as ``[TAG][ERR] err``."""
    get_logger().write(f"[{tag}][ERR] {err}")


def get_frame() -> int:
    return get_logger().frame


def increment_frame() -> None:
    get_logger().frame += 1
