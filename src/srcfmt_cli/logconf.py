import logging
import sys
from contextlib import contextmanager
from typing import Iterator

PATTERN = "%(message)s"


@contextmanager
def console_logging(level: str = "INFO") -> Iterator[logging.Handler]:
    """Attach a stderr handler to the root logger for the length of one run."""
    root = logging.getLogger()
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(PATTERN))
    previous_level = root.level
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.addHandler(handler)
    try:
        yield handler
    finally:
        root.removeHandler(handler)
        root.setLevel(previous_level)
