"""
DocumentStack: Package logger with step duration tracking.

The library only attaches a NullHandler; applications (and the CLI) call
configure_logging() to get output.
"""

import logging
import time
from contextlib import contextmanager
from typing import Generator

LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(message)s"
LOG_DATEFMT = "%H:%M:%S"

logger = logging.getLogger("documentstack")
logger.addHandler(logging.NullHandler())


def configure_logging(level: int = logging.INFO) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATEFMT)
    logger.setLevel(level)


@contextmanager
def step_timer(step_name: str) -> Generator[None, None, None]:
    """Log how long a CLI step took, whether or not it succeeded."""
    logger.info("%s ...", step_name)
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info("%s took %.0f ms", step_name, elapsed_ms)
