"""
Counsel Connect - Logging Configuration

``setup_logging`` attaches a single console handler to the root logger.
Calling it again is a no-op, so the app factory and the test suite can
both invoke it safely.
"""

import logging


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger once with a timestamped console handler."""
    logger = logging.getLogger()
    if logger.handlers:
        return

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(handler)
