# config.py
import logging
import os

# Pixels of exactly this RGB value are open floor; anything else is a wall
WHITE = (255, 255, 255)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_LEVEL = os.getenv("PAPARAZZO_LOG_LEVEL", "INFO").upper()

# Benchmark defaults
DEFAULT_REPEAT = 5

# How far to look for a free cell when a scenario endpoint lands on a wall
NEAREST_UNBLOCKED_RADIUS = 25


def configure_logging(level=None) -> None:
    """Configure the root logger. ``level`` may be a name or a number."""
    if level is None:
        level = LOG_LEVEL
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)
