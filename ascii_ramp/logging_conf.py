"""
Central logging setup for ascii_ramp.
"""

import logging
from typing import Union

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def setup_logging(level: Union[int, str] = "WARNING") -> None:
    """Configure root logging. Accepts a level name ("DEBUG") or number."""
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(level=level, format=LOG_FORMAT)
