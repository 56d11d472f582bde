"""Logging helpers."""

import logging
import sys
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False


def configure_logging(level: Union[int, str] = logging.INFO, stream: Optional[object] = None) -> None:
    """
    Attach a single stream handler to the artscope root logger.
    
    Calling this more than once only updates the level.
    """
    global _configured
    root = logging.getLogger("artscope")
    root.setLevel(level)
    if _configured:
        return
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
