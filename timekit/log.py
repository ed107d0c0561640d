from __future__ import annotations
import sys
from typing import Any, Optional

from loguru import logger

from .config import LogConfig

_LOGGER_CONFIGURED = False


def setup_logging(cfg: Optional[LogConfig] = None, sink: Any = None) -> None:
    """
    Configure the global loguru logger once and enable timekit's messages.
    The package is disabled on import, so nothing is emitted until this runs.
    """
    global _LOGGER_CONFIGURED
    cfg = cfg or LogConfig()

    logger.remove()
    logger.add(
        sink=sink if sink is not None else sys.stderr,
        level=cfg.level.upper(),
        format=cfg.format,
        backtrace=True,
        diagnose=False,
    )
    logger.enable("timekit")

    if not _LOGGER_CONFIGURED:
        logger.debug("logger initialized")
    _LOGGER_CONFIGURED = True
