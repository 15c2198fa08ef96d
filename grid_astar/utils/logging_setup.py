"""Apply the ``logging`` section of the configuration."""

from __future__ import annotations

import logging
from typing import Optional

from .. import config
from ..config import Config

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(cfg: Optional[Config] = None, force: bool = True) -> None:
    """Configure the root logger and per-module levels from ``cfg``.

    The library itself never calls this; applications and benchmark scripts
    opt in.
    """

    cfg = cfg or config.CONFIG
    numeric_level = getattr(logging, cfg.logging.global_level.upper(), None)
    valid_level = isinstance(numeric_level, int)
    logging.basicConfig(
        level=numeric_level if valid_level else logging.WARNING,
        format=LOG_FORMAT,
        force=force,
    )
    if not valid_level:
        logger.warning("Invalid global log level '%s' in config.", cfg.logging.global_level)

    for module_name, level_str in cfg.logging.module_levels.items():
        module_numeric_level = getattr(logging, str(level_str).upper(), None)
        if isinstance(module_numeric_level, int):
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning("Invalid log level '%s' for module '%s' in config.", level_str, module_name)


__all__ = ["configure_logging", "LOG_FORMAT"]
