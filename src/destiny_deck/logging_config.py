"""Logging setup for command-line use of the engine."""
import logging
import sys
from typing import Optional

from destiny_deck.config import get_config


def setup_logging(level: Optional[str] = None, config_name: Optional[str] = None) -> None:
    """
    Set up root logging.

    Args:
        level: Level name such as 'DEBUG'; the configured level when omitted
        config_name: Configuration to read defaults from
    """
    cfg = get_config(config_name)
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    logging.basicConfig(
        level=(level or cfg.LOG_LEVEL).upper(),
        format=cfg.LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stderr)
        ],
        force=True
    )
