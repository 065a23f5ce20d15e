"""Logging setup for the league command line tools.

Engine modules log under the 'dartsleague' logger tree
(e.g. 'dartsleague.standings'); handlers are only attached here.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

DETAILED_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s'
SIMPLE_FORMAT = '%(levelname)s: %(message)s'


def setup_logging(
    level: int = logging.INFO,
    log_dir: Optional[Path] = None,
) -> logging.Logger:
    """
    Attach console (stderr) and optional file handlers to the package logger.

    Args:
        level: Logging level for every handler
        log_dir: When given, also write a timestamped league_<ts>.log there

    Returns:
        The 'dartsleague' logger
    """
    logger = logging.getLogger('dartsleague')
    logger.setLevel(level)
    logger.handlers = []

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(logging.Formatter(SIMPLE_FORMAT))
    logger.addHandler(console)

    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / f'league_{datetime.now():%Y%m%d_%H%M%S}.log'
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(DETAILED_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
        logger.addHandler(file_handler)

    return logger
