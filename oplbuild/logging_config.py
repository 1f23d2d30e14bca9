"""Logging setup for the results build.

Everything logs under the 'oplbuild' logger. Per-row skip messages go to the
'oplbuild.meet_parser.rows' child so a real export (hundreds of lines, many
blank or incomplete) doesn't drown the per-file messages at -v; they only
show at -vv.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

ROOT_LOGGER = 'oplbuild'
ROW_LOGGER = 'oplbuild.meet_parser.rows'

CONSOLE_FORMAT = '%(levelname)s: %(message)s'
FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def verbosity_to_levels(verbose: int = 0, quiet: bool = False) -> tuple[int, int]:
    """
    Map CLI verbosity to (build level, row level).

    quiet -> WARNING; default -> INFO; -v -> DEBUG for files;
    -vv -> DEBUG for rows too.
    """
    if quiet:
        return logging.WARNING, logging.WARNING
    if verbose >= 2:
        return logging.DEBUG, logging.DEBUG
    if verbose == 1:
        return logging.DEBUG, logging.INFO
    return logging.INFO, logging.INFO


def setup_logging(
    log_dir: Optional[Path] = None,
    level: int = logging.INFO,
    row_level: Optional[int] = None,
    log_to_file: bool = False,
) -> logging.Logger:
    """
    Configure the 'oplbuild' logger for one build run.

    Args:
        log_dir: Directory for the build log (default: ./logs)
        level: Level for the build as a whole
        row_level: Level for per-row skip messages (default: no more
            verbose than INFO, whatever `level` is)
        log_to_file: Also write build_<timestamp>.log into log_dir

    Returns:
        The configured 'oplbuild' logger
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    logger.handlers = []

    if row_level is None:
        row_level = max(level, logging.INFO)
    logging.getLogger(ROW_LOGGER).setLevel(row_level)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console_handler)

    if log_to_file:
        log_dir = Path(log_dir or 'logs')
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / f'build_{datetime.now().strftime("%Y%m%d_%H%M%S")}.log'
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    """Logger for a build module, e.g. get_logger('oplbuild.aggregator')."""
    return logging.getLogger(name)
