"""Logging utilities."""

import logging
import sys
from pathlib import Path
from datetime import datetime
from typing import Any, Dict, Union


def setup_logger(name: str = 'profile_hough', log_level: Union[int, str] = logging.INFO,
                log_file: str = None) -> logging.Logger:
    """Setup logger with console and optional file handler.

    log_level may be a level number or a name such as "debug".
    """
    if isinstance(log_level, str):
        log_level = log_level.upper()
    logger = logging.getLogger(name)
    logger.setLevel(log_level)

    # repeated setup replaces the handlers instead of duplicating output
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def create_session_log_file(log_dir: str = 'logs') -> str:
    """Create timestamped log file for session."""
    Path(log_dir).mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
    return f"{log_dir}/profile_hough_{timestamp}.log"


def setup_logger_from_config(config: Dict[str, Any], name: str = 'profile_hough',
                             session_log_dir: str = None) -> logging.Logger:
    """
    Setup logger from the ``logging`` section of a merged config.

    Args:
        config: Config as returned by merge_config / load_config
        name: Logger name
        session_log_dir: When the config names no file, write a timestamped
            session log here (optional)

    Returns:
        Configured logger
    """
    log_cfg = config["logging"]
    log_file = log_cfg.get("file")
    if not log_file and session_log_dir:
        log_file = create_session_log_file(session_log_dir)
    return setup_logger(name, log_level=log_cfg.get("level", logging.INFO),
                        log_file=log_file)
