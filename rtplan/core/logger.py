"""Unified logging for rtplan with console and file output.

Console logging goes to stderr so planned documents printed on stdout
(``--format yaml``/``json``) can be piped straight into the target config.
"""
import logging
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

console = Console(stderr=True)

LOG_DIR = Path("/var/log/rtplan")
LOG_FILE = LOG_DIR / "rtplan.log"
FALLBACK_LOG_FILE = Path("/tmp/rtplan.log")

ROOT_LOGGER = "rtplan"

_file_logging_configured = False
_level = logging.INFO


def setup_file_logging(log_file: Optional[str] = None, verbose: bool = False) -> Optional[Path]:
    """Mirror rtplan log records into a plain-text file.

    Returns the file actually used, or None if file logging was already set
    up. An unusable log directory falls back to /tmp/rtplan.log.
    """
    global _file_logging_configured

    if _file_logging_configured:
        return None

    target_log_file = Path(log_file) if log_file else LOG_FILE
    try:
        target_log_file.parent.mkdir(parents=True, exist_ok=True)
    except OSError:
        target_log_file = FALLBACK_LOG_FILE

    root_logger = logging.getLogger(ROOT_LOGGER)
    file_handler = logging.FileHandler(target_log_file)
    file_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    file_handler.setFormatter(logging.Formatter(
        "%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    root_logger.addHandler(file_handler)

    _file_logging_configured = True

    root_logger.info(f"rtplan logging initialized: {target_log_file}")
    return target_log_file


def set_verbose(verbose: bool) -> None:
    """Switch every rtplan logger, existing and future, between INFO and DEBUG."""
    global _level
    _level = logging.DEBUG if verbose else logging.INFO

    logging.getLogger(ROOT_LOGGER).setLevel(_level)
    for name, logger in list(logging.root.manager.loggerDict.items()):
        if name.startswith(f"{ROOT_LOGGER}.") and isinstance(logger, logging.Logger):
            logger.setLevel(_level)


def get_logger(name: str) -> logging.Logger:
    """Get a logger with Rich console output at the current verbosity.

    Args:
        name: Logger name (typically __name__)

    Note:
        File logging must be enabled separately via setup_file_logging()
    """
    logger = logging.getLogger(name)

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(console=console, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.setLevel(_level)

    return logger
