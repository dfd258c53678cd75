import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from ..api.config.get_home_dir import get_home_dir

# Prevent multiple configurations
_CONFIGURED = False

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
}


def configure_logging(ccr_home: Path | None = None, level: str = "INFO", log_name: str = "ccr.log") -> None:
    """Configure unified CCR logging.

    Args:
        ccr_home: Path to CCR home directory. If None, derived from environment.
        level: Level name as used in the config file (DEBUG, INFO, WARN, ERROR).
        log_name: Log file path relative to ccr_home.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if ccr_home is None:
        ccr_home = get_home_dir()

    log_file = ccr_home / log_name
    # Ensure directory exists
    log_file.parent.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger("ccr")
    root_logger.setLevel(_LEVELS.get(level.upper(), logging.INFO))

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True


def reset_logging() -> None:
    """Drop handlers installed by configure_logging (used when CCR_HOME changes)."""
    global _CONFIGURED
    root_logger = logging.getLogger("ccr")
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()
    _CONFIGURED = False
