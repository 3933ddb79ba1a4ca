"""Loguru sinks for the citation tools: stderr always, rotating files on request."""

import sys
from pathlib import Path
from loguru import logger

LOG_DIR = Path(__file__).parent.parent / '.data' / 'logs'

CONSOLE_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{line} | {message}"

_logging_configured = False


def _add_file_sink(path: Path, level: str, rotation_size_mb: int, retention_count: int):
    logger.add(
        str(path),
        format=FILE_FORMAT,
        level=level,
        rotation=f"{rotation_size_mb} MB",
        retention=retention_count,
        compression="zip",
        enqueue=True,
    )


def setup_logging(
    log_level: str = "INFO",
    enable_file_logging: bool = False,
    rotation_size_mb: int = 10,
    retention_count: int = 5,
    verbose: bool = False,
    log_dir: Path = None,
):
    """
    Replace loguru's default sink. Only the first call has any effect.

    With file logging on, every record goes to mla_citations.log and
    errors alone to errors.log, both under ``log_dir`` (default .data/logs).
    """
    global _logging_configured
    if _logging_configured:
        return

    level = "DEBUG" if verbose else log_level.upper()
    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    if enable_file_logging:
        directory = Path(log_dir) if log_dir else LOG_DIR
        directory.mkdir(parents=True, exist_ok=True)
        _add_file_sink(directory / "mla_citations.log", "DEBUG", rotation_size_mb, retention_count)
        _add_file_sink(directory / "errors.log", "ERROR", rotation_size_mb, retention_count)
        logger.info(f"Writing logs to {directory}")

    _logging_configured = True
    logger.debug(f"Logging initialized (level={level})")


def reset_logging():
    """Drop all sinks so setup_logging can run again."""
    global _logging_configured
    logger.remove()
    _logging_configured = False


def get_log_directory() -> Path:
    return LOG_DIR


def init_from_config(verbose: bool = False):
    """Set up logging from the LOG_* settings in .env."""
    from .config import config
    setup_logging(
        log_level=config.LOG_LEVEL,
        enable_file_logging=config.ENABLE_FILE_LOGGING,
        rotation_size_mb=config.LOG_ROTATION_SIZE_MB,
        retention_count=config.LOG_RETENTION_COUNT,
        verbose=verbose or config.VERBOSE,
    )


__all__ = [
    'setup_logging',
    'reset_logging',
    'get_log_directory',
    'init_from_config',
]
