"""
Configuration module for the MLA citation generator.

Centralizes all configuration settings, environment variables, and defaults.
Settings can be overridden via environment variables or .env file.

Usage:
    from mla_citations.config import config

    level = config.LOG_LEVEL
    notice = config.COPIED_NOTICE_SECONDS
"""

import os
from pathlib import Path
from dataclasses import dataclass, field

from dotenv import load_dotenv

# Load from project root .env file
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)


def _get_env(key: str, default: str = "") -> str:
    """Get environment variable with default."""
    return os.environ.get(key, default)


def _get_env_bool(key: str, default: bool = False) -> bool:
    """Get boolean environment variable."""
    val = os.environ.get(key, "").lower()
    if val in ("true", "1", "yes", "on"):
        return True
    if val in ("false", "0", "no", "off"):
        return False
    return default


def _get_env_int(key: str, default: int = 0) -> int:
    """Get integer environment variable."""
    val = os.environ.get(key, "")
    try:
        return int(val) if val else default
    except ValueError:
        return default


def _get_env_float(key: str, default: float = 0.0) -> float:
    """Get float environment variable."""
    val = os.environ.get(key, "")
    try:
        return float(val) if val else default
    except ValueError:
        return default


@dataclass
class Config:
    """
    Citation generator configuration settings.

    All settings can be overridden via environment variables.
    """

    # ==========================================================================
    # Citation Form Settings
    # ==========================================================================

    # Source type for newly added citations: book, journal or website
    DEFAULT_CITATION_TYPE: str = field(default_factory=lambda: _get_env(
        "DEFAULT_CITATION_TYPE", "book"
    ))

    # How long the "Copied!" notice stays on an entry (seconds)
    COPIED_NOTICE_SECONDS: float = field(default_factory=lambda: _get_env_float(
        "COPIED_NOTICE_SECONDS", 2.0
    ))

    # Clipboard command, e.g. "xclip -selection clipboard". Empty = auto-detect
    CLIPBOARD_COMMAND: str = field(default_factory=lambda: _get_env(
        "CLIPBOARD_COMMAND", ""
    ))

    # ==========================================================================
    # Logging Settings
    # ==========================================================================

    # Log level: DEBUG, INFO, WARNING, ERROR
    LOG_LEVEL: str = field(default_factory=lambda: _get_env(
        "LOG_LEVEL", "INFO"
    ))

    # Enable verbose logging
    VERBOSE: bool = field(default_factory=lambda: _get_env_bool(
        "VERBOSE", False
    ))

    # Enable file logging
    ENABLE_FILE_LOGGING: bool = field(default_factory=lambda: _get_env_bool(
        "ENABLE_FILE_LOGGING", False
    ))

    # Log file rotation size (MB)
    LOG_ROTATION_SIZE_MB: int = field(default_factory=lambda: _get_env_int(
        "LOG_ROTATION_SIZE_MB", 10
    ))

    # Number of log files to retain
    LOG_RETENTION_COUNT: int = field(default_factory=lambda: _get_env_int(
        "LOG_RETENTION_COUNT", 5
    ))

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        valid_levels = {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}
        if self.LOG_LEVEL.upper() not in valid_levels:
            self.LOG_LEVEL = 'INFO'

        valid_types = {'book', 'journal', 'website'}
        self.DEFAULT_CITATION_TYPE = self.DEFAULT_CITATION_TYPE.lower().strip()
        if self.DEFAULT_CITATION_TYPE not in valid_types:
            self.DEFAULT_CITATION_TYPE = 'book'

        # Ensure positive values
        if self.COPIED_NOTICE_SECONDS < 0:
            self.COPIED_NOTICE_SECONDS = 2.0
        if self.LOG_ROTATION_SIZE_MB < 1:
            self.LOG_ROTATION_SIZE_MB = 10
        if self.LOG_RETENTION_COUNT < 1:
            self.LOG_RETENTION_COUNT = 5

    def to_dict(self) -> dict:
        """Convert config to dictionary for logging/debugging."""
        return {
            'DEFAULT_CITATION_TYPE': self.DEFAULT_CITATION_TYPE,
            'COPIED_NOTICE_SECONDS': self.COPIED_NOTICE_SECONDS,
            'CLIPBOARD_COMMAND': self.CLIPBOARD_COMMAND,
            'LOG_LEVEL': self.LOG_LEVEL,
            'ENABLE_FILE_LOGGING': self.ENABLE_FILE_LOGGING,
        }


# Global config instance
config = Config()


VERSION = "1.0.0"


__all__ = ['config', 'Config', 'VERSION']
