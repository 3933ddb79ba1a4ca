"""Clipboard Module - Copies formatted citations using the system clipboard tool."""

import shlex
import shutil
import subprocess
from typing import List, Optional
from loguru import logger

from .config import config


# Tried in order when no command is configured
CLIPBOARD_COMMANDS: List[List[str]] = [
    ['pbcopy'],                                  # macOS
    ['wl-copy'],                                 # Wayland
    ['xclip', '-selection', 'clipboard'],        # X11
    ['xsel', '--clipboard', '--input'],          # X11
    ['clip'],                                    # Windows
]


def find_clipboard_command(configured: Optional[str] = None) -> Optional[List[str]]:
    """Return the clipboard command to use, or None if none is installed."""
    configured = config.CLIPBOARD_COMMAND if configured is None else configured
    if configured:
        try:
            return shlex.split(configured)
        except ValueError as e:
            logger.error(f"Invalid CLIPBOARD_COMMAND {configured!r}: {e}")
            return None

    for command in CLIPBOARD_COMMANDS:
        if shutil.which(command[0]):
            return command
    return None


def copy_to_clipboard(text: str, command: Optional[List[str]] = None) -> bool:
    """
    Copy text to the system clipboard.

    Returns:
        True if the clipboard command accepted the text
    """
    command = command or find_clipboard_command()
    if not command:
        logger.warning("No clipboard command available")
        return False

    try:
        process = subprocess.Popen(command, stdin=subprocess.PIPE)
        process.communicate(text.encode('utf-8'))
    except OSError as e:
        logger.error(f"Failed to copy: {e}")
        return False

    if process.returncode != 0:
        logger.error(f"Failed to copy: {command[0]} exited with {process.returncode}")
        return False
    return True


__all__ = ['copy_to_clipboard', 'find_clipboard_command', 'CLIPBOARD_COMMANDS']
