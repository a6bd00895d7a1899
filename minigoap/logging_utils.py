"""Logging utilities for minigoap.

Provides color-coded output to distinguish search chatter from results.
Messages below ``Config.LOG_LEVEL`` (DEBUG, INFO, WARNING, ERROR) are dropped.
"""

import os
from enum import Enum

from .config import Config


class Color(Enum):
    """ANSI color codes for terminal output."""

    # Colors for operation types
    BLUE = "\033[94m"      # Search steps (introspection, simulation)
    YELLOW = "\033[93m"    # Warnings (unvalidated plans)
    RED = "\033[91m"       # Errors and aborted executions
    GREEN = "\033[92m"     # Success/completion
    CYAN = "\033[96m"      # Info/metadata

    # Formatting
    BOLD = "\033[1m"
    RESET = "\033[0m"


def colored(text: str, color: Color, bold: bool = False) -> str:
    """Wrap text in ANSI color codes if colors are enabled.

    Args:
        text: Text to colorize
        color: Color to apply
        bold: Whether to make text bold

    Returns:
        Colorized text if MINIGOAP_NO_COLOR is not set, otherwise plain text
    """
    if os.getenv("MINIGOAP_NO_COLOR"):
        return text

    prefix = color.value
    if bold:
        prefix = Color.BOLD.value + prefix

    return f"{prefix}{text}{Color.RESET.value}"


_LEVELS = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40}


def _enabled(level: str) -> bool:
    threshold = _LEVELS.get(Config.LOG_LEVEL.upper(), _LEVELS["INFO"])
    return _LEVELS[level] >= threshold


def log_search(message: str) -> None:
    """Log a search step (blue)."""
    if _enabled("INFO"):
        print(colored(f"{LOG_TAG_SEARCH} {message}", Color.BLUE))


def log_warning(message: str) -> None:
    """Log a warning (yellow)."""
    if _enabled("WARNING"):
        print(colored(f"{LOG_TAG_WARNING} {message}", Color.YELLOW))


def log_error(message: str) -> None:
    """Log an error or aborted execution (red)."""
    if _enabled("ERROR"):
        print(colored(f"{LOG_TAG_ERROR} {message}", Color.RED))


def log_success(message: str) -> None:
    """Log a success (green)."""
    if _enabled("INFO"):
        print(colored(f"{LOG_TAG_SUCCESS} {message}", Color.GREEN))


def log_info(message: str) -> None:
    """Log metadata/info (cyan)."""
    if _enabled("INFO"):
        print(colored(f"{LOG_TAG_INFO} {message}", Color.CYAN))


# Markers for operation types (color-blind accessible)
LOG_TAG_SEARCH = "[•]"     # Search step
LOG_TAG_WARNING = "[?]"    # Warning
LOG_TAG_ERROR = "[!]"      # Error
LOG_TAG_SUCCESS = "[✓]"    # Success
LOG_TAG_INFO = "[i]"       # Information
