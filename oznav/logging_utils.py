"""Logging utilities for oznav runs.

Console output is color-coded by kind: deterministic engine steps, warnings,
errors, successes and informational lines. The trace file is never written
through these helpers.
"""

import os
from enum import Enum


class Color(Enum):
    """ANSI color codes for terminal output."""

    BLUE = "\033[94m"      # Engine steps (reveal, search, option trials)
    YELLOW = "\033[93m"    # Warnings and replans
    RED = "\033[91m"       # Errors
    GREEN = "\033[92m"     # Success/completion
    CYAN = "\033[96m"      # Info/metadata

    BOLD = "\033[1m"
    RESET = "\033[0m"


def colored(text: str, color: Color, bold: bool = False) -> str:
    """Wrap text in ANSI color codes unless ``OZNAV_NO_COLOR`` is set."""
    if os.getenv("OZNAV_NO_COLOR"):
        return text

    prefix = color.value
    if bold:
        prefix = Color.BOLD.value + prefix

    return f"{prefix}{text}{Color.RESET.value}"


def log_step(message: str) -> None:
    """Log a deterministic engine step (blue)."""
    print(colored(f"{LOG_TAG_DETERMINISTIC} {message}", Color.BLUE))


def log_warning(message: str) -> None:
    """Log a recoverable anomaly (yellow)."""
    print(colored(f"{LOG_TAG_WARNING} {message}", Color.YELLOW))


def log_error(message: str) -> None:
    print(colored(f"{LOG_TAG_ERROR} {message}", Color.RED))


def log_success(message: str) -> None:
    print(colored(f"{LOG_TAG_SUCCESS} {message}", Color.GREEN))


def log_info(message: str) -> None:
    print(colored(f"{LOG_TAG_INFO} {message}", Color.CYAN))


# Markers for line kinds (color-blind accessible)
LOG_TAG_DETERMINISTIC = "[•]"
LOG_TAG_WARNING = "[!]"
LOG_TAG_ERROR = "[x]"
LOG_TAG_SUCCESS = "[✓]"
LOG_TAG_INFO = "[i]"
