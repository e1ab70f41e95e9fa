"""
oznav Configuration

Loads configuration from environment variables with sensible defaults.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()


def _flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in {"1", "true", "yes", "on"}


class Config:
    """Application configuration loaded from environment variables."""

    # Console diagnostics
    VERBOSE: bool = _flag("OZNAV_VERBOSE")

    # Trace output
    ECHO_TRACE: bool = _flag("OZNAV_ECHO_TRACE")
    TRACE_FORMAT: str = os.getenv("OZNAV_TRACE_FORMAT", "text")
    TRACE_ENCODING: str = os.getenv("OZNAV_TRACE_ENCODING", "utf-8")

    # Project Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent
    EXAMPLES_DIR: Path = PROJECT_ROOT / "examples"

    TRACE_FORMATS = ("text", "jsonl")

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and raise errors on unusable values."""
        if cls.TRACE_FORMAT not in cls.TRACE_FORMATS:
            raise ValueError(
                f"OZNAV_TRACE_FORMAT must be one of {', '.join(cls.TRACE_FORMATS)} "
                f"(got '{cls.TRACE_FORMAT}')"
            )
        try:
            "".encode(cls.TRACE_ENCODING)
        except LookupError as exc:
            raise ValueError(f"OZNAV_TRACE_ENCODING '{cls.TRACE_ENCODING}' is not a known codec") from exc

    @classmethod
    def display(cls) -> str:
        """Return a formatted string showing current configuration."""
        lines = [
            "oznav Configuration:",
            f"  Verbose: {cls.VERBOSE}",
            f"  Echo trace: {cls.ECHO_TRACE}",
            f"  Trace format: {cls.TRACE_FORMAT}",
            f"  Trace encoding: {cls.TRACE_ENCODING}",
        ]
        return "\n".join(lines)
