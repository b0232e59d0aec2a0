"""
Configuration settings for the application.
"""

import os

from dotenv import load_dotenv

from fs_transcript.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()

DEFAULT_INPUT_PATH = "input.txt"
DEFAULT_TOTAL_SIZE = 70_000_000
DEFAULT_SPACE_NEEDED = 30_000_000
DEFAULT_SIZE_THRESHOLD = 100_000

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.input_path: str = self._get_env("FS_TRANSCRIPT_INPUT", DEFAULT_INPUT_PATH)
        self.total_size: int = self._get_int_env(
            "FS_TRANSCRIPT_TOTAL_SIZE", DEFAULT_TOTAL_SIZE
        )
        self.space_needed: int = self._get_int_env(
            "FS_TRANSCRIPT_SPACE_NEEDED", DEFAULT_SPACE_NEEDED
        )
        self.size_threshold: int = self._get_int_env(
            "FS_TRANSCRIPT_SIZE_THRESHOLD", DEFAULT_SIZE_THRESHOLD
        )
        self.strict_parsing: bool = self._get_bool_env("FS_TRANSCRIPT_STRICT", True)
        self.log_level: str = self._get_env("FS_TRANSCRIPT_LOG_LEVEL", "WARNING").upper()

        if self.log_level not in _LOG_LEVELS:
            raise ConfigurationError(
                f"FS_TRANSCRIPT_LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}, "
                f"got {self.log_level!r}"
            )

        if self.space_needed > self.total_size:
            raise ConfigurationError(
                f"FS_TRANSCRIPT_SPACE_NEEDED ({self.space_needed}) cannot exceed "
                f"FS_TRANSCRIPT_TOTAL_SIZE ({self.total_size})"
            )

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_int_env(self, key: str, default: int) -> int:
        """Get a non-negative integer environment variable, raise error if invalid."""
        raw = os.getenv(key)
        if raw is None or not raw.strip():
            return default
        try:
            value = int(raw.strip().replace("_", ""))
        except ValueError:
            raise ConfigurationError(f"Environment variable {key} must be an integer, got {raw!r}")
        if value < 0:
            raise ConfigurationError(f"Environment variable {key} must be non-negative, got {value}")
        return value

    def _get_bool_env(self, key: str, default: bool) -> bool:
        """Get a boolean environment variable, raise error if unrecognised."""
        raw = os.getenv(key)
        if raw is None or not raw.strip():
            return default
        val = raw.strip().lower()
        if val in _TRUE_VALUES:
            return True
        if val in _FALSE_VALUES:
            return False
        raise ConfigurationError(f"Environment variable {key} must be a boolean, got {raw!r}")

    def __repr__(self) -> str:
        return (
            f"Settings(input_path='{self.input_path}', total_size={self.total_size}, "
            f"space_needed={self.space_needed}, size_threshold={self.size_threshold}, "
            f"strict_parsing={self.strict_parsing})"
        )
