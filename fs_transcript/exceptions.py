"""
Custom exceptions for the application.
"""

from typing import Optional


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass


class TranscriptSourceError(BaseAppError):
    """Exception raised when the transcript cannot be read."""

    pass


class TranscriptParseError(BaseAppError):
    """Exception raised when a transcript cannot be turned into a tree."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        super().__init__(message)
        self.line_number = line_number


class MalformedLineError(TranscriptParseError):
    """Exception raised for a line that matches no known transcript shape."""

    def __init__(self, line: str, line_number: Optional[int] = None, reason: str = ""):
        location = f"line {line_number}" if line_number is not None else "line"
        message = f"Malformed transcript {location}: {line!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message, line_number)
        self.line = line


class UnresolvedDirectoryError(TranscriptParseError):
    """Exception raised when `cd` targets a directory that was never listed."""

    def __init__(self, name: str, cwd: str, line_number: Optional[int] = None):
        super().__init__(
            f"Cannot cd into '{name}': no such directory in {cwd}", line_number
        )
        self.name = name


class AnalysisError(BaseAppError):
    """Exception raised for directory-size query errors."""

    pass


class NoQualifyingDirectoryError(AnalysisError):
    """Exception raised when no directory is large enough to delete."""

    def __init__(self, clear_at_least: int):
        super().__init__(
            f"No directory is at least {clear_at_least} in size; cannot free enough space"
        )
        self.clear_at_least = clear_at_least
