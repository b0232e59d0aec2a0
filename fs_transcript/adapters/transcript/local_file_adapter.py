"""
Local file adapter implementation for reading a transcript from disk.
"""

import logging
import os

from typing_extensions import override

from fs_transcript.exceptions import TranscriptSourceError
from fs_transcript.ports.transcript.transcript_source_port import TranscriptSourcePort


def split_transcript(text: str) -> list[str]:
    """
    Trim trailing whitespace and split on newlines; an empty text has no lines.

    Only a newline ends a line (an optional carriage return before it is dropped),
    so form feeds and the other separators `str.splitlines` honours stay
    inside names.
    """
    text = text.rstrip()
    if not text:
        return []
    return [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]


class LocalTranscriptFileAdapter(TranscriptSourcePort):
    """Reads a UTF-8 transcript file from the local file system."""

    def __init__(self, path: str, logger: logging.Logger | None = None):
        """
        Initialize the adapter.

        Args:
            path: Path to the transcript file
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._path = path
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    @property
    def path(self) -> str:
        return self._path

    def _validate_file(self) -> None:
        """
        Validate that the transcript path exists and is a regular file.

        Raises:
            TranscriptSourceError: If the path does not exist or is not a file
        """
        if not os.path.exists(self._path):
            raise TranscriptSourceError(f"Transcript file does not exist: {self._path}")

        if not os.path.isfile(self._path):
            raise TranscriptSourceError(f"Transcript path is not a file: {self._path}")

    @override
    def read_lines(self) -> list[str]:
        try:
            self._validate_file()
            with open(self._path, "r", encoding="utf-8") as f:
                text = f.read()
        except TranscriptSourceError:
            raise
        except Exception as e:
            raise TranscriptSourceError(f"Failed to read transcript {self._path}: {str(e)}")

        lines = split_transcript(text)
        self._logger.debug(f"Read {len(lines)} lines from {self._path}")
        return lines

    @override
    def describe(self) -> str:
        return os.path.abspath(self._path)
