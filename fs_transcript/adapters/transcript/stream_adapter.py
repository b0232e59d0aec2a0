"""
Stream adapter implementation for reading a transcript from an open text stream.
"""

import logging
from typing import TextIO

from typing_extensions import override

from fs_transcript.adapters.transcript.local_file_adapter import split_transcript
from fs_transcript.exceptions import TranscriptSourceError
from fs_transcript.ports.transcript.transcript_source_port import TranscriptSourcePort


class StreamTranscriptAdapter(TranscriptSourcePort):
    """Reads a transcript from any text stream, e.g. standard input."""

    def __init__(self, stream: TextIO, name: str = "<stream>", logger: logging.Logger | None = None):
        self._stream = stream
        self._name = name
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    @override
    def read_lines(self) -> list[str]:
        try:
            text = self._stream.read()
        except Exception as e:
            raise TranscriptSourceError(f"Failed to read transcript from {self._name}: {str(e)}")

        lines = split_transcript(text)
        self._logger.debug(f"Read {len(lines)} lines from {self._name}")
        return lines

    @override
    def describe(self) -> str:
        return self._name
