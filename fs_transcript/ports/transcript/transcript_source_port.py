"""
Transcript source port interface defining the contract for reading transcripts.
"""

from abc import ABC, abstractmethod


class TranscriptSourcePort(ABC):
    """Port interface for transcript sources."""

    @abstractmethod
    def read_lines(self) -> list[str]:
        """
        Read the whole transcript.

        Trailing whitespace of the full text is trimmed before it is split
        into lines, so a final newline does not produce an empty line.

        Returns:
            Transcript lines in order

        Raises:
            TranscriptSourceError: If the source is missing or unreadable
        """
        pass

    @abstractmethod
    def describe(self) -> str:
        """
        Human-readable name of the source, used in log messages.
        """
        pass
