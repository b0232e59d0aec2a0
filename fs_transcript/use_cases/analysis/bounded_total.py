"""
Use case for summing the sizes of small directories.
"""

import logging
from typing import Optional

from fs_transcript.use_cases.analysis.directory_sizes import DirectorySize

DEFAULT_SIZE_THRESHOLD = 100_000


class BoundedSizeTotalUseCase:
    """Sum of the sizes of every directory no larger than a threshold."""

    def __init__(
        self,
        threshold: int = DEFAULT_SIZE_THRESHOLD,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            threshold: Largest directory size (inclusive) that still counts
            logger: Logger instance to use for logging
        """
        self._threshold = threshold
        self._logger = logger or logging.getLogger(__name__)

    @property
    def threshold(self) -> int:
        return self._threshold

    def execute(self, sizes: list[DirectorySize]) -> int:
        """
        Args:
            sizes: Sized directories, root included

        Returns:
            Sum of sizes <= threshold; 0 if every directory is larger
        """
        bounded = [entry.size for entry in sizes if entry.size <= self._threshold]
        total = sum(bounded)
        self._logger.info(
            f"{len(bounded)} of {len(sizes)} directories are at most {self._threshold}, total {total}"
        )
        return total
