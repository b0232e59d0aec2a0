"""
Use case for choosing the smallest directory whose deletion frees enough space.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from fs_transcript.exceptions import AnalysisError, NoQualifyingDirectoryError
from fs_transcript.use_cases.analysis.directory_sizes import DirectorySize

DEFAULT_TOTAL_SIZE = 70_000_000
DEFAULT_SPACE_NEEDED = 30_000_000


@dataclass(frozen=True)
class DeletionCandidate:
    path: str
    size: int
    clear_at_least: int


class DeletionCandidateUseCase:
    """Use case for finding the smallest directory worth deleting."""

    def __init__(
        self,
        total_size: int = DEFAULT_TOTAL_SIZE,
        space_needed: int = DEFAULT_SPACE_NEEDED,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            total_size: Capacity of the disk
            space_needed: Free space that must be available afterwards
            logger: Logger instance to use for logging
        """
        self._total_size = total_size
        self._space_needed = space_needed
        self._logger = logger or logging.getLogger(__name__)

    def clear_at_least(self, used: int) -> int:
        """Space still to free given `used` bytes; zero or negative means enough is free."""
        return self._space_needed - (self._total_size - used)

    def execute(self, sizes: list[DirectorySize], used: int) -> DeletionCandidate:
        """
        Pick the smallest directory that frees at least the missing space.

        Args:
            sizes: Sized directories, root included
            used: Space in use, i.e. the size of the root directory

        Returns:
            The chosen DeletionCandidate; on equal sizes the earliest created wins

        Raises:
            NoQualifyingDirectoryError: If no directory is large enough
        """
        if used < 0:
            raise AnalysisError(f"Used space must be non-negative, got {used}")

        target = self.clear_at_least(used)
        self._logger.info(
            f"Used {used} of {self._total_size}, need {self._space_needed} free: "
            f"must clear at least {target}"
        )

        best: Optional[DirectorySize] = None
        for entry in sizes:
            if entry.size >= target and (best is None or entry.size < best.size):
                best = entry

        if best is None:
            self._logger.error(f"No directory is at least {target} in size")
            raise NoQualifyingDirectoryError(target)

        self._logger.info(f"Smallest directory to delete is {best.path} ({best.size})")
        return DeletionCandidate(best.path, best.size, target)
