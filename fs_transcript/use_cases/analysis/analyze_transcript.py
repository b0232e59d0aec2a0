"""
Use case for reading a transcript and answering both directory-size queries.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from fs_transcript.entities.filesystem import FileSystemTree
from fs_transcript.exceptions import AnalysisError, BaseAppError
from fs_transcript.ports.transcript.transcript_source_port import TranscriptSourcePort
from fs_transcript.use_cases.analysis.bounded_total import BoundedSizeTotalUseCase
from fs_transcript.use_cases.analysis.deletion_candidate import (
    DeletionCandidate,
    DeletionCandidateUseCase,
)
from fs_transcript.use_cases.analysis.directory_sizes import (
    DirectorySize,
    DirectorySizesUseCase,
)
from fs_transcript.use_cases.transcript.build_tree import BuildTreeUseCase


@dataclass(frozen=True)
class AnalysisReport:
    tree: FileSystemTree
    sizes: list[DirectorySize]
    threshold: int
    bounded_total: int
    deletion_candidate: DeletionCandidate

    def size_by_id(self) -> dict[int, int]:
        return {entry.directory.id: entry.size for entry in self.sizes}

    def lines(self) -> list[str]:
        """The two report lines printed by the CLI."""
        return [
            f"The sum of all folder sizes at most {self.threshold} is: {self.bounded_total}",
            "The size of the smallest dir that should be deleted to make room is: "
            f"{self.deletion_candidate.size}",
        ]


class AnalyzeTranscriptUseCase:
    """Use case tying together reading, tree building and both size queries."""

    def __init__(
        self,
        source: TranscriptSourcePort,
        build_tree: BuildTreeUseCase,
        directory_sizes: DirectorySizesUseCase,
        bounded_total: BoundedSizeTotalUseCase,
        deletion_candidate: DeletionCandidateUseCase,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            source: Where the transcript is read from
            build_tree: Use case turning lines into a tree
            directory_sizes: Use case sizing every directory
            bounded_total: Query for the sum of small directories
            deletion_candidate: Query for the smallest directory to delete
            logger: Logger instance to use for logging
        """
        self._source = source
        self._build_tree = build_tree
        self._directory_sizes = directory_sizes
        self._bounded_total = bounded_total
        self._deletion_candidate = deletion_candidate
        self._logger = logger or logging.getLogger(__name__)

    def execute(self) -> AnalysisReport:
        """
        Run the whole analysis.

        Returns:
            AnalysisReport holding the tree, every directory size and both answers

        Raises:
            TranscriptSourceError: If the transcript cannot be read
            TranscriptParseError: If the transcript cannot be turned into a tree
            AnalysisError: If a query has no answer
        """
        try:
            self._logger.info(f"Analyzing transcript: {self._source.describe()}")
            lines = self._source.read_lines()
            tree = self._build_tree.execute(lines)
            sizes = self._directory_sizes.execute(tree)
            bounded_total = self._bounded_total.execute(sizes)
            candidate = self._deletion_candidate.execute(sizes, sizes[0].size)
        except BaseAppError:
            raise
        except Exception as e:
            self._logger.error(f"Error analyzing transcript: {e}")
            raise AnalysisError(
                f"Failed to analyze transcript {self._source.describe()}: {str(e)}"
            )

        return AnalysisReport(
            tree=tree,
            sizes=sizes,
            threshold=self._bounded_total.threshold,
            bounded_total=bounded_total,
            deletion_candidate=candidate,
        )
