"""
Dependency injection container for managing application dependencies.
"""

import logging

from fs_transcript.adapters.transcript.local_file_adapter import LocalTranscriptFileAdapter
from fs_transcript.config.settings import Settings
from fs_transcript.ports.transcript.transcript_source_port import TranscriptSourcePort
from fs_transcript.use_cases.analysis.analyze_transcript import AnalyzeTranscriptUseCase
from fs_transcript.use_cases.analysis.bounded_total import BoundedSizeTotalUseCase
from fs_transcript.use_cases.analysis.deletion_candidate import DeletionCandidateUseCase
from fs_transcript.use_cases.analysis.directory_sizes import DirectorySizesUseCase
from fs_transcript.use_cases.transcript.build_tree import BuildTreeUseCase


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self):
        self._instances = {}
        self._logger = logging.getLogger(__name__)

    def get_settings(self) -> Settings:
        """
        Get application settings, read from the environment on first use.

        Returns:
            Settings instance

        Raises:
            ConfigurationError: If an environment variable is invalid
        """
        if "settings" not in self._instances:
            self._instances["settings"] = Settings()
        return self._instances["settings"]

    def set_settings(self, settings: Settings) -> None:
        """Replace the settings and drop every instance built from the old ones."""
        self._instances.clear()
        self._instances["settings"] = settings

    def get_transcript_source(self) -> TranscriptSourcePort:
        """
        Get the transcript source, the configured input file unless overridden.

        Returns:
            TranscriptSourcePort implementation
        """
        if "transcript_source" not in self._instances:
            self._instances["transcript_source"] = LocalTranscriptFileAdapter(
                self.get_settings().input_path, self._logger
            )
        return self._instances["transcript_source"]

    def set_transcript_source(self, source: TranscriptSourcePort) -> None:
        """Read the transcript from `source` instead of the configured file."""
        self._instances["transcript_source"] = source
        self._instances.pop("analyze_transcript_use_case", None)

    def get_build_tree_use_case(self) -> BuildTreeUseCase:
        """
        Get build tree use case configured with the parsing policy.

        Returns:
            Configured BuildTreeUseCase
        """
        if "build_tree_use_case" not in self._instances:
            self._instances["build_tree_use_case"] = BuildTreeUseCase(
                strict=self.get_settings().strict_parsing, logger=self._logger
            )
        return self._instances["build_tree_use_case"]

    def get_directory_sizes_use_case(self) -> DirectorySizesUseCase:
        if "directory_sizes_use_case" not in self._instances:
            self._instances["directory_sizes_use_case"] = DirectorySizesUseCase(self._logger)
        return self._instances["directory_sizes_use_case"]

    def get_bounded_total_use_case(self) -> BoundedSizeTotalUseCase:
        if "bounded_total_use_case" not in self._instances:
            self._instances["bounded_total_use_case"] = BoundedSizeTotalUseCase(
                threshold=self.get_settings().size_threshold, logger=self._logger
            )
        return self._instances["bounded_total_use_case"]

    def get_deletion_candidate_use_case(self) -> DeletionCandidateUseCase:
        if "deletion_candidate_use_case" not in self._instances:
            settings = self.get_settings()
            self._instances["deletion_candidate_use_case"] = DeletionCandidateUseCase(
                total_size=settings.total_size,
                space_needed=settings.space_needed,
                logger=self._logger,
            )
        return self._instances["deletion_candidate_use_case"]

    def get_analyze_transcript_use_case(self) -> AnalyzeTranscriptUseCase:
        """
        Get analyze transcript use case with injected dependencies.

        Returns:
            Configured AnalyzeTranscriptUseCase
        """
        if "analyze_transcript_use_case" not in self._instances:
            self._instances["analyze_transcript_use_case"] = AnalyzeTranscriptUseCase(
                source=self.get_transcript_source(),
                build_tree=self.get_build_tree_use_case(),
                directory_sizes=self.get_directory_sizes_use_case(),
                bounded_total=self.get_bounded_total_use_case(),
                deletion_candidate=self.get_deletion_candidate_use_case(),
                logger=self._logger,
            )
        return self._instances["analyze_transcript_use_case"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
