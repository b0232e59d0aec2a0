"""
Use case for computing recursive directory sizes.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from fs_transcript.entities.entry import Directory
from fs_transcript.entities.filesystem import FileSystemTree


@dataclass(frozen=True)
class DirectorySize:
    """A directory of the tree paired with its recursive size."""

    directory: Directory
    path: str
    size: int


class DirectorySizesUseCase:
    """Use case for sizing every directory of a tree."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, tree: FileSystemTree) -> list[DirectorySize]:
        """
        Size every directory once. The tree is never mutated after parsing,
        so the result can be shared by all queries.

        Args:
            tree: Reconstructed filesystem tree

        Returns:
            One DirectorySize per directory, in creation order (root first)
        """
        sizes = tree.directory_sizes()
        result = [
            DirectorySize(directory, tree.path_of(directory), sizes[directory.id])
            for directory in tree.directories
        ]
        self._logger.info(f"Computed sizes of {len(result)} directories, / is {sizes[tree.root.id]}")
        return result
