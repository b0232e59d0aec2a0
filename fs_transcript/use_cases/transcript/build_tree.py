"""
Use case for rebuilding a filesystem tree from transcript lines.
"""

import logging
from dataclasses import dataclass, replace
from typing import Iterable, Optional

from fs_transcript.entities.command import (
    CdInto,
    CdRoot,
    CdUp,
    DirEntry,
    FileEntry,
    Ls,
    TranscriptLine,
)
from fs_transcript.entities.entry import Directory
from fs_transcript.entities.filesystem import FileSystemTree
from fs_transcript.exceptions import (
    MalformedLineError,
    TranscriptParseError,
    UnresolvedDirectoryError,
)
from fs_transcript.use_cases.transcript.classify_line import classify_line


@dataclass(frozen=True)
class ParserState:
    """Position of the parser: the current directory and the last line seen."""

    cwd_id: int = 0
    line_number: int = 0


class BuildTreeUseCase:
    """Use case for rebuilding a filesystem tree from a transcript."""

    def __init__(self, strict: bool = True, logger: Optional[logging.Logger] = None):
        """
        Initialize the use case.

        Args:
            strict: Raise on malformed lines when True, skip them with a warning otherwise
            logger: Logger instance to use for logging
        """
        self._strict = strict
        self._logger = logger or logging.getLogger(__name__)

    @property
    def strict(self) -> bool:
        return self._strict

    def execute(self, lines: Iterable[str]) -> FileSystemTree:
        """
        Replay the transcript and build the tree it describes.

        Args:
            lines: Transcript lines in order

        Returns:
            The reconstructed FileSystemTree; `tree.directories` is the flat
            list of every directory, root included

        Raises:
            MalformedLineError: If a line has no known shape and parsing is strict
            UnresolvedDirectoryError: If `cd` targets a directory never listed
            TranscriptParseError: If building fails for any other reason
        """
        tree = FileSystemTree()
        state = ParserState(cwd_id=tree.root.id)
        skipped = 0

        try:
            for line in lines:
                state = replace(state, line_number=state.line_number + 1)
                try:
                    command = classify_line(line, state.line_number)
                except MalformedLineError as e:
                    if self._strict:
                        raise
                    self._logger.warning(f"Skipping {e}")
                    skipped += 1
                    continue
                state = self.step(tree, state, command)
        except TranscriptParseError:
            raise
        except Exception as e:
            self._logger.error(f"Error building tree at line {state.line_number}: {e}")
            raise TranscriptParseError(
                f"Failed to build tree at line {state.line_number}: {str(e)}",
                state.line_number,
            )

        self._logger.info(
            f"Built tree from {state.line_number} lines: {len(tree)} directories, "
            f"{sum(1 for _ in tree.iter_files())} files, {skipped} lines skipped"
        )
        return tree

    def step(self, tree: FileSystemTree, state: ParserState, command: TranscriptLine) -> ParserState:
        """
        Apply one classified line to the tree.

        Listing entries are added to the current directory unless it already
        holds an entry with the same name, so re-listing a directory is harmless.

        Returns:
            The parser state after this line
        """
        cwd = tree.get_directory(state.cwd_id)

        match command:
            case CdUp():
                parent = tree.parent_of(cwd)
                if parent is None:
                    self._logger.warning(
                        f"Line {state.line_number}: 'cd ..' at root, staying in /"
                    )
                    return state
                return replace(state, cwd_id=parent.id)
            case CdRoot():
                return replace(state, cwd_id=tree.root.id)
            case CdInto(name=name):
                child = cwd.find_child(name)
                if not isinstance(child, Directory):
                    raise UnresolvedDirectoryError(name, tree.path_of(cwd), state.line_number)
                return replace(state, cwd_id=child.id)
            case Ls():
                return state
            case DirEntry(name=name):
                directory = tree.add_directory(cwd, name)
                if directory is not None:
                    self._logger.debug(f"Created directory {tree.path_of(directory)}")
                return state
            case FileEntry(name=name, size=size):
                if tree.add_file(cwd, name, size) is not None:
                    self._logger.debug(f"Created file {name} ({size}) in {tree.path_of(cwd)}")
                return state

        raise TranscriptParseError(f"Unhandled transcript line: {command!r}", state.line_number)
