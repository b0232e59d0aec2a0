"""
Classification of raw transcript lines into command and listing variants.
"""

import re
from typing import Optional

from fs_transcript.entities.command import (
    CdInto,
    CdRoot,
    CdUp,
    DirEntry,
    FileEntry,
    Ls,
    TranscriptLine,
)
from fs_transcript.exceptions import MalformedLineError

PROMPT = "$ "

_CD_PATTERN = re.compile(r"^\$ cd (?P<target>.+)$")
_LS_LINE = "$ ls"
_DIR_PATTERN = re.compile(r"^dir (?P<name>.+)$")
_FILE_PATTERN = re.compile(r"^(?P<size>\d+) (?P<name>.+)$")


def classify_line(line: str, line_number: Optional[int] = None) -> TranscriptLine:
    """
    Turn one transcript line into its tagged variant.

    Args:
        line: Raw transcript line, without the newline
        line_number: 1-based position in the transcript, for error messages

    Returns:
        Exactly one of CdUp, CdRoot, CdInto, Ls, DirEntry, FileEntry

    Raises:
        MalformedLineError: If the line matches none of the known shapes
    """
    if line.startswith(PROMPT):
        if line == _LS_LINE:
            return Ls()
        match = _CD_PATTERN.match(line)
        if match is None:
            raise MalformedLineError(line, line_number, "unknown command")
        target = match.group("target")
        if target == "..":
            return CdUp()
        if target == "/":
            return CdRoot()
        return CdInto(target)

    match = _DIR_PATTERN.match(line)
    if match is not None:
        return DirEntry(match.group("name"))

    match = _FILE_PATTERN.match(line)
    if match is not None:
        return FileEntry(match.group("name"), int(match.group("size")))

    raise MalformedLineError(line, line_number, "not a command or listing entry")
