"""
Transcript line variants: every line of a transcript is exactly one of these.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class CdUp:
    """`$ cd ..`"""


@dataclass(frozen=True)
class CdRoot:
    """`$ cd /`"""


@dataclass(frozen=True)
class CdInto:
    """`$ cd <name>`"""

    name: str


@dataclass(frozen=True)
class Ls:
    """`$ ls`"""


@dataclass(frozen=True)
class DirEntry:
    """`dir <name>` listing line."""

    name: str


@dataclass(frozen=True)
class FileEntry:
    """`<size> <name>` listing line."""

    name: str
    size: int


TranscriptLine = Union[CdUp, CdRoot, CdInto, Ls, DirEntry, FileEntry]
