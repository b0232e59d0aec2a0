"""
Pytest configuration and shared fixtures.
"""

import pytest
from unittest.mock import MagicMock

from fs_transcript.container import DependencyContainer

EXAMPLE_TRANSCRIPT = """\
$ cd /
$ ls
dir a
14848514 b.txt
8504156 c.dat
dir d
$ cd a
$ ls
dir e
29116 f
2557 g
62596 h.lst
$ cd e
$ ls
584 i
$ cd ..
$ cd ..
$ cd d
$ ls
4060174 j
8033020 d.log
5626152 d.ext
7214296 k
"""

SMALL_TRANSCRIPT = """\
$ cd /
$ ls
dir a
14848514 b.txt
$ cd a
$ ls
29116 f
$ cd ..
"""


@pytest.fixture
def example_lines():
    """
    The reference transcript with directories /, /a, /a/e and /d.

    Returns:
        Transcript lines
    """
    return EXAMPLE_TRANSCRIPT.splitlines()


@pytest.fixture
def small_lines():
    return SMALL_TRANSCRIPT.splitlines()


@pytest.fixture
def transcript_file(tmp_path):
    """
    Write the reference transcript to a temporary file.

    Returns:
        Path to the transcript file as a string
    """
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE_TRANSCRIPT, encoding="utf-8")
    return str(path)


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every FS_TRANSCRIPT_* variable so settings fall back to defaults."""
    for key in (
        "FS_TRANSCRIPT_INPUT",
        "FS_TRANSCRIPT_TOTAL_SIZE",
        "FS_TRANSCRIPT_SPACE_NEEDED",
        "FS_TRANSCRIPT_SIZE_THRESHOLD",
        "FS_TRANSCRIPT_STRICT",
        "FS_TRANSCRIPT_LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


@pytest.fixture
def dependency_container(mock_logger, clean_env):
    """
    Create a dependency container with a mocked logger for testing.

    Returns:
        DependencyContainer instance with mocked logger
    """
    container = DependencyContainer()
    # Replace the logger with our mock
    container._logger = mock_logger
    return container
