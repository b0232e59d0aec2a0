"""
Tests for the transcript source adapters.
"""

import io
import os

import pytest

from fs_transcript.adapters.transcript.local_file_adapter import (
    LocalTranscriptFileAdapter,
    split_transcript,
)
from fs_transcript.adapters.transcript.stream_adapter import StreamTranscriptAdapter
from fs_transcript.exceptions import TranscriptSourceError


class TestSplitTranscript:
    """Test cases for split_transcript."""

    def test_trailing_whitespace_is_trimmed(self):
        assert split_transcript("$ cd /\n$ ls\n\n  \n") == ["$ cd /", "$ ls"]

    def test_empty_text(self):
        assert split_transcript("") == []
        assert split_transcript("\n\n") == []

    def test_windows_line_endings(self):
        assert split_transcript("$ cd /\r\n$ ls\r\n") == ["$ cd /", "$ ls"]

    def test_only_newline_ends_a_line(self):
        text = "$ ls\n5 a\x0cb\n7 c\x0bd\u2028e\n"

        assert split_transcript(text) == ["$ ls", "5 a\x0cb", "7 c\x0bd\u2028e"]


class TestLocalTranscriptFileAdapter:
    """Test cases for the LocalTranscriptFileAdapter."""

    def test_read_lines_success(self, transcript_file, example_lines, mock_logger):
        adapter = LocalTranscriptFileAdapter(transcript_file, mock_logger)

        assert adapter.read_lines() == example_lines
        mock_logger.debug.assert_called_once_with(f"Read 23 lines from {transcript_file}")

    def test_read_lines_utf8(self, tmp_path, mock_logger):
        path = tmp_path / "input.txt"
        path.write_text("$ ls\n12 résumé.txt\n", encoding="utf-8")

        assert LocalTranscriptFileAdapter(str(path), mock_logger).read_lines() == [
            "$ ls",
            "12 résumé.txt",
        ]

    def test_read_lines_form_feed_in_name(self, tmp_path, mock_logger):
        path = tmp_path / "input.txt"
        path.write_text("$ cd /\n$ ls\n5 a\x0cb\n", encoding="utf-8")

        assert LocalTranscriptFileAdapter(str(path), mock_logger).read_lines() == [
            "$ cd /",
            "$ ls",
            "5 a\x0cb",
        ]

    def test_read_lines_nonexistent_file(self, tmp_path, mock_logger):
        adapter = LocalTranscriptFileAdapter(str(tmp_path / "missing.txt"), mock_logger)

        with pytest.raises(TranscriptSourceError, match="Transcript file does not exist"):
            adapter.read_lines()

    def test_read_lines_directory(self, tmp_path, mock_logger):
        adapter = LocalTranscriptFileAdapter(str(tmp_path), mock_logger)

        with pytest.raises(TranscriptSourceError, match="Transcript path is not a file"):
            adapter.read_lines()

    def test_read_lines_invalid_encoding(self, tmp_path, mock_logger):
        path = tmp_path / "input.txt"
        path.write_bytes(b"$ ls\n12 \xff\xfe\n")

        with pytest.raises(TranscriptSourceError, match="Failed to read transcript"):
            LocalTranscriptFileAdapter(str(path), mock_logger).read_lines()

    def test_describe(self, transcript_file):
        assert LocalTranscriptFileAdapter(transcript_file).describe() == os.path.abspath(transcript_file)

    def test_initialization_without_logger(self, transcript_file):
        adapter = LocalTranscriptFileAdapter(transcript_file)

        assert adapter._logger is not None
        assert adapter.path == transcript_file


class TestStreamTranscriptAdapter:
    """Test cases for the StreamTranscriptAdapter."""

    def test_read_lines_success(self, mock_logger):
        adapter = StreamTranscriptAdapter(io.StringIO("$ cd /\n$ ls\n5 f\n"), "<stdin>", mock_logger)

        assert adapter.read_lines() == ["$ cd /", "$ ls", "5 f"]
        assert adapter.describe() == "<stdin>"

    def test_read_lines_failure(self, mock_logger):
        stream = io.StringIO("$ ls")
        stream.close()
        adapter = StreamTranscriptAdapter(stream, "<closed>", mock_logger)

        with pytest.raises(TranscriptSourceError, match="Failed to read transcript from <closed>"):
            adapter.read_lines()
