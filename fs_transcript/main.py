"""
Command line entry point: analyze a `cd`/`ls` transcript and print the directory-size report.
"""

import argparse
import io
import logging
import sys

from fs_transcript.adapters.transcript.local_file_adapter import LocalTranscriptFileAdapter
from fs_transcript.adapters.transcript.stream_adapter import StreamTranscriptAdapter
from fs_transcript.container import container
from fs_transcript.exceptions import BaseAppError, ConfigurationError
from fs_transcript.ui.tree_view import print_tree

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fs-transcript",
        description=(
            "Rebuild a filesystem from a terminal transcript and report directory sizes."
        ),
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Transcript file, '-' for standard input (default: FS_TRANSCRIPT_INPUT or input.txt)",
    )
    parser.add_argument(
        "--tree",
        action="store_true",
        help="Also print the reconstructed tree with directory sizes",
    )
    parser.add_argument(
        "--lenient",
        action="store_true",
        help="Skip malformed lines with a warning instead of failing",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log progress to stderr (-v for info, -vv for debug)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    container.reset()
    try:
        settings = container.get_settings()
    except ConfigurationError as exc:
        print("Error:", exc, file=sys.stderr)
        return 1

    if args.verbose >= 2:
        level = "DEBUG"
    elif args.verbose == 1:
        level = "INFO"
    else:
        level = settings.log_level
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr, force=True)

    if args.lenient:
        settings.strict_parsing = False
        container.set_settings(settings)
    if args.path == "-":
        stdin = io.TextIOWrapper(sys.stdin.buffer, encoding="utf-8")
        container.set_transcript_source(StreamTranscriptAdapter(stdin, "<stdin>"))
    elif args.path:
        container.set_transcript_source(LocalTranscriptFileAdapter(args.path))

    try:
        report = container.get_analyze_transcript_use_case().execute()
    except BaseAppError as exc:
        print("Error:", exc, file=sys.stderr)
        return 1

    if args.tree:
        print_tree(report.tree, report.size_by_id(), report.threshold)
    for line in report.lines():
        print(line)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
