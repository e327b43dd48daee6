"""Entry point: python -m resource_io"""

from __future__ import annotations

import argparse
import codecs
import io
import json
import sys

from .binary import copy_file, copy_to_stream
from .logger import setup_logging
from .source import open_source, prepare_target
from .text import copy_text_stream, copy_text_to_stream
from .types import CopyOption


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="resource_io", description="Read and copy files and bundled resources")
    parser.add_argument("--log-level", type=str, help="Override RESOURCE_IO_LOG_LEVEL (e.g. DEBUG)")
    commands = parser.add_subparsers(dest="command", required=True)

    cat = commands.add_parser("cat", help="Write a source to stdout")
    cat.add_argument("source", help="File path, or classpath:<name> for a bundled resource")
    cat.add_argument("--encoding", type=str, help="Decode the source as text with this encoding")

    copy = commands.add_parser("copy", help="Copy a source to a target file")
    copy.add_argument("source", help="File path, or classpath:<name> for a bundled resource")
    copy.add_argument("target", help="Target file path")
    copy.add_argument("--replace", action="store_true", help="Overwrite the target if it exists")
    copy.add_argument("--preserve", action="store_true", help="Copy permission bits and timestamps")
    copy.add_argument("--encoding", type=str, help="Decode the source as text with this encoding")
    copy.add_argument("--target-encoding", type=str, help="Encoding for the target (default: --encoding)")
    return parser


def _cat(args: argparse.Namespace) -> int:
    if args.encoding:
        return copy_text_to_stream(args.source, args.encoding, sys.stdout)
    count = copy_to_stream(args.source, sys.stdout.buffer)
    sys.stdout.buffer.flush()
    return count


def _copy(args: argparse.Namespace) -> int:
    if not args.encoding:
        options = [CopyOption.REPLACE_EXISTING] if args.replace else []
        if args.preserve:
            options.append(CopyOption.COPY_ATTRIBUTES)
        return copy_file(args.source, args.target, *options)

    target_encoding = args.target_encoding or args.encoding
    codecs.lookup(target_encoding)
    with open_source(args.source) as raw, io.TextIOWrapper(raw, encoding=args.encoding, newline="") as reader:
        target = prepare_target(args.target)
        mode = "w" if args.replace else "x"
        writer = open(target, mode, encoding=target_encoding, newline="")
        try:
            with writer:
                return copy_text_stream(reader, writer)
        except (OSError, UnicodeError):
            # drop the partly written target
            target.unlink(missing_ok=True)
            raise


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.command == "copy" and args.preserve and args.encoding:
        parser.error("--preserve cannot be combined with --encoding")
    if args.log_level:
        setup_logging(args.log_level)
    else:
        setup_logging()

    try:
        if args.command == "cat":
            _cat(args)
        else:
            copied = _copy(args)
            print(json.dumps({"source": args.source, "target": args.target, "copied": copied}))
    except (OSError, LookupError, UnicodeError) as err:
        print(f"resource_io: {err}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
