"""Command-line interface for textsniff."""

from __future__ import annotations

import argparse
import json
import logging
import sys

import textsniff
from textsniff._utils import DEEP_SCAN_BYTES
from textsniff.pipeline import FileTypeResult


def _format(label: str, result: FileTypeResult, args: argparse.Namespace) -> str:
    if args.json:
        return json.dumps({"path": label, **result.to_dict()})
    verdict = "text" if result.is_text else "binary"
    if args.minimal:
        return verdict
    return (
        f"{label}: {verdict} with confidence {result.confidence:.2f} "
        f"({result.reason})"
    )


def main(argv: list[str] | None = None) -> None:
    """Run the ``textsniff`` command-line tool.

    :param argv: Command-line arguments.  Defaults to ``sys.argv[1:]``.
    """
    parser = argparse.ArgumentParser(
        description="Classify files as text or binary."
    )
    parser.add_argument("files", nargs="*", help="Files to classify")
    parser.add_argument(
        "--minimal", action="store_true", help="Output only 'text' or 'binary'"
    )
    parser.add_argument(
        "--json", action="store_true", help="Output one JSON object per input"
    )
    parser.add_argument(
        "--mime-type", default=None, help="Declared MIME type applied to every input"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log each decision to stderr"
    )
    parser.add_argument(
        "--version", action="version", version=f"textsniff {textsniff.__version__}"
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(name)s: %(message)s", stream=sys.stderr
        )

    failed = False
    if args.files:
        for filepath in args.files:
            try:
                result = textsniff.classify_file(filepath, mime_type=args.mime_type)
            except OSError as e:
                print(f"textsniff: {filepath}: {e}", file=sys.stderr)
                failed = True
                continue
            print(_format(filepath, result, args))
    else:
        data = sys.stdin.buffer.read(DEEP_SCAN_BYTES)
        result = textsniff.classify(data, mime_type=args.mime_type)
        print(_format("stdin", result, args))

    if failed:
        sys.exit(1)


if __name__ == "__main__":
    main()
