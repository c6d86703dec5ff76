"""Command-line interface for blanklines."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import blanklines
from blanklines.message import Request

_MAX_INPUT_BYTES = 64 * 1024 * 1024


def _normalize(data: bytes, body_only: bool) -> blanklines.ProcessingResult:
    if body_only:
        return blanklines.process_body(Request(headers=(), body=data))
    return blanklines.process(data)


def _describe(name: str, data: bytes, body_only: bool) -> str:
    if body_only:
        classification = blanklines.classify(data)
    else:
        classification = blanklines.process(data).classification
        if classification is None:
            return f"{name}: no header/body boundary"
    line = f"{name}: {classification.verdict.value} ({classification.evidence.value}"
    if classification.label:
        line += f" {classification.label}"
    if classification.score is not None:
        line += f" {classification.score:.2f}"
    return line + ")"


def main(argv: list[str] | None = None) -> int:
    """Run the ``blanklines`` command-line tool.

    :param argv: Command-line arguments.  Defaults to ``sys.argv[1:]``.
    :returns: The process exit status.
    """
    parser = argparse.ArgumentParser(
        description="Remove extra blank lines from raw HTTP messages."
    )
    parser.add_argument("files", nargs="*", help="Message files (default: stdin)")
    parser.add_argument(
        "--body-only",
        action="store_true",
        help="Treat input as a bare body and only trim leading blank lines",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--classify",
        action="store_true",
        help="Print whether each body is text or binary and why",
    )
    mode.add_argument(
        "--check",
        action="store_true",
        help="Report inputs that would change; exit 1 if any would",
    )
    mode.add_argument(
        "-i", "--in-place", action="store_true", help="Rewrite files in place"
    )
    parser.add_argument(
        "--version", action="version", version=f"blanklines {blanklines.__version__}"
    )

    args = parser.parse_args(argv)
    if args.in_place and not args.files:
        parser.error("--in-place needs at least one file")

    inputs: list[tuple[str, Path | None, bytes]] = []
    status = 0
    if args.files:
        for filepath in args.files:
            path = Path(filepath)
            try:
                with path.open("rb") as f:
                    inputs.append((filepath, path, f.read(_MAX_INPUT_BYTES + 1)))
            except OSError as e:
                print(f"blanklines: {filepath}: {e}", file=sys.stderr)
                status = 2
    else:
        inputs.append(("stdin", None, sys.stdin.buffer.read(_MAX_INPUT_BYTES + 1)))

    for name, path, data in inputs:
        # A partial read must never be normalized and written back.
        if len(data) > _MAX_INPUT_BYTES:
            print(
                f"blanklines: {name}: input exceeds {_MAX_INPUT_BYTES} bytes",
                file=sys.stderr,
            )
            status = 2
            continue
        if args.classify:
            print(_describe(name, data, args.body_only))
            continue
        result = _normalize(data, args.body_only)
        if args.check:
            if result.modified:
                print(f"{name}: would change")
                status = max(status, 1)
            continue
        if args.in_place:
            if result.modified and path is not None:
                path.write_bytes(result.data)
            continue
        sys.stdout.buffer.write(result.data)
    sys.stdout.flush()
    return status


if __name__ == "__main__":
    sys.exit(main())
