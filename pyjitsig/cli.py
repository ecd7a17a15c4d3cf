#!/usr/bin/env python3
"""
Command-line interface for pyjitsig.

Reads signature lines from files (or stdin) and prints each canonical
signature as JSON.
"""

import argparse
import logging
import sys

from .generics import ClassContext
from .model import SignatureParseError
from .parsers import AssemblyHeaderParser, BytecodeHeaderParser, LogCompilationParser
from .stats import JITStats

logger = logging.getLogger("pyjitsig")


def _read_lines(files):
    if not files:
        for n, line in enumerate(sys.stdin, 1):
            yield "<stdin>", n, line
        return
    for source_file in files:
        try:
            with open(source_file, "r", encoding="utf-8", errors="replace") as f:
                for n, line in enumerate(f, 1):
                    yield source_file, n, line
        except FileNotFoundError:
            print(f"Error: File not found: {source_file}", file=sys.stderr)
            sys.exit(1)


def _make_parse_function(args):
    """Return a function that parses one line for the selected format."""
    if args.command == "log":
        return LogCompilationParser(strict=args.strict).parse
    if args.command == "comment":
        return LogCompilationParser(strict=args.strict).parse_bytecode_comment
    if args.command == "assembly":
        return AssemblyHeaderParser(strict=args.strict).parse

    context = None
    class_name = args.class_name
    if args.class_header:
        try:
            context = ClassContext.from_class_header(args.class_header)
        except SignatureParseError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        class_name = class_name or context.name
    if not class_name:
        print("Error: bytecode parsing needs --class-name or --class-header", file=sys.stderr)
        sys.exit(1)

    parser = BytecodeHeaderParser(strict=args.strict)
    return lambda line: parser.parse(line, class_name, context)


def parse_command(args):
    """Parse signature lines and output each as JSON."""
    parse = _make_parse_function(args)
    stats = JITStats() if args.stats else None

    parsed = 0
    failed = 0
    for source, line_no, line in _read_lines(args.files):
        line = line.rstrip("\n")
        if not line.strip():
            continue

        try:
            sig = parse(line)
        except SignatureParseError as e:
            if args.strict:
                print(f"Error parsing {source}:{line_no}: {e}", file=sys.stderr)
                sys.exit(1)
            logger.warning("Skipping %s:%d: %s", source, line_no, e)
            failed += 1
            continue

        parsed += 1
        if stats is not None:
            stats.record_member(sig)
        if not args.quiet:
            print(sig.to_json(indent=args.indent))

    if stats is not None:
        for name, value in vars(stats).items():
            print(f"{name}: {value}", file=sys.stderr)

    if args.verbose:
        print(f"Parsed {parsed} signature(s), {failed} failure(s)", file=sys.stderr)


def main(argv=None):
    """Main entry point for pyjitsig CLI."""
    parser = argparse.ArgumentParser(
        prog="pyjitsig",
        description="Normalize JIT log, bytecode and assembly member signatures",
    )

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "files",
        nargs="*",
        help="Files with one signature per line (default: stdin)",
    )
    common.add_argument(
        "--strict",
        action="store_true",
        help="Stop at the first line that cannot be parsed or identified",
    )
    common.add_argument(
        "--stats",
        action="store_true",
        help="Print modifier and member counts to stderr",
    )
    common.add_argument(
        "--indent",
        type=int,
        default=None,
        help="Indent JSON output (default: one signature per line)",
    )
    common.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log debug output and print a summary",
    )
    common.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Suppress JSON output",
    )

    subparsers = parser.add_subparsers(dest="command", help="Signature format")

    subparsers.add_parser(
        "log",
        parents=[common],
        help="LogCompilation signatures: 'java/lang/String hashCode ()I'",
    ).set_defaults(func=parse_command)

    subparsers.add_parser(
        "comment",
        parents=[common],
        help="javap method reference comments: '// Method java/lang/String.length:()I'",
    ).set_defaults(func=parse_command)

    subparsers.add_parser(
        "assembly",
        parents=[common],
        help="hsdis method headers: \"'hashCode' '()I' in 'java/lang/String'\"",
    ).set_defaults(func=parse_command)

    bytecode_parser = subparsers.add_parser(
        "bytecode",
        parents=[common],
        help="javap member header lines",
    )
    bytecode_parser.add_argument(
        "-c", "--class-name",
        help="Fully qualified name of the declaring class",
    )
    bytecode_parser.add_argument(
        "--class-header",
        help="javap class header line, used for class-level generics",
    )
    bytecode_parser.set_defaults(func=parse_command)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    args.func(args)


if __name__ == "__main__":
    main()
