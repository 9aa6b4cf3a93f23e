import argparse
import sys
from typing import List, Optional, TextIO

from .config import LOG_LEVEL, EXIT_MATCH, EXIT_NO_MATCH, EXIT_ERROR
from .errors import PatternError
from .logger import setup_logging, logger_cli
from .pipeline import compile, search_lines


def build_parser() -> argparse.ArgumentParser:

    parser = argparse.ArgumentParser(
        prog="rematch",
        description="Print lines matching a pattern (c . ^ $ * only).",
    )
    parser.add_argument("pattern")
    parser.add_argument("files", nargs="*", metavar="FILE",
                        help="files to search (default: stdin)")
    parser.add_argument("-v", "--invert-match", action="store_true",
                        help="print lines that do not match")
    parser.add_argument("--log-level", default=LOG_LEVEL)
    parser.add_argument("--log-file", default=None)
    return parser


def scan(pattern: str, stream: TextIO, out: TextIO, invert: bool) -> int:
    lines = (raw.rstrip("\n") for raw in stream)
    found = 0
    for line in search_lines(pattern, lines, invert=invert):
        out.write(line + "\n")
        found += 1
    return found


def main(argv: Optional[List[str]] = None,
         stdin: Optional[TextIO] = None,
         stdout: Optional[TextIO] = None) -> int:

    args = build_parser().parse_args(argv)
    setup_logging(level=args.log_level, log_file=args.log_file)

    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    try:
        compile(args.pattern)
    except PatternError as e:
        logger_cli.error(f"bad pattern {args.pattern!r}: {e}")
        return EXIT_ERROR

    found = 0
    failed = False

    if not args.files:
        try:
            found += scan(args.pattern, stdin, stdout, args.invert_match)
        except UnicodeDecodeError as e:
            logger_cli.error(f"cannot read standard input: {e}")
            failed = True

    # like grep: report a bad file and go on with the rest
    for path in args.files:
        try:
            with open(path, "r", encoding="utf-8") as f:
                found += scan(args.pattern, f, stdout, args.invert_match)
        except (OSError, UnicodeDecodeError) as e:
            logger_cli.error(f"cannot read {path}: {e}")
            failed = True

    logger_cli.info(f"SEARCH_COMPLETE | pattern={args.pattern} | lines={found} | failed={failed}")

    if failed:
        return EXIT_ERROR
    return EXIT_MATCH if found else EXIT_NO_MATCH


if __name__ == "__main__":
    sys.exit(main())
