"""Command-line entry point: ensure every given file ends with a newline."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TextIO

from feedline.fixer import fix_files
from feedline.printer import Printer
from feedline.status import ColorOption, Status, Verbosity
from feedline.style import plain, styled

_VERSION = "0.1.0"

_EPILOG = (
    "\x1b[1m\x1b[4mExamples:\x1b[0m\n"
    "\x1b[1m# Format files explicitly in verbose mode (with color)\x1b[0m\n"
    "> feedline -v --color=always file1.txt\n\n"
    "\x1b[1m# Pipe the files in a folder (using bash expansion) to feedline\x1b[0m\n"
    "> ls examples/*.txt | feedline --sort\n\n"
    "\x1b[1m# Find files, pipe them to feedline, then filter with grep\x1b[0m\n"
    "> find ./src/ -type f | feedline --color=never | grep '^SKIP.*'"
)

_MIN_VERBOSITY = {
    Status.SUCCESS: Verbosity.NORMAL,
    Status.WARN: Verbosity.VERBOSE,
    Status.SKIP: Verbosity.NORMAL,
    Status.ERROR: Verbosity.QUIET,
}


@dataclass
class CommandArgs:
    """Settings resolved from the command line and standard input."""

    files: list[str]
    color: ColorOption
    sort: bool
    verbosity: Verbosity


def parse_bool(value: str) -> bool:
    """Parse a yes/no style boolean; raise ValueError otherwise."""
    lowered = value.lower()
    if lowered in ("true", "1", "yes", "y"):
        return True
    if lowered in ("false", "0", "no", "n"):
        return False
    raise ValueError(f"invalid boolean value: {value}")


def _bool_arg(value: str) -> bool:
    try:
        return parse_bool(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def _color_arg(value: str) -> ColorOption:
    try:
        return ColorOption(value.lower())
    except ValueError:
        choices = ", ".join(option.value for option in ColorOption)
        raise argparse.ArgumentTypeError(
            f"invalid value '{value}' (choose from {choices})"
        ) from None


def read_file_list(stream: Iterable[str]) -> list[str]:
    """Collect the non-blank lines of ``stream`` as file names."""
    return [
        line.rstrip("\n").rstrip("\r")
        for line in stream
        if line.strip()
    ]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="feedline",
        description="Make sure there is an empty line at the end of the files provided",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_VERSION}")
    parser.add_argument(
        "--color",
        type=_color_arg,
        default=ColorOption.AUTO,
        help="Control when to use colored output (always, never or auto)",
    )
    parser.add_argument(
        "-v",
        dest="verbose",
        action="count",
        default=0,
        help="Increase output verbosity. Use multiple times for more detail (-v, -vv, -vvv).",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Silence all output that is not an error (overrides any `-v` flags)",
    )
    parser.add_argument(
        "-s",
        "--sort",
        type=_bool_arg,
        default=False,
        help="Sort by status (ERROR > WARN > SKIP > SUCCESS), then alphabetically.",
    )
    parser.add_argument(
        "files",
        metavar="FILES",
        nargs="*",
        help="Files to process (if no files provided, read from standard input)",
    )
    return parser


def parse_args(argv: list[str] | None = None, stdin: TextIO | None = None) -> CommandArgs:
    """Parse arguments; with no files and piped input, read names from stdin."""
    args = _build_parser().parse_args(argv)
    stdin = stdin if stdin is not None else sys.stdin

    if args.quiet:
        verbosity = Verbosity.QUIET
    elif args.verbose > 0:
        verbosity = Verbosity.VERBOSE
    else:
        verbosity = Verbosity.NORMAL

    files = list(args.files)
    if not files and not stdin.isatty():
        files = read_file_list(stdin)

    return CommandArgs(files=files, color=args.color, sort=args.sort, verbosity=verbosity)


def main(argv: list[str] | None = None) -> int:
    """Run the command and return its exit status."""
    command = parse_args(argv)
    printer = Printer(command.color, command.verbosity, sys.stdout, sys.stderr)

    printer.eprint(
        [styled("files: ", "blue"), *(plain(name) for name in command.files)],
        Verbosity.VERBOSE,
    )
    printer.eprint([styled("color: ", "blue"), command.color.colored()], Verbosity.VERBOSE)
    printer.eprint(
        [styled("verbosity: ", "blue"), command.verbosity.colored()], Verbosity.VERBOSE
    )
    printer.eprint(
        [
            styled("sort: ", "blue"),
            styled("true", "green") if command.sort else styled("false", "red"),
        ],
        Verbosity.VERBOSE,
    )

    results = fix_files(command.files)
    if command.sort:
        results.sort()

    for result in results:
        minimum = _MIN_VERBOSITY[result.status]
        if minimum > printer.verbosity_level:
            continue
        printer.eprint(result.message_parts(), minimum)

    if not sys.stdout.isatty():
        for name in command.files:
            printer.print([plain(name)], Verbosity.QUIET)
    return 0


if __name__ == "__main__":
    sys.exit(main())