"""yars-format CLI: canonicalize YAML files in place or check them."""

import argparse
import logging
import sys
from importlib.metadata import version as get_version, PackageNotFoundError
from pathlib import Path
from typing import List, Optional

import shtab

from .errors import FileReadError, FileWriteError, MissingFileError, YamlFormatError
from .files import process_file

COMPLETION_SHELLS = ["bash", "zsh", "tcsh"]

EXIT_OK = 0
EXIT_WOULD_CHANGE = 1
EXIT_ERRORS = 2


def setup_logging(level: str = "WARNING") -> None:
    """Configure logging for CLI operations."""
    log_level = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    # Get version for --version argument (handle PackageNotFoundError)
    try:
        yars_version = get_version("yars-format")
    except PackageNotFoundError:
        yars_version = "dev"

    parser = argparse.ArgumentParser(
        prog="yars-format",
        description="Format YAML files using the yars formatter"
    )
    parser.add_argument("--version", action="version", version=f"yars-format {yars_version}")
    parser.add_argument(
        "--check",
        action="store_true",
        help="Run in check mode (report changes without writing)"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output (list each processed file)"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress all non-error output."
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level for diagnostic messages (default: WARNING)"
    )
    parser.add_argument(
        "--generate-completions",
        dest="generate_completions",
        choices=COMPLETION_SHELLS,
        default=None,
        help="Generate shell completion script for the given shell"
    )
    parser.add_argument(
        "files",
        metavar="FILE",
        type=Path,
        nargs="*",
        help="YAML files to format"
    ).complete = shtab.FILE
    return parser


def _describe_failure(path: Path, err: YamlFormatError) -> str:
    if isinstance(err, MissingFileError):
        return f"{path}: Failed to read file: No such file or directory"
    if isinstance(err, FileReadError):
        return f"{path}: Failed to read file: {err.reason}"
    if isinstance(err, FileWriteError):
        return f"{path}: Failed to write file: {err.reason}"
    return f"{path}: {err}"


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point. Returns the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.generate_completions:
        print(shtab.complete(parser, shell=args.generate_completions))
        return EXIT_OK

    if not args.files:
        parser.error("the following arguments are required: FILE")

    setup_logging(args.log_level)

    changed_count = 0
    error_count = 0
    success_count = 0

    for path in args.files:
        try:
            outcome = process_file(path, check_only=args.check)
        except YamlFormatError as e:
            error_count += 1
            print(f"Error: {_describe_failure(path, e)}", file=sys.stderr)
            continue

        success_count += 1
        if outcome.changed:
            changed_count += 1
            if args.verbose and not args.quiet:
                if args.check:
                    print(f"{path} - would reformat ({outcome.lines_changed} differing line(s))")
                else:
                    print(f"{path} - reformatted ({outcome.lines_changed} line(s) changed)")
        elif args.verbose and not args.quiet:
            print(f"{path} - already formatted")

    if not args.quiet:
        if args.check:
            print(f"Checked {success_count} file(s); {changed_count} would change.")
        else:
            print(
                f"Formatted {success_count} file(s); {changed_count} updated, "
                f"{success_count - changed_count} unchanged."
            )

    if error_count > 0:
        print(f"Encountered {error_count} error(s).", file=sys.stderr)
        return EXIT_ERRORS

    if args.check and changed_count > 0:
        return EXIT_WOULD_CHANGE

    return EXIT_OK


def run() -> None:
    """Console-script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
