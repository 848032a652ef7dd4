# Copyright 2026 parenlex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the parenlex command-line interface."""

import argparse
import sys
from pathlib import Path

from parenlex.config.settings import (
    CONFIG_FILE_NAME,
    DEFAULT_CONFIG_TEXT,
    OUTPUT_FORMATS,
    ConfigError,
    LexConfig,
    find_config,
    load_config,
)
from parenlex.output.dump import collect, format_error, format_tokens, serialize

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the parenlex CLI."""
    parser = argparse.ArgumentParser(
        prog="parenlex",
        description="parenlex - tokenizer for parenthesized expressions",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # init subcommand
    init_parser = subparsers.add_parser(
        "init",
        help="Write a default configuration file",
        description=f"Create a default {CONFIG_FILE_NAME} in a directory.",
    )
    init_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory to write the configuration to (default: current directory)",
    )

    # tokenize subcommand
    tokenize_parser = subparsers.add_parser(
        "tokenize",
        help="Print the tokens of an input",
        description="Lex a file or standard input and print its tokens.",
    )
    tokenize_parser.add_argument(
        "file",
        nargs="?",
        default="-",
        help="File to tokenize, or '-' for standard input (default: standard input)",
    )
    tokenize_parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Output format (default: from configuration, else text)",
    )
    tokenize_parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored text output",
    )
    tokenize_parser.add_argument(
        "--config",
        default=None,
        help=f"Configuration file (default: {CONFIG_FILE_NAME} in the current directory)",
    )

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Check that files lex without errors",
        description="Lex each file and report the first error found in it.",
    )
    check_parser.add_argument(
        "files",
        nargs="+",
        help="Files to check",
    )
    check_parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored error output",
    )
    check_parser.add_argument(
        "--config",
        default=None,
        help=f"Configuration file (default: {CONFIG_FILE_NAME} in the current directory)",
    )

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################

_STDIN_LABEL = "<stdin>"


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "init":
        return _cmd_init(args)
    if args.command == "tokenize":
        return _cmd_tokenize(args)
    if args.command == "check":
        return _cmd_check(args)
    return 0


def _cmd_init(args: argparse.Namespace) -> int:
    """Handle the init subcommand."""
    directory = Path(args.directory).resolve()

    if not directory.exists():
        print(f"Error: directory '{directory}' does not exist.", file=sys.stderr)
        return 1

    config_file = directory / CONFIG_FILE_NAME

    if config_file.exists():
        print(f"Error: configuration already exists at '{config_file}'.", file=sys.stderr)
        return 1

    config_file.write_text(DEFAULT_CONFIG_TEXT, encoding="utf-8")
    print(f"Wrote parenlex configuration to '{config_file}'.")
    return 0


def _cmd_tokenize(args: argparse.Namespace) -> int:
    """Handle the tokenize subcommand."""
    config = _load_cli_config(args)
    if config is None:
        return 1

    output_format = args.format or config.output_format
    color = config.color and not args.no_color

    if args.file == "-":
        label = _STDIN_LABEL
        data = sys.stdin.buffer.read()
    else:
        label = args.file
        try:
            data = Path(args.file).read_bytes()
        except OSError as exc:
            print(f"Error: cannot read '{args.file}': {exc}", file=sys.stderr)
            return 1

    stream = collect(data, label)

    if output_format == "json":
        print(serialize(stream))
    else:
        for line in format_tokens(stream, color=color):
            print(line)

    if stream.error is not None:
        if output_format != "json":
            text = data.decode("utf-8", errors="replace")
            print(format_error(stream, color=color, text=text), file=sys.stderr)
        return 1
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    """Handle the check subcommand."""
    config = _load_cli_config(args)
    if config is None:
        return 1

    color = config.color and not args.no_color

    has_errors = False
    for file_name in args.files:
        try:
            data = Path(file_name).read_bytes()
        except OSError as exc:
            print(f"Error: cannot read '{file_name}': {exc}", file=sys.stderr)
            has_errors = True
            continue

        stream = collect(data, file_name)
        if stream.error is not None:
            text = data.decode("utf-8", errors="replace")
            print(format_error(stream, color=color, text=text), file=sys.stderr)
            has_errors = True

    if has_errors:
        return 1

    print(f"Checked {len(args.files)} file(s), no issues found.")
    return 0


def _load_cli_config(args: argparse.Namespace) -> LexConfig | None:
    """Load the configuration named on the command line, or the one in the current directory.

    Prints the error and returns None if the configuration is invalid.
    """
    try:
        if args.config is not None:
            return load_config(Path(args.config))
        return find_config(Path.cwd())
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return None
