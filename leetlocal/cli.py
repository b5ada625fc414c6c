"""CLI interface for leetlocal."""

from __future__ import annotations

import argparse
import asyncio
import sys

from leetlocal.config import Config
from leetlocal.models import RunStatus
from leetlocal.output import terminal_channel, terminal_notifier
from leetlocal.prompting import prompt_for_test_input, read_input_file
from leetlocal.runner import run_local


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="leetlocal",
        description="Run a saved LeetCode solution file locally against custom input",
    )
    subparsers = parser.add_subparsers(dest="command")

    run_parser = subparsers.add_parser("run", help="Run a solution file against test input")
    run_parser.add_argument("file", help="Path to the solution file (must contain an @lc marker)")
    source = run_parser.add_mutually_exclusive_group()
    source.add_argument("--input", type=str, default=None, help="Test input, skips the prompt")
    source.add_argument(
        "--input-file", type=str, default=None, help="Read test input from this file"
    )
    run_parser.add_argument(
        "-v", "--verbose", action="store_true", default=False, help="Log commands and cleanup"
    )

    subparsers.add_parser("shortcuts", help="List the editor shortcuts that are enabled")

    serve_parser = subparsers.add_parser("serve", help="Start the HTTP bridge for editors")
    serve_parser.add_argument("--host", type=str, default=None)
    serve_parser.add_argument("--port", type=int, default=None)
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    # Build config from env + CLI overrides
    overrides = {}
    if getattr(args, "verbose", False):
        overrides["verbose"] = True
    if getattr(args, "host", None) is not None:
        overrides["host"] = args.host
    if getattr(args, "port", None) is not None:
        overrides["port"] = args.port

    try:
        config = Config.from_env(**overrides)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.command == "shortcuts":
        for shortcut in config.shortcuts:
            print(shortcut)
        return

    if args.command == "serve":
        from leetlocal.web.app import app

        app.config["LEETLOCAL_CONFIG"] = config
        app.run(host=config.host, port=config.port)
        return

    test_input = args.input
    if args.input_file is not None:
        try:
            test_input = read_input_file(args.input_file)
        except (OSError, UnicodeDecodeError) as e:
            print(f"Error: cannot read {args.input_file}: {e}", file=sys.stderr)
            sys.exit(1)

    outcome = asyncio.run(
        run_local(
            args.file,
            terminal_channel(),
            terminal_notifier(),
            config=config,
            test_input=test_input,
            prompt=prompt_for_test_input if test_input is None else None,
        )
    )
    if outcome.status is RunStatus.FAILED:
        sys.exit(1)
