# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
CLI entrypoint for wordclass.

Every operation is a subcommand of `wordclass`. The global options
(--config, --log-level) are inherited by every subcommand through argparse's
parent parser mechanism. `build` adds --force and --dry-run.

Usage:
    wordclass build --config configs/vocab.yaml
    wordclass build --config configs/vocab.yaml --force
    wordclass build --config configs/vocab.yaml --dry-run
    wordclass verify --config configs/vocab.yaml
"""

import argparse
import sys

from wordclass.cli.commands import handle_build, handle_verify
from wordclass.cli.exit_codes import USER_ERROR


def _build_global_parser() -> argparse.ArgumentParser:
    """
    Build the parent parser with global options.

    These options get inherited by every subcommand. We use a separate parent
    parser (with add_help=False) so that help text doesn't collide between the
    parent and the subcommand parsers.
    """
    parent = argparse.ArgumentParser(add_help=False)
    parent.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to YAML configuration file.",
    )
    parent.add_argument(
        "--log-level",
        type=str,
        default=None,
        dest="log_level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set the logging verbosity level (overrides the config).",
    )
    return parent


def _register_subcommands(
    subparsers: argparse._SubParsersAction,  # type: ignore[type-arg]
    parent: argparse.ArgumentParser,
) -> None:
    """Register all subcommands with their handler functions."""
    commands = [
        ("build", "Build the vocabulary and word-class tables from a corpus.", handle_build),
        ("verify", "Check existing vocabulary and class tables.", handle_verify),
    ]

    for name, help_text, handler in commands:
        parser = subparsers.add_parser(name, parents=[parent], help=help_text)
        parser.set_defaults(func=handler)

    build_parser = subparsers.choices["build"]
    build_parser.add_argument(
        "--dry-run",
        action="store_true",
        default=False,
        dest="dry_run",
        help="Validate settings and report outputs without building.",
    )
    build_parser.add_argument(
        "--force",
        action="store_true",
        default=False,
        help="Rebuild even when make mode reports the outputs as up to date.",
    )


def main() -> None:
    """
    Main CLI entrypoint. This is what pyproject.toml's [project.scripts] points to.

    If no subcommand is given, we show help and exit with USER_ERROR.
    """
    parent = _build_global_parser()

    root_parser = argparse.ArgumentParser(
        prog="wordclass",
        description="wordclass: vocabulary and frequency-class builder for class-based LM outputs.",
        parents=[parent],
    )
    subparsers = root_parser.add_subparsers(dest="command")
    _register_subcommands(subparsers, parent)

    args = root_parser.parse_args()

    if not hasattr(args, "func") or args.func is None:
        root_parser.print_help()
        sys.exit(USER_ERROR)

    exit_code = args.func(args)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
