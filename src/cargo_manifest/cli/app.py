# Copyright 2025 CrownOps Engineering
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""CLI entry point and orchestration for cargo-manifest commands."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable, Sequence
from contextlib import suppress
from typing import Final

from cargo_manifest import __version__
from cargo_manifest.cli.commands import schema as schema_command
from cargo_manifest.cli.commands import show as show_command
from cargo_manifest.cli.helpers import echo as _echo
from cargo_manifest.cli.helpers import register_argument as _register_argument
from cargo_manifest.core.model_types import LogFormat
from cargo_manifest.logging import LOG_FORMATS, LOG_LEVELS, configure_logging

logger: logging.Logger = logging.getLogger("cargo_manifest.cli")

CARGO_MANIFEST_VERSION: Final[str] = __version__

CommandHandler = Callable[[argparse.Namespace], int]


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the cargo-manifest command-line interface.

    Parses command-line arguments, configures logging, and dispatches to the
    selected command.

    Args:
        argv: Command-line arguments to parse. If None, uses sys.argv.

    Returns:
        int: Exit code from the executed command handler (0 for success, non-zero for failure).
    """
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if args.version:
        _echo(f"cargo-manifest {CARGO_MANIFEST_VERSION}")
        return 0
    if args.command is None:
        parser.error("No command provided.")
    _initialize_logging(getattr(args, "log_format", None), getattr(args, "log_level", None))
    handler = _command_handlers().get(args.command)
    if handler is None:
        parser.error(f"Unknown command {args.command}")
    logger.debug("Running command %s", args.command)
    return handler(args)


def _build_parser() -> argparse.ArgumentParser:
    """Build the top-level parser with global options and all subcommands."""
    common = argparse.ArgumentParser(add_help=False)
    _register_argument(
        common,
        "--log-format",
        choices=LOG_FORMATS,
        default=argparse.SUPPRESS,
        help="Logging output format (defaults to $CARGO_MANIFEST_LOG_FORMAT, then text).",
    )
    _register_argument(
        common,
        "--log-level",
        choices=LOG_LEVELS,
        default=argparse.SUPPRESS,
        help="Logging verbosity (defaults to $CARGO_MANIFEST_LOG_LEVEL, then info).",
    )
    parser = argparse.ArgumentParser(
        prog="cargo-manifest",
        parents=[common],
        description="Parse Cargo.toml manifests and infer the products Cargo would build.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    _register_argument(
        parser,
        "--version",
        action="store_true",
        help="Print the cargo-manifest version and exit.",
    )
    subparsers = parser.add_subparsers(dest="command")

    parents = [common]
    show_command.register_show_command(subparsers, parents=parents)
    schema_command.register_schema_command(subparsers, parents=parents)
    return parser


def _initialize_logging(log_format: str | None, log_level: str | None) -> None:
    # An unknown format in the environment leaves logging unconfigured.
    with suppress(ValueError):
        _ = configure_logging(
            LogFormat.from_str(log_format) if log_format is not None else None,
            log_level=log_level,
        )


def _command_handlers() -> dict[str, CommandHandler]:
    return {
        "schema": schema_command.execute_schema,
        "show": show_command.execute_show,
    }


__all__ = ["main"]
