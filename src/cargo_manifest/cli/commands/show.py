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

"""`cargo-manifest show`: print a manifest in canonical form."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from cargo_manifest._internal.error_codes import error_code_for
from cargo_manifest._internal.exceptions import ManifestError
from cargo_manifest._internal.logging_utils import structured_extra
from cargo_manifest.cli.helpers import choices_of, echo, register_argument, register_indent_option
from cargo_manifest.core.model_types import LogComponent, OutputFormat
from cargo_manifest.manifest.loader import manifest_from_path
from cargo_manifest.manifest.writer import manifest_to_json, manifest_to_toml

if TYPE_CHECKING:
    from collections.abc import Sequence

    from cargo_manifest.cli.types import SubparserCollection

logger: logging.Logger = logging.getLogger("cargo_manifest.cli")

MANIFEST_FILE_NAME = "Cargo.toml"


def register_show_command(
    subparsers: SubparserCollection,
    *,
    parents: Sequence[argparse.ArgumentParser] | None = None,
) -> None:
    """Register the `cargo-manifest show` command.

    Args:
        subparsers: Top-level argparse subparser collection to register commands on.
        parents: Shared parent parsers carrying global options.
    """
    show = subparsers.add_parser(
        "show",
        help="Parse a Cargo.toml and print it in canonical form",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        parents=parents or [],
    )
    register_argument(
        show,
        "path",
        type=Path,
        help="Cargo.toml file, or a directory containing one",
    )
    register_argument(
        show,
        "--format",
        dest="output_format",
        choices=choices_of([format_.value for format_ in OutputFormat]),
        default=OutputFormat.TOML.value,
        help="Output document format",
    )
    register_argument(
        show,
        "--no-complete",
        action="store_true",
        help="Do not infer products and the build script from files on disk",
    )
    register_indent_option(show)


def resolve_manifest_path(path: Path) -> Path:
    """Return `path`, or `path/Cargo.toml` when `path` is a directory."""
    return path / MANIFEST_FILE_NAME if path.is_dir() else path


def execute_show(args: argparse.Namespace) -> int:
    """Execute `cargo-manifest show`.

    Args:
        args: Parsed CLI namespace.

    Returns:
        `0` on success, `1` when the manifest cannot be loaded.
    """
    manifest_path = resolve_manifest_path(args.path)
    try:
        manifest = manifest_from_path(manifest_path, complete=not args.no_complete)
    except ManifestError as exc:
        logger.debug(
            "Failed to load %s",
            manifest_path,
            extra=structured_extra(
                LogComponent.CLI,
                manifest=manifest_path,
                details={"kind": exc.kind, "code": error_code_for(exc)},
            ),
        )
        echo(f"[cargo-manifest] ({error_code_for(exc)}) {exc}", err=True)
        return 1

    output_format = OutputFormat.from_str(args.output_format)
    if output_format is OutputFormat.JSON:
        echo(manifest_to_json(manifest, indent=args.indent))
    else:
        echo(manifest_to_toml(manifest), newline=False)
    return 0


__all__ = ["execute_show", "register_show_command", "resolve_manifest_path"]
