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

# ignore JUSTIFIED: argument helpers mirror argparse signatures and allow passthrough
# typing without constraining caller kwargs
# ruff: noqa: ANN401

"""Argument parser helpers used across CLI commands."""

from __future__ import annotations

import argparse
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence


class ArgumentRegistrar(Protocol):
    """Anything with ``add_argument``: parsers and argument groups alike."""

    def add_argument(
        self,
        *args: Any,
        **kwargs: Any,
    ) -> argparse.Action:
        """Expose ``ArgumentParser.add_argument`` so helpers can operate generically."""
        ...  # pragma: no cover


def register_argument(
    registrar: ArgumentRegistrar,
    *args: Any,
    **kwargs: Any,
) -> None:
    """Register an argument on a parser/argument group, discarding the action handle.

    Args:
        registrar: Parser or argument group on which to register the option.
        *args: Positional flags and option strings forwarded to ``add_argument``.
        **kwargs: Keyword options forwarded to ``add_argument``.
    """
    _ = registrar.add_argument(*args, **kwargs)


def non_negative_int(raw: str) -> int:
    """argparse ``type=`` callable accepting integers >= 0."""
    try:
        value = int(raw)
    except ValueError as exc:
        msg = f"expected an integer, got {raw!r}"
        raise argparse.ArgumentTypeError(msg) from exc
    if value < 0:
        msg = f"expected a non-negative integer, got {value}"
        raise argparse.ArgumentTypeError(msg)
    return value


def register_indent_option(registrar: ArgumentRegistrar, *, default: int = 2) -> None:
    """Register the shared ``--indent`` option for JSON output."""
    register_argument(
        registrar,
        "--indent",
        type=non_negative_int,
        default=default,
        help="Indentation level for JSON output",
    )


def choices_of(values: Sequence[str]) -> list[str]:
    """Return argparse choices in a stable order."""
    return sorted(values)


__all__ = [
    "ArgumentRegistrar",
    "choices_of",
    "non_negative_int",
    "register_argument",
    "register_indent_option",
]
