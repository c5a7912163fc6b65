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

"""Closed vocabularies used throughout cargo_manifest.

This module defines the enumerations shared by the manifest data model,
the error hierarchy, logging and the CLI:

- Edition and resolver choices declared by packages and workspaces
- Maintenance status vocabulary for the `[badges.maintenance]` table
- Error kinds, log formats, log components and CLI output formats
"""

from __future__ import annotations

from enum import Enum


class Edition(str, Enum):
    """Language edition a package or product is compiled with.

    Attributes:
        E2015: The original edition; the default when nothing is declared.
        E2018: The 2018 edition.
        E2021: The 2021 edition.
        E2024: The 2024 edition.
    """

    E2015 = "2015"
    E2018 = "2018"
    E2021 = "2021"
    E2024 = "2024"

    @classmethod
    def default(cls) -> Edition:
        """Return the oldest supported edition."""
        return cls.E2015

    @classmethod
    def from_str(cls, raw: str) -> Edition:
        """Create an Edition from its string form.

        Args:
            raw: Year string such as ``"2021"``.

        Returns:
            Edition enum value.

        Raises:
            ValueError: If the string does not name a known edition.
        """
        value = raw.strip()
        try:
            return cls(value)
        except ValueError as exc:
            msg = f"Unknown edition '{raw}'"
            raise ValueError(msg) from exc


class Resolver(str, Enum):
    """Dependency feature resolver version.

    Attributes:
        V1: The original resolver (default).
        V2: The resolver that keeps build/dev/target features apart.
    """

    V1 = "1"
    V2 = "2"

    @classmethod
    def default(cls) -> Resolver:
        """Return the resolver used when none is declared."""
        return cls.V1


class MaintenanceStatus(str, Enum):
    """Maintenance intent advertised through `[badges.maintenance]`.

    Attributes:
        NONE: No badge is displayed (default).
        ACTIVELY_DEVELOPED: New features are being added.
        PASSIVELY_MAINTAINED: Only bug fixes are expected.
        AS_IS: No changes are planned.
        EXPERIMENTAL: Not yet ready for general use.
        LOOKING_FOR_MAINTAINER: The current maintainer wants to hand over.
        DEPRECATED: Users should migrate elsewhere.
    """

    NONE = "none"
    ACTIVELY_DEVELOPED = "actively-developed"
    PASSIVELY_MAINTAINED = "passively-maintained"
    AS_IS = "as-is"
    EXPERIMENTAL = "experimental"
    LOOKING_FOR_MAINTAINER = "looking-for-maintainer"
    DEPRECATED = "deprecated"


class ManifestErrorKind(str, Enum):
    """Kinds of failure a manifest operation can report.

    Attributes:
        SYNTAX: The document could not be parsed into the expected shape.
        ENCODING: The input bytes are not valid UTF-8.
        IO: A file read or directory listing failed.
    """

    SYNTAX = "syntax"
    ENCODING = "encoding"
    IO = "io"


class ProductKind(str, Enum):
    """Categories of buildable products a manifest may declare."""

    LIB = "lib"
    BIN = "bin"
    EXAMPLE = "example"
    TEST = "test"
    BENCH = "bench"


class LogFormat(str, Enum):
    """Enumeration of log output formats.

    Attributes:
        TEXT: Human-readable text format.
        JSON: Machine-readable JSON format.
    """

    TEXT = "text"
    JSON = "json"

    @classmethod
    def from_str(cls, raw: str) -> LogFormat:
        """Create a LogFormat enum from a string value.

        Args:
            raw: String representation of the log format.

        Returns:
            LogFormat enum value.

        Raises:
            ValueError: If the string does not match any LogFormat value.
        """
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            msg = f"Unknown log format '{raw}'"
            raise ValueError(msg) from exc


class LogComponent(str, Enum):
    """Enumeration of loggable components.

    Attributes:
        LOADER: Manifest parsing and file reading.
        COMPLETION: Filesystem-driven completion of implicit products.
        CLI: Command-line interface.
    """

    LOADER = "loader"
    COMPLETION = "completion"
    CLI = "cli"


class OutputFormat(str, Enum):
    """Document formats the CLI can render a manifest as."""

    TOML = "toml"
    JSON = "json"

    @classmethod
    def from_str(cls, raw: str) -> OutputFormat:
        """Create an OutputFormat from a string value.

        Args:
            raw: String representation of the output format.

        Returns:
            OutputFormat enum value.

        Raises:
            ValueError: If the string does not match any OutputFormat value.
        """
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            msg = f"Unknown output format '{raw}'"
            raise ValueError(msg) from exc


__all__ = [
    "Edition",
    "LogComponent",
    "LogFormat",
    "MaintenanceStatus",
    "ManifestErrorKind",
    "OutputFormat",
    "ProductKind",
    "Resolver",
]
