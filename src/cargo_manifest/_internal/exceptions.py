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

"""Exception hierarchy for cargo_manifest.

Every failure raised by the loader or the completion engine is a
``ManifestError`` subclass. The concrete class (and its ``kind``) tells
callers whether the document was malformed, the bytes were not UTF-8, or
the filesystem failed; the original exception stays reachable through
``error`` and ``__cause__``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from pydantic import ValidationError

from cargo_manifest.core.model_types import ManifestErrorKind

if TYPE_CHECKING:
    from pathlib import Path

__all__ = [
    "CargoManifestError",
    "ManifestEncodingError",
    "ManifestError",
    "ManifestIOError",
    "ManifestSyntaxError",
]


class CargoManifestError(Exception):
    """Base error for all cargo_manifest exceptions."""


class ManifestError(CargoManifestError):
    """A manifest could not be loaded or completed.

    Attributes:
        kind: Which of the three failure kinds this error represents.
        error: The underlying exception.
        path: Source file or directory involved, when known.
    """

    kind: ClassVar[ManifestErrorKind]

    def __init__(self, error: BaseException, *, path: Path | None = None) -> None:
        """Initialize the exception from its underlying cause.

        Args:
            error: The exception raised by the parser, decoder or filesystem.
            path: Optional path of the manifest or directory involved.
        """
        self.error = error
        self.path = path
        super().__init__(self._render())
        self.__cause__ = error

    def _render(self) -> str:
        message = str(self.error)
        if self.path is None:
            return message
        return f"{self.path}: {message}"


class ManifestSyntaxError(ManifestError, ValueError):
    """The document is not valid TOML or does not match the manifest shape."""

    kind: ClassVar[ManifestErrorKind] = ManifestErrorKind.SYNTAX

    @property
    def locations(self) -> list[str]:
        """Dotted paths of the fields that failed validation.

        Returns:
            One entry per validation failure (``package.metadata.docs``),
            or an empty list when the failure came from the TOML parser.
        """
        if not isinstance(self.error, ValidationError):
            return []
        return [".".join(str(part) for part in item["loc"]) for item in self.error.errors()]


class ManifestEncodingError(ManifestError, ValueError):
    """The manifest bytes are not valid UTF-8."""

    kind: ClassVar[ManifestErrorKind] = ManifestErrorKind.ENCODING


class ManifestIOError(ManifestError, OSError):
    """Reading the manifest or listing a directory failed."""

    kind: ClassVar[ManifestErrorKind] = ManifestErrorKind.IO
