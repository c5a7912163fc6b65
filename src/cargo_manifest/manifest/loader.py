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

"""Turn `Cargo.toml` bytes into `Manifest` models.

Parsing happens in up to two passes. The first validates the document as a
whole. When that produces neither `[package]` nor `[workspace]`, the file is
an old-style manifest and the second pass takes the package body from
`[project]` (or from the document root when there is no such table).
"""

from __future__ import annotations

import logging
from os import PathLike
from pathlib import Path
from typing import TypeVar

from pydantic import ValidationError

from cargo_manifest._internal.exceptions import (
    ManifestEncodingError,
    ManifestIOError,
    ManifestSyntaxError,
)
from cargo_manifest._internal.logging_utils import structured_extra
from cargo_manifest.compat import tomllib
from cargo_manifest.core.model_types import LogComponent

from .fields import TomlValue
from .models import Manifest

logger: logging.Logger = logging.getLogger("cargo_manifest.loader")

ManifestT = TypeVar("ManifestT", bound=Manifest)

LEGACY_PACKAGE_KEY = "project"


def _decode(content: bytes, path: Path | None) -> str:
    try:
        return content.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ManifestEncodingError(exc, path=path) from exc


def _parse_document(text: str, path: Path | None) -> dict[str, TomlValue]:
    try:
        return tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise ManifestSyntaxError(exc, path=path) from exc


def _validate(model: type[ManifestT], document: dict[str, TomlValue], path: Path | None) -> ManifestT:
    try:
        manifest = model.model_validate(document)
        if manifest.package is None and manifest.workspace is None:
            body = document.get(LEGACY_PACKAGE_KEY, document)
            source = "[project]" if LEGACY_PACKAGE_KEY in document else "document root"
            logger.debug(
                "No [package] or [workspace] section; reading the package from %s",
                source,
                extra=structured_extra(LogComponent.LOADER, details={"legacy_source": source}),
            )
            manifest = model.model_validate({**document, "package": body})
    except ValidationError as exc:
        raise ManifestSyntaxError(exc, path=path) from exc
    return manifest


def _load(content: bytes, model: type[ManifestT], path: Path | None) -> ManifestT:
    text = _decode(content, path)
    document = _parse_document(text, path)
    return _validate(model, document, path)


def manifest_from_slice(content: bytes, *, model: type[ManifestT] = Manifest) -> ManifestT:
    """Parse manifest bytes.

    Implicit products are not filled in; see `complete_from_abstract_filesystem`.

    Args:
        content: Raw `Cargo.toml` bytes, expected to be UTF-8.
        model: Manifest class to validate into, e.g. ``Manifest[MyMetadata]``.

    Returns:
        The parsed manifest.

    Raises:
        ManifestEncodingError: If `content` is not valid UTF-8.
        ManifestSyntaxError: If the TOML is malformed or does not fit `model`.
    """
    return _load(content, model, None)


def manifest_from_str(text: str, *, model: type[ManifestT] = Manifest) -> ManifestT:
    """Parse manifest text. `text` is the file content, not a file name."""
    return _validate(model, _parse_document(text, None), None)


def manifest_from_path(
    path: str | PathLike[str],
    *,
    model: type[ManifestT] = Manifest,
    complete: bool = True,
) -> ManifestT:
    """Read and parse the manifest at `path`, then complete it from disk.

    Args:
        path: Location of a `Cargo.toml` file.
        model: Manifest class to validate into.
        complete: Fill in implicit products and the build script from the
            files next to the manifest (default True).

    Returns:
        The parsed (and, unless disabled, completed) manifest.

    Raises:
        ManifestIOError: If the file cannot be read or a directory listing fails.
        ManifestEncodingError: If the file is not valid UTF-8.
        ManifestSyntaxError: If the TOML is malformed or does not fit `model`.
    """
    manifest_path = Path(path)
    try:
        content = manifest_path.read_bytes()
    except OSError as exc:
        raise ManifestIOError(exc, path=manifest_path) from exc
    manifest = _load(content, model, manifest_path)
    logger.debug(
        "Parsed %s",
        manifest_path,
        extra=structured_extra(LogComponent.LOADER, manifest=manifest_path),
    )
    if complete:
        from cargo_manifest.completion import complete_from_path

        complete_from_path(manifest, manifest_path)
    return manifest


__all__ = ["manifest_from_path", "manifest_from_slice", "manifest_from_str"]
