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

"""Render manifests back into documents.

Output mirrors the parser: canonical kebab-case keys, sorted dependency
tables, and no entry at all for sections that were never set.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

import tomli_w

if TYPE_CHECKING:
    from pydantic import BaseModel

    from .fields import TomlValue


def _plain(value: TomlValue) -> TomlValue:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {key: _plain(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_plain(item) for item in value]
    return value


def manifest_to_document(manifest: BaseModel) -> dict[str, TomlValue]:
    """Return `manifest` as a nested document of plain TOML values.

    Args:
        manifest: Any manifest model (`Manifest`, `Package`, `Product`, ...).

    Returns:
        Dictionary keyed by canonical document keys, with enum members
        replaced by their string values.
    """
    document = manifest.model_dump(mode="python", by_alias=True, exclude_none=True)
    return _plain(document)


def manifest_to_toml(manifest: BaseModel) -> str:
    """Render `manifest` as TOML text."""
    return tomli_w.dumps(manifest_to_document(manifest))


def manifest_to_json(manifest: BaseModel, *, indent: int | None = 2) -> str:
    """Render `manifest` as JSON text (TOML datetimes become ISO strings)."""
    return manifest.model_dump_json(by_alias=True, exclude_none=True, indent=indent)


__all__ = ["manifest_to_document", "manifest_to_json", "manifest_to_toml"]
