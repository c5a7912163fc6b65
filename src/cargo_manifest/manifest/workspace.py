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

"""The `[workspace]` section and the package fields members may inherit."""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from cargo_manifest.core.model_types import Edition, Resolver

from .dependencies import DepsSet
from .fields import MANIFEST_MODEL_CONFIG, Publish, StringOrBool, alias_field


class WorkspacePackage(BaseModel):
    """`[workspace.package]`: values members pull in with `{ workspace = true }`.

    Attributes:
        edition: Shared edition.
        version: Shared version string.
        authors: Shared author list.
        description: Shared description.
        homepage: Shared homepage URL.
        documentation: Shared documentation URL.
        readme: Shared readme path, or ``false``.
        keywords: Shared keywords.
        categories: Shared categories.
        license: Shared SPDX license expression.
        license_file: Shared license file path.
        publish: Shared publish setting.
        exclude: Shared exclude globs.
        include: Shared include globs.
        repository: Shared repository URL.
        rust_version: Shared minimum supported compiler version.
    """

    model_config: ClassVar[ConfigDict] = MANIFEST_MODEL_CONFIG

    edition: Edition | None = None
    version: str | None = None
    authors: list[str] | None = None
    description: str | None = None
    homepage: str | None = None
    documentation: str | None = None
    readme: StringOrBool | None = None
    keywords: list[str] | None = None
    categories: list[str] | None = None
    license: str | None = None
    license_file: str | None = None
    publish: Publish | None = None
    exclude: list[str] | None = None
    include: list[str] | None = None
    repository: str | None = None
    rust_version: str | None = None


def _empty_members() -> list[str]:
    return []


class Workspace(BaseModel):
    """The `[workspace]` section.

    Member globs are stored as written; nothing here expands or checks them.

    Attributes:
        members: Member path globs.
        default_members: Members operated on when no package is selected.
        exclude: Paths excluded from the workspace.
        resolver: Feature resolver version for the whole workspace.
        dependencies: Dependencies members may inherit.
        package: Package fields members may inherit.
    """

    model_config: ClassVar[ConfigDict] = MANIFEST_MODEL_CONFIG

    members: list[str] = Field(default_factory=_empty_members)
    default_members: list[str] | None = alias_field("default-members", "default_members", default=None)
    exclude: list[str] | None = None
    resolver: Resolver | None = None
    dependencies: DepsSet | None = None
    package: WorkspacePackage | None = None


__all__ = ["Workspace", "WorkspacePackage"]
