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

"""Dependency declarations.

A dependency is written either as a bare version requirement
(`serde = "1.0"`) or as a table (`serde = { version = "1.0", features = [...] }`).
`Dependency` wraps both shapes and answers the questions callers usually
ask without caring which shape was used.
"""

from __future__ import annotations

from typing import Any, ClassVar, TypeAlias, Union

from pydantic import BaseModel, ConfigDict, Field, RootModel

from cargo_manifest.compat import Self

from .fields import MANIFEST_MODEL_CONFIG, SortedMap, alias_field

WILDCARD_REQUIREMENT = "*"


class DependencyDetail(BaseModel):
    """Table form of a dependency.

    The source fields (`path`, `git` with `branch`/`tag`/`rev`, `registry`,
    `registry-index`) are not mutually exclusive here; Cargo decides how to
    combine them.

    Attributes:
        version: Version requirement, e.g. ``"1.2"``.
        registry: Name of an alternative registry.
        registry_index: URL of an alternative registry index.
        path: Local path to the dependency, relative to the manifest.
        git: Git repository URL.
        branch: Git branch to track.
        tag: Git tag to check out.
        rev: Git revision to check out.
        features: Extra features to enable.
        optional: Whether the dependency is only pulled in by a feature.
        workspace: Whether the declaration is inherited from the workspace.
        default_features: Whether the dependency's default features are enabled.
        package: Real package name when the dependency is renamed.
    """

    model_config: ClassVar[ConfigDict] = MANIFEST_MODEL_CONFIG

    version: str | None = None
    registry: str | None = None
    registry_index: str | None = alias_field("registry-index", "registry_index", default=None)
    path: str | None = None
    git: str | None = None
    branch: str | None = None
    tag: str | None = None
    rev: str | None = None
    features: list[str] | None = None
    optional: bool | None = None
    workspace: bool | None = None
    default_features: bool | None = alias_field("default-features", "default_features", default=None)
    package: str | None = None


class Dependency(RootModel[Union[str, DependencyDetail]]):
    """A dependency in either its simple (requirement string) or detailed form."""

    root: Union[str, DependencyDetail]

    @classmethod
    def simple(cls, requirement: str) -> Self:
        """Build a dependency written as a bare requirement string."""
        return cls(requirement)

    @classmethod
    def detailed(cls, **fields: Any) -> Self:  # noqa: ANN401
        """Build a table-form dependency from `DependencyDetail` fields."""
        return cls(DependencyDetail(**fields))

    def detail(self) -> DependencyDetail | None:
        """Return the table form, or None for a simple dependency."""
        return self.root if isinstance(self.root, DependencyDetail) else None

    def req(self) -> str:
        """Return the version requirement (``"*"`` when a table declares none)."""
        if isinstance(self.root, str):
            return self.root
        return self.root.version or WILDCARD_REQUIREMENT

    def req_features(self) -> list[str]:
        """Return the explicitly requested features."""
        detail = self.detail()
        if detail is None or detail.features is None:
            return []
        return list(detail.features)

    def optional(self) -> bool:
        """Return True when the dependency is optional."""
        detail = self.detail()
        return bool(detail and detail.optional)

    def package(self) -> str | None:
        """Return the real package name when the dependency is renamed.

        Simple dependencies never rename; when this is None the dependency's
        key is the package name.
        """
        detail = self.detail()
        return detail.package if detail is not None else None

    def git(self) -> str | None:
        """Return the git URL, if any."""
        detail = self.detail()
        return detail.git if detail is not None else None

    def is_crates_io(self) -> bool:
        """Return True when the dependency resolves from the default registry.

        That is the case for every simple dependency, and for a table that
        sets none of path, registry, registry-index, git, tag, branch or rev.
        """
        detail = self.detail()
        if detail is None:
            return True
        return (
            detail.path is None
            and detail.registry is None
            and detail.registry_index is None
            and detail.git is None
            and detail.tag is None
            and detail.branch is None
            and detail.rev is None
        )


DepsSet: TypeAlias = SortedMap[Dependency]


def _empty_deps() -> dict[str, Dependency]:
    return {}


class Target(BaseModel):
    """Dependencies that only apply to one target platform (`[target.'cfg(unix)']`).

    Attributes:
        dependencies: Normal dependencies for the platform.
        dev_dependencies: Dev dependencies for the platform.
        build_dependencies: Build-script dependencies for the platform.
    """

    model_config: ClassVar[ConfigDict] = MANIFEST_MODEL_CONFIG

    dependencies: DepsSet = Field(default_factory=_empty_deps)
    dev_dependencies: DepsSet = alias_field(
        "dev-dependencies",
        "dev_dependencies",
        default_factory=_empty_deps,
    )
    build_dependencies: DepsSet = alias_field(
        "build-dependencies",
        "build_dependencies",
        default_factory=_empty_deps,
    )


TargetDepsSet: TypeAlias = SortedMap[Target]
PatchSet: TypeAlias = SortedMap[DepsSet]

__all__ = [
    "WILDCARD_REQUIREMENT",
    "Dependency",
    "DependencyDetail",
    "DepsSet",
    "PatchSet",
    "Target",
    "TargetDepsSet",
]
