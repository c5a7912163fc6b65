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

"""Top-level manifest models: `Manifest` and its `[package]` section.

Both models are generic over the type of `[package.metadata]`. The bare
`Manifest` accepts any metadata value; `Manifest[MyMetadata]` validates it
against a caller-supplied model and reports mismatches as syntax errors.
"""

from __future__ import annotations

from os import PathLike
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from cargo_manifest.compat import Self
from cargo_manifest.core.model_types import Edition, Resolver

from .badges import Badges
from .dependencies import DepsSet, PatchSet, TargetDepsSet
from .fields import (
    MANIFEST_MODEL_CONFIG,
    FeatureSet,
    Inheritable,
    Publish,
    StringOrBool,
    TomlValue,
    alias_field,
)
from .products import Product
from .profiles import Profiles
from .workspace import Workspace
from .writer import manifest_to_document, manifest_to_toml

if TYPE_CHECKING:
    from cargo_manifest.filesystem import AbstractFilesystem

MetadataT = TypeVar("MetadataT")


class Package(BaseModel, Generic[MetadataT]):
    """The `[package]` section.

    Fields typed `Inheritable[...]` hold either the local value or the
    `WorkspaceInherited` marker for `{ workspace = true }`.

    Attributes:
        name: Package name; must not be empty.
        version: Version string.
        edition: Edition of the package; unset means 2015.
        build: Build script path, or ``false`` to disable the implicit one.
        workspace: Path to the workspace root when it is not a parent directory.
        authors: Author list.
        links: Name of the native library the package links.
        description: One-line summary.
        homepage: Homepage URL.
        documentation: Documentation URL.
        readme: Readme path, or ``false``.
        keywords: Search keywords.
        categories: Registry category slugs.
        license: SPDX license expression.
        license_file: Path to a non-standard license text.
        repository: Source repository URL.
        metadata: Free-form `[package.metadata]` table.
        rust_version: Minimum supported compiler version.
        exclude: Globs excluded from the published package.
        include: Globs included in the published package.
        default_run: Binary run by `cargo run` when several exist.
        autobins: Whether binaries are discovered from disk.
        autoexamples: Whether examples are discovered from disk.
        autotests: Whether integration tests are discovered from disk.
        autobenches: Whether benchmarks are discovered from disk.
        publish: Where the package may be published.
        resolver: Feature resolver version.
    """

    model_config: ClassVar[ConfigDict] = MANIFEST_MODEL_CONFIG

    name: str = Field(min_length=1)
    version: Inheritable[str]
    edition: Inheritable[Edition] | None = None
    build: StringOrBool | None = None
    workspace: str | None = None
    authors: Inheritable[list[str]] | None = None
    links: str | None = None
    description: Inheritable[str] | None = None
    homepage: Inheritable[str] | None = None
    documentation: Inheritable[str] | None = None
    readme: Inheritable[StringOrBool] | None = None
    keywords: Inheritable[list[str]] | None = None
    categories: Inheritable[list[str]] | None = None
    license: Inheritable[str] | None = None
    license_file: Inheritable[str] | None = None
    repository: Inheritable[str] | None = None
    metadata: MetadataT | None = None
    rust_version: Inheritable[str] | None = None
    exclude: Inheritable[list[str]] | None = None
    include: Inheritable[list[str]] | None = None
    default_run: str | None = None
    autobins: bool = True
    autoexamples: bool = True
    autotests: bool = True
    autobenches: bool = True
    publish: Inheritable[Publish] | None = None
    resolver: Resolver | None = None


class Manifest(BaseModel, Generic[MetadataT]):
    """A parsed `Cargo.toml`.

    Build with `Manifest.from_slice`, `Manifest.from_str` or
    `Manifest.from_path` (the last one also completes the manifest from the
    files next to it). Every section is optional; absent sections stay
    `None` and are left out when the manifest is written back.

    Attributes:
        package: The `[package]` section.
        cargo_features: Unstable compiler features the manifest opts into.
        workspace: The `[workspace]` section.
        dependencies: Normal dependencies.
        dev_dependencies: Dependencies for tests, examples and benchmarks.
        build_dependencies: Dependencies of the build script.
        target: Platform-specific dependency tables.
        features: Feature name to the features/dependencies it enables.
        bin: Binaries (`[[bin]]`).
        bench: Benchmarks (`[[bench]]`).
        test: Integration tests (`[[test]]`).
        example: Examples (`[[example]]`).
        patch: Dependency overrides per source.
        lib: The library (`[lib]`).
        profile: Build profiles.
        badges: Service badges.
    """

    model_config: ClassVar[ConfigDict] = MANIFEST_MODEL_CONFIG

    package: Package[MetadataT] | None = None
    cargo_features: list[str] | None = None
    workspace: Workspace | None = None
    dependencies: DepsSet | None = None
    dev_dependencies: DepsSet | None = alias_field("dev-dependencies", "dev_dependencies", default=None)
    build_dependencies: DepsSet | None = alias_field(
        "build-dependencies",
        "build_dependencies",
        default=None,
    )
    target: TargetDepsSet | None = None
    features: FeatureSet | None = None
    bin: list[Product] | None = None
    bench: list[Product] | None = None
    test: list[Product] | None = None
    example: list[Product] | None = None
    patch: PatchSet | None = None
    lib: Product | None = None
    profile: Profiles | None = None
    badges: Badges | None = None

    @classmethod
    def from_slice(cls, content: bytes) -> Self:
        """Parse manifest bytes without looking at the filesystem."""
        from .loader import manifest_from_slice

        return manifest_from_slice(content, model=cls)

    @classmethod
    def from_str(cls, text: str) -> Self:
        """Parse manifest text (not a file name) without looking at the filesystem."""
        from .loader import manifest_from_str

        return manifest_from_str(text, model=cls)

    @classmethod
    def from_path(cls, path: str | PathLike[str]) -> Self:
        """Read, parse and complete the manifest at `path`."""
        from .loader import manifest_from_path

        return manifest_from_path(path, model=cls)

    def complete_from_path(self, path: str | PathLike[str]) -> None:
        """Fill in implicit products from the directory containing `path`."""
        from cargo_manifest.completion import complete_from_path

        complete_from_path(self, path)

    def complete_from_abstract_filesystem(self, fs: AbstractFilesystem) -> None:
        """Fill in implicit products from any directory-listing source."""
        from cargo_manifest.completion import complete_from_abstract_filesystem

        complete_from_abstract_filesystem(self, fs)

    def to_document(self) -> dict[str, TomlValue]:
        """Return the manifest as a plain nested document with canonical keys."""
        return manifest_to_document(self)

    def to_toml(self) -> str:
        """Return the manifest rendered as TOML text."""
        return manifest_to_toml(self)


def manifest_json_schema() -> dict[str, Any]:
    """Return the JSON Schema of the `Cargo.toml` document shape.

    Returns:
        Dictionary containing the complete JSON Schema definition.
    """
    schema = Manifest.model_json_schema(by_alias=True)
    schema["$schema"] = "https://json-schema.org/draft-07/schema#"
    return schema


__all__ = ["Manifest", "MetadataT", "Package", "manifest_json_schema"]
