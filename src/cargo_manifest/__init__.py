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

"""cargo_manifest - typed `Cargo.toml` manifests for Python.

Parses manifests into pydantic models, writes them back, and fills in the
library, binaries, examples, tests, benchmarks and build script that Cargo
would discover from the package's files.
"""

from __future__ import annotations

from cargo_manifest.exceptions import (
    CargoManifestError,
    ManifestEncodingError,
    ManifestError,
    ManifestIOError,
    ManifestSyntaxError,
)

from .completion import complete_from_abstract_filesystem, complete_from_path
from .core.model_types import Edition, MaintenanceStatus, ManifestErrorKind, Resolver
from .filesystem import AbstractFilesystem, Filesystem, MemoryFilesystem
from .manifest import (
    Badge,
    Badges,
    Dependency,
    DependencyDetail,
    Maintenance,
    Manifest,
    Package,
    Product,
    Profile,
    Profiles,
    Publish,
    Target,
    Workspace,
    WorkspaceInherited,
    WorkspacePackage,
    manifest_from_path,
    manifest_from_slice,
    manifest_from_str,
    manifest_json_schema,
    manifest_to_document,
    manifest_to_toml,
)

__all__ = [
    "AbstractFilesystem",
    "Badge",
    "Badges",
    "CargoManifestError",
    "Dependency",
    "DependencyDetail",
    "Edition",
    "Filesystem",
    "Maintenance",
    "MaintenanceStatus",
    "Manifest",
    "ManifestEncodingError",
    "ManifestError",
    "ManifestErrorKind",
    "ManifestIOError",
    "ManifestSyntaxError",
    "MemoryFilesystem",
    "Package",
    "Product",
    "Profile",
    "Profiles",
    "Publish",
    "Resolver",
    "Target",
    "Workspace",
    "WorkspaceInherited",
    "WorkspacePackage",
    "__version__",
    "complete_from_abstract_filesystem",
    "complete_from_path",
    "manifest_from_path",
    "manifest_from_slice",
    "manifest_from_str",
    "manifest_json_schema",
    "manifest_to_document",
    "manifest_to_toml",
]

__version__ = "0.1.0"
