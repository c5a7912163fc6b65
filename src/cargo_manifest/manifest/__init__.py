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

"""Typed model of `Cargo.toml`, with its parser and writer."""

from __future__ import annotations

from .badges import Badge, Badges, Maintenance
from .dependencies import Dependency, DependencyDetail, DepsSet, PatchSet, Target, TargetDepsSet
from .fields import (
    FeatureSet,
    Inheritable,
    Publish,
    StringOrBool,
    WorkspaceInherited,
    is_inherited,
    local_value,
)
from .loader import manifest_from_path, manifest_from_slice, manifest_from_str
from .models import Manifest, Package, manifest_json_schema
from .products import Product
from .profiles import Profile, Profiles
from .workspace import Workspace, WorkspacePackage
from .writer import manifest_to_document, manifest_to_json, manifest_to_toml

__all__ = [
    "Badge",
    "Badges",
    "Dependency",
    "DependencyDetail",
    "DepsSet",
    "FeatureSet",
    "Inheritable",
    "Maintenance",
    "Manifest",
    "Package",
    "PatchSet",
    "Product",
    "Profile",
    "Profiles",
    "Publish",
    "StringOrBool",
    "Target",
    "TargetDepsSet",
    "Workspace",
    "WorkspaceInherited",
    "WorkspacePackage",
    "is_inherited",
    "local_value",
    "manifest_from_path",
    "manifest_from_slice",
    "manifest_from_str",
    "manifest_json_schema",
    "manifest_to_document",
    "manifest_to_json",
    "manifest_to_toml",
]
