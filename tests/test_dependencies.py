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

from __future__ import annotations

from cargo_manifest import Dependency, DependencyDetail, Manifest

MANIFEST = """
[package]
name = "demo"
version = "0.1.0"

[dependencies]
serde = { version = "1.0", features = ["derive"], default-features = false }
log = "0.4"
local = { path = "../local" }
renamed = { package = "real-name", version = "2" }
inherited = { workspace = true, optional = true }

[dev-dependencies]
proptest = { git = "https://github.com/proptest-rs/proptest", branch = "main" }

[build_dependencies]
cc = "1"

[target.'cfg(unix)'.dependencies]
libc = "0.2"

[patch.crates-io]
serde = { path = "../serde" }
"""


def test_simple_dependency_is_always_crates_io() -> None:
    dep = Dependency.simple("1.2")
    assert dep.is_crates_io()
    assert dep.req() == "1.2"
    assert dep.package() is None
    assert dep.req_features() == []
    assert not dep.optional()
    assert dep.detail() is None


def test_detailed_dependency_classification() -> None:
    assert Dependency.detailed(version="1").is_crates_io()
    assert not Dependency.detailed(git="https://example.com/repo.git").is_crates_io()
    assert not Dependency.detailed(path="../x").is_crates_io()
    assert not Dependency.detailed(registry_index="https://index.example").is_crates_io()


def test_detailed_dependency_without_version_requires_anything() -> None:
    assert Dependency.detailed(path="../x").req() == "*"


def test_parsed_dependencies() -> None:
    manifest = Manifest.from_str(MANIFEST)
    deps = manifest.dependencies
    assert deps is not None
    assert list(deps) == ["inherited", "local", "log", "renamed", "serde"]

    serde = deps["serde"]
    detail = serde.detail()
    assert isinstance(detail, DependencyDetail)
    assert detail.default_features is False
    assert serde.req() == "1.0"
    assert serde.req_features() == ["derive"]

    assert deps["log"].root == "0.4"
    assert deps["renamed"].package() == "real-name"
    assert deps["inherited"].optional()
    assert deps["inherited"].detail() == DependencyDetail(workspace=True, optional=True)


def test_dev_build_target_and_patch_sections() -> None:
    manifest = Manifest.from_str(MANIFEST)
    assert manifest.dev_dependencies is not None
    assert manifest.dev_dependencies["proptest"].git() == "https://github.com/proptest-rs/proptest"
    assert manifest.build_dependencies is not None
    assert manifest.build_dependencies["cc"].req() == "1"
    assert manifest.target is not None
    unix = manifest.target["cfg(unix)"]
    assert unix.dependencies["libc"].req() == "0.2"
    assert unix.dev_dependencies == {}
    assert unix.build_dependencies == {}
    assert manifest.patch is not None
    assert not manifest.patch["crates-io"]["serde"].is_crates_io()


def test_dependencies_serialise_with_canonical_keys() -> None:
    document = Manifest.from_str(MANIFEST).to_document()
    assert "build-dependencies" in document
    assert "build_dependencies" not in document
    assert document["dependencies"]["serde"] == {
        "version": "1.0",
        "features": ["derive"],
        "default-features": False,
    }
    assert list(document["dependencies"]) == ["inherited", "local", "log", "renamed", "serde"]
    assert document["target"]["cfg(unix)"] == {
        "dependencies": {"libc": "0.2"},
        "dev-dependencies": {},
        "build-dependencies": {},
    }
