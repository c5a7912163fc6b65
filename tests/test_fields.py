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

import pytest

from cargo_manifest import Manifest, ManifestSyntaxError, Publish, WorkspaceInherited
from cargo_manifest.core.model_types import Edition
from cargo_manifest.manifest.fields import is_inherited, kebab_case, local_value

INHERITING = """
[package]
name = "member"
version.workspace = true
edition = { workspace = true }
authors = ["A <a@example.com>"]
license.workspace = true
publish = ["internal"]
"""


def test_kebab_case_translates_attribute_names() -> None:
    assert kebab_case("dev_dependencies") == "dev-dependencies"
    assert kebab_case("name") == "name"


@pytest.mark.parametrize(
    ("publish", "flag", "expected"),
    [
        (Publish(True), True, True),
        (Publish(True), False, False),
        (Publish(False), False, True),
        (Publish(False), True, False),
        (Publish(["crates-io"]), True, True),
        (Publish(["crates-io"]), False, False),
        (Publish([]), False, True),
        (Publish([]), True, False),
    ],
)
def test_publish_compares_with_bool_by_effect(publish: Publish, flag: bool, expected: bool) -> None:
    assert (publish == flag) is expected
    assert (flag == publish) is expected


def test_publish_compares_structurally_with_publish() -> None:
    assert Publish(["a"]) == Publish(["a"])
    assert Publish([]) != Publish(False)
    assert Publish.default() == Publish(True)


def test_publish_registries() -> None:
    assert Publish(True).registries is None
    assert Publish(["internal"]).registries == ["internal"]
    assert not Publish([]).is_publishable()


def test_inheritable_fields_accept_local_and_workspace_values() -> None:
    manifest = Manifest.from_str(INHERITING)
    package = manifest.package
    assert package is not None
    assert is_inherited(package.version)
    assert package.version == WorkspaceInherited.inherited()
    assert is_inherited(package.edition)
    assert local_value(package.edition) is None
    assert local_value(package.authors) == ["A <a@example.com>"]
    assert is_inherited(package.license)
    assert package.publish == Publish(["internal"])


def test_local_edition_is_an_enum() -> None:
    manifest = Manifest.from_str('[package]\nname = "x"\nversion = "1.0.0"\nedition = "2021"\n')
    assert manifest.package is not None
    assert local_value(manifest.package.edition) is Edition.E2021


def test_workspace_false_is_rejected() -> None:
    with pytest.raises(ManifestSyntaxError) as excinfo:
        _ = Manifest.from_str('[package]\nname = "x"\nversion = { workspace = false }\n')
    assert any(location.startswith("package.version") for location in excinfo.value.locations)


@pytest.mark.parametrize(
    ("line", "field"),
    [
        ("version = {}", "version"),
        ('version = "1.0.0"\ndescription = { foo = 1 }', "description"),
    ],
)
def test_table_without_workspace_key_is_rejected(line: str, field: str) -> None:
    with pytest.raises(ManifestSyntaxError) as excinfo:
        _ = Manifest.from_str(f'[package]\nname = "x"\n{line}\n')
    assert any(location.startswith(f"package.{field}") for location in excinfo.value.locations)


def test_inherited_marker_serialises_as_workspace_true() -> None:
    manifest = Manifest.from_str(INHERITING)
    document = manifest.to_document()
    assert document["package"]["version"] == {"workspace": True}
    assert document["package"]["publish"] == ["internal"]
