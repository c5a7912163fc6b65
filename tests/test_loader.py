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

from typing import TYPE_CHECKING

import pytest
from pydantic import BaseModel, ValidationError

from cargo_manifest import (
    Manifest,
    ManifestEncodingError,
    ManifestError,
    ManifestIOError,
    ManifestSyntaxError,
    Package,
    manifest_from_path,
    manifest_from_slice,
)
from cargo_manifest.compat import tomllib
from cargo_manifest.core.model_types import ManifestErrorKind

if TYPE_CHECKING:
    from pathlib import Path


class Docs(BaseModel):
    features: list[str] = []
    all_features: bool = False


class Metadata(BaseModel):
    docs: Docs | None = None


def test_from_slice_and_from_str_agree() -> None:
    text = '[package]\nname = "demo"\nversion = "0.1.0"\n'
    assert Manifest.from_slice(text.encode()) == Manifest.from_str(text)
    assert manifest_from_slice(text.encode()) == Manifest.from_str(text)


def test_parsing_does_not_complete() -> None:
    manifest = Manifest.from_str('[package]\nname = "demo"\nversion = "0.1.0"\n')
    assert manifest.lib is None
    assert manifest.bin is None
    assert manifest.package is not None
    assert manifest.package.build is None


def test_invalid_utf8_is_an_encoding_error() -> None:
    with pytest.raises(ManifestEncodingError) as excinfo:
        _ = Manifest.from_slice(b'[package]\nname = "\xff\xfe"\n')
    error = excinfo.value
    assert error.kind is ManifestErrorKind.ENCODING
    assert isinstance(error, ValueError)
    assert isinstance(error.__cause__, UnicodeDecodeError)
    assert error.error is error.__cause__


def test_malformed_toml_is_a_syntax_error() -> None:
    with pytest.raises(ManifestSyntaxError) as excinfo:
        _ = Manifest.from_str("[package\nname = 1")
    error = excinfo.value
    assert error.kind is ManifestErrorKind.SYNTAX
    assert isinstance(error.error, tomllib.TOMLDecodeError)
    assert error.locations == []
    assert str(error)


def test_shape_mismatch_is_a_syntax_error_with_locations() -> None:
    with pytest.raises(ManifestSyntaxError) as excinfo:
        _ = Manifest.from_str('[package]\nname = ""\nversion = "0.1.0"\n')
    assert isinstance(excinfo.value.error, ValidationError)
    assert "package.name" in excinfo.value.locations


def test_legacy_project_section_becomes_package() -> None:
    manifest = Manifest.from_str(
        '[project]\nname = "old"\nversion = "0.1.0"\nauthors = ["me"]\n\n[dependencies]\nfoo = "1"\n',
    )
    expected = Package.model_validate({"name": "old", "version": "0.1.0", "authors": ["me"]})
    assert manifest.package == expected
    assert manifest.dependencies is not None
    assert manifest.dependencies["foo"].req() == "1"


def test_legacy_document_root_becomes_package() -> None:
    manifest = Manifest.from_str('name = "rooty"\nversion = "1.2.3"\ndescription = "no header"\n')
    assert manifest.package is not None
    assert manifest.package.name == "rooty"
    assert manifest.package.description == "no header"


def test_legacy_document_without_name_fails() -> None:
    with pytest.raises(ManifestSyntaxError) as excinfo:
        _ = Manifest.from_str('[dependencies]\nfoo = "1"\n')
    assert "package.name" in excinfo.value.locations


def test_typed_metadata() -> None:
    text = '[package]\nname = "x"\nversion = "1.0.0"\n\n[package.metadata.docs]\nfeatures = ["a", "b"]\n'
    manifest = Manifest[Metadata].from_str(text)
    assert manifest.package is not None
    metadata = manifest.package.metadata
    assert isinstance(metadata, Metadata)
    assert metadata.docs == Docs(features=["a", "b"])


def test_untyped_metadata_keeps_raw_values() -> None:
    text = '[package]\nname = "x"\nversion = "1.0.0"\n\n[package.metadata.release]\nsign = true\n'
    manifest = Manifest.from_str(text)
    assert manifest.package is not None
    assert manifest.package.metadata == {"release": {"sign": True}}


def test_typed_metadata_mismatch_names_the_path() -> None:
    text = '[package]\nname = "x"\nversion = "1.0.0"\n\n[package.metadata.docs]\nfeatures = 3\n'
    with pytest.raises(ManifestSyntaxError) as excinfo:
        _ = Manifest[Metadata].from_str(text)
    assert "package.metadata.docs.features" in excinfo.value.locations


def test_from_path_reads_and_completes(crate_dir: Path) -> None:
    manifest = manifest_from_path(crate_dir / "Cargo.toml")
    assert manifest.lib is not None
    assert manifest.lib.name == "demo_crate"
    assert manifest.bin is not None
    assert [product.name for product in manifest.bin] == ["tool", "demo-crate"]
    assert manifest.package is not None
    assert manifest.package.build == "build.rs"


def test_from_path_without_completion(crate_dir: Path) -> None:
    manifest = Manifest.from_path(crate_dir / "Cargo.toml")
    assert manifest.lib is not None
    bare = manifest_from_path(crate_dir / "Cargo.toml", complete=False)
    assert bare.lib is None
    assert bare.bin is None


def test_missing_file_is_an_io_error(tmp_path: Path) -> None:
    missing = tmp_path / "Cargo.toml"
    with pytest.raises(ManifestIOError) as excinfo:
        _ = Manifest.from_path(missing)
    error = excinfo.value
    assert error.kind is ManifestErrorKind.IO
    assert error.path == missing
    assert isinstance(error, OSError)
    assert isinstance(error, ManifestError)
    assert isinstance(error.__cause__, FileNotFoundError)
    assert str(missing) in str(error)


def test_errors_from_path_carry_the_path(tmp_path: Path) -> None:
    path = tmp_path / "Cargo.toml"
    _ = path.write_bytes(b"[package]\nname = 'x'\nversion = 1\n")
    with pytest.raises(ManifestSyntaxError) as excinfo:
        _ = Manifest.from_path(path)
    assert excinfo.value.path == path
    assert str(excinfo.value).startswith(str(path))
