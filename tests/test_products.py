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

from cargo_manifest import Manifest, Product
from cargo_manifest.core.model_types import Edition

MANIFEST = """
[package]
name = "demo"
version = "0.1.0"

[lib]
path = "src/lib.rs"
proc-macro = true
crate-type = ["cdylib", "rlib"]

[[bin]]
name = "cli"
path = "src/cli.rs"
required-features = ["cli"]
edition = "2018"

[[bin]]
name = "legacy"
required_features = ["old"]
test = false
"""


def test_default_product_has_documented_defaults() -> None:
    product = Product.default()
    assert product.test
    assert product.doctest
    assert product.bench
    assert product.doc
    assert product.harness
    assert not product.plugin
    assert not product.proc_macro
    assert product.edition is Edition.E2015
    assert product.required_features == []
    assert product.crate_type is None
    assert product.name is None
    assert product.path is None


def test_default_product_accepts_overrides() -> None:
    product = Product.default(name="tool", path="src/bin/tool.rs", edition=None)
    assert product.name == "tool"
    assert product.edition is None
    assert product.harness


def test_sparse_products_leave_edition_unset() -> None:
    manifest = Manifest.from_str(MANIFEST)
    assert manifest.lib is not None
    assert manifest.lib.edition is None
    assert manifest.lib.proc_macro
    assert manifest.lib.crate_type == ["cdylib", "rlib"]
    assert manifest.bin is not None
    cli, legacy = manifest.bin
    assert cli.edition is Edition.E2018
    assert cli.required_features == ["cli"]
    assert legacy.required_features == ["old"]
    assert not legacy.test
    assert legacy.doctest


def test_products_serialise_with_canonical_keys() -> None:
    document = Manifest.from_str(MANIFEST).to_document()
    lib = document["lib"]
    assert lib["proc-macro"] is True
    assert lib["crate-type"] == ["cdylib", "rlib"]
    assert "edition" not in lib
    assert document["bin"][0]["edition"] == "2018"
    assert document["bin"][1]["required-features"] == ["old"]
    assert "example" not in document
