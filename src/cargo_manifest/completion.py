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

"""Fill in the parts of a manifest that Cargo infers from the file layout.

A manifest may leave out `[lib]`, `[[bin]]`, `[[example]]`, `[[test]]`,
`[[bench]]` and `package.build`; Cargo then finds them by convention:

- `src/lib.rs` is the library, `src/main.rs` a binary named after the package;
- every `*.rs` file in `src/bin`, `examples`, `tests` or `benches` is a
  product named after the file (a file called just `.rs` gives an empty
  name), and every subdirectory there holding a `main.rs` is a product
  named after the subdirectory;
- `build.rs` next to the manifest is the build script.

Product lists that are declared explicitly (even as empty lists) are never
touched, so completing twice gives the same result as completing once.
Directory names are visited in sorted order.
"""

from __future__ import annotations

import logging
from os import PathLike
from pathlib import Path
from typing import TYPE_CHECKING, Any

from cargo_manifest._internal.exceptions import ManifestIOError
from cargo_manifest._internal.logging_utils import structured_extra
from cargo_manifest.core.model_types import Edition, LogComponent, ProductKind
from cargo_manifest.filesystem import AbstractFilesystem, Filesystem
from cargo_manifest.manifest.fields import local_value
from cargo_manifest.manifest.products import DEFAULT_LIB_CRATE_TYPE, Product

if TYPE_CHECKING:
    from cargo_manifest.manifest.models import Manifest, Package

logger: logging.Logger = logging.getLogger("cargo_manifest.completion")

SOURCE_EXTENSION = ".rs"
BUILD_SCRIPT = "build.rs"
LIB_SOURCE = "lib.rs"
MAIN_SOURCE = "main.rs"
ROOT_DIR = "."
SRC_DIR = "src"
BIN_DIR = "src/bin"
EXAMPLES_DIR = "examples"
TESTS_DIR = "tests"
BENCHES_DIR = "benches"


def _list_dir(fs: AbstractFilesystem, rel_path: str) -> set[str]:
    """List `rel_path`, reading a missing directory as empty."""
    try:
        return fs.file_names_in(rel_path)
    except FileNotFoundError:
        return set()
    except OSError as exc:
        raise ManifestIOError(exc, path=Path(rel_path)) from exc


def _log_product(kind: ProductKind, product: Product) -> None:
    logger.debug(
        "Inferred %s %s at %s",
        kind.value,
        product.name,
        product.path,
        extra=structured_extra(
            LogComponent.COMPLETION,
            path=product.path or "",
            details={"kind": kind, "name": product.name},
        ),
    )


def _autoset(
    fs: AbstractFilesystem,
    rel_dir: str,
    kind: ProductKind,
    edition: Edition | None,
) -> list[Product]:
    products: list[Product] = []
    for name in sorted(_list_dir(fs, rel_dir)):
        rel_path = f"{rel_dir}/{name}"
        if name.endswith(SOURCE_EXTENSION):
            product = Product.default(
                name=name.removesuffix(SOURCE_EXTENSION),
                path=rel_path,
                edition=edition,
            )
        else:
            try:
                entries = fs.file_names_in(rel_path)
            except (FileNotFoundError, NotADirectoryError):
                continue
            except OSError as exc:
                raise ManifestIOError(exc, path=Path(rel_path)) from exc
            if MAIN_SOURCE not in entries:
                continue
            product = Product.default(name=name, path=f"{rel_path}/{MAIN_SOURCE}", edition=edition)
        _log_product(kind, product)
        products.append(product)
    return products


def _local_edition(package: Package[Any]) -> Edition | None:
    # Inherited editions are not resolved here; the product keeps no edition.
    return local_value(package.edition)


def complete_from_abstract_filesystem(manifest: Manifest[Any], fs: AbstractFilesystem) -> None:
    """Infer unset products and the build script from `fs`.

    Does nothing when the manifest has no `[package]`. An explicit `[lib]`
    always has its `required-features` cleared, since they do not apply to
    libraries.

    Args:
        manifest: Manifest to update in place.
        fs: Directory listings relative to the manifest's directory.

    Raises:
        ManifestIOError: If listing a directory fails for any reason other
            than the directory not existing. Changes made before the failure
            are kept.
    """
    package = manifest.package
    if package is None:
        return

    src = _list_dir(fs, SRC_DIR)
    edition = _local_edition(package)
    counts: dict[str, int] = {}

    if manifest.lib is not None:
        manifest.lib.required_features.clear()
    elif LIB_SOURCE in src:
        manifest.lib = Product.default(
            name=package.name.replace("-", "_"),
            path=f"{SRC_DIR}/{LIB_SOURCE}",
            edition=edition,
            crate_type=[DEFAULT_LIB_CRATE_TYPE],
        )
        _log_product(ProductKind.LIB, manifest.lib)
        counts[ProductKind.LIB.value] = 1

    if package.autobins and manifest.bin is None:
        bins = _autoset(fs, BIN_DIR, ProductKind.BIN, edition)
        if MAIN_SOURCE in src:
            main = Product.default(name=package.name, path=f"{SRC_DIR}/{MAIN_SOURCE}", edition=edition)
            _log_product(ProductKind.BIN, main)
            bins.append(main)
        manifest.bin = bins
        counts[ProductKind.BIN.value] = len(bins)
    if package.autoexamples and manifest.example is None:
        manifest.example = _autoset(fs, EXAMPLES_DIR, ProductKind.EXAMPLE, edition)
        counts[ProductKind.EXAMPLE.value] = len(manifest.example)
    if package.autotests and manifest.test is None:
        manifest.test = _autoset(fs, TESTS_DIR, ProductKind.TEST, edition)
        counts[ProductKind.TEST.value] = len(manifest.test)
    if package.autobenches and manifest.bench is None:
        manifest.bench = _autoset(fs, BENCHES_DIR, ProductKind.BENCH, edition)
        counts[ProductKind.BENCH.value] = len(manifest.bench)

    if package.build is None and BUILD_SCRIPT in _list_dir(fs, ROOT_DIR):
        package.build = BUILD_SCRIPT
        logger.debug(
            "Inferred build script %s",
            BUILD_SCRIPT,
            extra=structured_extra(LogComponent.COMPLETION, path=BUILD_SCRIPT),
        )

    logger.debug(
        "Completed %s with %d inferred products",
        package.name,
        sum(counts.values()),
        extra=structured_extra(LogComponent.COMPLETION, counts=counts),
    )


def complete_from_path(manifest: Manifest[Any], manifest_path: str | PathLike[str]) -> None:
    """Complete `manifest` from the directory that contains `manifest_path`.

    Args:
        manifest: Manifest to update in place.
        manifest_path: Path of the `Cargo.toml` the manifest was read from.
    """
    root = Path(manifest_path).parent
    logger.debug(
        "Completing manifest from %s",
        root,
        extra=structured_extra(LogComponent.COMPLETION, manifest=manifest_path, path=root),
    )
    complete_from_abstract_filesystem(manifest, Filesystem(root))


__all__ = [
    "complete_from_abstract_filesystem",
    "complete_from_path",
]
