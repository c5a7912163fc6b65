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

"""Build products: the library, binaries, examples, tests and benchmarks.

Cargo calls these "targets", a word it also uses for target platforms; here
they are "products" to keep the two apart.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict

from cargo_manifest.compat import Self
from cargo_manifest.core.model_types import Edition

from .fields import MANIFEST_MODEL_CONFIG, alias_field

DEFAULT_LIB_CRATE_TYPE = "rlib"


def _empty_features() -> list[str]:
    return []


class Product(BaseModel):
    """A single buildable product (`[lib]`, `[[bin]]`, `[[example]]`, ...).

    Attributes:
        path: Source file of the product's crate root, relative to the manifest.
        name: Name of the generated artifact. For the library this defaults to
            the package name with dashes replaced by underscores.
        test: Whether unit tests are built for this product.
        doctest: Whether documentation tests run (libraries only).
        bench: Whether benchmarks are built for this product.
        doc: Whether the product is documented.
        plugin: Whether the product is a compiler plugin.
        proc_macro: Whether the product is a procedural macro library.
        harness: Whether the test harness is generated.
        edition: Edition override; unset means the package edition applies.
        required_features: Features that must be enabled to build the product.
            Meaningless for the library.
        crate_type: Crate types to emit (``rlib``, ``cdylib``, ...).
    """

    model_config: ClassVar[ConfigDict] = MANIFEST_MODEL_CONFIG

    path: str | None = None
    name: str | None = None
    test: bool = True
    doctest: bool = True
    bench: bool = True
    doc: bool = True
    plugin: bool = False
    proc_macro: bool = alias_field("proc-macro", "proc_macro", default=False)
    harness: bool = True
    edition: Edition | None = None
    required_features: list[str] = alias_field(
        "required-features",
        "required_features",
        default_factory=_empty_features,
    )
    crate_type: list[str] | None = alias_field("crate-type", "crate_type", default=None)

    @classmethod
    def default(cls, **overrides: Any) -> Self:  # noqa: ANN401
        """Return a product with every field at its documented default.

        The edition starts at the oldest supported edition; any field can be
        replaced through keyword overrides (including ``edition=None``).

        Args:
            **overrides: Field values that replace the defaults.

        Returns:
            A new product.
        """
        fields: dict[str, Any] = {"edition": Edition.default()}
        fields.update(overrides)
        return cls(**fields)


__all__ = ["DEFAULT_LIB_CRATE_TYPE", "Product"]
