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

"""Shared building blocks for the manifest models.

Document keys are kebab-case (`dev-dependencies`); model attributes are
snake_case. Every model uses `MANIFEST_MODEL_CONFIG`, which derives the
kebab-case alias from the attribute name, still accepts the attribute name
on input, and ignores keys it does not know about. Fields with a documented
historical spelling declare it through `alias_field`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Annotated, Any, ClassVar, Literal, TypeAlias, TypeVar, Union

from pydantic import (
    AliasChoices,
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    RootModel,
    SerializerFunctionWrapHandler,
    WrapSerializer,
)

from cargo_manifest.compat import Self, override

T = TypeVar("T")
V = TypeVar("V")

# Any TOML value: string, integer, float, bool, datetime, array or table.
TomlValue: TypeAlias = Any


def kebab_case(name: str) -> str:
    """Return the document key for a snake_case attribute name."""
    return name.replace("_", "-")


MANIFEST_MODEL_CONFIG: ConfigDict = ConfigDict(
    alias_generator=kebab_case,
    populate_by_name=True,
    extra="ignore",
)


def alias_field(
    key: str,
    *legacy: str,
    default: object = ...,
    default_factory: Callable[[], object] | None = None,
) -> Any:  # noqa: ANN401 # JUSTIFIED: Must return Any to work with Pydantic field annotations
    """Return a Field that reads `key` or any legacy spelling and always writes `key`.

    Args:
        key: Canonical kebab-case document key.
        *legacy: Historical spellings accepted on input only.
        default: Default value for the field (use ... for required fields).
        default_factory: Factory function to generate default values.

    Returns:
        FieldInfo configured with matching validation and serialization aliases.
    """
    aliases = AliasChoices(key, *legacy)
    if default_factory is not None:
        return Field(
            default_factory=default_factory,
            validation_alias=aliases,
            serialization_alias=key,
        )
    return Field(
        default=default,
        validation_alias=aliases,
        serialization_alias=key,
    )


def _sort_by_key(value: dict[str, V]) -> dict[str, V]:
    return dict(sorted(value.items()))


def _serialize_sorted(value: dict[str, V], handler: SerializerFunctionWrapHandler) -> object:
    return handler(_sort_by_key(value))


# Mapping that is ordered by key after validation and again on output.
SortedMap = Annotated[
    dict[str, V],
    AfterValidator(_sort_by_key),
    WrapSerializer(_serialize_sorted),
]

FeatureSet: TypeAlias = SortedMap[list[str]]


class WorkspaceInherited(BaseModel):
    """Marker for a value deferred to the workspace: `{ workspace = true }`.

    Only a literal `true` is accepted; `{ workspace = false }` does not
    validate.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="ignore", frozen=True)

    workspace: Literal[True]

    @classmethod
    def inherited(cls) -> Self:
        """Return the marker value."""
        return cls(workspace=True)


# A field that is either given locally (the bare value) or inherited from
# `[workspace.package]` / `[workspace.dependencies]`.
Inheritable = Union[WorkspaceInherited, T]


def is_inherited(value: object) -> bool:
    """Return True when `value` is the inherited-from-workspace marker."""
    return isinstance(value, WorkspaceInherited)


def local_value(value: WorkspaceInherited | T | None) -> T | None:
    """Return the locally declared value, or None when absent or inherited."""
    if value is None or isinstance(value, WorkspaceInherited):
        return None
    return value


# `readme = "README.md"` or `readme = false`.
StringOrBool: TypeAlias = Union[str, bool]


class Publish(RootModel[Union[bool, list[str]]]):
    """Where a package may be published.

    `true` allows any registry, `false` forbids publishing, and a list
    restricts publishing to the named registries. An empty list forbids
    publishing just like `false`, so comparison with a plain bool follows
    that effect instead of the structure.
    """

    root: Union[bool, list[str]] = True

    @classmethod
    def default(cls) -> Self:
        """Return the flag used when nothing is declared (`true`)."""
        return cls(True)

    @property
    def registries(self) -> list[str] | None:
        """Registry names, or None when `publish` is a plain flag."""
        return None if isinstance(self.root, bool) else self.root

    def is_publishable(self) -> bool:
        """Return True when at least one registry may receive the package."""
        return bool(self.root)

    @override
    def __eq__(self, other: object) -> bool:
        if isinstance(other, bool):
            return self.is_publishable() == other
        if isinstance(other, Publish):
            return self.root == other.root
        return NotImplemented


__all__ = [
    "MANIFEST_MODEL_CONFIG",
    "FeatureSet",
    "Inheritable",
    "Publish",
    "SortedMap",
    "StringOrBool",
    "TomlValue",
    "WorkspaceInherited",
    "alias_field",
    "is_inherited",
    "kebab_case",
    "local_value",
]
