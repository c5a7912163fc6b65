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

"""Build profiles (`[profile.release]`, `[profile.dev]`, custom profiles)."""

from __future__ import annotations

from typing import Annotated, ClassVar

from pydantic import BaseModel, ConfigDict, Field

from .fields import MANIFEST_MODEL_CONFIG, SortedMap, TomlValue, alias_field


class Profile(BaseModel):
    """Compiler settings for one profile.

    `opt-level`, `debug`, `lto` and `strip` accept several value kinds
    (`opt-level = 3`, `opt-level = "s"`, `lto = true`, `lto = "thin"`), so
    they are kept as raw TOML values.
    """

    model_config: ClassVar[ConfigDict] = MANIFEST_MODEL_CONFIG

    opt_level: TomlValue | None = alias_field("opt-level", "opt_level", default=None)
    debug: TomlValue | None = None
    rpath: bool | None = None
    inherits: str | None = None
    lto: TomlValue | None = None
    debug_assertions: bool | None = alias_field("debug-assertions", "debug_assertions", default=None)
    codegen_units: Annotated[int, Field(ge=0, le=65535)] | None = alias_field(
        "codegen-units",
        "codegen_units",
        default=None,
    )
    panic: str | None = None
    incremental: bool | None = None
    overflow_checks: bool | None = alias_field("overflow-checks", "overflow_checks", default=None)
    strip: TomlValue | None = None
    split_debuginfo: str | None = None
    # per-package overrides: `[profile.dev.package.foo]`
    package: SortedMap[TomlValue] | None = None
    build_override: TomlValue | None = None


class Profiles(BaseModel):
    """The `[profile]` table.

    The five built-in profiles are fields; every other key is a custom
    profile, validated as a `Profile` and written back at the same level.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(populate_by_name=True, extra="allow")

    release: Profile | None = None
    dev: Profile | None = None
    test: Profile | None = None
    bench: Profile | None = None
    doc: Profile | None = None

    __pydantic_extra__: dict[str, Profile] = Field(init=False)

    @property
    def custom(self) -> dict[str, Profile]:
        """Custom profiles by name."""
        return self.__pydantic_extra__ if self.__pydantic_extra__ is not None else {}


__all__ = ["Profile", "Profiles"]
