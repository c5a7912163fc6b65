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

from cargo_manifest.core.model_types import (
    Edition,
    LogFormat,
    MaintenanceStatus,
    OutputFormat,
    Resolver,
)


def test_edition_defaults_to_oldest() -> None:
    assert Edition.default() is Edition.E2015
    assert [edition.value for edition in Edition] == ["2015", "2018", "2021", "2024"]


def test_edition_from_str() -> None:
    assert Edition.from_str(" 2021 ") is Edition.E2021
    with pytest.raises(ValueError, match="Unknown edition"):
        _ = Edition.from_str("2019")


def test_resolver_default() -> None:
    assert Resolver.default() is Resolver.V1
    assert Resolver("2") is Resolver.V2


def test_maintenance_status_vocabulary() -> None:
    assert {status.value for status in MaintenanceStatus} == {
        "none",
        "actively-developed",
        "passively-maintained",
        "as-is",
        "experimental",
        "looking-for-maintainer",
        "deprecated",
    }


@pytest.mark.parametrize("enum_cls", [LogFormat, OutputFormat])
def test_format_from_str_is_case_insensitive(enum_cls: type[LogFormat] | type[OutputFormat]) -> None:
    assert enum_cls.from_str(" JSON ").value == "json"
    with pytest.raises(ValueError, match="Unknown"):
        _ = enum_cls.from_str("yaml")
