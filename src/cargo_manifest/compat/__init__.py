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

"""Version-tolerant imports shared across cargo_manifest.

Re-exported symbols:

- tomllib: stdlib TOML parser (falls back to `tomli`)
- Self, TypedDict, Unpack, override: typing helpers (fall back to `typing_extensions`)
"""

from __future__ import annotations

from .toml import tomllib
from .typing import Self, TypedDict, Unpack, override

__all__ = ["Self", "TypedDict", "Unpack", "override", "tomllib"]
