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

"""Pytest entry point that wires shared fixtures and markers."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from collections.abc import Iterator

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with the custom markers used by the test suite."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "property: Property-based tests")
    config.addinivalue_line("markers", "cli: CLI-related tests")


@pytest.fixture(autouse=True)
def reset_cargo_manifest_logging() -> Iterator[None]:
    """Undo any handlers, levels or propagation changes a test makes."""
    names = ("cargo_manifest", "cargo_manifest.loader", "cargo_manifest.completion", "cargo_manifest.cli")
    yield
    for name in names:
        logger = logging.getLogger(name)
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)
        logger.propagate = True


@pytest.fixture
def crate_dir(tmp_path: Path) -> Path:
    """A small on-disk crate with a library, a binary and a build script."""
    _ = (tmp_path / "Cargo.toml").write_text(
        '[package]\nname = "demo-crate"\nversion = "0.1.0"\nedition = "2021"\n',
        encoding="utf-8",
    )
    (tmp_path / "src" / "bin").mkdir(parents=True)
    _ = (tmp_path / "src" / "lib.rs").write_text("", encoding="utf-8")
    _ = (tmp_path / "src" / "main.rs").write_text("fn main() {}\n", encoding="utf-8")
    _ = (tmp_path / "src" / "bin" / "tool.rs").write_text("fn main() {}\n", encoding="utf-8")
    _ = (tmp_path / "build.rs").write_text("fn main() {}\n", encoding="utf-8")
    return tmp_path
