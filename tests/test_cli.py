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

import json
from typing import TYPE_CHECKING

import pytest

from cargo_manifest import __version__, manifest_json_schema
from cargo_manifest.cli import main
from cargo_manifest.compat import tomllib

if TYPE_CHECKING:
    from pathlib import Path

    from _pytest.capture import CaptureFixture

pytestmark = pytest.mark.cli


def test_version(capsys: CaptureFixture[str]) -> None:
    assert main(["--version"]) == 0
    assert capsys.readouterr().out.strip() == f"cargo-manifest {__version__}"


def test_show_directory_as_toml(crate_dir: Path, capsys: CaptureFixture[str]) -> None:
    assert main(["show", str(crate_dir)]) == 0
    document = tomllib.loads(capsys.readouterr().out)
    assert document["package"]["name"] == "demo-crate"
    assert document["package"]["build"] == "build.rs"
    assert document["lib"]["crate-type"] == ["rlib"]
    assert [product["name"] for product in document["bin"]] == ["tool", "demo-crate"]


def test_show_file_as_json_without_completion(crate_dir: Path, capsys: CaptureFixture[str]) -> None:
    exit_code = main(["show", str(crate_dir / "Cargo.toml"), "--format", "json", "--no-complete", "--indent", "0"])
    assert exit_code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["package"]["edition"] == "2021"
    assert "lib" not in payload
    assert "bin" not in payload


def test_show_reports_errors_with_codes(tmp_path: Path, capsys: CaptureFixture[str]) -> None:
    assert main(["show", str(tmp_path / "missing")]) == 1
    assert "(CM103)" in capsys.readouterr().err

    bad = tmp_path / "Cargo.toml"
    _ = bad.write_text("[package\n", encoding="utf-8")
    assert main(["show", str(tmp_path)]) == 1
    assert "(CM101)" in capsys.readouterr().err


def test_schema_to_stdout(capsys: CaptureFixture[str]) -> None:
    assert main(["schema"]) == 0
    assert json.loads(capsys.readouterr().out) == manifest_json_schema()


def test_schema_to_file(tmp_path: Path) -> None:
    output = tmp_path / "schemas" / "cargo.json"
    assert main(["schema", "--output", str(output), "--indent", "4"]) == 0
    schema = json.loads(output.read_text(encoding="utf-8"))
    assert schema["$schema"] == "https://json-schema.org/draft-07/schema#"
    assert "package" in schema["properties"]
    assert "dev-dependencies" in schema["properties"]


def test_json_logging_flag(crate_dir: Path, capsys: CaptureFixture[str]) -> None:
    assert main(["--log-format", "json", "--log-level", "debug", "show", str(crate_dir)]) == 0
    err_lines = [line for line in capsys.readouterr().err.splitlines() if line]
    payloads = [json.loads(line) for line in err_lines]
    assert any(payload.get("component") == "completion" for payload in payloads)


def test_missing_command_exits() -> None:
    with pytest.raises(SystemExit):
        _ = main([])
