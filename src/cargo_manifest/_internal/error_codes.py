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

"""Stable error code registry used across cargo_manifest."""

from __future__ import annotations

from typing import TYPE_CHECKING, NewType

from .exceptions import (
    CargoManifestError,
    ManifestEncodingError,
    ManifestError,
    ManifestIOError,
    ManifestSyntaxError,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

ErrorCode = NewType("ErrorCode", str)

_ERROR_CODES: dict[type[BaseException], ErrorCode] = {
    CargoManifestError: ErrorCode("CM000"),
    ManifestError: ErrorCode("CM100"),
    ManifestSyntaxError: ErrorCode("CM101"),
    ManifestEncodingError: ErrorCode("CM102"),
    ManifestIOError: ErrorCode("CM103"),
}


def error_code_for(exc: BaseException) -> ErrorCode:
    """Return a stable error code for a structured cargo_manifest exception.

    Args:
        exc: Exception instance raised by cargo_manifest code paths.

    Returns:
        Error code mapped from the exception's class hierarchy.
    """
    for cls in type(exc).__mro__:
        code = _ERROR_CODES.get(cls)
        if code:
            return code
    return ErrorCode("CM000")


def error_code_catalog() -> Mapping[str, ErrorCode]:
    """Return a stable mapping of fully-qualified exception names to error codes.

    Returns:
        Mapping of `<module>.<ExceptionName>` strings to error codes.
    """
    result: dict[str, ErrorCode] = {}
    for exc_type, code in _ERROR_CODES.items():
        key = f"{exc_type.__module__}.{exc_type.__name__}"
        result[key] = code
    return result


__all__ = ["ErrorCode", "error_code_catalog", "error_code_for"]
