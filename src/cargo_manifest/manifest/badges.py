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

"""Service badges declared under `[badges]`.

Badge tables have historically been written in many slightly different
shapes. A badge that does not match is dropped (read as absent) instead of
failing the whole manifest; a malformed `maintenance` table falls back to
the `none` status.
"""

from __future__ import annotations

from typing import Annotated, ClassVar

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidatorFunctionWrapHandler,
    WrapValidator,
)

from cargo_manifest.core.model_types import MaintenanceStatus

from .fields import MANIFEST_MODEL_CONFIG, alias_field

DEFAULT_BADGE_BRANCH = "master"


class Badge(BaseModel):
    """A CI or coverage service badge.

    Attributes:
        repository: Repository path on the service, e.g. ``"user/project"``.
        branch: Branch to report on (default ``"master"``).
        service: Hosting service (``github``, ``bitbucket``, ``gitlab``).
        id: Service-specific project id.
        project_name: Project name when it differs from the repository name.
    """

    model_config: ClassVar[ConfigDict] = MANIFEST_MODEL_CONFIG

    repository: str
    branch: str = DEFAULT_BADGE_BRANCH
    service: str | None = None
    id: str | None = None
    project_name: str | None = alias_field("project-name", "project_name", default=None)


class Maintenance(BaseModel):
    """The `[badges.maintenance]` table."""

    model_config: ClassVar[ConfigDict] = MANIFEST_MODEL_CONFIG

    status: MaintenanceStatus = MaintenanceStatus.NONE


def _badge_or_none(value: object, handler: ValidatorFunctionWrapHandler) -> Badge | None:
    try:
        return handler(value)
    except ValidationError:
        return None


def _maintenance_or_default(value: object, handler: ValidatorFunctionWrapHandler) -> Maintenance:
    try:
        return handler(value)
    except ValidationError:
        return Maintenance()


TolerantBadge = Annotated[Badge | None, WrapValidator(_badge_or_none)]
TolerantMaintenance = Annotated[Maintenance, WrapValidator(_maintenance_or_default)]


class Badges(BaseModel):
    """Every badge the manifest format knows about.

    Attributes:
        appveyor: AppVeyor build status.
        circle_ci: CircleCI build status.
        gitlab: GitLab pipeline status.
        travis_ci: Travis CI build status (`repository` as ``"user/project"``).
        codecov: Codecov coverage.
        coveralls: Coveralls coverage.
        is_it_maintained_issue_resolution: Median issue resolution time.
        is_it_maintained_open_issues: Share of open issues.
        maintenance: Maintenance intent; always present.
    """

    model_config: ClassVar[ConfigDict] = MANIFEST_MODEL_CONFIG

    appveyor: TolerantBadge = None
    circle_ci: TolerantBadge = None
    gitlab: TolerantBadge = None
    travis_ci: TolerantBadge = None
    codecov: TolerantBadge = None
    coveralls: TolerantBadge = None
    is_it_maintained_issue_resolution: TolerantBadge = None
    is_it_maintained_open_issues: TolerantBadge = None
    maintenance: TolerantMaintenance = Field(default_factory=Maintenance)


__all__ = ["DEFAULT_BADGE_BRANCH", "Badge", "Badges", "Maintenance"]
