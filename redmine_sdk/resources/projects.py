"""Projects and the resources scoped to a project."""

from __future__ import annotations

from redmine_sdk.models import (
    News,
    Pagination,
    Project,
    ProjectInclude,
    ProjectMembership,
    Version,
)
from redmine_sdk.resources.base import Params, Resource, require


class ProjectsResource(Resource):
    """Operations on /projects.

    Project ids may be given as the numeric id or the string identifier.
    """

    def list(self, params: Params = None) -> tuple[list[Project], Pagination]:
        return self._list("projects.json", "projects", Project, params)

    def get(self, project_id: int | str, include: ProjectInclude | None = None) -> Project:
        return self._get(f"projects/{project_id}.json", "project", Project, include=include)

    def create(self, project: Project) -> Project:
        return self._create("projects.json", "project", Project, project.encode())

    def update(self, project: Project) -> None:
        self._update(f"projects/{project.id}.json", "project", project.encode())

    def delete(self, project_id: int | str) -> None:
        self._delete(f"projects/{project_id}.json")


class MembershipsResource(Resource):
    """Operations on project memberships."""

    def list(
        self, project_id: int | str, params: Params = None
    ) -> tuple[list[ProjectMembership], Pagination]:
        return self._list(
            f"projects/{project_id}/memberships.json",
            "memberships",
            ProjectMembership,
            params,
        )

    def get(self, membership_id: int) -> ProjectMembership:
        return self._get(f"memberships/{membership_id}.json", "membership", ProjectMembership)

    def create(self, membership: ProjectMembership) -> ProjectMembership:
        """Add ``membership.user`` (or ``membership.group``) to ``membership.project``.

        Raises:
            RedmineValidationError: The project is not set. No request is sent.
        """
        require(membership.project, "Missing required field: Project")
        return self._create(
            f"projects/{membership.project.id}/memberships.json",
            "membership",
            ProjectMembership,
            membership.encode(),
        )

    def update(self, membership: ProjectMembership) -> None:
        """Replace the roles of a membership."""
        self._update(f"memberships/{membership.id}.json", "membership", membership.encode())

    def delete(self, membership_id: int) -> None:
        self._delete(f"memberships/{membership_id}.json")


class VersionsResource(Resource):
    """Operations on project versions."""

    def list(self, project_id: int | str, params: Params = None) -> tuple[list[Version], Pagination]:
        return self._list(f"projects/{project_id}/versions.json", "versions", Version, params)

    def get(self, version_id: int) -> Version:
        return self._get(f"versions/{version_id}.json", "version", Version)

    def create(self, version: Version) -> Version:
        """Create a version in ``version.project``.

        Raises:
            RedmineValidationError: The project is not set. No request is sent.
        """
        require(version.project, "Missing required field: Project")
        return self._create(
            f"projects/{version.project.id}/versions.json",
            "version",
            Version,
            version.encode(),
        )

    def update(self, version: Version) -> None:
        self._update(f"versions/{version.id}.json", "version", version.encode())

    def delete(self, version_id: int) -> None:
        self._delete(f"versions/{version_id}.json")


class NewsResource(Resource):
    def list(self, params: Params = None) -> tuple[list[News], Pagination]:
        return self._list("news.json", "news", News, params)

    def list_for_project(
        self, project_id: int | str, params: Params = None
    ) -> tuple[list[News], Pagination]:
        return self._list(f"projects/{project_id}/news.json", "news", News, params)
