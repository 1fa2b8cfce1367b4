"""Issues and the resources that hang off them."""

from __future__ import annotations

from collections.abc import Sequence

from redmine_sdk.models import (
    Issue,
    IssueCategory,
    IssueInclude,
    IssueRelation,
    IssueStatus,
    Pagination,
    Query,
    Tracker,
    Upload,
)
from redmine_sdk.resources.base import Params, Resource, require


class IssuesResource(Resource):
    """Operations on /issues."""

    def list(self, params: Params = None) -> tuple[list[Issue], Pagination]:
        """List issues.

        Args:
            params: Filters passed through untouched, e.g.
                {"project_id": 1, "status_id": "open", "offset": 25, "limit": 25}.

        Returns:
            The decoded issues and the pagination window of the response.
        """
        return self._list("issues.json", "issues", Issue, params)

    def list_for_project(
        self, project_id: int | str, params: Params = None
    ) -> tuple[list[Issue], Pagination]:
        """List the issues of one project."""
        return self._list(f"projects/{project_id}/issues.json", "issues", Issue, params)

    def get(self, issue_id: int, include: IssueInclude | None = None) -> Issue:
        """Fetch one issue, optionally expanding the relations named in ``include``."""
        return self._get(f"issues/{issue_id}.json", "issue", Issue, include=include)

    def create(self, issue: Issue, uploads: Sequence[Upload] = ()) -> Issue:
        """Create an issue, attaching previously uploaded files.

        Returns:
            The issue as stored by Redmine, with its new id.
        """
        return self._create("issues.json", "issue", Issue, issue.encode(tuple(uploads)))

    def update(self, issue: Issue, uploads: Sequence[Upload] = ()) -> None:
        """Send the non-zero fields of ``issue`` to the issue with the same id."""
        self._update(f"issues/{issue.id}.json", "issue", issue.encode(tuple(uploads)))

    def delete(self, issue_id: int) -> None:
        self._delete(f"issues/{issue_id}.json")


class IssueRelationsResource(Resource):
    """Operations on issue relations."""

    def list(self, issue_id: int, params: Params = None) -> tuple[list[IssueRelation], Pagination]:
        return self._list(f"issues/{issue_id}/relations.json", "relations", IssueRelation, params)

    def get(self, relation_id: int) -> IssueRelation:
        return self._get(f"relations/{relation_id}.json", "relation", IssueRelation)

    def create(self, relation: IssueRelation) -> IssueRelation:
        """Create a relation from ``relation.issue_id`` to ``relation.issue_to_id``.

        Raises:
            RedmineValidationError: ``issue_id`` is not set. No request is sent.
        """
        require(relation.issue_id, "Missing required field: issue_id")
        return self._create(
            f"issues/{relation.issue_id}/relations.json",
            "relation",
            IssueRelation,
            relation.encode(),
        )

    def delete(self, relation_id: int) -> None:
        self._delete(f"relations/{relation_id}.json")


class IssueCategoriesResource(Resource):
    """Operations on issue categories."""

    def list(
        self, project_id: int | str, params: Params = None
    ) -> tuple[list[IssueCategory], Pagination]:
        return self._list(
            f"projects/{project_id}/issue_categories.json",
            "issue_categories",
            IssueCategory,
            params,
        )

    def get(self, category_id: int) -> IssueCategory:
        return self._get(f"issue_categories/{category_id}.json", "issue_category", IssueCategory)

    def create(self, category: IssueCategory) -> IssueCategory:
        """Create a category in ``category.project``.

        Raises:
            RedmineValidationError: The project is not set. No request is sent.
        """
        require(category.project, "Missing required field: Project")
        return self._create(
            f"projects/{category.project.id}/issue_categories.json",
            "issue_category",
            IssueCategory,
            category.encode(),
        )

    def update(self, category: IssueCategory) -> None:
        self._update(f"issue_categories/{category.id}.json", "issue_category", category.encode())

    def delete(self, category_id: int, reassign_to_id: int | None = None) -> None:
        """Delete a category.

        Args:
            category_id: The category to delete.
            reassign_to_id: Category that receives the issues of the deleted one.
        """
        params = {"reassign_to_id": reassign_to_id} if reassign_to_id else None
        self._delete(f"issue_categories/{category_id}.json", params)


class IssueStatusesResource(Resource):
    def list(self, params: Params = None) -> tuple[list[IssueStatus], Pagination]:
        return self._list("issue_statuses.json", "issue_statuses", IssueStatus, params)


class TrackersResource(Resource):
    def list(self, params: Params = None) -> tuple[list[Tracker], Pagination]:
        return self._list("trackers.json", "trackers", Tracker, params)


class QueriesResource(Resource):
    """Saved issue queries visible to the authenticated user."""

    def list(self, params: Params = None) -> tuple[list[Query], Pagination]:
        return self._list("queries.json", "queries", Query, params)
