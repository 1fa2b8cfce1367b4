"""Project wiki pages."""

from __future__ import annotations

from collections.abc import Sequence
from urllib.parse import quote

from redmine_sdk.models import Pagination, Upload, WikiPage, WikiPageInclude
from redmine_sdk.resources.base import Resource


def _page_path(project_id: int | str, title: str, version: int | None = None) -> str:
    path = f"projects/{project_id}/wiki/{quote(title, safe='')}"
    if version:
        path = f"{path}/{version}"
    return f"{path}.json"


class WikiResource(Resource):
    """Operations on the wiki of a project.

    Pages are addressed by title; there is no separate create call, an update
    of a missing title creates the page.
    """

    def list(self, project_id: int | str) -> tuple[list[WikiPage], Pagination]:
        """List the pages of a project wiki (title, version and timestamps only)."""
        return self._list(f"projects/{project_id}/wiki/index.json", "wiki_pages", WikiPage)

    def get(
        self,
        project_id: int | str,
        title: str,
        version: int | None = None,
        include: WikiPageInclude | None = None,
    ) -> WikiPage:
        """Fetch a page, or one of its older versions when ``version`` is given."""
        return self._get(
            _page_path(project_id, title, version),
            "wiki_page",
            WikiPage,
            include=include,
        )

    def update(
        self,
        project_id: int | str,
        page: WikiPage,
        uploads: Sequence[Upload] = (),
    ) -> None:
        """Create or update the page titled ``page.title``."""
        self._update(_page_path(project_id, page.title), "wiki_page", page.encode(tuple(uploads)))

    def delete(self, project_id: int | str, title: str) -> None:
        """Delete a page with all its history."""
        self._delete(_page_path(project_id, title))
