"""Time tracking and enumerations."""

from __future__ import annotations

from redmine_sdk.models import (
    DocumentCategory,
    IssuePriority,
    Pagination,
    TimeEntry,
    TimeEntryActivity,
)
from redmine_sdk.resources.base import Params, Resource


class TimeEntriesResource(Resource):
    """Operations on /time_entries."""

    def list(self, params: Params = None) -> tuple[list[TimeEntry], Pagination]:
        return self._list("time_entries.json", "time_entries", TimeEntry, params)

    def get(self, time_entry_id: int) -> TimeEntry:
        return self._get(f"time_entries/{time_entry_id}.json", "time_entry", TimeEntry)

    def create(self, time_entry: TimeEntry) -> TimeEntry:
        """Log time on ``time_entry.issue`` or ``time_entry.project``."""
        return self._create("time_entries.json", "time_entry", TimeEntry, time_entry.encode())

    def update(self, time_entry: TimeEntry) -> None:
        self._update(f"time_entries/{time_entry.id}.json", "time_entry", time_entry.encode())

    def delete(self, time_entry_id: int) -> None:
        self._delete(f"time_entries/{time_entry_id}.json")


class EnumerationsResource(Resource):
    """Read-only enumerations configured by the administrator."""

    def issue_priorities(self, params: Params = None) -> tuple[list[IssuePriority], Pagination]:
        return self._list(
            "enumerations/issue_priorities.json", "issue_priorities", IssuePriority, params
        )

    def time_entry_activities(
        self, params: Params = None
    ) -> tuple[list[TimeEntryActivity], Pagination]:
        return self._list(
            "enumerations/time_entry_activities.json",
            "time_entry_activities",
            TimeEntryActivity,
            params,
        )

    def document_categories(
        self, params: Params = None
    ) -> tuple[list[DocumentCategory], Pagination]:
        return self._list(
            "enumerations/document_categories.json",
            "document_categories",
            DocumentCategory,
            params,
        )
