"""Pydantic models for Redmine resources.

Each model mirrors one resource of the Redmine REST API. Decoding goes
through ``Model.model_validate(wire)``; writable resources also provide
``encode()``, which returns the JSON body for create/update requests with
references reduced to ids and zero values left out.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import AliasChoices, Field

from redmine_sdk._internal.codec import format_date, omit_zero, ref_id, ref_ids
from redmine_sdk.models.base import (
    ZERO_DATE,
    ZERO_TIME,
    CustomField,
    DateField,
    IncludeFlags,
    RedmineModel,
    TimeField,
    Upload,
    custom_fields_to_map,
)

# =============================================================================
# Constants
# =============================================================================


class RelationType(StrEnum):
    RELATES = "relates"
    DUPLICATES = "duplicates"
    DUPLICATED = "duplicated"
    BLOCKS = "blocks"
    BLOCKED = "blocked"
    PRECEDES = "precedes"
    FOLLOWS = "follows"
    COPIED_TO = "copied_to"
    COPIED_FROM = "copied_from"


class VersionStatus(StrEnum):
    OPEN = "open"
    LOCKED = "locked"
    CLOSED = "closed"


class VersionSharing(StrEnum):
    NONE = "none"
    DESCENDANTS = "descendants"
    HIERARCHY = "hierarchy"
    TREE = "tree"
    SYSTEM = "system"


# =============================================================================
# Read-only Lookups
# =============================================================================


class Tracker(RedmineModel):
    id: int = 0
    name: str = ""


class IssueStatus(RedmineModel):
    id: int = 0
    name: str = ""
    is_default: bool = False
    is_closed: bool = False


class IssuePriority(RedmineModel):
    id: int = 0
    name: str = ""
    is_default: bool = False
    custom_fields: list[CustomField] = Field(default_factory=list)


class TimeEntryActivity(RedmineModel):
    id: int = 0
    name: str = ""
    is_default: bool = False
    custom_fields: list[CustomField] = Field(default_factory=list)


class DocumentCategory(RedmineModel):
    id: int = 0
    name: str = ""
    is_default: bool = False


class Role(RedmineModel):
    """Role granted through a project membership.

    ``inherited`` is set on membership roles acquired through a group.
    """

    id: int = 0
    name: str = ""
    inherited: bool = False
    permissions: list[str] = Field(default_factory=list)


class Query(RedmineModel):
    """Saved issue query."""

    id: int = 0
    name: str = ""
    is_public: bool = False
    project_id: int = 0


# =============================================================================
# Users and Groups
# =============================================================================


class UserInclude(IncludeFlags):
    memberships: bool = False
    groups: bool = False


class User(RedmineModel):
    """Redmine user account.

    ``password`` is write-only: Redmine never returns it, and it is only sent
    when creating a user or changing the password.
    """

    id: int = 0
    login: str = ""
    password: str = Field(default="", repr=False)
    first_name: str = Field(default="", alias="firstname")
    last_name: str = Field(default="", alias="lastname")
    name: str = ""
    mail: str = ""
    custom_fields: list[CustomField] = Field(default_factory=list)
    memberships: list[ProjectMembership] = Field(default_factory=list)
    groups: list[Group] = Field(default_factory=list)
    created_on: TimeField = ZERO_TIME
    last_login_on: TimeField = ZERO_TIME

    def encode(self) -> dict[str, Any]:
        return omit_zero({
            "login": self.login,
            "password": self.password,
            "firstname": self.first_name,
            "lastname": self.last_name,
            "mail": self.mail,
            "custom_field_values": custom_fields_to_map(self.custom_fields),
        })


class GroupInclude(IncludeFlags):
    users: bool = False
    memberships: bool = False


class Group(RedmineModel):
    id: int = 0
    name: str = ""
    users: list[User] = Field(default_factory=list)
    memberships: list[ProjectMembership] = Field(default_factory=list)
    custom_fields: list[CustomField] = Field(default_factory=list)

    def encode(self) -> dict[str, Any]:
        return omit_zero({
            "name": self.name,
            "user_ids": ref_ids(self.users),
            "custom_field_values": custom_fields_to_map(self.custom_fields),
        })


# =============================================================================
# Projects
# =============================================================================


class ProjectInclude(IncludeFlags):
    trackers: bool = False
    issue_categories: bool = False


class Project(RedmineModel):
    id: int = 0
    identifier: str = ""
    name: str = ""
    description: str = ""
    homepage: str = ""
    parent: Project | None = None
    trackers: list[Tracker] = Field(default_factory=list)
    issue_categories: list[IssueCategory] = Field(default_factory=list)
    custom_fields: list[CustomField] = Field(default_factory=list)
    created_on: TimeField = ZERO_TIME
    updated_on: TimeField = ZERO_TIME

    def encode(self) -> dict[str, Any]:
        return omit_zero({
            "identifier": self.identifier,
            "name": self.name,
            "description": self.description,
            "homepage": self.homepage,
            "parent_id": ref_id(self.parent),
            "tracker_ids": ref_ids(self.trackers),
            "custom_field_values": custom_fields_to_map(self.custom_fields),
        })


class ProjectMembership(RedmineModel):
    """Membership of a user or a group in a project.

    On create the member is taken from ``user``, or from ``group`` when no
    user is set; Redmine accepts group ids in ``user_id``.
    """

    id: int = 0
    project: Project | None = None
    roles: list[Role] = Field(default_factory=list)
    group: Group | None = None
    user: User | None = None

    def encode(self) -> dict[str, Any]:
        return omit_zero({
            "user_id": ref_id(self.user) or ref_id(self.group),
            "role_ids": ref_ids(self.roles),
        })


class IssueCategory(RedmineModel):
    id: int = 0
    name: str = ""
    project: Project | None = None
    assigned_to: User | None = None

    def encode(self) -> dict[str, Any]:
        return omit_zero({
            "name": self.name,
            "assigned_to_id": ref_id(self.assigned_to),
        })


class Version(RedmineModel):
    id: int = 0
    name: str = ""
    project: Project | None = None
    description: str = ""
    status: VersionStatus | str = ""
    due_date: DateField = ZERO_DATE
    sharing: VersionSharing | str = ""
    custom_fields: list[CustomField] = Field(default_factory=list)
    created_on: TimeField = ZERO_TIME
    updated_on: TimeField = ZERO_TIME

    def encode(self) -> dict[str, Any]:
        return omit_zero({
            "name": self.name,
            "description": self.description,
            "status": str(self.status),
            "due_date": format_date(self.due_date),
            "sharing": str(self.sharing),
            "custom_field_values": custom_fields_to_map(self.custom_fields),
        })


class News(RedmineModel):
    id: int = 0
    project: Project | None = None
    author: User | None = None
    title: str = ""
    summary: str = ""
    description: str = ""
    created_on: TimeField = ZERO_TIME


# =============================================================================
# Issues
# =============================================================================


class Attachment(RedmineModel):
    id: int = 0
    author: User | None = None
    description: str = ""
    content_url: str = ""
    filename: str = ""
    filesize: int = 0
    content_type: str = ""
    created_on: TimeField = ZERO_TIME


class JournalDetail(RedmineModel):
    """Single attribute change recorded in a journal."""

    property: str = ""
    name: str = ""
    old_value: str = ""
    new_value: str = ""


class Journal(RedmineModel):
    id: int = 0
    user: User | None = None
    notes: str = ""
    details: list[JournalDetail] = Field(default_factory=list)
    created_on: TimeField = ZERO_TIME


class Changeset(RedmineModel):
    revision: str = ""
    user: User | None = None
    comments: str = ""
    committed_on: TimeField = Field(
        default=ZERO_TIME,
        validation_alias=AliasChoices("committed_on", "commited_on"),
    )


class IssueRelation(RedmineModel):
    """Directed relation between two issues.

    ``delay`` is only meaningful for precedes/follows relations.
    """

    id: int = 0
    issue_id: int = 0
    issue_to_id: int = 0
    relation_type: RelationType | str = ""
    delay: int = 0

    def encode(self) -> dict[str, Any]:
        return omit_zero({
            "issue_to_id": self.issue_to_id,
            "relation_type": str(self.relation_type),
            "delay": self.delay,
        })


class IssueInclude(IncludeFlags):
    children: bool = False
    attachments: bool = False
    relations: bool = False
    changesets: bool = False
    journals: bool = False


class Issue(RedmineModel):
    """Redmine issue.

    ``notes`` is write-only: set it on update to add a journal entry.
    """

    id: int = 0
    subject: str = ""
    parent: Issue | None = None
    estimated_hours: float = 0.0
    spent_hours: float = 0.0
    assigned_to: User | None = None
    priority: IssuePriority | None = None
    done_ratio: int = 0
    project: Project | None = None
    author: User | None = None
    start_date: DateField = ZERO_DATE
    due_date: DateField = ZERO_DATE
    tracker: Tracker | None = None
    description: str = ""
    notes: str = ""
    status: IssueStatus | None = None
    custom_fields: list[CustomField] = Field(default_factory=list)
    journals: list[Journal] = Field(default_factory=list)
    attachments: list[Attachment] = Field(default_factory=list)
    relations: list[IssueRelation] = Field(default_factory=list)
    fixed_version: Version | None = None
    category: IssueCategory | None = None
    changesets: list[Changeset] = Field(default_factory=list)
    children: list[Issue] = Field(default_factory=list)
    created_on: TimeField = ZERO_TIME
    updated_on: TimeField = ZERO_TIME

    def encode(self, uploads: list[Upload] | tuple[Upload, ...] = ()) -> dict[str, Any]:
        return omit_zero({
            "subject": self.subject,
            "parent_issue_id": ref_id(self.parent),
            "estimated_hours": self.estimated_hours,
            "spent_hours": self.spent_hours,
            "assigned_to_id": ref_id(self.assigned_to),
            "priority_id": ref_id(self.priority),
            "done_ratio": self.done_ratio,
            "project_id": ref_id(self.project),
            "author_id": ref_id(self.author),
            "start_date": format_date(self.start_date),
            "due_date": format_date(self.due_date),
            "tracker_id": ref_id(self.tracker),
            "description": self.description,
            "notes": self.notes,
            "status_id": ref_id(self.status),
            "fixed_version_id": ref_id(self.fixed_version),
            "category_id": ref_id(self.category),
            "custom_field_values": custom_fields_to_map(self.custom_fields),
            "uploads": [upload.encode() for upload in uploads],
        })


# =============================================================================
# Time Tracking
# =============================================================================


class TimeEntry(RedmineModel):
    id: int = 0
    hours: float = 0.0
    comments: str = ""
    spent_on: DateField = ZERO_DATE
    issue: Issue | None = None
    project: Project | None = None
    activity: TimeEntryActivity | None = None
    user: User | None = None
    custom_fields: list[CustomField] = Field(default_factory=list)
    created_on: TimeField = ZERO_TIME
    updated_on: TimeField = ZERO_TIME

    def encode(self) -> dict[str, Any]:
        return omit_zero({
            "project_id": ref_id(self.project),
            "issue_id": ref_id(self.issue),
            "user_id": ref_id(self.user),
            "activity_id": ref_id(self.activity),
            "hours": self.hours,
            "comments": self.comments,
            "spent_on": format_date(self.spent_on),
            "custom_field_values": custom_fields_to_map(self.custom_fields),
        })


# =============================================================================
# Wiki
# =============================================================================


class WikiPageInclude(IncludeFlags):
    attachments: bool = False


class WikiPage(RedmineModel):
    """Wiki page, identified by its title within a project.

    ``parent`` only carries the parent page title.
    """

    title: str = ""
    parent: WikiPage | None = None
    text: str = ""
    comments: str = ""
    version: int = 0
    author: User | None = None
    attachments: list[Attachment] = Field(default_factory=list)
    created_on: TimeField = ZERO_TIME
    updated_on: TimeField = ZERO_TIME

    def encode(self, uploads: list[Upload] | tuple[Upload, ...] = ()) -> dict[str, Any]:
        return omit_zero({
            "title": self.title,
            "text": self.text,
            "comments": self.comments,
            "version": self.version,
            "uploads": [upload.encode() for upload in uploads],
        })


for _model in (
    User,
    Group,
    Project,
    ProjectMembership,
    IssueCategory,
    Version,
    News,
    Attachment,
    Journal,
    Changeset,
    Issue,
    TimeEntry,
    WikiPage,
):
    _model.model_rebuild()
del _model
