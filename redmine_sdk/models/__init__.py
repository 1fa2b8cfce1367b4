"""Public models for Redmine resources.

Example:
    from redmine_sdk.models import Issue, Project

    issue = Issue(subject="Broken link", project=Project(id=1))
    issue.encode()  # {"subject": "Broken link", "project_id": 1}
"""

from redmine_sdk.models.base import (
    ZERO_DATE,
    ZERO_TIME,
    CustomField,
    IncludeFlags,
    Pagination,
    RedmineModel,
    Upload,
)
from redmine_sdk.models.resources import (
    Attachment,
    Changeset,
    DocumentCategory,
    Group,
    GroupInclude,
    Issue,
    IssueCategory,
    IssueInclude,
    IssuePriority,
    IssueRelation,
    IssueStatus,
    Journal,
    JournalDetail,
    News,
    Project,
    ProjectInclude,
    ProjectMembership,
    Query,
    RelationType,
    Role,
    TimeEntry,
    TimeEntryActivity,
    Tracker,
    User,
    UserInclude,
    Version,
    VersionSharing,
    VersionStatus,
    WikiPage,
    WikiPageInclude,
)

__all__ = [
    "ZERO_DATE",
    "ZERO_TIME",
    "RedmineModel",
    "CustomField",
    "IncludeFlags",
    "Pagination",
    "Upload",
    "Attachment",
    "Changeset",
    "DocumentCategory",
    "Group",
    "GroupInclude",
    "Issue",
    "IssueCategory",
    "IssueInclude",
    "IssuePriority",
    "IssueRelation",
    "IssueStatus",
    "Journal",
    "JournalDetail",
    "News",
    "Project",
    "ProjectInclude",
    "ProjectMembership",
    "Query",
    "RelationType",
    "Role",
    "TimeEntry",
    "TimeEntryActivity",
    "Tracker",
    "User",
    "UserInclude",
    "Version",
    "VersionSharing",
    "VersionStatus",
    "WikiPage",
    "WikiPageInclude",
]
