"""Resource operation classes, one per group of Redmine endpoints."""

from redmine_sdk.resources.base import Resource
from redmine_sdk.resources.files import AttachmentsResource, UploadsResource
from redmine_sdk.resources.issues import (
    IssueCategoriesResource,
    IssueRelationsResource,
    IssuesResource,
    IssueStatusesResource,
    QueriesResource,
    TrackersResource,
)
from redmine_sdk.resources.projects import (
    MembershipsResource,
    NewsResource,
    ProjectsResource,
    VersionsResource,
)
from redmine_sdk.resources.time_entries import EnumerationsResource, TimeEntriesResource
from redmine_sdk.resources.users import GroupsResource, RolesResource, UsersResource
from redmine_sdk.resources.wiki import WikiResource

__all__ = [
    "Resource",
    "AttachmentsResource",
    "UploadsResource",
    "IssueCategoriesResource",
    "IssueRelationsResource",
    "IssuesResource",
    "IssueStatusesResource",
    "QueriesResource",
    "TrackersResource",
    "MembershipsResource",
    "NewsResource",
    "ProjectsResource",
    "VersionsResource",
    "EnumerationsResource",
    "TimeEntriesResource",
    "GroupsResource",
    "RolesResource",
    "UsersResource",
    "WikiResource",
]
