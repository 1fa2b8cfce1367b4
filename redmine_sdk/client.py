"""User-facing client for the Redmine REST API.

Example usage:
    from redmine_sdk import RedmineClient
    from redmine_sdk.models import Issue, IssueInclude, Project

    client = RedmineClient.with_api_key("https://redmine.example.com", "your-api-key")

    issue = client.issues.create(Issue(subject="Broken link", project=Project(id=1)))
    issue = client.issues.get(issue.id, include=IssueInclude(journals=True))

    projects, page = client.projects.list({"limit": 100})
"""

import os
from types import TracebackType

import httpx

from redmine_sdk._internal.http import (
    DEFAULT_TIMEOUT,
    api_key_auth,
    basic_auth,
    create_http_client,
)
from redmine_sdk._internal.transport import Transport
from redmine_sdk.exceptions import RedmineConfigError
from redmine_sdk.resources import (
    AttachmentsResource,
    EnumerationsResource,
    GroupsResource,
    IssueCategoriesResource,
    IssueRelationsResource,
    IssuesResource,
    IssueStatusesResource,
    MembershipsResource,
    NewsResource,
    ProjectsResource,
    QueriesResource,
    RolesResource,
    TimeEntriesResource,
    TrackersResource,
    UploadsResource,
    UsersResource,
    VersionsResource,
    WikiResource,
)


class RedmineClient:
    """Client for one Redmine instance.

    Base URL, credentials, impersonated user and TLS settings are fixed at
    construction, so one instance may be shared between threads. Use
    ``with_api_key()`` or ``with_basic_auth()`` to pick the authentication
    mode, or ``from_env()`` to configure from environment variables.

    Every call sends exactly one request. Nothing is retried or cached.
    """

    def __init__(
        self,
        base_url: str,
        auth: httpx.Auth | None,
        *,
        switch_user: str | None = None,
        ca_bundle: str | None = None,
        verify: bool = True,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: httpx.Client | None = None,
        debug: bool = False,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Root URL of the Redmine instance.
            auth: Credentials attached to every request.
            switch_user: Login to impersonate on every request (admin only).
            ca_bundle: Path to a PEM file of trusted root certificates.
            verify: Whether to verify TLS certificates at all.
            timeout: Request timeout in seconds.
            http_client: Pre-configured client to use instead of building one.
                It is used as-is: auth, switch_user, ca_bundle, verify and
                timeout are ignored, and the caller keeps ownership.
            debug: Enable debug logging to stderr.

        Raises:
            RedmineConfigError: base_url is empty or no credentials are given.
        """
        if not base_url:
            raise RedmineConfigError("base_url is required")
        if auth is None and http_client is None:
            raise RedmineConfigError("auth is required")

        self._base_url = base_url.rstrip("/")
        self._switch_user = switch_user
        self._owns_http_client = http_client is None
        self._http_client = http_client or create_http_client(
            auth=auth,
            timeout=timeout,
            switch_user=switch_user,
            ca_bundle=ca_bundle,
            verify=verify,
        )
        self._transport = Transport(self._base_url, self._http_client, debug=debug)

        self.uploads = UploadsResource(self._transport)
        self.issues = IssuesResource(self._transport)
        self.projects = ProjectsResource(self._transport)
        self.memberships = MembershipsResource(self._transport)
        self.users = UsersResource(self._transport)
        self.time_entries = TimeEntriesResource(self._transport)
        self.news = NewsResource(self._transport)
        self.relations = IssueRelationsResource(self._transport)
        self.versions = VersionsResource(self._transport)
        self.wiki = WikiResource(self._transport)
        self.queries = QueriesResource(self._transport)
        self.attachments = AttachmentsResource(self._transport)
        self.issue_statuses = IssueStatusesResource(self._transport)
        self.trackers = TrackersResource(self._transport)
        self.enumerations = EnumerationsResource(self._transport)
        self.issue_categories = IssueCategoriesResource(self._transport)
        self.roles = RolesResource(self._transport)
        self.groups = GroupsResource(self._transport)

    @classmethod
    def with_api_key(cls, base_url: str, api_key: str, **kwargs) -> "RedmineClient":
        """Create a client authenticating with an API key."""
        return cls(base_url, api_key_auth(api_key), **kwargs)

    @classmethod
    def with_basic_auth(
        cls, base_url: str, username: str, password: str, **kwargs
    ) -> "RedmineClient":
        """Create a client authenticating with a login and password."""
        return cls(base_url, basic_auth(username, password), **kwargs)

    @classmethod
    def from_env(cls) -> "RedmineClient":
        """Create a client from environment variables.

        Required environment variables:
            REDMINE_URL: Root URL of the Redmine instance.
            REDMINE_API_KEY: API key, or
            REDMINE_USERNAME and REDMINE_PASSWORD: login credentials.

        Optional environment variables:
            REDMINE_SWITCH_USER: Login to impersonate.
            REDMINE_CA_BUNDLE: Path to a PEM file of trusted root certificates.
            REDMINE_TIMEOUT: Request timeout in seconds.
            REDMINE_DEBUG: Set to "1" to enable debug logging.

        Raises:
            RedmineConfigError: A required variable is missing.
            ValueError: REDMINE_TIMEOUT is not a number.
        """
        base_url = os.environ.get("REDMINE_URL")
        if not base_url:
            raise RedmineConfigError("REDMINE_URL is not set")

        api_key = os.environ.get("REDMINE_API_KEY")
        username = os.environ.get("REDMINE_USERNAME")
        password = os.environ.get("REDMINE_PASSWORD")
        if api_key:
            auth = api_key_auth(api_key)
        elif username and password is not None:
            auth = basic_auth(username, password)
        else:
            raise RedmineConfigError(
                "Set REDMINE_API_KEY, or REDMINE_USERNAME and REDMINE_PASSWORD"
            )

        timeout = float(os.environ.get("REDMINE_TIMEOUT", str(DEFAULT_TIMEOUT)))
        debug = os.environ.get("REDMINE_DEBUG", "") == "1"

        return cls(
            base_url,
            auth,
            switch_user=os.environ.get("REDMINE_SWITCH_USER") or None,
            ca_bundle=os.environ.get("REDMINE_CA_BUNDLE") or None,
            timeout=timeout,
            debug=debug,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def switch_user(self) -> str | None:
        """Login impersonated on every request, if any."""
        return self._switch_user

    def close(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_http_client:
            self._http_client.close()

    def __enter__(self) -> "RedmineClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()
