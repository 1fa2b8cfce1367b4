"""Redmine SDK for Python.

A typed client for the Redmine REST API.

Public API:
    RedmineClient - User-facing client
    redmine_sdk.models - Entity models and include flags
    redmine_sdk.exceptions - Error hierarchy

Internal (not for direct use):
    _internal.transport - Request/response plumbing
    _internal.codec - Date, time and partial-update encoding
"""

from redmine_sdk._version import __version__
from redmine_sdk.client import RedmineClient
from redmine_sdk.exceptions import (
    RedmineAPIError,
    RedmineConfigError,
    RedmineConnectionError,
    RedmineError,
    RedmineUnprocessableEntityError,
    RedmineValidationError,
)

__all__ = [
    "__version__",
    "RedmineClient",
    "RedmineError",
    "RedmineAPIError",
    "RedmineUnprocessableEntityError",
    "RedmineConnectionError",
    "RedmineConfigError",
    "RedmineValidationError",
]
