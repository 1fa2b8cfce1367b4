"""Public exceptions for the Redmine SDK."""


class RedmineError(Exception):
    """Base exception for all Redmine SDK errors."""


class RedmineAPIError(RedmineError):
    """Unexpected response status from the Redmine API."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class RedmineUnprocessableEntityError(RedmineAPIError):
    """422 response carrying the server's validation messages."""

    def __init__(self, errors: list[str], body: str | None = None) -> None:
        super().__init__("; ".join(errors), status_code=422, body=body)
        self.errors = errors


class RedmineConnectionError(RedmineError):
    """Network or IO failure before a response was received."""


class RedmineConfigError(RedmineError):
    """Configuration error (missing env vars, invalid config)."""


class RedmineValidationError(RedmineError):
    """Validation error for request/response data."""
