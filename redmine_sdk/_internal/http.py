"""Shared HTTP client configuration."""

import ssl

import httpx

from redmine_sdk._version import __version__

DEFAULT_TIMEOUT = 30.0
SWITCH_USER_HEADER = "X-Redmine-Switch-User"


def api_key_auth(api_key: str) -> httpx.BasicAuth:
    """Basic auth credentials carrying an API key as the username."""
    return httpx.BasicAuth(api_key, "")


def basic_auth(username: str, password: str) -> httpx.BasicAuth:
    """Basic auth credentials for a login/password pair."""
    return httpx.BasicAuth(username, password)


def create_http_client(
    *,
    auth: httpx.Auth | None = None,
    timeout: float = DEFAULT_TIMEOUT,
    switch_user: str | None = None,
    ca_bundle: str | None = None,
    verify: bool = True,
) -> httpx.Client:
    """Create configured HTTP client.

    Args:
        auth: Credentials attached to every request.
        timeout: Request timeout in seconds.
        switch_user: Login to impersonate on every request (admin only).
        ca_bundle: Path to a PEM file of trusted root certificates.
        verify: Whether to verify TLS certificates at all.

    Returns:
        Configured httpx.Client instance.
    """
    headers = {"User-Agent": f"redmine-sdk/{__version__}"}
    if switch_user:
        headers[SWITCH_USER_HEADER] = switch_user

    tls: bool | ssl.SSLContext = verify
    if verify and ca_bundle:
        tls = ssl.create_default_context(cafile=ca_bundle)

    return httpx.Client(
        auth=auth,
        timeout=timeout,
        verify=tls,
        headers=headers,
    )
