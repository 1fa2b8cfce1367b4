"""Tests for attachment and upload operations."""

import httpx
import pytest
import respx

from redmine_sdk import RedmineClient
from redmine_sdk.exceptions import RedmineAPIError, RedmineValidationError

BASE = "https://redmine.test"


def make_client() -> RedmineClient:
    return RedmineClient.with_api_key(BASE, "key")


class TestUploadsResource:
    """Tests for client.uploads."""

    @respx.mock
    def test_upload_returns_token(self):
        """Should send the bytes and return the token."""
        route = respx.post(f"{BASE}/uploads.json").mock(
            return_value=httpx.Response(201, json={"upload": {"id": 7, "token": "7.ed32257a"}})
        )
        token = make_client().uploads.upload(b"log contents", filename="log.txt")

        assert token == "7.ed32257a"
        request = route.calls.last.request
        assert request.content == b"log contents"
        assert request.headers["content-type"] == "application/octet-stream"
        assert request.url.params["filename"] == "log.txt"

    @respx.mock
    def test_upload_without_filename(self):
        """Should not send a filename parameter when none is given."""
        route = respx.post(f"{BASE}/uploads.json").mock(
            return_value=httpx.Response(201, json={"upload": {"token": "1.a"}})
        )
        make_client().uploads.upload(b"x")
        assert "filename" not in route.calls.last.request.url.params

    @respx.mock
    def test_upload_too_large(self):
        """A 422 for an oversized file should raise."""
        respx.post(f"{BASE}/uploads.json").mock(
            return_value=httpx.Response(422, json={"errors": ["This file cannot be uploaded because it exceeds the maximum allowed file size (5 MB)"]})
        )
        with pytest.raises(RedmineAPIError):
            make_client().uploads.upload(b"x" * 10)

    @respx.mock
    def test_upload_missing_token(self):
        """A response without a token should be a validation error."""
        respx.post(f"{BASE}/uploads.json").mock(
            return_value=httpx.Response(201, json={"upload": {}})
        )
        with pytest.raises(RedmineValidationError):
            make_client().uploads.upload(b"x")


class TestAttachmentsResource:
    """Tests for client.attachments."""

    @respx.mock
    def test_get(self):
        """Should decode attachment metadata."""
        respx.get(f"{BASE}/attachments/4.json").mock(
            return_value=httpx.Response(
                200,
                json={
                    "attachment": {
                        "id": 4,
                        "filename": "log.txt",
                        "filesize": 1024,
                        "content_url": f"{BASE}/attachments/download/4/log.txt",
                        "author": {"id": 5, "name": "John"},
                    }
                },
            )
        )
        attachment = make_client().attachments.get(4)
        assert attachment.filesize == 1024
        assert attachment.author.name == "John"
