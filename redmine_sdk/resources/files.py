"""Attachments and raw file uploads."""

from redmine_sdk.exceptions import RedmineValidationError
from redmine_sdk.models import Attachment
from redmine_sdk.resources.base import Resource


class AttachmentsResource(Resource):
    def get(self, attachment_id: int) -> Attachment:
        """Fetch attachment metadata; the file itself is at ``content_url``."""
        return self._get(f"attachments/{attachment_id}.json", "attachment", Attachment)


class UploadsResource(Resource):
    def upload(self, data: bytes, filename: str | None = None) -> str:
        """Upload file content and return the token that attaches it.

        Pass the token in an ``Upload`` to ``issues.create``/``issues.update``
        or ``wiki.update``.

        Args:
            data: Raw file content.
            filename: Optional file name recorded by Redmine.

        Returns:
            The opaque upload token.
        """
        params = {"filename": filename} if filename else None
        response = self._transport.upload("uploads.json", data, params)
        upload = response.get("upload") if isinstance(response, dict) else None
        if not isinstance(upload, dict) or not upload.get("token"):
            raise RedmineValidationError("Response from uploads.json is missing 'upload' token")
        return str(upload["token"])
