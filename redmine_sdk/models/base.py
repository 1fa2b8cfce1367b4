"""Base model and shared value types for Redmine resources.

Every resource model decodes leniently: a null or absent wire field falls
back to the zero value of its type, and a nested object that is absent stays
None. Encoding goes the other way through ``omit_zero`` so that only the
fields a caller actually set are sent.
"""

from datetime import date, datetime
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, model_validator

from redmine_sdk._internal.codec import (
    ZERO_DATE,
    ZERO_TIME,
    drop_nulls,
    omit_zero,
    parse_date,
    parse_time,
)

DateField = Annotated[date, BeforeValidator(parse_date)]
TimeField = Annotated[datetime, BeforeValidator(parse_time)]


class RedmineModel(BaseModel):
    """Base for all Redmine resource models."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def null_to_zero(cls, data: Any) -> Any:
        return drop_nulls(data)


# =============================================================================
# Custom Fields
# =============================================================================


class CustomField(RedmineModel):
    """Custom field value attached to a resource.

    The ``multiple`` flag decides which slot is meaningful: ``values`` for
    multi-valued fields, ``value`` otherwise. A raw JSON value of the wrong
    shape for the flag decodes to the empty slot.
    """

    id: int = 0
    name: str = ""
    multiple: bool = False
    value: str = ""
    values: list[str] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def split_value(cls, data: Any) -> Any:
        data = drop_nulls(data)
        if not isinstance(data, dict):
            return data

        result = {key: value for key, value in data.items() if key not in ("value", "values")}
        if data.get("multiple"):
            raw = data.get("values", data.get("value"))
            if isinstance(raw, list):
                result["values"] = [item for item in raw if isinstance(item, str)]
        else:
            raw = data.get("value")
            if isinstance(raw, str):
                result["value"] = raw
        return result

    @property
    def data(self) -> str | list[str]:
        """The active value slot."""
        return self.values if self.multiple else self.value


def custom_fields_to_map(custom_fields: list[CustomField]) -> dict[str, str | list[str]]:
    """Flatten custom fields into the {"<id>": value} mapping Redmine accepts."""
    return {str(field.id): field.data for field in custom_fields}


# =============================================================================
# Uploads and Pagination
# =============================================================================


class Upload(RedmineModel):
    """File upload reference attached to an issue or wiki page.

    ``token`` is the value returned by ``client.uploads.upload()``.
    """

    token: str = ""
    filename: str = ""
    description: str = ""
    content_type: str = ""

    def encode(self) -> dict[str, Any]:
        return omit_zero({
            "token": self.token,
            "filename": self.filename,
            "description": self.description,
            "content_type": self.content_type,
        })


class Pagination(RedmineModel):
    """Offset/limit window reported by a list response."""

    total_count: int = 0
    limit: int = 0
    offset: int = 0


# =============================================================================
# Include Flags
# =============================================================================


class IncludeFlags(BaseModel):
    """Set of relations to expand inline in a response.

    Subclasses declare one boolean per relation, named as Redmine names it.
    """

    model_config = ConfigDict(frozen=True)

    def names(self) -> list[str]:
        """Names of the requested relations, in lexicographic order."""
        return sorted(name for name in type(self).model_fields if getattr(self, name))

    def to_params(self) -> dict[str, str]:
        """Return {"include": "a,b"}, or an empty mapping when nothing is requested."""
        names = self.names()
        if not names:
            return {}
        return {"include": ",".join(names)}


def include_params(include: IncludeFlags | None) -> dict[str, str]:
    if include is None:
        return {}
    return include.to_params()

