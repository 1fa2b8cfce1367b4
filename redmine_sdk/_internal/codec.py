"""Conversion helpers between Redmine wire values and domain values."""

from datetime import UTC, date, datetime
from typing import Any

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

# "Unset" sentinels for date and timestamp fields.
ZERO_DATE = date(1, 1, 1)
ZERO_TIME = datetime(1, 1, 1, tzinfo=UTC)


def parse_date(value: Any) -> date:
    """Parse a YYYY-MM-DD value, returning ZERO_DATE when absent or invalid."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value:
        return ZERO_DATE
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError:
        return ZERO_DATE


def parse_time(value: Any) -> datetime:
    """Parse a YYYY-MM-DDTHH:MM:SSZ value, returning ZERO_TIME when absent or invalid."""
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=UTC)
    if not isinstance(value, str) or not value:
        return ZERO_TIME
    try:
        return datetime.strptime(value, TIME_FORMAT).replace(tzinfo=UTC)
    except ValueError:
        return ZERO_TIME


def format_date(value: date) -> str:
    """Format a date as YYYY-MM-DD; ZERO_DATE formats as ""."""
    if isinstance(value, datetime):
        value = value.date()
    if value == ZERO_DATE:
        return ""
    return value.strftime(DATE_FORMAT)


def format_time(value: datetime) -> str:
    """Format a timestamp as UTC YYYY-MM-DDTHH:MM:SSZ; ZERO_TIME formats as ""."""
    if value == ZERO_TIME:
        return ""
    if value.tzinfo is not None:
        value = value.astimezone(UTC)
    return value.strftime(TIME_FORMAT)


def is_zero(value: Any) -> bool:
    """Check whether a wire value is the zero value of its type."""
    if value is None:
        return True
    if isinstance(value, (str, bytes, list, tuple, dict, set)):
        return len(value) == 0
    if isinstance(value, bool):
        return value is False
    if isinstance(value, (int, float)):
        return value == 0
    return False


def omit_zero(fields: dict[str, Any]) -> dict[str, Any]:
    """Drop every entry whose value is the zero value of its type.

    Only the top level is filtered: values inside a nested mapping (such as
    the custom field map) are sent as given so that a field can be cleared.
    """
    return {key: value for key, value in fields.items() if not is_zero(value)}


def ref_id(entity: Any) -> int:
    """Return the id of a referenced entity, or 0 when the reference is unset."""
    if entity is None:
        return 0
    return entity.id


def ref_ids(entities: list[Any]) -> list[int]:
    return [entity.id for entity in entities]


def drop_nulls(data: Any) -> Any:
    """Remove null entries from a JSON object so defaults apply in their place."""
    if isinstance(data, dict):
        return {key: value for key, value in data.items() if value is not None}
    return data
