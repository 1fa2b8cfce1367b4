"""Shared plumbing for resource operation classes."""

from typing import Any, TypeVar

from redmine_sdk._internal.transport import Params, Transport
from redmine_sdk.exceptions import RedmineValidationError
from redmine_sdk.models.base import IncludeFlags, Pagination, RedmineModel, include_params

M = TypeVar("M", bound=RedmineModel)


class Resource:
    """Base for one group of Redmine endpoints.

    Subclasses compose URL templates with the transport and the models;
    every method maps to exactly one HTTP request.
    """

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def _list(
        self,
        path: str,
        key: str,
        model: type[M],
        params: Params = None,
    ) -> tuple[list[M], Pagination]:
        data = self._transport.get(path, params)
        envelope = _require_object(data, path)
        items = envelope.get(key) or []
        return [model.model_validate(item) for item in items], Pagination.model_validate(envelope)

    def _get(
        self,
        path: str,
        key: str,
        model: type[M],
        *,
        include: IncludeFlags | None = None,
        params: Params = None,
    ) -> M:
        query = {**(params or {}), **include_params(include)}
        data = self._transport.get(path, query)
        return _unwrap(data, key, model, path)

    def _create(self, path: str, key: str, model: type[M], body: dict[str, Any]) -> M:
        data = self._transport.post(path, {key: body})
        return _unwrap(data, key, model, path)

    def _update(self, path: str, key: str, body: dict[str, Any]) -> None:
        self._transport.put(path, {key: body})

    def _delete(self, path: str, params: Params = None) -> None:
        self._transport.delete(path, params)


def require(value: Any, message: str) -> None:
    """Fail locally, before any request, when a required parent is missing."""
    if not value:
        raise RedmineValidationError(message)


def _require_object(data: Any, path: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise RedmineValidationError(f"Expected a JSON object from {path}")
    return data


def _unwrap(data: Any, key: str, model: type[M], path: str) -> M:
    envelope = _require_object(data, path)
    if not isinstance(envelope.get(key), dict):
        raise RedmineValidationError(f"Response from {path} is missing '{key}'")
    return model.model_validate(envelope[key])
