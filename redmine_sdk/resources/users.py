"""Users, groups and roles."""

from __future__ import annotations

from redmine_sdk._internal.transport import STATUS_ANY_SUCCESS
from redmine_sdk.models import Group, GroupInclude, Pagination, Role, User, UserInclude
from redmine_sdk.resources.base import Params, Resource


class UsersResource(Resource):
    """Operations on /users. Most of them require an administrator account."""

    def list(self, params: Params = None) -> tuple[list[User], Pagination]:
        return self._list("users.json", "users", User, params)

    def get(self, user_id: int | str, include: UserInclude | None = None) -> User:
        """Fetch one user. ``user_id`` may be "current" for the authenticated user."""
        return self._get(f"users/{user_id}.json", "user", User, include=include)

    def create(self, user: User) -> User:
        return self._create("users.json", "user", User, user.encode())

    def update(self, user: User) -> None:
        self._update(f"users/{user.id}.json", "user", user.encode())

    def delete(self, user_id: int) -> None:
        self._delete(f"users/{user_id}.json")


class GroupsResource(Resource):
    """Operations on /groups and group membership."""

    def list(self, params: Params = None) -> tuple[list[Group], Pagination]:
        return self._list("groups.json", "groups", Group, params)

    def get(self, group_id: int, include: GroupInclude | None = None) -> Group:
        return self._get(f"groups/{group_id}.json", "group", Group, include=include)

    def create(self, group: Group) -> Group:
        return self._create("groups.json", "group", Group, group.encode())

    def update(self, group: Group) -> None:
        self._update(f"groups/{group.id}.json", "group", group.encode())

    def delete(self, group_id: int) -> None:
        self._delete(f"groups/{group_id}.json")

    def add_user(self, group_id: int, user_id: int) -> None:
        """Add a user to a group."""
        self._transport.post(
            f"groups/{group_id}/users.json",
            {"user_id": user_id},
            expected=STATUS_ANY_SUCCESS,
        )

    def remove_user(self, group_id: int, user_id: int) -> None:
        """Remove a user from a group."""
        self._delete(f"groups/{group_id}/users/{user_id}.json")


class RolesResource(Resource):
    def list(self, params: Params = None) -> tuple[list[Role], Pagination]:
        return self._list("roles.json", "roles", Role, params)

    def get(self, role_id: int) -> Role:
        """Fetch one role with its permissions."""
        return self._get(f"roles/{role_id}.json", "role", Role)
