"""Tests for issue, relation, category and lookup operations."""

import json

import httpx
import pytest
import respx

from redmine_sdk import RedmineClient
from redmine_sdk.exceptions import RedmineUnprocessableEntityError, RedmineValidationError
from redmine_sdk.models import (
    Issue,
    IssueCategory,
    IssueInclude,
    IssueRelation,
    Project,
    RelationType,
    Tracker,
    Upload,
    User,
)

BASE = "https://redmine.test"


def make_client() -> RedmineClient:
    return RedmineClient.with_api_key(BASE, "key")


class TestIssuesResource:
    """Tests for client.issues."""

    @respx.mock
    def test_list_returns_pagination(self):
        """Should decode the items and the list window."""
        route = respx.get(f"{BASE}/issues.json").mock(
            return_value=httpx.Response(
                200,
                json={
                    "issues": [{"id": 1, "subject": "A"}, {"id": 2, "subject": "B"}],
                    "total_count": 42,
                    "offset": 25,
                    "limit": 25,
                },
            )
        )
        issues, page = make_client().issues.list({"project_id": 1, "offset": 25, "limit": 25})

        assert [issue.subject for issue in issues] == ["A", "B"]
        assert (page.total_count, page.offset, page.limit) == (42, 25, 25)
        params = route.calls.last.request.url.params
        assert params["project_id"] == "1"
        assert params["offset"] == "25"

    @respx.mock
    def test_list_empty(self):
        """An empty result should give no items and a zero total."""
        respx.get(f"{BASE}/issues.json").mock(
            return_value=httpx.Response(200, json={"issues": [], "total_count": 0})
        )
        issues, page = make_client().issues.list()
        assert issues == []
        assert page.total_count == 0

    @respx.mock
    def test_list_for_project(self):
        """Should list under the project path."""
        route = respx.get(f"{BASE}/projects/web/issues.json").mock(
            return_value=httpx.Response(200, json={"issues": [{"id": 1}]})
        )
        issues, _ = make_client().issues.list_for_project("web")
        assert route.called
        assert issues[0].id == 1

    @respx.mock
    def test_get_with_include(self):
        """Should request the included relations in sorted order."""
        route = respx.get(f"{BASE}/issues/7.json").mock(
            return_value=httpx.Response(
                200,
                json={"issue": {"id": 7, "journals": [{"id": 1, "notes": "Hi"}]}},
            )
        )
        issue = make_client().issues.get(7, include=IssueInclude(journals=True, attachments=True))

        assert issue.journals[0].notes == "Hi"
        assert route.calls.last.request.url.params["include"] == "attachments,journals"

    @respx.mock
    def test_get_without_include(self):
        """Should not send an include parameter when nothing is requested."""
        route = respx.get(f"{BASE}/issues/7.json").mock(
            return_value=httpx.Response(200, json={"issue": {"id": 7}})
        )
        make_client().issues.get(7, include=IssueInclude())
        assert "include" not in route.calls.last.request.url.params

    @respx.mock
    def test_get_missing_envelope(self):
        """A response without the issue object should be a validation error."""
        respx.get(f"{BASE}/issues/7.json").mock(return_value=httpx.Response(200, json={}))
        with pytest.raises(RedmineValidationError):
            make_client().issues.get(7)

    @respx.mock
    def test_create(self):
        """Should POST the encoded issue and decode the created one."""
        route = respx.post(f"{BASE}/issues.json").mock(
            return_value=httpx.Response(
                201, json={"issue": {"id": 100, "subject": "Login fails"}}
            )
        )
        created = make_client().issues.create(
            Issue(subject="Login fails", project=Project(id=1), tracker=Tracker(id=1)),
            uploads=[Upload(token="7.abc", filename="log.txt")],
        )

        assert created.id == 100
        assert json.loads(route.calls.last.request.content) == {
            "issue": {
                "subject": "Login fails",
                "project_id": 1,
                "tracker_id": 1,
                "uploads": [{"token": "7.abc", "filename": "log.txt"}],
            }
        }

    @respx.mock
    def test_create_validation_failure(self):
        """Server validation messages should be surfaced."""
        respx.post(f"{BASE}/issues.json").mock(
            return_value=httpx.Response(422, json={"errors": ["Subject cannot be blank"]})
        )
        with pytest.raises(RedmineUnprocessableEntityError) as exc_info:
            make_client().issues.create(Issue(project=Project(id=1)))
        assert str(exc_info.value) == "Subject cannot be blank"

    @respx.mock
    def test_update(self):
        """Should PUT only the set fields to the issue path."""
        route = respx.put(f"{BASE}/issues/7.json").mock(return_value=httpx.Response(204))
        make_client().issues.update(Issue(id=7, notes="Reassigned", assigned_to=User(id=5)))

        assert json.loads(route.calls.last.request.content) == {
            "issue": {"notes": "Reassigned", "assigned_to_id": 5}
        }

    @respx.mock
    def test_delete(self):
        """Should DELETE the issue path."""
        route = respx.delete(f"{BASE}/issues/7.json").mock(return_value=httpx.Response(200))
        make_client().issues.delete(7)
        assert route.called


class TestIssueRelationsResource:
    """Tests for client.relations."""

    @respx.mock
    def test_list(self):
        """Should list the relations of an issue."""
        respx.get(f"{BASE}/issues/1/relations.json").mock(
            return_value=httpx.Response(
                200,
                json={"relations": [{"id": 3, "issue_id": 1, "issue_to_id": 2, "relation_type": "blocks"}]},
            )
        )
        relations, _ = make_client().relations.list(1)
        assert relations[0].relation_type == RelationType.BLOCKS

    @respx.mock
    def test_create(self):
        """Should POST under the source issue."""
        route = respx.post(f"{BASE}/issues/1/relations.json").mock(
            return_value=httpx.Response(
                201, json={"relation": {"id": 3, "issue_id": 1, "issue_to_id": 2, "relation_type": "relates"}}
            )
        )
        relation = make_client().relations.create(
            IssueRelation(issue_id=1, issue_to_id=2, relation_type=RelationType.RELATES)
        )

        assert relation.id == 3
        assert json.loads(route.calls.last.request.content) == {
            "relation": {"issue_to_id": 2, "relation_type": "relates"}
        }

    @respx.mock
    def test_create_requires_issue(self):
        """Should fail without sending anything when issue_id is unset."""
        with pytest.raises(RedmineValidationError):
            make_client().relations.create(IssueRelation(issue_to_id=2))
        assert respx.calls.call_count == 0

    @respx.mock
    def test_get_and_delete(self):
        """Should address relations by their own id."""
        respx.get(f"{BASE}/relations/3.json").mock(
            return_value=httpx.Response(200, json={"relation": {"id": 3}})
        )
        delete = respx.delete(f"{BASE}/relations/3.json").mock(return_value=httpx.Response(204))

        client = make_client()
        assert client.relations.get(3).id == 3
        client.relations.delete(3)
        assert delete.called


class TestIssueCategoriesResource:
    """Tests for client.issue_categories."""

    @respx.mock
    def test_create(self):
        """Should POST under the category's project."""
        route = respx.post(f"{BASE}/projects/1/issue_categories.json").mock(
            return_value=httpx.Response(201, json={"issue_category": {"id": 4, "name": "UI"}})
        )
        category = make_client().issue_categories.create(
            IssueCategory(name="UI", project=Project(id=1), assigned_to=User(id=5))
        )

        assert category.id == 4
        assert json.loads(route.calls.last.request.content) == {
            "issue_category": {"name": "UI", "assigned_to_id": 5}
        }

    @respx.mock
    def test_create_requires_project(self):
        """Should fail without sending anything when the project is unset."""
        with pytest.raises(RedmineValidationError) as exc_info:
            make_client().issue_categories.create(IssueCategory(name="UI"))
        assert str(exc_info.value) == "Missing required field: Project"
        assert respx.calls.call_count == 0

    @respx.mock
    def test_delete_with_reassign(self):
        """Should pass reassign_to_id as a query parameter."""
        route = respx.delete(f"{BASE}/issue_categories/4.json").mock(
            return_value=httpx.Response(204)
        )
        make_client().issue_categories.delete(4, reassign_to_id=2)
        assert route.calls.last.request.url.params["reassign_to_id"] == "2"

    @respx.mock
    def test_list(self):
        """Should list the categories of a project."""
        respx.get(f"{BASE}/projects/1/issue_categories.json").mock(
            return_value=httpx.Response(
                200, json={"issue_categories": [{"id": 4, "name": "UI"}], "total_count": 1}
            )
        )
        categories, page = make_client().issue_categories.list(1)
        assert categories[0].name == "UI"
        assert page.total_count == 1


class TestLookups:
    """Tests for statuses, trackers and queries."""

    @respx.mock
    def test_issue_statuses(self):
        """Should decode the status flags."""
        respx.get(f"{BASE}/issue_statuses.json").mock(
            return_value=httpx.Response(
                200, json={"issue_statuses": [{"id": 5, "name": "Closed", "is_closed": True}]}
            )
        )
        statuses, _ = make_client().issue_statuses.list()
        assert statuses[0].is_closed is True

    @respx.mock
    def test_trackers(self):
        """Should list trackers."""
        respx.get(f"{BASE}/trackers.json").mock(
            return_value=httpx.Response(200, json={"trackers": [{"id": 1, "name": "Bug"}]})
        )
        trackers, _ = make_client().trackers.list()
        assert trackers[0].name == "Bug"

    @respx.mock
    def test_queries(self):
        """Should list saved queries."""
        respx.get(f"{BASE}/queries.json").mock(
            return_value=httpx.Response(
                200, json={"queries": [{"id": 2, "name": "Open bugs", "is_public": True}]}
            )
        )
        queries, _ = make_client().queries.list()
        assert queries[0].is_public is True
