"""
Integration tests against a live Canvas instance.

These tests assume a non-admin user enrolled in several courses. Configure them
with a .env file in the project root (or environment variables):

    CANVAS_API_HOST=http://canvas.docker
    CANVAS_ACCESS_KEY=<token>

Run with: pytest tests/integration -m integration
Tests are skipped when no Canvas instance is configured.
"""

import time

import pytest

from canvas_client import CanvasClient
from canvas_client.errors import ApiError, ConfigurationError
from canvas_client.utils.config_loader import load_config

pytestmark = pytest.mark.integration


@pytest.fixture(scope="module")
def api():
    """CanvasClient configured from the environment."""
    try:
        config = load_config()
    except ConfigurationError as e:
        pytest.skip(f"Canvas instance not configured: {e}")
    with CanvasClient(config) as client:
        yield client


def test_non_paginated_item_get(api):
    me = api.get("/users/self")

    assert isinstance(me, dict)
    assert "name" in me


def test_unauthorized(api):
    with pytest.raises(ApiError) as exc_info:
        api.get("/accounts/1")

    assert exc_info.value.status_code == 401


def test_paginated_list_get(api):
    courses = api.get_all("/courses?per_page=1")

    assert isinstance(courses, list)
    assert len(courses) > 1


def test_get_square_bracket_params(api):
    courses = api.get_all("/courses?include[]=term&include[]=account")

    assert len(courses) > 1
    assert "term" in courses[0]
    assert "account" in courses[0]


def test_post_put_delete_lifecycle(api):
    course = api.get_all("/courses")[0]
    assignments_url = f"/courses/{course['id']}/assignments"
    assignment_name = f"unit_{int(time.time())}"

    def matching():
        return [a for a in api.get_all(assignments_url) if a["name"] == assignment_name]

    assert matching() == []

    assignment = api.post(
        assignments_url,
        {"assignment[name]": assignment_name, "assignment[description]": "unit test 1"},
    )
    assert assignment["name"] == assignment_name
    assert assignment["description"] == "unit test 1"
    assert [a["description"] for a in matching()] == ["unit test 1"]

    updated = api.put(
        f"{assignments_url}/{assignment['id']}",
        {"assignment": {"description": "unit test 2"}},
    )
    assert updated["name"] == assignment_name
    assert [a["description"] for a in matching()] == ["unit test 2"]

    api.delete(f"{assignments_url}/{assignment['id']}")
    assert matching() == []
