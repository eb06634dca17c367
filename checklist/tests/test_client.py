"""
Tests for the checklist HTTP client.

The requests session is mocked; only the URL/method/body the client sends
and its handling of responses are checked.
"""
import pytest
import requests
from unittest.mock import MagicMock

from checklist.app.services.client import ChecklistAPIError, ChecklistClient


def make_response(status_code=200, json_body=None, text=None):
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    if json_body is not None:
        response.json.return_value = json_body
        response.text = text if text is not None else "{...}"
    else:
        response.json.side_effect = ValueError("No JSON")
        response.text = text or ""
    return response


@pytest.fixture
def session():
    return MagicMock()


@pytest.fixture
def api(session):
    return ChecklistClient(base_url="http://checklist.test/api/", session=session, timeout=5)


def test_get_list(api, session):
    session.request.return_value = make_response(json_body=[{"id": 1, "task": "Ice"}])

    assert api.list("tasks") == [{"id": 1, "task": "Ice"}]
    session.request.assert_called_once_with("GET", "http://checklist.test/api/tasks/", timeout=5)


def test_post_sends_json(api, session):
    session.request.return_value = make_response(201, json_body={"id": 7, "name": "Zoe"})

    created = api.create("guests", {"name": "Zoe", "month": "May"})

    assert created == {"id": 7, "name": "Zoe"}
    session.request.assert_called_once_with(
        "POST", "http://checklist.test/api/guests/", timeout=5, json={"name": "Zoe", "month": "May"}
    )


def test_put_and_delete_use_record_id(api, session):
    session.request.return_value = make_response(204)

    assert api.update("artists", 3, {"room": "main"}) is None
    api.delete("artists", 3)

    calls = session.request.call_args_list
    assert calls[0].args == ("PUT", "http://checklist.test/api/artists/3")
    assert calls[1].args == ("DELETE", "http://checklist.test/api/artists/3")
    assert "json" not in calls[1].kwargs


def test_empty_body_returns_none(api, session):
    session.request.return_value = make_response(200, text="")

    assert api.request("tasks") is None


def test_error_uses_server_detail(api, session):
    session.request.return_value = make_response(404, json_body={"detail": "Task not found"})

    with pytest.raises(ChecklistAPIError) as exc_info:
        api.update("tasks", 99, {"complete": True})

    assert str(exc_info.value) == "Task not found"
    assert exc_info.value.status_code == 404


def test_error_with_text_body(api, session):
    session.request.return_value = make_response(500, text="Something broke!")

    with pytest.raises(ChecklistAPIError) as exc_info:
        api.list("artists")

    assert str(exc_info.value) == "HTTP error! status: 500 - Something broke!"


def test_transport_error_is_wrapped(api, session):
    session.request.side_effect = requests.ConnectionError("refused")

    with pytest.raises(ChecklistAPIError) as exc_info:
        api.list("guests")

    assert exc_info.value.status_code is None
    assert isinstance(exc_info.value.__cause__, requests.ConnectionError)


def test_load_all(api, session):
    session.request.side_effect = [
        make_response(json_body=[{"id": 1}]),
        make_response(json_body=[]),
        make_response(200, text=""),
    ]

    assert api.load_all() == {"tasks": [{"id": 1}], "artists": [], "guests": []}


class TestToggleTaskComplete:
    TASKS = [
        {"id": 1, "task": "Ice", "complete": False},
        {"id": 2, "task": "Flyers", "complete": True},
    ]

    def test_merges_server_copy(self, api, session):
        session.request.return_value = make_response(
            json_body={"id": 1, "task": "Ice", "complete": True, "updated_at": "2025-05-01T10:00:00"}
        )
        tasks = [dict(t) for t in self.TASKS]

        updated = api.toggle_task_complete(tasks, 1)

        assert updated[0] == {"id": 1, "task": "Ice", "complete": True, "updated_at": "2025-05-01T10:00:00"}
        assert updated[1] == self.TASKS[1]
        assert session.request.call_args.kwargs["json"] == {"complete": True}

    def test_keeps_optimistic_state_without_body(self, api, session):
        session.request.return_value = make_response(204)

        updated = api.toggle_task_complete([dict(t) for t in self.TASKS], 2)

        assert updated[1]["complete"] is False

    def test_failure_leaves_list_untouched(self, api, session):
        session.request.return_value = make_response(500, json_body={"error": "Database down"})
        tasks = [dict(t) for t in self.TASKS]

        with pytest.raises(ChecklistAPIError, match="Database down"):
            api.toggle_task_complete(tasks, 1)

        assert tasks == self.TASKS

    def test_unknown_task(self, api, session):
        with pytest.raises(KeyError):
            api.toggle_task_complete([dict(t) for t in self.TASKS], 42)
        session.request.assert_not_called()
