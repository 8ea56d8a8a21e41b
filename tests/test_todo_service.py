"""Todo store: CRUD, status handling and sequencing."""
import pytest

from todo_mcp.models.todo import TodoStatus
from todo_mcp.utils.errors import DuplicateTodoError

LATER = "2099-01-01T00:00:00.000Z"


def test_create_assigns_defaults_and_first_task_number(service):
    todo = service.create_todo("Write docs", "Describe the tools")

    assert todo.task_number == 1
    assert todo.status == TodoStatus.NEW.value
    assert todo.completed_at is None
    assert todo.completed is False
    assert todo.file_path is None
    assert todo.created_at == todo.updated_at
    assert len(todo.id) == 36


def test_task_number_is_max_plus_one(service):
    service.create_todo("first", "one")
    service.create_todo("pinned", "far ahead", task_number=10)

    todo = service.create_todo("next", "after the pinned one")

    assert todo.task_number == 11


def test_deleting_a_middle_todo_does_not_fill_the_gap(service):
    service.create_todo("a", "a")
    middle = service.create_todo("b", "b")
    service.create_todo("c", "c")
    service.delete_todo(middle.id)

    todo = service.create_todo("d", "d")

    assert todo.task_number == 4


def test_duplicate_title_and_description_is_rejected(service):
    original = service.create_todo("Same", "Same body")

    with pytest.raises(DuplicateTodoError) as exc_info:
        service.create_todo("Same", "Same body")

    assert exc_info.value.existing_id == original.id
    assert exc_info.value.code == "DUPLICATE_TODO"
    matching = [t for t in service.get_all_todos() if t.title == "Same"]
    assert len(matching) == 1


def test_same_title_with_different_description_is_allowed(service):
    service.create_todo("Same", "one")
    service.create_todo("Same", "two")

    assert len(service.get_all_todos()) == 2


def test_get_missing_todo_returns_none(service):
    assert service.get_todo("00000000-0000-0000-0000-000000000000") is None


def test_update_applies_only_supplied_fields(service, monkeypatch):
    todo = service.create_todo("Old title", "Old description")
    monkeypatch.setattr("todo_mcp.services.todo_service.utc_now_iso", lambda: LATER)

    updated = service.update_todo(todo.id, title="New title")

    assert updated.title == "New title"
    assert updated.description == "Old description"
    assert updated.updated_at == LATER


def test_update_does_not_recheck_duplicates(service):
    service.create_todo("Taken", "body")
    other = service.create_todo("Other", "body")

    updated = service.update_todo(other.id, title="Taken")

    assert updated.title == "Taken"


def test_update_missing_todo_returns_none(service):
    assert service.update_todo("00000000-0000-0000-0000-000000000000", title="x") is None


def test_complete_sets_timestamp_and_status(service, monkeypatch):
    todo = service.create_todo("Finish me", "soon")
    before = todo.updated_at
    monkeypatch.setattr("todo_mcp.services.todo_service.utc_now_iso", lambda: LATER)

    service.complete_todo(todo.id)
    fetched = service.get_todo(todo.id)

    assert fetched.completed_at == LATER
    assert fetched.completed is True
    assert fetched.status == TodoStatus.DONE.value
    assert fetched.updated_at != before


def test_complete_missing_todo_returns_none(service):
    assert service.complete_todo("00000000-0000-0000-0000-000000000000") is None


def test_update_status_done_leaves_completed_at_unset(service):
    todo = service.create_todo("Status only", "no timestamp")

    updated = service.update_status(todo.id, "Done")

    assert updated.status == "Done"
    assert updated.completed_at is None
    assert updated.completed is False


def test_update_status_new_keeps_existing_completed_at(service):
    todo = service.create_todo("Reopen", "keeps stamp")
    completed = service.complete_todo(todo.id)
    stamp = completed.completed_at

    reopened = service.update_status(todo.id, "New")

    assert reopened.status == "New"
    assert reopened.completed_at == stamp
    assert reopened.to_dict()["completed"] is True


def test_update_status_missing_todo_returns_none(service):
    assert service.update_status("00000000-0000-0000-0000-000000000000", "Done") is None


def test_delete_reports_whether_a_row_was_removed(service):
    todo = service.create_todo("Delete me", "gone")

    assert service.delete_todo(todo.id) is True
    assert service.get_todo(todo.id) is None
    assert service.delete_todo(todo.id) is False


def test_active_todos_exclude_completed_ones(service):
    keep = service.create_todo("keep", "active")
    done = service.create_todo("done", "completed")
    status_only = service.create_todo("status only", "still active")
    service.complete_todo(done.id)
    service.update_status(status_only.id, "Done")

    active_ids = {t.id for t in service.get_active_todos()}

    assert active_ids == {keep.id, status_only.id}
    assert len(service.get_all_todos()) == 3


def test_next_todo_walks_the_queue_in_task_number_order(service):
    first = service.create_todo("one", "1")
    second = service.create_todo("two", "2")

    assert service.get_next_todo().id == first.id

    service.complete_todo(first.id)
    assert service.get_next_todo().id == second.id

    service.update_status(second.id, "Done")
    assert service.get_next_todo() is None


def test_next_todo_on_empty_store_returns_none(service):
    assert service.get_next_todo() is None


def test_clear_all_returns_count_and_resets_numbering(service):
    loaded = [service.create_todo(f"todo {i}", "body") for i in range(3)]

    assert service.clear_all_todos() == 3
    assert service.get_all_todos() == []
    assert service.get_todo(loaded[0].id) is None
    assert service.clear_all_todos() == 0

    fresh = service.create_todo("fresh", "start over")
    assert fresh.task_number == 1


def test_to_dict_uses_wire_field_names(service):
    todo = service.create_todo("Wire", "shape")

    record = todo.to_dict()

    assert set(record) == {
        "id", "title", "description", "completedAt", "completed",
        "createdAt", "updatedAt", "filePath", "status", "taskNumber",
    }
    assert record["status"] == "New"
    assert record["taskNumber"] == 1
    assert record["createdAt"].endswith("Z")
