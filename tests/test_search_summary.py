"""Title/date search and the active summary."""
from todo_mcp.services.todo_service import NO_ACTIVE_TODOS_MESSAGE


def test_title_search_is_case_insensitive_substring(service):
    match = service.create_todo("Fix Authentication Bug", "login fails")
    service.create_todo("Write release notes", "v1")

    results = service.search_by_title("AUTH")

    assert [t.id for t in results] == [match.id]


def test_empty_title_term_matches_everything(service):
    service.create_todo("one", "1")
    service.create_todo("two", "2")

    assert len(service.search_by_title("")) == 2


def test_date_search_matches_creation_day_prefix(service):
    todo = service.create_todo("Dated", "today")
    day = todo.created_at[:10]

    assert [t.id for t in service.search_by_date(day)] == [todo.id]
    assert service.search_by_date("1999-01-01") == []


def test_malformed_date_matches_nothing(service):
    service.create_todo("Dated", "today")

    assert service.search_by_date("yesterday") == []


def test_summary_without_active_todos(service):
    done = service.create_todo("Done already", "x")
    service.complete_todo(done.id)

    assert service.summarize_active_todos() == NO_ACTIVE_TODOS_MESSAGE


def test_summary_lists_active_titles(service):
    service.create_todo("First", "a")
    service.create_todo("Second", "b")
    done = service.create_todo("Third", "c")
    service.complete_todo(done.id)

    assert service.summarize_active_todos() == (
        "# Active Todos Summary\n\n"
        "There are 2 active todos:\n\n"
        "- First\n"
        "- Second"
    )
