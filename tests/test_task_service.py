import pytest
from sqlmodel import select

from tasktracker.models.enums import Priority
from tasktracker.models.task import Task
from tasktracker.schemas.task import TaskUpdate
from tasktracker.services.errors import NotFoundError, ValidationError

OWNER = "user-123"


def test_create_task_trims_title_and_starts_pending(service):
    task = service.create_task(OWNER, "  Write docs  ", description="  for the API ", priority=Priority.HIGH)

    assert task.id is not None
    assert task.title == "Write docs"
    assert task.description == "for the API"
    assert task.completed is False
    assert task.priority == Priority.HIGH
    assert task.created_at == task.updated_at
    assert task.user_id == OWNER


def test_create_task_defaults(service):
    task = service.create_task(OWNER, "Plain task")

    assert task.priority == Priority.MEDIUM
    assert task.description is None
    assert task.due_date is None


def test_create_task_blank_description_and_due_date_become_none(service):
    task = service.create_task(OWNER, "Task", description="   ", due_date="")

    assert task.description is None
    assert task.due_date is None


@pytest.mark.parametrize("title", ["", "   ", "\t\n"])
def test_create_task_rejects_empty_title(service, session, title):
    with pytest.raises(ValidationError) as excinfo:
        service.create_task(OWNER, title)

    assert excinfo.value.code == "VALIDATION_ERROR"
    assert excinfo.value.details["field"] == "title"
    assert session.exec(select(Task)).all() == []


def test_create_task_title_length_limit(service):
    assert service.create_task(OWNER, "x" * 200).title == "x" * 200

    with pytest.raises(ValidationError):
        service.create_task(OWNER, "x" * 201)


def test_create_task_description_length_limit(service):
    assert len(service.create_task(OWNER, "ok", description="d" * 1000).description) == 1000

    with pytest.raises(ValidationError) as excinfo:
        service.create_task(OWNER, "too long", description="d" * 1001)
    assert excinfo.value.details["field"] == "description"


def test_create_task_rejects_malformed_due_date(service):
    with pytest.raises(ValidationError):
        service.create_task(OWNER, "Task", due_date="next tuesday")
    for compact in ("20240115", "2024-W03-1", "2024-1-5", "2024-02-30"):
        with pytest.raises(ValidationError):
            service.create_task(OWNER, "Task", due_date=compact)
    assert service.list_tasks(OWNER) == []

    assert service.create_task(OWNER, "Task", due_date="2024-01-15").due_date == "2024-01-15"


def test_list_tasks_newest_first_and_scoped_to_owner(service):
    first = service.create_task(OWNER, "first")
    second = service.create_task(OWNER, "second")
    service.create_task("someone-else", "not mine")

    tasks = service.list_tasks(OWNER)

    assert [task.id for task in tasks] == [second.id, first.id]


def test_list_tasks_by_status(service):
    done = service.create_task(OWNER, "done")
    open_task = service.create_task(OWNER, "open")
    service.toggle_task(done.id)

    assert [task.id for task in service.list_tasks_by_status(OWNER, True)] == [done.id]
    assert [task.id for task in service.list_tasks_by_status(OWNER, False)] == [open_task.id]


def test_list_tasks_by_priority(service):
    low = service.create_task(OWNER, "low", priority=Priority.LOW)
    high_one = service.create_task(OWNER, "high 1", priority=Priority.HIGH)
    high_two = service.create_task(OWNER, "high 2", priority="high")

    high = service.list_tasks_by_priority(OWNER, Priority.HIGH)

    assert [task.id for task in high] == [high_two.id, high_one.id]
    assert [task.id for task in service.list_tasks_by_priority(OWNER, "low")] == [low.id]


def test_list_tasks_by_priority_rejects_unknown_priority(service):
    with pytest.raises(ValidationError):
        service.list_tasks_by_priority(OWNER, "urgent")


def test_toggle_task_flips_and_advances_updated_at(service):
    task = service.create_task(OWNER, "toggle me")
    original_updated_at = task.updated_at

    toggled = service.toggle_task(task.id)
    assert toggled.completed is True
    assert toggled.updated_at > original_updated_at
    first_toggle_at = toggled.updated_at

    toggled_back = service.toggle_task(task.id)
    assert toggled_back.completed is False
    assert toggled_back.updated_at > first_toggle_at


def test_toggle_missing_task_raises_not_found(service):
    with pytest.raises(NotFoundError):
        service.toggle_task(999)


def test_update_priority_only_leaves_other_fields(service):
    task = service.create_task(OWNER, "Keep me", description="details", due_date="2030-05-01")
    before = task.updated_at

    updated = service.update_task(task.id, TaskUpdate(priority=Priority.HIGH))

    assert updated.priority == Priority.HIGH
    assert updated.title == "Keep me"
    assert updated.description == "details"
    assert updated.due_date == "2030-05-01"
    assert updated.completed is False
    assert updated.updated_at > before


def test_update_validates_and_trims_title(service):
    task = service.create_task(OWNER, "Old")

    assert service.update_task(task.id, TaskUpdate(title="  New  ")).title == "New"

    with pytest.raises(ValidationError):
        service.update_task(task.id, TaskUpdate(title="   "))
    with pytest.raises(ValidationError):
        service.update_task(task.id, TaskUpdate(title="x" * 201))
    with pytest.raises(ValidationError):
        service.update_task(task.id, TaskUpdate(description="d" * 1001))

    assert service.get_task(task.id).title == "New"


def test_update_can_clear_optional_fields(service):
    task = service.create_task(OWNER, "Task", description="text", due_date="2030-01-01")

    updated = service.update_task(task.id, TaskUpdate(description="", due_date=None))

    assert updated.description is None
    assert updated.due_date is None


def test_update_rejects_null_required_fields(service):
    task = service.create_task(OWNER, "Task")

    with pytest.raises(ValidationError):
        service.update_task(task.id, TaskUpdate(title=None))
    with pytest.raises(ValidationError):
        service.update_task(task.id, TaskUpdate(priority=None))


def test_update_can_set_completed(service):
    task = service.create_task(OWNER, "Task")

    assert service.update_task(task.id, TaskUpdate(completed=True)).completed is True


def test_update_missing_task_raises_not_found(service):
    with pytest.raises(NotFoundError):
        service.update_task(42, TaskUpdate(priority=Priority.LOW))


def test_delete_task(service):
    task_id = service.create_task(OWNER, "Delete me").id

    service.delete_task(task_id)

    assert service.list_tasks(OWNER) == []
    with pytest.raises(NotFoundError):
        service.get_task(task_id)


def test_delete_missing_task_raises_not_found(service):
    with pytest.raises(NotFoundError):
        service.delete_task(123)
