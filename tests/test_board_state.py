from itertools import product

import pytest

from tasktracker.board import state as board
from tasktracker.models.enums import Priority, PriorityFilter, StatusFilter
from tasktracker.schemas.task import TaskResponse


def make_task(task_id, completed=False, priority=Priority.MEDIUM, created_at=1_000):
    return TaskResponse(
        id=task_id,
        user_id="user-123",
        title=f"Task {task_id}",
        completed=completed,
        priority=priority,
        created_at=created_at,
        updated_at=created_at,
    )


@pytest.fixture()
def tasks():
    """One task for every (completed, priority) combination."""
    combos = product([True, False], list(Priority))
    return tuple(
        make_task(index, completed=completed, priority=priority)
        for index, (completed, priority) in enumerate(combos, start=1)
    )


def test_pending_high_filter_matches_exactly(tasks):
    state = board.BoardState(tasks=tasks, status_filter=StatusFilter.PENDING,
                             priority_filter=PriorityFilter.HIGH)

    visible = board.visible_tasks(state)

    expected = {task.id for task in tasks if not task.completed and task.priority == Priority.HIGH}
    assert {task.id for task in visible} == expected
    assert len(visible) == 1


@pytest.mark.parametrize("status_filter", list(StatusFilter))
@pytest.mark.parametrize("priority_filter", list(PriorityFilter))
def test_filters_apply_conjunctively(tasks, status_filter, priority_filter):
    visible = board.filter_tasks(tasks, status_filter, priority_filter)

    for task in tasks:
        should_show = (
            board.matches_status(task, status_filter)
            and (priority_filter == PriorityFilter.ALL or task.priority.value == priority_filter.value)
        )
        assert (task in visible) == should_show


def test_all_filters_show_everything_in_order(tasks):
    assert board.visible_tasks(board.BoardState(tasks=tasks)) == tasks


def test_stats_add_up(tasks):
    stats = board.task_stats(tasks)

    assert stats.total == 6
    assert stats.completed == 3
    assert stats.pending == 3
    assert stats.completed + stats.pending == stats.total


def test_stats_of_empty_collection():
    stats = board.task_stats(())

    assert (stats.total, stats.completed, stats.pending) == (0, 0, 0)


def test_add_task_prepends_without_mutating():
    original = (make_task(1),)

    result = board.add_task(original, make_task(2))

    assert [task.id for task in result] == [2, 1]
    assert [task.id for task in original] == [1]


def test_replace_and_remove_task():
    tasks = (make_task(1), make_task(2))
    renamed = tasks[1].model_copy(update={"title": "Renamed"})

    replaced = board.replace_task(tasks, renamed)
    assert replaced[1].title == "Renamed"
    assert tasks[1].title == "Task 2"

    assert [task.id for task in board.remove_task(tasks, 1)] == [2]
    assert board.remove_task(tasks, 99) == tasks


def test_toggle_task_reducer_flips_only_target():
    tasks = (make_task(1), make_task(2, completed=True))

    toggled = board.toggle_task(tasks, 2, timestamp=5_000)

    assert toggled[0] is tasks[0]
    assert toggled[1].completed is False
    assert toggled[1].updated_at == 5_000
    assert tasks[1].completed is True


def test_filter_setters_return_new_state():
    state = board.BoardState()

    filtered = board.set_priority_filter(board.set_status_filter(state, "completed"), "low")

    assert filtered.status_filter == StatusFilter.COMPLETED
    assert filtered.priority_filter == PriorityFilter.LOW
    assert state.status_filter == StatusFilter.ALL

    with pytest.raises(ValueError):
        board.set_status_filter(state, "done")
