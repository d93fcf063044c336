"""Tests for Board column management and card movement."""

import pytest

from memban.errors import EntityKind, NotFoundError
from memban.model import Column, move_description


def _ids(column):
    return [c.id for c in column.cards]


def test_move_card_between_columns(board):
    board.move_card("card_todo_1", "todo", "doing")

    todo, doing = board.find_column("todo"), board.find_column("doing")
    assert _ids(todo) == ["card_todo_2"]
    assert _ids(doing) == ["card_doing_1", "card_todo_1"]


def test_move_card_logs_one_activity(board):
    board.move_card("card_todo_1", "todo", "doing")

    log = board.activity_log
    assert log.size() == 1
    activity = log.last()
    assert activity.id == "card_todo_1_move"
    assert activity.description == "Card 'Write docs' moved from 'To Do' to 'Doing'"
    assert "Write docs" in activity.description
    assert "To Do" in activity.description
    assert "Doing" in activity.description


def test_move_card_without_log(board):
    board.activity_log = None
    board.move_card("card_todo_1", "todo", "done")
    assert _ids(board.find_column("done")) == ["card_todo_1"]


def test_move_card_same_column_appends(board):
    board.move_card("card_todo_1", "todo", "todo")
    assert _ids(board.find_column("todo")) == ["card_todo_2", "card_todo_1"]
    assert board.activity_log.size() == 1


@pytest.mark.parametrize(
    "card_id, from_id, to_id, kind",
    [
        ("card_todo_1", "missing", "doing", EntityKind.COLUMN),
        ("card_todo_1", "todo", "missing", EntityKind.COLUMN),
        ("card_doing_1", "todo", "done", EntityKind.CARD),
        ("nope", "todo", "done", EntityKind.CARD),
    ],
)
def test_failed_move_changes_nothing(board, card_id, from_id, to_id, kind):
    before = {c.id: _ids(c) for c in board.columns}

    with pytest.raises(NotFoundError) as exc:
        board.move_card(card_id, from_id, to_id)

    assert exc.value.kind is kind
    assert {c.id: _ids(c) for c in board.columns} == before
    assert board.activity_log.empty()


def test_move_card_with_duplicate_in_target_keeps_one(board):
    duplicate = board.find_column("todo").cards[0]
    board.find_column("done").add_card(duplicate)

    board.move_card(duplicate.id, "todo", "done")

    assert _ids(board.find_column("todo")) == ["card_todo_2"]
    assert _ids(board.find_column("done")) == [duplicate.id]


def test_move_card_within_column(board):
    board.move_card_within_column("todo", "card_todo_1", 5)
    assert _ids(board.find_column("todo")) == ["card_todo_2", "card_todo_1"]
    board.move_card_within_column("todo", "card_todo_1", -1)
    assert _ids(board.find_column("todo")) == ["card_todo_1", "card_todo_2"]
    assert board.activity_log.empty()


def test_move_card_within_column_missing(board):
    with pytest.raises(NotFoundError):
        board.move_card_within_column("todo", "card_doing_1", 0)
    with pytest.raises(NotFoundError):
        board.move_card_within_column("missing", "card_todo_1", 0)
    assert _ids(board.find_column("todo")) == ["card_todo_1", "card_todo_2"]


def test_move_column(board):
    board.move_column("done", 0)
    assert [c.id for c in board.columns] == ["done", "todo", "doing"]
    board.move_column("done", 10)
    assert [c.id for c in board.columns] == ["todo", "doing", "done"]


def test_add_column_ignores_duplicate_id(board):
    board.add_column(Column("todo", "Other"))
    assert board.column_count() == 3
    assert board.find_column("todo").name == "To Do"


def test_remove_column_and_find_card_column(board):
    assert board.find_card_column("card_doing_1").id == "doing"
    assert board.find_card_column("nope") is None
    removed = board.remove_column_by_id("doing")
    assert removed.name == "Doing"
    assert board.remove_column_by_id("doing") is None
    assert not board.has_column("doing")


def test_clear_detaches_log(board):
    board.clear()
    assert board.columns == ()
    assert board.activity_log is None


def test_move_description():
    assert move_description("T", "A", "B") == "Card 'T' moved from 'A' to 'B'"
