"""Shared test helpers for model tests."""

import pytest

from memban.model import ActivityLog, Board, Card, Column


def _make_column(column_id, name, titles=()):
    """Helper to build a column holding cards card_<column_id>_<n>."""
    column = Column(column_id, name)
    for i, title in enumerate(titles, start=1):
        column.add_card(Card(f"card_{column_id}_{i}", title))
    return column


@pytest.fixture
def board():
    """Board with To Do (two cards), Doing (one card), Done (empty) and a log."""
    b = Board("board_1", "Project")
    b.add_column(_make_column("todo", "To Do", ["Write docs", "Review"]))
    b.add_column(_make_column("doing", "Doing", ["Build"]))
    b.add_column(_make_column("done", "Done"))
    b.activity_log = ActivityLog()
    return b


@pytest.fixture
def make_column():
    return _make_column
