"""Shared fixtures for CLI tests."""

from io import StringIO

import pytest
from rich.console import Console

from memban.cli.console import ConsoleController
from memban.cli.view import ConsoleView
from memban.service import KanbanService


class RecordingView:
    """View that keeps what it was asked to show."""

    def __init__(self):
        self.messages = []
        self.errors = []
        self.boards = None
        self.columns = None
        self.cards = None

    def show_message(self, text):
        self.messages.append(text)

    def show_error(self, text):
        self.errors.append(text)

    def display_boards(self, boards):
        self.boards = list(boards)

    def display_columns(self, columns):
        self.columns = list(columns)

    def display_cards(self, cards):
        self.cards = list(cards)


@pytest.fixture
def view():
    return RecordingView()


@pytest.fixture
def service():
    return KanbanService()


@pytest.fixture
def controller(service, view):
    return ConsoleController(service, view)


@pytest.fixture
def rich_view():
    """ConsoleView writing to buffers. Returns (view, out, err)."""
    out, err = StringIO(), StringIO()
    console_view = ConsoleView(
        console=Console(file=out, width=120, highlight=False),
        error_console=Console(file=err, width=120, highlight=False),
    )
    return console_view, out, err
