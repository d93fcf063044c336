"""Main Textual application for memban."""

import logging

from textual.app import App

from memban.config import Settings
from memban.service import KanbanService
from memban.ui.board import BoardScreen, new_board

logger = logging.getLogger(__name__)


class MembanApp(App):
    """In-memory kanban board TUI."""

    TITLE = "memban"
    BINDINGS = [("ctrl+q", "quit", "Quit")]

    def __init__(self, service: KanbanService, settings: Settings | None = None):
        super().__init__()
        self.service = service
        self.settings = settings or Settings()

    def on_mount(self) -> None:
        self.push_screen(BoardScreen(self.service, self._initial_board()))

    def _initial_board(self) -> str:
        """Sample board if asked for, else the first existing board, else a fresh one."""
        if self.settings.sample_data:
            return self.service.create_sample_data()
        boards = self.service.list_boards()
        if boards:
            return boards[0].id
        logger.info("starting with empty board %r", self.settings.board_name)
        return new_board(self.service, self.settings.board_name)
