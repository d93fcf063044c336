"""Interactive line-oriented console."""

from __future__ import annotations

import logging
import shlex
from collections.abc import Callable, Iterable

from memban.cli.view import View
from memban.errors import EntityKind, MembanError, NotFoundError
from memban.service import KanbanService

logger = logging.getLogger(__name__)

PROMPT = "> "

HELP = [
    ("create-board <name>", "Create a board and print its ID"),
    ("add-column <boardId> <name>", "Add a column to a board"),
    ("add-card <boardId> <columnId> <title>", "Add a card to a column"),
    ("move-card <boardId> <cardId> <fromColumnId> <toColumnId>", "Move a card between columns"),
    ("list-boards", "List all boards"),
    ("list-columns <boardId>", "List the columns of a board"),
    ("list-cards <columnId>", "List the cards of a column"),
    ("history <boardId>", "Show a board's activity, newest first"),
    ("stats <boardId>", "Show column and card counts"),
    ("sample", "Create the sample board"),
    ("help", "Show this help"),
    ("exit", "Leave the console"),
]


class UsageError(Exception):
    """A command was called with the wrong arguments."""


class ConsoleController:
    """Parses console lines and calls the service.

    Every failure is reported through the view; the loop only ends on
    ``exit``/``quit`` or end of input.
    """

    def __init__(self, service: KanbanService, view: View):
        self.service = service
        self.view = view
        self._commands: dict[str, Callable[[list[str]], None]] = {
            "help": self.cmd_help,
            "sample": self.cmd_sample,
            "create-board": self.cmd_create_board,
            "add-column": self.cmd_add_column,
            "add-card": self.cmd_add_card,
            "move-card": self.cmd_move_card,
            "list-boards": self.cmd_list_boards,
            "list-columns": self.cmd_list_columns,
            "list-cards": self.cmd_list_cards,
            "history": self.cmd_history,
            "stats": self.cmd_stats,
        }

    def run(self, lines: Iterable[str] | None = None, read_line: Callable[[str], str] | None = None) -> None:
        """Process lines until exit or EOF.

        Without lines, reads with read_line (default: the builtin input).
        """
        self.view.show_message("Interactive console started. Type 'help' for commands, 'exit' to leave.")
        if lines is not None:
            for line in lines:
                if not self.execute(line):
                    return
            return
        read_line = read_line or input
        while True:
            try:
                line = read_line(PROMPT)
            except (EOFError, KeyboardInterrupt):
                return
            if not self.execute(line):
                return

    def execute(self, line: str) -> bool:
        """Run one command line. Returns False when the console should stop."""
        try:
            tokens = shlex.split(line)
        except ValueError as e:
            self.view.show_error(f"Could not parse command: {e}")
            return True
        if not tokens:
            return True

        name, args = tokens[0], tokens[1:]
        if name in ("exit", "quit"):
            return False
        handler = self._commands.get(name)
        if handler is None:
            self.view.show_error(f"Unknown command '{name}'. Type 'help' for the command list.")
            return True

        try:
            handler(args)
        except UsageError as e:
            self.view.show_error(f"Usage: {e}")
        except MembanError as e:
            logger.debug("%s failed: %s", name, e)
            self.view.show_error(e.message)
        return True

    # -- commands --

    def cmd_help(self, args: list[str]) -> None:
        width = max(len(usage) for usage, _ in HELP)
        lines = ["Available commands:"]
        lines += [f"  {usage:<{width}}  {text}" for usage, text in HELP]
        self.view.show_message("\n".join(lines))

    def cmd_sample(self, args: list[str]) -> None:
        board_id = self.service.create_sample_data()
        self.view.show_message(f"Sample board created (ID: {board_id})")

    def cmd_create_board(self, args: list[str]) -> None:
        if not args:
            raise UsageError("create-board <name>")
        name = " ".join(args)
        board_id = self.service.create_board(name)
        self.view.show_message(f"Board created: '{name}' (ID: {board_id})")

    def cmd_add_column(self, args: list[str]) -> None:
        if len(args) < 2:
            raise UsageError("add-column <boardId> <name>")
        name = " ".join(args[1:])
        column_id = self.service.add_column(args[0], name)
        self.view.show_message(f"Column created: '{name}' (ID: {column_id})")

    def cmd_add_card(self, args: list[str]) -> None:
        if len(args) < 3:
            raise UsageError("add-card <boardId> <columnId> <title>")
        title = " ".join(args[2:])
        card_id = self.service.add_card(args[0], args[1], title)
        self.view.show_message(f"Card created: '{title}' (ID: {card_id})")

    def cmd_move_card(self, args: list[str]) -> None:
        if len(args) != 4:
            raise UsageError("move-card <boardId> <cardId> <fromColumnId> <toColumnId>")
        board_id, card_id, from_column_id, to_column_id = args
        self.service.move_card(board_id, card_id, from_column_id, to_column_id)
        self.view.show_message(f"Card moved: {card_id}")

    def cmd_list_boards(self, args: list[str]) -> None:
        self.view.display_boards(self.service.list_boards())

    def cmd_list_columns(self, args: list[str]) -> None:
        if len(args) != 1:
            raise UsageError("list-columns <boardId>")
        self.view.display_columns(self.service.list_columns(args[0]))

    def cmd_list_cards(self, args: list[str]) -> None:
        if len(args) != 1:
            raise UsageError("list-cards <columnId>")
        self.view.display_cards(self.service.list_cards(args[0]))

    def cmd_history(self, args: list[str]) -> None:
        if len(args) != 1:
            raise UsageError("history <boardId>")
        board = self.service.find_board(args[0])
        if board is None:
            raise NotFoundError(EntityKind.BOARD, args[0])
        log = board.activity_log
        if log is None or log.empty():
            self.view.show_message("No activity yet.")
            return
        self.view.show_message("\n".join(str(activity) for activity in log.newest_first()))

    def cmd_stats(self, args: list[str]) -> None:
        if len(args) != 1:
            raise UsageError("stats <boardId>")
        stats = self.service.board_stats(args[0])
        lines = [f"Columns: {stats.columns}", f"Cards: {stats.cards}"]
        lines += [f"  {name}: {count} {'card' if count == 1 else 'cards'}" for name, count in stats.per_column]
        self.view.show_message("\n".join(lines))
