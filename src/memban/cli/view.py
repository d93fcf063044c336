"""Views: how front ends present results and errors."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from memban.filters import priority_label
from memban.model import Board, Card, Column


class View(Protocol):
    """What a front end must implement to present core results."""

    def show_message(self, text: str) -> None: ...

    def show_error(self, text: str) -> None: ...

    def display_boards(self, boards: Sequence[Board]) -> None: ...

    def display_columns(self, columns: Sequence[Column]) -> None: ...

    def display_cards(self, cards: Sequence[Card]) -> None: ...


def format_tags(card: Card) -> str:
    return ", ".join(tag.name for tag in card.tags)


class ConsoleView:
    """Rich-rendered terminal view."""

    def __init__(self, console: Console | None = None, error_console: Console | None = None):
        self.console = console or Console(highlight=False)
        self.error_console = error_console or Console(stderr=True, highlight=False)

    def show_message(self, text: str) -> None:
        self.console.print(Text(text))

    def show_error(self, text: str) -> None:
        self.error_console.print(f"[bold red]error:[/bold red] {escape(text)}")

    def display_boards(self, boards: Sequence[Board]) -> None:
        if not boards:
            self.show_message("No boards.")
            return
        table = Table(title="Boards")
        table.add_column("ID", style="cyan", no_wrap=True)
        table.add_column("Name")
        table.add_column("Columns", justify="right")
        table.add_column("Activities", justify="right")
        for board in boards:
            log = board.activity_log
            table.add_row(
                board.id,
                escape(board.name),
                str(board.column_count()),
                str(log.size()) if log is not None else "-",
            )
        self.console.print(table)

    def display_columns(self, columns: Sequence[Column]) -> None:
        if not columns:
            self.show_message("No columns.")
            return
        table = Table(title="Columns")
        table.add_column("ID", style="cyan", no_wrap=True)
        table.add_column("Name")
        table.add_column("Cards", justify="right")
        for column in columns:
            table.add_row(column.id, escape(column.name), str(column.size()))
        self.console.print(table)

    def display_cards(self, cards: Sequence[Card]) -> None:
        if not cards:
            self.show_message("No cards.")
            return
        table = Table(title="Cards")
        table.add_column("ID", style="cyan", no_wrap=True)
        table.add_column("Title")
        table.add_column("Priority")
        table.add_column("Tags")
        for card in cards:
            table.add_row(card.id, escape(card.title), priority_label(card.priority), escape(format_tags(card)))
        self.console.print(table)
