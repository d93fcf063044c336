"""Board screen showing kanban columns and cards."""

import logging

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import Screen
from textual.widgets import Footer

from memban.errors import MembanError
from memban.filters import CardFilter
from memban.service import SAMPLE_COLUMNS, KanbanService
from memban.ui.activity import ActivityPanel
from memban.ui.card import AddCard, CardWidget
from memban.ui.column import AddColumn, ColumnWidget
from memban.ui.detail import CardDetailModal, NewBoardModal
from memban.ui.drag import ColumnPlaceholder, DropTarget
from memban.ui.filter_bar import FilterBar
from memban.ui.static import PlainStatic

logger = logging.getLogger(__name__)


def new_board(service: KanbanService, name: str) -> str:
    """Create a board with the default columns. Returns its id."""
    board_id = service.create_board(name)
    for column_name in SAMPLE_COLUMNS:
        service.add_column(board_id, column_name)
    return board_id


class BoardScreen(DropTarget, Screen):
    """Main board screen showing all columns of one board.

    Widgets never mutate the service themselves; they post messages that
    end up in ``_apply`` here, which reports failures and then re-syncs
    every widget from the service.
    """

    DEFAULT_CSS = """
    BoardScreen {
        layers: base overlay;
    }
    #board-header {
        width: 100%;
        height: 1;
        background: $primary-darken-2;
    }
    #board-title {
        width: 1fr;
        padding: 0 1;
        text-style: bold;
    }
    #board-position {
        width: auto;
        padding: 0 1;
    }
    #body {
        height: 1fr;
    }
    #columns {
        width: 1fr;
        overflow-x: auto;
    }
    """

    BINDINGS = [
        Binding("escape", "cancel_drag", "Cancel drag", show=False),
        ("ctrl+b", "next_board", "Next board"),
        ("ctrl+n", "new_board", "New board"),
    ]

    def __init__(self, service: KanbanService, board_id: str):
        super().__init__()
        self.service = service
        self.board_id = board_id
        self.card_filter: CardFilter | None = None
        self._active_draggable = None
        self._column_placeholder: ColumnPlaceholder | None = None

    def compose(self) -> ComposeResult:
        with Horizontal(id="board-header"):
            yield PlainStatic(id="board-title")
            yield PlainStatic(id="board-position")
        yield FilterBar()
        with Horizontal(id="body"):
            with Horizontal(id="columns"):
                yield AddColumn()
            with Vertical(id="side"):
                yield ActivityPanel()
        yield Footer()

    def on_mount(self) -> None:
        self.refresh_board()
        self.call_after_refresh(self._focus_first_card)

    def _focus_first_card(self) -> None:
        for column in self.query(ColumnWidget):
            cards = list(column.query(CardWidget))
            if cards:
                cards[0].focus()
                return

    # -- syncing widgets to the service --

    def refresh_board(self) -> None:
        """Re-read the current board and bring every widget in line with it."""
        board = self.service.find_board(self.board_id)
        if board is None:
            return
        boards = self.service.list_boards()
        self.query_one("#board-title", PlainStatic).update(f"{board.name} [{board.id}]")
        self.query_one("#board-position", PlainStatic).update(f"board {boards.index(board) + 1}/{len(boards)}")

        container = self.query_one("#columns", Horizontal)
        wanted = [c.id for c in board.columns]
        existing = {w.column_id: w for w in container.query(ColumnWidget)}

        for column_id, widget in existing.items():
            if column_id not in wanted:
                widget.remove()

        anchor = container.query_one(AddColumn)
        for column_id in wanted:
            if column_id not in existing:
                widget = ColumnWidget(self.service, column_id)
                container.mount(widget, before=anchor)
                existing[column_id] = widget

        for column_id in reversed(wanted):
            container.move_child(existing[column_id], before=anchor)
            anchor = existing[column_id]

        for column_id in wanted:
            existing[column_id].refresh_cards(self.card_filter)

        log = board.activity_log
        self.query_one(ActivityPanel).show(
            self.service.board_stats(self.board_id),
            log.newest_first() if log is not None else [],
        )

    def _apply(self, action, *args):
        """Run a service call. Errors become notifications; widgets re-sync either way."""
        try:
            return action(*args)
        except MembanError as e:
            logger.warning("%s failed: %s", action.__name__, e)
            self.notify(e.message, title="memban", severity="error")
            return None
        finally:
            self.refresh_board()

    def _focus_card(self, card_id: str) -> None:
        for column in self.query(ColumnWidget):
            if column.focus_card(card_id):
                return

    # -- Thin delegation: screen routes mouse events to active draggable --

    def on_mouse_move(self, event) -> None:
        if self._active_draggable is not None:
            self._active_draggable._drag_move(event.screen_x, event.screen_y)

    def on_mouse_up(self, event) -> None:
        if self._active_draggable is not None:
            self._active_draggable._drag_finish(event.screen_x, event.screen_y)

    def action_cancel_drag(self) -> None:
        if self._active_draggable is not None:
            self._active_draggable._drag_cancel()

    # -- DropTarget: board accepting column drops --

    def drag_over(self, draggable, x: int, y: int) -> bool:
        if not isinstance(draggable, ColumnWidget):
            return False
        self._ensure_column_placeholder(self._column_insert_before(draggable, x))
        return True

    def drag_away(self, draggable) -> None:
        self._remove_column_placeholder()

    def try_drop(self, draggable, x: int, y: int) -> bool:
        if not isinstance(draggable, ColumnWidget):
            return False
        insert_before = self._column_insert_before(draggable, x)
        new_index = 0
        for child in self.query_one("#columns", Horizontal).children:
            if child is insert_before:
                break
            if isinstance(child, ColumnWidget) and child is not draggable:
                new_index += 1
        self._remove_column_placeholder()
        self._apply(self.service.move_column, self.board_id, draggable.column_id, new_index)
        return True

    def _column_insert_before(self, draggable, screen_x: int):
        container = self.query_one("#columns", Horizontal)
        for column in container.query(ColumnWidget):
            if column is draggable:
                continue
            if screen_x < column.region.x + column.region.width // 2:
                return column
        return container.query_one(AddColumn)

    def _ensure_column_placeholder(self, insert_before) -> None:
        container = self.query_one("#columns", Horizontal)
        if self._column_placeholder is None:
            self._column_placeholder = ColumnPlaceholder()
            container.mount(self._column_placeholder, before=insert_before)
            return
        children = list(container.children)
        if children.index(self._column_placeholder) + 1 != children.index(insert_before):
            container.move_child(self._column_placeholder, before=insert_before)

    def _remove_column_placeholder(self) -> None:
        if self._column_placeholder is not None and self._column_placeholder.parent is not None:
            self._column_placeholder.remove()
        self._column_placeholder = None

    # -- messages from widgets --

    def on_card_widget_move_requested(self, event: CardWidget.MoveRequested) -> None:
        event.stop()
        self._apply(self._move_card, event.card_id, event.from_column_id, event.to_column_id, event.index)
        card_id = event.card_id
        self.call_after_refresh(lambda: self._focus_card(card_id))

    def _move_card(self, card_id: str, from_column_id: str, to_column_id: str, index: int | None) -> None:
        """Cross-column moves append and log; an index then places the card."""
        if from_column_id != to_column_id:
            self.service.move_card(self.board_id, card_id, from_column_id, to_column_id)
        if index is not None:
            self.service.move_card_within_column(self.board_id, to_column_id, card_id, index)

    def on_card_widget_open_requested(self, event: CardWidget.OpenRequested) -> None:
        event.stop()
        card = self.service.find_card(event.card_id)
        if card is None:
            return
        card_id = card.id

        def on_closed(changes: dict | None) -> None:
            if changes:
                self._apply(self._update_card, card_id, changes)

        self.app.push_screen(CardDetailModal(card), on_closed)

    def _update_card(self, card_id: str, changes: dict) -> None:
        self.service.update_card(card_id, **changes)

    def on_add_card_card_requested(self, event: AddCard.CardRequested) -> None:
        event.stop()
        self._apply(self.service.add_card, self.board_id, event.column_id, event.title)

    def on_add_column_column_requested(self, event: AddColumn.ColumnRequested) -> None:
        event.stop()
        self._apply(self.service.add_column, self.board_id, event.column_name)

    def on_filter_bar_changed(self, event: FilterBar.Changed) -> None:
        event.stop()
        self.card_filter = event.card_filter
        self.refresh_board()

    # -- boards --

    def show_board(self, board_id: str) -> None:
        self.board_id = board_id
        self.refresh_board()
        self.call_after_refresh(self._focus_first_card)

    def action_next_board(self) -> None:
        boards = self.service.list_boards()
        if len(boards) < 2:
            self.notify("Only one board")
            return
        ids = [b.id for b in boards]
        self.show_board(ids[(ids.index(self.board_id) + 1) % len(ids)])

    def action_new_board(self) -> None:
        def on_named(name: str | None) -> None:
            if name:
                self.show_board(new_board(self.service, name))

        self.app.push_screen(NewBoardModal(), on_named)
