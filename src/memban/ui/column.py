"""Column widgets for memban UI."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.message import Message
from textual.widgets import Input, Rule

from memban.filters import CardFilter, filter_cards
from memban.service import KanbanService
from memban.ui.card import AddCard, CardWidget
from memban.ui.drag import CardPlaceholder, DraggableMixin, DropTarget
from memban.ui.static import PlainStatic


class ColumnWidget(DraggableMixin, DropTarget, Vertical):
    """A single column on the board. Dragged by its title."""

    DEFAULT_CSS = """
    ColumnWidget {
        width: 1fr;
        height: auto;
        min-height: 100%;
        min-width: 25;
        max-width: 30;
        padding: 0 1;
        border-right: tall $surface-lighten-1;
    }
    ColumnWidget.dragging {
        layer: overlay;
        border: solid $primary;
        opacity: 0.8;
    }
    ColumnWidget > #column-title {
        width: 100%;
        text-align: center;
        text-style: bold;
    }
    ColumnWidget > Rule.-horizontal {
        margin: 0;
    }
    """

    HORIZONTAL_ONLY = True

    def __init__(self, service: KanbanService, column_id: str):
        Vertical.__init__(self)
        self._init_draggable()
        self.service = service
        self.column_id = column_id
        self.card_filter: CardFilter | None = None
        self._card_placeholder: CardPlaceholder | None = None
        self._ready = False

    def compose(self) -> ComposeResult:
        yield PlainStatic(self._title(), id="column-title")
        yield Rule()
        yield AddCard(self.column_id)

    def on_mount(self) -> None:
        self._ready = True
        self.refresh_cards(self.card_filter)

    def _title(self) -> str:
        column = self.service.find_column(self.column_id)
        if column is None:
            return self.column_id
        return f"{column.name} ({column.size()})"

    def refresh_cards(self, card_filter: CardFilter | None = None) -> None:
        """Sync card children to the column's cards that pass the filter."""
        self.card_filter = card_filter
        if not self._ready:
            return
        self.query_one("#column-title", PlainStatic).update(self._title())

        cards = filter_cards(self.service.list_cards(self.column_id), card_filter)
        wanted = [card.id for card in cards]
        existing = {w.card_id: w for w in self.query(CardWidget)}

        for card_id, widget in existing.items():
            if card_id not in wanted:
                widget.remove()

        anchor = self.query_one(AddCard)
        for card in cards:
            if card.id not in existing:
                widget = CardWidget(card)
                self.mount(widget, before=anchor)
                existing[card.id] = widget

        for card_id in reversed(wanted):
            self.move_child(existing[card_id], before=anchor)
            anchor = existing[card_id]

        for card_id in wanted:
            if existing[card_id].is_mounted:
                existing[card_id].refresh_card()

    def focus_card(self, card_id: str) -> bool:
        for card in self.query(CardWidget):
            if card.card_id == card_id:
                card.focus()
                return True
        return False

    # -- DraggableMixin: column being dragged --

    def draggable_can_start(self, x: int, y: int) -> bool:
        return self.query_one("#column-title", PlainStatic).region.contains(x, y)

    def draggable_make_ghost(self):
        return self

    def _container_offset(self, x: int, y: int) -> tuple[int, int]:
        """Screen point to a position inside the scrolled #columns container."""
        container = self.screen.query_one("#columns", Horizontal)
        region = container.region
        return (x - region.x + int(container.scroll_x), y - region.y + int(container.scroll_y))

    def _drag_start(self, mouse_pos) -> None:
        super()._drag_start(mouse_pos)
        self.styles.offset = self._container_offset(self.region.x, self.region.y)

    def _reposition_ghost(self, x: int, y: int) -> None:
        self.styles.offset = self._container_offset(x - self._grab_offset.x, y - self._grab_offset.y)

    def _drag_cleanup(self) -> None:
        self.styles.offset = (0, 0)
        super()._drag_cleanup()

    def draggable_clicked(self) -> None:
        pass

    # -- DropTarget: column accepting card drops --

    def drag_over(self, draggable, x: int, y: int) -> bool:
        if not isinstance(draggable, CardWidget):
            return False
        self._ensure_card_placeholder(self._insert_before(draggable, y))
        return True

    def drag_away(self, draggable) -> None:
        self._remove_placeholder()

    def try_drop(self, draggable, x: int, y: int) -> bool:
        if not isinstance(draggable, CardWidget):
            return False
        index = self._model_index(draggable, self._insert_before(draggable, y))
        from_column_id = getattr(draggable.parent, "column_id", self.column_id)
        self._remove_placeholder()
        self.post_message(CardWidget.MoveRequested(draggable.card_id, from_column_id, self.column_id, index))
        return True

    def _insert_before(self, draggable, screen_y: int):
        """The visible card (or AddCard) the dragged card would land above."""
        for card in self.query(CardWidget):
            if card is draggable:
                continue
            if screen_y < card.region.y + card.region.height // 2:
                return card
        return self.query_one(AddCard)

    def _model_index(self, draggable, insert_before) -> int:
        """Position in the column's cards, not counting the dragged card.

        Hidden (filtered) cards keep their place relative to visible ones.
        """
        others = [c.id for c in self.service.list_cards(self.column_id) if c.id != draggable.card_id]
        if isinstance(insert_before, CardWidget) and insert_before.card_id in others:
            return others.index(insert_before.card_id)
        return len(others)

    def _ensure_card_placeholder(self, insert_before) -> None:
        if self._card_placeholder is None or self._card_placeholder.parent is not self:
            self._remove_placeholder()
            self._card_placeholder = CardPlaceholder()
            self.mount(self._card_placeholder, before=insert_before)
            return
        children = list(self.children)
        if children.index(self._card_placeholder) + 1 != children.index(insert_before):
            self.move_child(self._card_placeholder, before=insert_before)

    def _remove_placeholder(self) -> None:
        if self._card_placeholder is not None and self._card_placeholder.parent is not None:
            self._card_placeholder.remove()
        self._card_placeholder = None

    # -- keyboard --

    def on_key(self, event) -> None:
        """Arrow keys move focus between cards; shift+arrows move the card."""
        if event.key not in ("up", "down", "left", "right", "shift+up", "shift+down", "shift+left", "shift+right"):
            return
        focused = self.screen.focused
        if not isinstance(focused, CardWidget) or focused.parent is not self:
            return

        cards = list(self.query(CardWidget))
        idx = cards.index(focused)
        if event.key == "up" and idx > 0:
            cards[idx - 1].focus()
        elif event.key == "down" and idx < len(cards) - 1:
            cards[idx + 1].focus()
        elif event.key in ("left", "right"):
            neighbour = self._neighbour(-1 if event.key == "left" else 1)
            if neighbour is not None:
                target_cards = list(neighbour.query(CardWidget))
                if target_cards:
                    target_cards[min(idx, len(target_cards) - 1)].focus()
        else:
            self._move_card(focused, event.key)

        event.prevent_default()
        event.stop()

    def _neighbour(self, direction: int) -> ColumnWidget | None:
        siblings = [c for c in self.parent.children if isinstance(c, ColumnWidget)]
        new_idx = siblings.index(self) + direction
        if 0 <= new_idx < len(siblings):
            return siblings[new_idx]
        return None

    def _move_card(self, card: CardWidget, key: str) -> None:
        column = self.service.find_column(self.column_id)
        card_idx = column.index_of(card.card_id)
        if key in ("shift+up", "shift+down"):
            # Swap with the neighbouring visible card; hidden cards stay put.
            visible = list(self.query(CardWidget))
            step = visible.index(card) + (-1 if key == "shift+up" else 1)
            if 0 <= step < len(visible):
                new_idx = column.index_of(visible[step].card_id)
                self.post_message(CardWidget.MoveRequested(card.card_id, self.column_id, self.column_id, new_idx))
            return
        target = self._neighbour(-1 if key == "shift+left" else 1)
        if target is not None:
            size = len(self.service.list_cards(target.column_id))
            self.post_message(
                CardWidget.MoveRequested(card.card_id, self.column_id, target.column_id, min(card_idx, size))
            )


class AddColumn(Vertical):
    """Widget to add a new column."""

    class ColumnRequested(Message):
        """Posted when a name was entered for a new column."""

        def __init__(self, column_name: str):
            super().__init__()
            self.column_name = column_name

    DEFAULT_CSS = """
    AddColumn {
        width: 1fr;
        height: 100%;
        min-width: 25;
        max-width: 25;
        padding: 0 1;
    }
    """

    def compose(self) -> ComposeResult:
        yield Input(placeholder="+ column")

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        name = event.value.strip()
        if name:
            self.post_message(self.ColumnRequested(name))
        event.input.value = ""
