"""Card widgets for memban UI."""

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.message import Message
from textual.widgets import Input, Static

from memban.filters import priority_label
from memban.model.card import Card
from memban.ui.drag import DraggableMixin, DragGhost
from memban.ui.static import PlainStatic


def card_meta_text(card: Card) -> Text:
    """Priority and tags line shown under the title."""
    text = Text(priority_label(card.priority), style="bold" if card.priority >= 2 else "")
    for tag in card.tags:
        text.append(" ")
        text.append(f"#{tag.name}", style="italic")
    return text


class CardWidget(DraggableMixin, Static, can_focus=True):
    """A single card in a column."""

    BINDINGS = [
        ("space", "open_card"),
        ("enter", "open_card"),
    ]

    class OpenRequested(Message):
        """Posted when the card's detail editor should open."""

        def __init__(self, card_id: str):
            super().__init__()
            self.card_id = card_id

    class MoveRequested(Message):
        """Posted when a card should move, either across columns or within one.

        ``index`` is the card's position in the target column counted without
        the card itself; None means append.
        """

        def __init__(self, card_id: str, from_column_id: str, to_column_id: str, index: int | None = None):
            super().__init__()
            self.card_id = card_id
            self.from_column_id = from_column_id
            self.to_column_id = to_column_id
            self.index = index

    DEFAULT_CSS = """
    CardWidget {
        width: 100%;
        height: auto;
        padding: 0 1;
        margin-bottom: 1;
        background: $surface;
    }
    CardWidget:focus {
        background: $primary;
    }
    CardWidget.dragging {
        display: none;
    }
    CardWidget #card-meta {
        width: 100%;
        height: 1;
        color: $text-muted;
    }
    """

    def __init__(self, card: Card):
        Static.__init__(self)
        self._init_draggable()
        self.card = card

    @property
    def card_id(self) -> str:
        return self.card.id

    def compose(self) -> ComposeResult:
        yield PlainStatic(self.card.title, id="card-title")
        yield PlainStatic(card_meta_text(self.card), id="card-meta")

    def refresh_card(self) -> None:
        """Re-read title, priority and tags from the card."""
        self.query_one("#card-title", PlainStatic).update(self.card.title)
        self.query_one("#card-meta", PlainStatic).update(card_meta_text(self.card))

    def action_open_card(self) -> None:
        self.draggable_clicked()

    def draggable_make_ghost(self):
        return DragGhost(self.card.title)

    def draggable_clicked(self) -> None:
        self.post_message(self.OpenRequested(self.card_id))


class AddCard(Vertical):
    """Input at the bottom of a column for new cards."""

    class CardRequested(Message):
        """Posted when a title was entered for a new card."""

        def __init__(self, column_id: str, title: str):
            super().__init__()
            self.column_id = column_id
            self.title = title

    DEFAULT_CSS = """
    AddCard {
        width: 100%;
        height: auto;
        margin-bottom: 1;
    }
    AddCard > Input {
        border: dashed $surface-lighten-2;
    }
    """

    def __init__(self, column_id: str):
        super().__init__()
        self.column_id = column_id

    def compose(self) -> ComposeResult:
        yield Input(placeholder="+ card")

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        title = event.value.strip()
        if title:
            self.post_message(self.CardRequested(self.column_id, title))
        event.input.value = ""
