"""Modals for editing a card and naming a new board."""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label, Select, TextArea

from memban.filters import PRIORITY_LABELS, priority_label
from memban.model.card import Card


def parse_tags(text: str) -> list[str]:
    """Comma separated tag names, blanks dropped."""
    return [name.strip() for name in text.split(",") if name.strip()]


class CardDetailModal(ModalScreen[dict | None]):
    """Edit title, description, priority and tags of one card.

    Dismisses with the keyword arguments for ``KanbanService.update_card``
    or None when cancelled.
    """

    DEFAULT_CSS = """
    CardDetailModal {
        align: center middle;
        background: rgba(0, 0, 0, 0.6);
    }
    #dialog {
        width: 70;
        height: auto;
        border: thick $primary;
        background: $surface;
        padding: 1 2;
    }
    #dialog > Label {
        margin-top: 1;
    }
    #description {
        height: 6;
    }
    #buttons {
        width: 100%;
        height: 3;
        margin-top: 1;
        align: center middle;
    }
    #buttons > Button {
        margin: 0 2;
    }
    """

    BINDINGS = [Binding("escape", "cancel", "Cancel")]

    def __init__(self, card: Card):
        super().__init__()
        self.card = card

    def compose(self) -> ComposeResult:
        options = [(label, p) for p, label in PRIORITY_LABELS.items()]
        if self.card.priority not in PRIORITY_LABELS:
            options.append((priority_label(self.card.priority), self.card.priority))
        with Vertical(id="dialog"):
            yield Label(f"Card {self.card.id}", id="card-id")
            yield Label("Title")
            yield Input(self.card.title, id="title")
            yield Label("Description")
            yield TextArea(self.card.description or "", id="description")
            yield Label("Priority")
            yield Select(options, value=self.card.priority, allow_blank=False, id="priority")
            yield Label("Tags (comma separated)")
            yield Input(", ".join(t.name for t in self.card.tags), id="tags")
            with Horizontal(id="buttons"):
                yield Button("Save", id="save", variant="primary")
                yield Button("Cancel", id="cancel")

    def collect(self) -> dict | None:
        """Current field values, or None if the title is blank."""
        title = self.query_one("#title", Input).value.strip()
        if not title:
            return None
        return {
            "title": title,
            "description": self.query_one("#description", TextArea).text,
            "priority": self.query_one("#priority", Select).value,
            "tags": parse_tags(self.query_one("#tags", Input).value),
        }

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.id != "save":
            self.dismiss(None)
            return
        changes = self.collect()
        if changes is None:
            self.notify("Title can't be empty", severity="error")
            return
        self.dismiss(changes)

    def action_cancel(self) -> None:
        self.dismiss(None)


class NewBoardModal(ModalScreen[str | None]):
    """Ask for the name of a new board."""

    DEFAULT_CSS = """
    NewBoardModal {
        align: center middle;
    }
    NewBoardModal > Vertical {
        width: 50;
        height: auto;
        border: thick $primary;
        background: $surface;
        padding: 1 2;
    }
    """

    BINDINGS = [Binding("escape", "cancel", "Cancel")]

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Label("New board name")
            yield Input(placeholder="Board name", id="board-name")

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.dismiss(event.value.strip() or None)

    def action_cancel(self) -> None:
        self.dismiss(None)
