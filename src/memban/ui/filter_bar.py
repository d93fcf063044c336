"""Tag and priority filter controls above the columns."""

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.message import Message
from textual.widgets import Input, Select

from memban.filters import PRIORITY_LABELS, AllOf, CardFilter, PriorityFilter, TagFilter

ANY_PRIORITY = -1


class FilterBar(Horizontal):
    """Posts Changed with a new card filter whenever a control changes."""

    class Changed(Message):
        def __init__(self, card_filter: CardFilter | None):
            super().__init__()
            self.card_filter = card_filter

    DEFAULT_CSS = """
    FilterBar {
        width: 100%;
        height: auto;
    }
    FilterBar > #tag-filter {
        width: 1fr;
    }
    FilterBar > #priority-filter {
        width: 24;
    }
    """

    def compose(self) -> ComposeResult:
        yield Input(placeholder="Filter by tag", id="tag-filter")
        options = [("Any priority", ANY_PRIORITY)] + [(label, p) for p, label in PRIORITY_LABELS.items()]
        yield Select(options, value=ANY_PRIORITY, allow_blank=False, id="priority-filter")

    def build_filter(self) -> CardFilter | None:
        """Combine the current control values. None when nothing is filtered."""
        tag_text = self.query_one("#tag-filter", Input).value.strip()
        priority = self.query_one("#priority-filter", Select).value
        filters: list[CardFilter] = []
        if tag_text:
            filters.append(TagFilter(tag_text))
        if isinstance(priority, int) and priority != ANY_PRIORITY:
            filters.append(PriorityFilter({priority}))
        if not filters:
            return None
        return AllOf(*filters)

    def on_input_changed(self, event: Input.Changed) -> None:
        event.stop()
        self.post_message(self.Changed(self.build_filter()))

    def on_select_changed(self, event: Select.Changed) -> None:
        event.stop()
        self.post_message(self.Changed(self.build_filter()))
