"""Side panel with board statistics and move history."""

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import VerticalScroll

from memban.model.activity import Activity
from memban.service import BoardStats
from memban.ui.static import PlainStatic


def stats_text(stats: BoardStats) -> Text:
    text = Text()
    text.append("Statistics\n", style="bold")
    text.append(f"Columns: {stats.columns}\n")
    text.append(f"Cards: {stats.cards}\n")
    for name, count in stats.per_column:
        text.append(f"  {name}: {count}\n", style="dim")
    return text


def history_text(activities: list[Activity]) -> Text:
    """Activities as lines, in the order given."""
    text = Text()
    text.append("History\n", style="bold")
    if not activities:
        text.append("No activity yet.", style="dim")
    for activity in activities:
        text.append(activity.timestamp.strftime("%H:%M:%S "), style="dim")
        text.append(f"{activity.description}\n")
    return text


class ActivityPanel(VerticalScroll):
    DEFAULT_CSS = """
    ActivityPanel {
        width: 36;
        height: 100%;
        padding: 0 1;
        border-left: tall $surface-lighten-1;
    }
    ActivityPanel > #stats {
        margin-bottom: 1;
    }
    """

    def compose(self) -> ComposeResult:
        yield PlainStatic(id="stats")
        yield PlainStatic(id="history")

    def show(self, stats: BoardStats, activities: list[Activity]) -> None:
        self.query_one("#stats", PlainStatic).update(stats_text(stats))
        self.query_one("#history", PlainStatic).update(history_text(activities))
