"""Mouse drag-and-drop for cards and columns.

A drag has two halves:
- DraggableMixin lives on the widget being dragged and owns the flight:
  threshold detection, the ghost, hit-testing for targets.
- DropTarget lives on containers and owns the landing: placeholders while
  hovering and the model update on drop.

While a drag is in flight the screen forwards mouse moves and releases to
``screen._active_draggable``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.geometry import Offset
from textual.widgets import Static

if TYPE_CHECKING:
    from textual.widget import Widget


class DropTarget:
    """Mixin for widgets that accept drops. Methods return True to consume."""

    def drag_over(self, draggable: DraggableMixin, x: int, y: int) -> bool:
        """A draggable hovers at (x, y). Return True to accept it."""
        return False

    def drag_away(self, draggable: DraggableMixin) -> None:
        """The draggable left this target."""

    def try_drop(self, draggable: DraggableMixin, x: int, y: int) -> bool:
        """Mouse released over this target. Return True if the drop happened."""
        return False


class DraggableMixin:
    """Mixin for widgets that can be picked up with the mouse.

    Subclasses call ``_init_draggable()`` in ``__init__`` and implement
    ``draggable_make_ghost()`` and ``draggable_clicked()``.
    """

    DRAG_THRESHOLD = 2
    HORIZONTAL_ONLY = False

    def _init_draggable(self) -> None:
        self._press_pos: Offset | None = None
        self._dragging = False
        self._ghost: Widget | None = None
        self._grab_offset = Offset(0, 0)
        self._hover_target: DropTarget | None = None

    @property
    def is_dragging(self) -> bool:
        return self._dragging

    def on_mouse_down(self, event) -> None:
        if event.button != 1 or not self.draggable_can_start(event.screen_x, event.screen_y):
            return
        event.stop()
        event.prevent_default()
        self._press_pos = Offset(event.screen_x, event.screen_y)
        self.capture_mouse()

    def on_mouse_move(self, event) -> None:
        if self._press_pos is None:
            return
        event.stop()
        event.prevent_default()
        dx = abs(event.screen_x - self._press_pos.x)
        dy = abs(event.screen_y - self._press_pos.y)
        moved = dx > self.DRAG_THRESHOLD
        if not self.HORIZONTAL_ONLY:
            moved = moved or dy > self.DRAG_THRESHOLD
        if moved:
            self.release_mouse()
            start = self._press_pos
            self._press_pos = None
            self._drag_start(start)

    def on_mouse_up(self, event) -> None:
        if self._press_pos is None:
            return
        event.stop()
        event.prevent_default()
        self.release_mouse()
        self._press_pos = None
        self.draggable_clicked()

    def _drag_start(self, mouse_pos: Offset) -> None:
        self._dragging = True
        self.add_class("dragging")
        self.screen.set_focus(None)

        region = self.region
        self._grab_offset = Offset(mouse_pos.x - region.x, mouse_pos.y - region.y)
        self._ghost = self.draggable_make_ghost()
        if self._ghost is not self:
            self._ghost.styles.width = region.width
            self._ghost.styles.offset = (region.x, region.y)
            self.screen.mount(self._ghost)

        self.screen._active_draggable = self
        self.screen.capture_mouse()

    def _drag_move(self, x: int, y: int) -> None:
        """Screen callback while dragging."""
        self._reposition_ghost(x, y)
        # Over empty space the last placeholder stays where it was.
        for target in self._drop_targets_at(x, y):
            if target.drag_over(self, x, y):
                if target is not self._hover_target:
                    if self._hover_target is not None:
                        self._hover_target.drag_away(self)
                    self._hover_target = target
                return

    def _reposition_ghost(self, x: int, y: int) -> None:
        if self._ghost is not None:
            self._ghost.styles.offset = (x - self._grab_offset.x, y - self._grab_offset.y)

    def _drag_finish(self, x: int, y: int) -> None:
        """Screen callback on mouse release. Tries targets innermost first."""
        self.screen.release_mouse()
        candidates = self._drop_targets_at(x, y)
        if self._hover_target is not None and self._hover_target not in candidates:
            candidates.append(self._hover_target)

        for target in candidates:
            if target.try_drop(self, x, y):
                self._hover_target = None
                self._drag_cleanup()
                return
        self._drag_cancel()

    def _drag_cancel(self) -> None:
        self.screen.release_mouse()
        if self._hover_target is not None:
            self._hover_target.drag_away(self)
            self._hover_target = None
        self._drag_cleanup()

    def _drag_cleanup(self) -> None:
        if self._ghost is not None and self._ghost is not self:
            self._ghost.remove()
        self._ghost = None
        self._dragging = False
        self._grab_offset = Offset(0, 0)
        self.remove_class("dragging")
        if getattr(self.screen, "_active_draggable", None) is self:
            self.screen._active_draggable = None

    def _drop_targets_at(self, x: int, y: int) -> list[DropTarget]:
        """All DropTargets under (x, y), innermost first, ignoring the ghost."""
        found: list[DropTarget] = []
        for widget, _region in self.screen.get_widgets_at(x, y):
            ghost = self._ghost
            if ghost is not None and ghost is not self and (widget is ghost or ghost in widget.ancestors):
                continue
            node = widget
            while node is not None:
                if isinstance(node, DropTarget) and node is not self and node not in found:
                    found.append(node)
                node = node.parent
        return found

    def draggable_can_start(self, x: int, y: int) -> bool:
        """Whether a press at (x, y) may start a drag."""
        return True

    def draggable_make_ghost(self) -> Widget:
        """Widget that follows the mouse. May return self."""
        raise NotImplementedError

    def draggable_clicked(self) -> None:
        """Mouse released without crossing the drag threshold."""
        raise NotImplementedError


class DragGhost(Static):
    """Floating copy of a card's title while it is dragged."""

    DEFAULT_CSS = """
    DragGhost {
        layer: overlay;
        height: auto;
        padding: 0 1;
        background: $primary;
        border: solid $accent;
    }
    """


class CardPlaceholder(Static):
    """Marks where a dragged card will land."""

    DEFAULT_CSS = """
    CardPlaceholder {
        width: 100%;
        height: 1;
        margin-bottom: 1;
        background: $accent 40%;
    }
    """


class ColumnPlaceholder(Static):
    """Marks where a dragged column will land."""

    DEFAULT_CSS = """
    ColumnPlaceholder {
        width: 3;
        height: 100%;
        background: $accent 40%;
    }
    """
