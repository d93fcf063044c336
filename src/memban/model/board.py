"""Boards and the card movement between their columns."""

from __future__ import annotations

import logging

from memban.errors import EntityKind, NotFoundError
from memban.model.activity import Activity, ActivityLog
from memban.model.card import utcnow
from memban.model.column import Column

logger = logging.getLogger(__name__)


def move_description(title: str, from_name: str, to_name: str) -> str:
    """Human readable activity text for a card move."""
    return f"Card '{title}' moved from '{from_name}' to '{to_name}'"


class Board:
    """Top-level container of columns for one workflow.

    Owns its columns in order and optionally shares an ActivityLog that
    records card moves. ``move_card`` is the only operation spanning more
    than one column.
    """

    def __init__(self, board_id: str, name: str):
        self._id = board_id
        self.name = name
        self._columns: list[Column] = []
        self._activity_log: ActivityLog | None = None

    @property
    def id(self) -> str:
        return self._id

    @property
    def columns(self) -> tuple[Column, ...]:
        return tuple(self._columns)

    @property
    def activity_log(self) -> ActivityLog | None:
        return self._activity_log

    @activity_log.setter
    def activity_log(self, log: ActivityLog | None) -> None:
        self._activity_log = log

    def add_column(self, column: Column) -> None:
        """Append a column unless one with the same id is already here."""
        if not self.has_column(column.id):
            self._columns.append(column)

    def remove_column_by_id(self, column_id: str) -> Column | None:
        for i, column in enumerate(self._columns):
            if column.id == column_id:
                return self._columns.pop(i)
        return None

    def find_column(self, column_id: str) -> Column | None:
        return next((c for c in self._columns if c.id == column_id), None)

    def has_column(self, column_id: str) -> bool:
        return self.find_column(column_id) is not None

    def column_count(self) -> int:
        return len(self._columns)

    def set_columns(self, columns: list[Column]) -> None:
        """Replace the column list wholesale (used for reordering)."""
        self._columns = list(columns)

    def clear(self) -> None:
        """Drop all columns and detach the activity log."""
        self._columns.clear()
        self._activity_log = None

    def find_card_column(self, card_id: str) -> Column | None:
        """Find the column containing a card."""
        for column in self._columns:
            if column.has_card(card_id):
                return column
        return None

    def move_card(self, card_id: str, from_column_id: str, to_column_id: str) -> None:
        """Move a card between two columns of this board.

        Raises NotFoundError if either column isn't on this board or the
        card isn't in the source column; nothing is mutated in that case.
        The destination append uses ``Column.add_card``, so a card whose id
        is already in the destination ends up there exactly once.
        """
        source = self.find_column(from_column_id)
        if source is None:
            raise NotFoundError(EntityKind.COLUMN, from_column_id, where=f"board '{self._id}'")
        target = self.find_column(to_column_id)
        if target is None:
            raise NotFoundError(EntityKind.COLUMN, to_column_id, where=f"board '{self._id}'")

        card = source.remove_card_by_id(card_id)
        if card is None:
            raise NotFoundError(EntityKind.CARD, card_id, where=f"column '{from_column_id}'")
        target.add_card(card)
        logger.debug("moved %s from %s to %s on %s", card_id, from_column_id, to_column_id, self._id)

        if self._activity_log is not None:
            self._activity_log.add(
                Activity(
                    id=f"{card_id}_move",
                    description=move_description(card.title, source.name, target.name),
                    timestamp=utcnow(),
                )
            )

    def move_card_within_column(self, column_id: str, card_id: str, new_index: int) -> None:
        """Reorder a card inside one column. new_index is clamped."""
        column = self.find_column(column_id)
        if column is None:
            raise NotFoundError(EntityKind.COLUMN, column_id, where=f"board '{self._id}'")
        card = column.remove_card_by_id(card_id)
        if card is None:
            raise NotFoundError(EntityKind.CARD, card_id, where=f"column '{column_id}'")
        column.insert_card_at(new_index, card)

    def move_column(self, column_id: str, new_index: int) -> None:
        """Move a column to new_index, clamped to the column range."""
        column = self.find_column(column_id)
        if column is None:
            raise NotFoundError(EntityKind.COLUMN, column_id, where=f"board '{self._id}'")
        columns = [c for c in self._columns if c is not column]
        new_index = max(0, min(new_index, len(columns)))
        columns.insert(new_index, column)
        self.set_columns(columns)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        ids = ", ".join(c.id for c in self._columns)
        return f"<Board {self._id} {self.name!r} [{ids}]>"
