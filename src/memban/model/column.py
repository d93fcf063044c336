"""Columns: ordered sequences of cards."""

from __future__ import annotations

from memban.model.card import Card


class Column:
    """One workflow stage holding cards in insertion or explicit order.

    ``add_card`` ignores a card whose id is already present, while
    ``insert_card_at`` does not check. Lookups are linear scans.
    """

    def __init__(self, column_id: str, name: str):
        self._id = column_id
        self.name = name
        self._cards: list[Card] = []

    @property
    def id(self) -> str:
        return self._id

    @property
    def cards(self) -> tuple[Card, ...]:
        return tuple(self._cards)

    def add_card(self, card: Card) -> None:
        """Append a card unless one with the same id is already here."""
        if not self.has_card(card.id):
            self._cards.append(card)

    def insert_card_at(self, index: int, card: Card) -> None:
        """Insert at index, clamped to [0, size]. No duplicate check."""
        index = max(0, index)
        if index >= len(self._cards):
            self._cards.append(card)
        else:
            self._cards.insert(index, card)

    def remove_card_by_id(self, card_id: str) -> Card | None:
        """Remove and return the card, or None if it isn't here."""
        for i, card in enumerate(self._cards):
            if card.id == card_id:
                return self._cards.pop(i)
        return None

    def find_card(self, card_id: str) -> Card | None:
        return next((c for c in self._cards if c.id == card_id), None)

    def has_card(self, card_id: str) -> bool:
        return self.find_card(card_id) is not None

    def index_of(self, card_id: str) -> int:
        """Position of a card in this column, or -1."""
        for i, card in enumerate(self._cards):
            if card.id == card_id:
                return i
        return -1

    def size(self) -> int:
        return len(self._cards)

    def empty(self) -> bool:
        return not self._cards

    def clear(self) -> None:
        self._cards.clear()

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self):
        return iter(tuple(self._cards))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Column):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        ids = ", ".join(c.id for c in self._cards)
        return f"<Column {self._id} {self.name!r} [{ids}]>"
