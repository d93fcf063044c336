"""Card filters for narrowing what a column shows."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from memban.model.card import Card

PRIORITY_LABELS = {0: "Low", 1: "Medium", 2: "High"}


def priority_label(priority: int) -> str:
    """Display label for a priority value: Low/Medium/High, else ⚡N."""
    return PRIORITY_LABELS.get(priority, f"⚡{priority}")


class CardFilter(Protocol):
    def matches(self, card: Card) -> bool: ...


class TagFilter:
    """Matches cards having a tag whose name contains text (case-insensitive).

    Empty text matches every card.
    """

    def __init__(self, text: str = ""):
        self.text = text.strip().lower()

    def matches(self, card: Card) -> bool:
        if not self.text:
            return True
        return any(self.text in tag.name.lower() for tag in card.tags)


class PriorityFilter:
    """Matches cards whose priority is one of priorities. Empty set matches all."""

    def __init__(self, priorities: Iterable[int] = ()):
        self.priorities = frozenset(priorities)

    def matches(self, card: Card) -> bool:
        return not self.priorities or card.priority in self.priorities


class AllOf:
    """Matches when every wrapped filter matches."""

    def __init__(self, *filters: CardFilter):
        self.filters = filters

    def matches(self, card: Card) -> bool:
        return all(f.matches(card) for f in self.filters)


def filter_cards(cards: Iterable[Card], card_filter: CardFilter | None) -> list[Card]:
    """Keep matching cards, preserving order."""
    if card_filter is None:
        return list(cards)
    return [card for card in cards if card_filter.matches(card)]
