"""Tests for the generic repository."""

import pytest

from memban.errors import DuplicateIdError, EntityKind, NotFoundError
from memban.model import Card, Column
from memban.repository import Repository


@pytest.fixture
def cards():
    repo = Repository(EntityKind.CARD)
    for n in (10, 2, 1):
        repo.add(Card(f"card_{n}", f"Card {n}"))
    return repo


def test_add_and_find(cards):
    assert cards.find_by_id("card_2").title == "Card 2"
    assert cards.find_by_id("card_99") is None
    assert cards.exists("card_10")
    assert "card_1" in cards
    assert cards.size() == 3
    assert len(cards) == 3


def test_add_duplicate_raises_and_keeps_original(cards):
    with pytest.raises(DuplicateIdError) as exc:
        cards.add(Card("card_2", "Impostor"))
    assert exc.value.entity_id == "card_2"
    assert exc.value.kind is EntityKind.CARD
    assert cards.find_by_id("card_2").title == "Card 2"
    assert cards.size() == 3


def test_remove(cards):
    removed = cards.remove("card_2")
    assert removed.title == "Card 2"
    assert not cards.exists("card_2")


def test_remove_missing_raises(cards):
    with pytest.raises(NotFoundError) as exc:
        cards.remove("card_99")
    assert exc.value.error_code == "NOT_FOUND"
    assert cards.size() == 3


def test_get_all_is_ordered_by_id(cards):
    assert [c.id for c in cards.get_all()] == ["card_1", "card_2", "card_10"]


def test_clear(cards):
    cards.clear()
    assert cards.size() == 0
    assert cards.get_all() == []


def test_holds_any_entity_with_id():
    columns = Repository(EntityKind.COLUMN)
    columns.add(Column("column_1", "To Do"))
    assert columns.find_by_id("column_1").name == "To Do"
