"""Tests for the board screen."""

import pytest
from textual.widgets import Button, Input

from memban.config import Settings
from memban.service import KanbanService
from memban.ui import MembanApp
from memban.ui.board import BoardScreen
from memban.ui.card import AddCard, CardWidget
from memban.ui.column import AddColumn, ColumnWidget
from memban.ui.detail import CardDetailModal


def _column_cards(screen, column_id):
    for column in screen.query(ColumnWidget):
        if column.column_id == column_id:
            return [c.card_id for c in column.query(CardWidget)]
    raise AssertionError(f"no widget for {column_id}")


@pytest.mark.asyncio
async def test_board_shows_columns_and_cards(sample_service, settle):
    app = MembanApp(sample_service)
    async with app.run_test() as pilot:
        await settle(pilot)
        screen = app.screen
        assert isinstance(screen, BoardScreen)
        assert [c.column_id for c in screen.query(ColumnWidget)] == ["column_1", "column_2", "column_3"]
        assert _column_cards(screen, "column_1") == ["card_1", "card_2"]
        assert len(screen.query(CardWidget)) == 4


@pytest.mark.asyncio
async def test_empty_service_starts_with_named_board(settle):
    service = KanbanService()
    app = MembanApp(service, Settings(board_name="Sprint"))
    async with app.run_test() as pilot:
        await settle(pilot)
        assert [b.name for b in service.list_boards()] == ["Sprint"]
        assert len(app.screen.query(ColumnWidget)) == 3


@pytest.mark.asyncio
async def test_move_request_moves_card_and_logs(sample_service, settle):
    app = MembanApp(sample_service)
    async with app.run_test() as pilot:
        await settle(pilot)
        screen = app.screen
        screen.post_message(CardWidget.MoveRequested("card_1", "column_1", "column_3"))
        await settle(pilot)

        assert [c.id for c in sample_service.list_cards("column_3")] == ["card_4", "card_1"]
        assert _column_cards(screen, "column_3") == ["card_4", "card_1"]
        assert _column_cards(screen, "column_1") == ["card_2"]


@pytest.mark.asyncio
async def test_shift_right_moves_focused_card(sample_service, settle):
    app = MembanApp(sample_service)
    async with app.run_test() as pilot:
        await settle(pilot)
        first = next(c for c in app.screen.query(CardWidget) if c.card_id == "card_1")
        first.focus()
        await pilot.pause()
        await pilot.press("shift+right")
        await settle(pilot)

        assert [c.id for c in sample_service.list_cards("column_2")] == ["card_1", "card_3"]
        assert sample_service.find_board("board_1").activity_log.size() == 1


@pytest.mark.asyncio
async def test_shift_down_reorders_without_logging(sample_service, settle):
    app = MembanApp(sample_service)
    async with app.run_test() as pilot:
        await settle(pilot)
        first = next(c for c in app.screen.query(CardWidget) if c.card_id == "card_1")
        first.focus()
        await pilot.pause()
        await pilot.press("shift+down")
        await settle(pilot)

        assert [c.id for c in sample_service.list_cards("column_1")] == ["card_2", "card_1"]
        assert _column_cards(app.screen, "column_1") == ["card_2", "card_1"]
        assert sample_service.find_board("board_1").activity_log.empty()


@pytest.mark.asyncio
async def test_service_error_is_notified(sample_service, monkeypatch, settle):
    app = MembanApp(sample_service)
    async with app.run_test() as pilot:
        await settle(pilot)
        screen = app.screen
        notes = []
        monkeypatch.setattr(screen, "notify", lambda message, **kwargs: notes.append((message, kwargs)))
        screen.post_message(CardWidget.MoveRequested("card_1", "column_1", "column_999"))
        await settle(pilot)

        assert notes[0][0] == "Column 'column_999' not found"
        assert notes[0][1]["severity"] == "error"
        assert _column_cards(screen, "column_1") == ["card_1", "card_2"]


@pytest.mark.asyncio
async def test_add_card_and_column(sample_service, settle):
    app = MembanApp(sample_service)
    async with app.run_test() as pilot:
        await settle(pilot)
        screen = app.screen
        screen.post_message(AddCard.CardRequested("column_3", "Ship it"))
        screen.post_message(AddColumn.ColumnRequested("Blocked"))
        await settle(pilot)

        assert [c.title for c in sample_service.list_cards("column_3")] == ["Define project architecture", "Ship it"]
        assert [c.column_id for c in screen.query(ColumnWidget)][-1] == "column_4"


@pytest.mark.asyncio
async def test_tag_filter_hides_cards(sample_service, settle):
    sample_service.update_card("card_2", tags=["core"])
    app = MembanApp(sample_service)
    async with app.run_test() as pilot:
        await settle(pilot)
        app.screen.query_one("#tag-filter", Input).value = "COR"
        await settle(pilot)

        assert [c.card_id for c in app.screen.query(CardWidget)] == ["card_2"]


@pytest.mark.asyncio
async def test_card_detail_saves_through_service(sample_service, settle):
    app = MembanApp(sample_service)
    async with app.run_test() as pilot:
        await settle(pilot)
        app.screen.post_message(CardWidget.OpenRequested("card_3"))
        await settle(pilot)

        modal = app.screen
        assert isinstance(modal, CardDetailModal)
        modal.query_one("#title", Input).value = "Create the service"
        modal.query_one("#tags", Input).value = "core, api"
        modal.query_one("#save", Button).press()
        await settle(pilot)

        card = sample_service.find_card("card_3")
        assert card.title == "Create the service"
        assert [t.name for t in card.tags] == ["core", "api"]
        assert isinstance(app.screen, BoardScreen)


@pytest.mark.asyncio
async def test_next_board_cycles(sample_service, settle):
    other = sample_service.create_board("Empty")
    app = MembanApp(sample_service)
    async with app.run_test() as pilot:
        await settle(pilot)
        app.screen.action_next_board()
        await settle(pilot)

        assert app.screen.board_id == other
        assert len(app.screen.query(ColumnWidget)) == 0


@pytest.mark.asyncio
async def test_shift_up_skips_filtered_out_cards(sample_service, settle):
    third = sample_service.add_card("board_1", "column_1", "Third")
    sample_service.update_card("card_1", tags=["core"])
    sample_service.update_card(third, tags=["core"])
    app = MembanApp(sample_service)
    async with app.run_test() as pilot:
        await settle(pilot)
        app.screen.query_one("#tag-filter", Input).value = "core"
        await settle(pilot)
        assert _column_cards(app.screen, "column_1") == ["card_1", third]

        card = next(c for c in app.screen.query(CardWidget) if c.card_id == third)
        card.focus()
        await pilot.pause()
        await pilot.press("shift+up")
        await settle(pilot)

        assert [c.id for c in sample_service.list_cards("column_1")] == [third, "card_1", "card_2"]
        assert _column_cards(app.screen, "column_1") == [third, "card_1"]
