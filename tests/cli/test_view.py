"""Tests for the rich console view."""

from memban.service import KanbanService


def test_show_message_and_error(rich_view):
    view, out, err = rich_view
    view.show_message("Board created: [x]")
    view.show_error("Column 'column_999' not found [sic]")
    assert out.getvalue() == "Board created: [x]\n"
    assert err.getvalue() == "error: Column 'column_999' not found [sic]\n"


def test_empty_listings(rich_view):
    view, out, _ = rich_view
    view.display_boards([])
    view.display_columns([])
    view.display_cards([])
    assert out.getvalue().splitlines() == ["No boards.", "No columns.", "No cards."]


def test_tables(rich_view):
    view, out, _ = rich_view
    service = KanbanService()
    board_id = service.create_sample_data()
    card = service.list_cards("column_1")[0]
    service.update_card(card.id, priority=2, tags=["setup", "infra"])

    view.display_boards(service.list_boards())
    view.display_columns(service.list_columns(board_id))
    view.display_cards(service.list_cards("column_1"))

    text = out.getvalue()
    assert "Sample Kanban Project" in text
    assert "Doing" in text
    assert "Set up development environment" in text
    assert "High" in text
    assert "setup, infra" in text
