"""Tests for the interactive console controller."""

from memban.cli.console import PROMPT


def test_session_create_move_and_history(controller, service, view):
    controller.run(
        [
            'create-board "Release 1"',
            "add-column board_1 Todo",
            "add-column board_1 Doing",
            "add-card board_1 column_1 Write docs",
            "move-card board_1 card_1 column_1 column_2",
            "history board_1",
        ]
    )

    assert view.errors == []
    assert view.messages[0].startswith("Interactive console started")
    assert "Board created: 'Release 1' (ID: board_1)" in view.messages
    assert "Column created: 'Todo' (ID: column_1)" in view.messages
    assert "Card created: 'Write docs' (ID: card_1)" in view.messages
    assert "Card moved: card_1" in view.messages
    assert "Card 'Write docs' moved from 'Todo' to 'Doing'" in view.messages[-1]
    assert [c.id for c in service.list_cards("column_2")] == ["card_1"]


def test_errors_do_not_stop_the_console(controller, view):
    controller.run(["move-card board_1 card_1 column_1 column_2", "bogus", "create-board", "list-boards"])

    assert view.errors == [
        "Board 'board_1' not found",
        "Unknown command 'bogus'. Type 'help' for the command list.",
        "Usage: create-board <name>",
    ]
    assert view.boards == []


def test_exit_stops_processing(controller, service):
    controller.run(["create-board A", "exit", "create-board B"])
    assert [b.name for b in service.list_boards()] == ["A"]


def test_quit_and_blank_lines(controller):
    assert controller.execute("") is True
    assert controller.execute("   ") is True
    assert controller.execute("quit") is False


def test_unbalanced_quotes(controller, view):
    assert controller.execute('create-board "oops') is True
    assert view.errors[0].startswith("Could not parse command")


def test_reads_until_eof(controller, service):
    prompts = []
    lines = iter(["create-board A", "create-board B"])

    def read_line(prompt):
        prompts.append(prompt)
        try:
            return next(lines)
        except StopIteration:
            raise EOFError from None

    controller.run(read_line=read_line)

    assert len(service.list_boards()) == 2
    assert prompts == [PROMPT] * 3


def test_listing_commands(controller, service, view):
    board_id = service.create_sample_data()
    controller.execute("list-boards")
    controller.execute(f"list-columns {board_id}")
    controller.execute("list-cards column_1")

    assert [b.id for b in view.boards] == [board_id]
    assert [c.name for c in view.columns] == ["To Do", "Doing", "Done"]
    assert [c.title for c in view.cards] == ["Set up development environment", "Implement domain classes"]


def test_list_cards_unknown_column(controller, view):
    controller.execute("list-cards column_999")
    assert view.errors == ["Column 'column_999' not found"]


def test_history_unknown_board_and_empty_log(controller, service, view):
    controller.execute("history board_7")
    board_id = service.create_board("Quiet")
    controller.execute(f"history {board_id}")
    assert view.errors == ["Board 'board_7' not found"]
    assert view.messages[-1] == "No activity yet."


def test_sample_and_stats(controller, view):
    controller.execute("sample")
    controller.execute("stats board_1")
    assert view.messages[0] == "Sample board created (ID: board_1)"
    assert view.messages[1].splitlines() == [
        "Columns: 3",
        "Cards: 4",
        "  To Do: 2 cards",
        "  Doing: 1 card",
        "  Done: 1 card",
    ]


def test_help_lists_commands(controller, view):
    controller.execute("help")
    text = view.messages[0]
    for name in ("create-board", "move-card", "list-boards", "history", "exit"):
        assert name in text


def test_ctrl_c_at_prompt_exits_quietly(controller, service):
    def read_line(prompt):
        raise KeyboardInterrupt

    controller.run(read_line=read_line)

    assert service.list_boards() == []
