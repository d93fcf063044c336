"""KanbanService: the façade every front end talks to."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from memban.errors import EntityKind, NotFoundError
from memban.ids import IdGenerator
from memban.model.activity import ActivityLog
from memban.model.board import Board
from memban.model.card import Card, Tag
from memban.model.column import Column
from memban.model.user import User
from memban.repository import Repository

logger = logging.getLogger(__name__)

SAMPLE_BOARD = "Sample Kanban Project"
SAMPLE_COLUMNS = ("To Do", "Doing", "Done")
SAMPLE_CARDS = (
    ("To Do", "Set up development environment"),
    ("To Do", "Implement domain classes"),
    ("Doing", "Create KanbanService"),
    ("Done", "Define project architecture"),
)


@dataclass
class BoardStats:
    """Column and card counts for one board."""

    columns: int = 0
    cards: int = 0
    per_column: list[tuple[str, int]] = field(default_factory=list)


class KanbanService:
    """Creates entities, validates references and coordinates mutations.

    Keeps flat repositories per entity type alongside the containment held
    by boards and columns. Every mutating operation here writes both, so a
    column on a board is always in the column repository and a card in a
    column is always in the card repository.
    """

    def __init__(self) -> None:
        self.boards: Repository[Board] = Repository(EntityKind.BOARD)
        self.columns: Repository[Column] = Repository(EntityKind.COLUMN)
        self.cards: Repository[Card] = Repository(EntityKind.CARD)
        self.users: Repository[User] = Repository(EntityKind.USER)
        self.ids = IdGenerator()

    # -- validation --

    def _require_board(self, board_id: str) -> Board:
        board = self.boards.find_by_id(board_id)
        if board is None:
            logger.debug("board %s not found", board_id)
            raise NotFoundError(EntityKind.BOARD, board_id)
        return board

    def _require_column(self, column_id: str) -> Column:
        column = self.columns.find_by_id(column_id)
        if column is None:
            logger.debug("column %s not found", column_id)
            raise NotFoundError(EntityKind.COLUMN, column_id)
        return column

    def _require_card(self, card_id: str) -> Card:
        card = self.cards.find_by_id(card_id)
        if card is None:
            logger.debug("card %s not found", card_id)
            raise NotFoundError(EntityKind.CARD, card_id)
        return card

    # -- creation --

    def create_sample_data(self) -> str:
        """Seed a demo board with three columns and four cards. Returns its id."""
        board_id = self.create_board(SAMPLE_BOARD)
        column_ids = {name: self.add_column(board_id, name) for name in SAMPLE_COLUMNS}
        for column_name, title in SAMPLE_CARDS:
            self.add_card(board_id, column_ids[column_name], title)
        logger.info("created sample board %s", board_id)
        return board_id

    def create_board(self, name: str) -> str:
        board_id = self.ids.next_id(EntityKind.BOARD)
        board = Board(board_id, name)
        board.activity_log = ActivityLog()
        self.boards.add(board)
        logger.info("created board %s %r", board_id, name)
        return board_id

    def add_column(self, board_id: str, name: str) -> str:
        board = self._require_board(board_id)
        column_id = self.ids.next_id(EntityKind.COLUMN)
        column = Column(column_id, name)
        self.columns.add(column)
        board.add_column(column)
        logger.info("added column %s %r to %s", column_id, name, board_id)
        return column_id

    def add_card(self, board_id: str, column_id: str, title: str) -> str:
        """Create a card at the end of a column.

        The column must exist and belong to the board; a column of another
        board is rejected as not found.
        """
        board = self._require_board(board_id)
        column = self._require_column(column_id)
        if not board.has_column(column_id):
            logger.debug("column %s is not on board %s", column_id, board_id)
            raise NotFoundError(EntityKind.COLUMN, column_id, where=f"board '{board_id}'")

        card_id = self.ids.next_id(EntityKind.CARD)
        card = Card(card_id, title)
        self.cards.add(card)
        column.add_card(card)
        logger.info("added card %s %r to %s", card_id, title, column_id)
        return card_id

    def create_user(self, name: str) -> str:
        user_id = self.ids.next_id(EntityKind.USER)
        self.users.add(User(user_id, name))
        return user_id

    # -- movement --

    def move_card(self, board_id: str, card_id: str, from_column_id: str, to_column_id: str) -> None:
        """Move a card between columns, recording it in the board's history.

        Columns are checked in the flat repository first; the board then
        resolves both from its own column list, which is what scopes the
        move to this board.
        """
        board = self._require_board(board_id)
        self._require_column(from_column_id)
        self._require_column(to_column_id)
        board.move_card(card_id, from_column_id, to_column_id)
        logger.info("moved card %s from %s to %s", card_id, from_column_id, to_column_id)

    def move_card_within_column(self, board_id: str, column_id: str, card_id: str, new_index: int) -> None:
        board = self._require_board(board_id)
        self._require_column(column_id)
        board.move_card_within_column(column_id, card_id, new_index)

    def move_column(self, board_id: str, column_id: str, new_index: int) -> None:
        board = self._require_board(board_id)
        self._require_column(column_id)
        board.move_column(column_id, new_index)

    # -- editing --

    def update_card(
        self,
        card_id: str,
        title: str | None = None,
        description: str | None = None,
        priority: int | None = None,
        tags: Iterable[str] | None = None,
    ) -> Card:
        """Edit card fields. None leaves a field alone; tags replaces the set.

        A tag's id is its name. Names differing only in case collapse to the
        first one given.
        """
        card = self._require_card(card_id)
        if title is not None and title != card.title:
            card.title = title
        if description is not None and description != (card.description or ""):
            card.description = description
        if priority is not None and priority != card.priority:
            card.priority = priority
        if tags is not None:
            names: list[str] = []
            seen: set[str] = set()
            for raw in tags:
                name = raw.strip()
                if name and name.lower() not in seen:
                    seen.add(name.lower())
                    names.append(name)
            if names != [t.name for t in card.tags]:
                card.clear_tags()
                for name in names:
                    card.add_tag(Tag(name, name))
        return card

    # -- queries --

    def list_boards(self) -> list[Board]:
        return self.boards.get_all()

    def find_board(self, board_id: str) -> Board | None:
        return self.boards.find_by_id(board_id)

    def list_columns(self, board_id: str) -> list[Column]:
        return list(self._require_board(board_id).columns)

    def list_cards(self, column_id: str) -> list[Card]:
        return list(self._require_column(column_id).cards)

    def find_column(self, column_id: str) -> Column | None:
        return self.columns.find_by_id(column_id)

    def find_card(self, card_id: str) -> Card | None:
        return self.cards.find_by_id(card_id)

    def find_card_column(self, board_id: str, card_id: str) -> Column | None:
        """The column of board_id currently holding card_id, if any."""
        return self._require_board(board_id).find_card_column(card_id)

    def list_users(self) -> list[User]:
        return self.users.get_all()

    def board_stats(self, board_id: str) -> BoardStats:
        columns = self.list_columns(board_id)
        per_column = [(c.name, c.size()) for c in columns]
        return BoardStats(
            columns=len(columns),
            cards=sum(n for _, n in per_column),
            per_column=per_column,
        )

    def check_integrity(self) -> list[str]:
        """Describe every disagreement between the flat and nested stores.

        Returns an empty list when both agree.
        """
        problems = []
        seen_columns: set[str] = set()
        seen_cards: dict[str, str] = {}
        for board in self.boards.get_all():
            for column in board.columns:
                seen_columns.add(column.id)
                if self.columns.find_by_id(column.id) is not column:
                    problems.append(f"column {column.id} on {board.id} missing from column repository")
                for card in column.cards:
                    if self.cards.find_by_id(card.id) is not card:
                        problems.append(f"card {card.id} in {column.id} missing from card repository")
                    if card.id in seen_cards:
                        problems.append(f"card {card.id} in both {seen_cards[card.id]} and {column.id}")
                    seen_cards[card.id] = column.id
        for column in self.columns.get_all():
            if column.id not in seen_columns:
                problems.append(f"column {column.id} is on no board")
        for card in self.cards.get_all():
            if card.id not in seen_cards:
                problems.append(f"card {card.id} is in no column")
        return problems
