"""Domain model: boards, columns, cards and their history."""

from memban.model.activity import Activity, ActivityLog
from memban.model.board import Board, move_description
from memban.model.card import Card, Tag, utcnow
from memban.model.column import Column
from memban.model.user import User

__all__ = [
    "Activity",
    "ActivityLog",
    "Board",
    "Card",
    "Column",
    "Tag",
    "User",
    "move_description",
    "utcnow",
]
