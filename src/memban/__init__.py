"""In-memory kanban board."""

from memban.errors import DuplicateIdError, EntityKind, MembanError, NotFoundError
from memban.service import KanbanService

__all__ = [
    "DuplicateIdError",
    "EntityKind",
    "KanbanService",
    "MembanError",
    "NotFoundError",
]
