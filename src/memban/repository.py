"""Generic id-keyed in-memory store."""

from __future__ import annotations

import logging
from typing import Generic, Protocol, TypeVar

from memban.errors import DuplicateIdError, EntityKind, NotFoundError
from memban.ids import id_sort_key

logger = logging.getLogger(__name__)


class HasId(Protocol):
    @property
    def id(self) -> str: ...


T = TypeVar("T", bound=HasId)


class Repository(Generic[T]):
    """Map from string id to entity, keyed by the entity's own ``id``.

    ``add`` and ``remove`` raise on collision and absence respectively;
    ``find_by_id`` reports absence with None. ``get_all`` is ordered by id
    (numeric suffixes compare numerically) so listings are deterministic.
    Not thread-safe.
    """

    def __init__(self, kind: EntityKind):
        self.kind = kind
        self._items: dict[str, T] = {}

    def add(self, item: T) -> None:
        if item.id in self._items:
            raise DuplicateIdError(self.kind, item.id)
        self._items[item.id] = item
        logger.debug("stored %s %s", self.kind.value, item.id)

    def remove(self, entity_id: str) -> T:
        try:
            return self._items.pop(entity_id)
        except KeyError:
            raise NotFoundError(self.kind, entity_id) from None

    def get_all(self) -> list[T]:
        return [self._items[k] for k in sorted(self._items, key=id_sort_key)]

    def find_by_id(self, entity_id: str) -> T | None:
        return self._items.get(entity_id)

    def exists(self, entity_id: str) -> bool:
        return entity_id in self._items

    def size(self) -> int:
        return len(self._items)

    def clear(self) -> None:
        self._items.clear()

    def __contains__(self, entity_id: str) -> bool:
        return entity_id in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"<Repository {self.kind.value} [{', '.join(self._items)}]>"
