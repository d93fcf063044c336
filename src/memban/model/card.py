"""Cards and the tags attached to them."""

from __future__ import annotations

from datetime import datetime, timezone


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class Tag:
    """A named label attachable to a card. Identity is the id."""

    def __init__(self, tag_id: str, name: str):
        self._id = tag_id
        self.name = name

    @property
    def id(self) -> str:
        return self._id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tag):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Tag(id={self._id!r}, name={self.name!r})"


class Card:
    """A unit of work.

    Every mutation of title, description, priority or tags refreshes
    ``updated_at``. Higher priority means more important; any integer is
    accepted.

    Cards compare with ``<`` by priority descending, then by creation time
    ascending. Columns don't keep cards in that order; it's there for
    presentation layers that want to sort.
    """

    def __init__(self, card_id: str, title: str):
        self._id = card_id
        self._title = title
        self._description: str | None = None
        self._priority = 0
        self._tags: list[Tag] = []
        self._created_at = utcnow()
        self._updated_at = self._created_at

    @property
    def id(self) -> str:
        return self._id

    @property
    def title(self) -> str:
        return self._title

    @title.setter
    def title(self, value: str) -> None:
        self._title = value
        self._touch()

    @property
    def description(self) -> str | None:
        return self._description

    @description.setter
    def description(self, value: str | None) -> None:
        self._description = value
        self._touch()

    @property
    def priority(self) -> int:
        return self._priority

    @priority.setter
    def priority(self, value: int) -> None:
        self._priority = value
        self._touch()

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    @property
    def tags(self) -> tuple[Tag, ...]:
        return tuple(self._tags)

    def add_tag(self, tag: Tag) -> None:
        """Attach a tag. Ignored if a tag with the same id is already attached."""
        if self.has_tag(tag.id):
            return
        self._tags.append(tag)
        self._touch()

    def remove_tag_by_id(self, tag_id: str) -> bool:
        """Detach a tag by id. Returns whether one was removed."""
        for i, tag in enumerate(self._tags):
            if tag.id == tag_id:
                del self._tags[i]
                self._touch()
                return True
        return False

    def has_tag(self, tag_id: str) -> bool:
        return any(tag.id == tag_id for tag in self._tags)

    def clear_tags(self) -> None:
        if self._tags:
            self._tags.clear()
            self._touch()

    def sort_key(self) -> tuple[int, datetime]:
        """Key for ``sorted()`` matching the ``<`` ordering."""
        return -self._priority, self._created_at

    def _touch(self) -> None:
        now = utcnow()
        # Clock adjustments must not move updated_at backwards.
        if now > self._updated_at:
            self._updated_at = now

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __lt__(self, other: Card) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __repr__(self) -> str:
        return f"<Card {self._id} {self._title!r} p={self._priority}>"
