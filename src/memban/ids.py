"""Entity ID generation."""

from memban.errors import EntityKind


def format_id(kind: EntityKind, number: int) -> str:
    """Build an ID from an entity kind and a sequence number.

    (BOARD, 1) → "board_1", (CARD, 12) → "card_12"
    """
    return f"{kind.value}_{number}"


def parse_id(entity_id: str) -> tuple[str, int] | None:
    """Split an ID into (prefix, number), or None if it isn't generated.

    "column_3" → ("column", 3), "Done" → None
    """
    prefix, sep, number = entity_id.rpartition("_")
    if not sep or not prefix or not number.isdigit():
        return None
    return prefix, int(number)


def id_sort_key(entity_id: str) -> tuple[str, int, str]:
    """Sort key that orders "card_2" before "card_10".

    Non-generated ids sort by their plain text after the numeric ones
    sharing the same prefix.
    """
    parsed = parse_id(entity_id)
    if parsed is None:
        return entity_id, -1, entity_id
    prefix, number = parsed
    return prefix, number, entity_id


class IdGenerator:
    """Monotonic per-kind counters. Numbers start at 1 and are never reused."""

    def __init__(self) -> None:
        self._counters: dict[EntityKind, int] = {}

    def next_id(self, kind: EntityKind) -> str:
        """Return the next ID for kind and advance its counter."""
        number = self._counters.get(kind, 0) + 1
        self._counters[kind] = number
        return format_id(kind, number)

