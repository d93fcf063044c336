"""Board users."""

from dataclasses import dataclass, field


@dataclass(eq=False)
class User:
    """A person using the board. Holds no permissions."""

    id: str
    name: str = field(default="")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
