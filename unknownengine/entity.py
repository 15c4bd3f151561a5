"""Entity identifiers."""

from __future__ import annotations

import itertools
from dataclasses import dataclass

MAX_ENTITIES = 65535

# Id 0 is reserved for the invalid entity.
_next_id = itertools.count(1)


@dataclass(frozen=True)
class Entity:
    """An entity is just an id; 0 means no entity."""

    id: int = 0

    @classmethod
    def create(cls) -> Entity:
        """Return a new entity with a fresh id."""
        return cls(next(_next_id))

    def is_valid(self) -> bool:
        return self.id > 0

    def __int__(self) -> int:
        return self.id

    def __index__(self) -> int:
        return self.id