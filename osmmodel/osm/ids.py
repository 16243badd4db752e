from __future__ import annotations

from enum import Enum
from typing import NewType

# OSM ids are signed 64-bit integers; negative values denote unpublished data.
ID_MIN = -(2**63)
ID_MAX = 2**63 - 1

NodeId = NewType("NodeId", int)
WayId = NewType("WayId", int)
RelationId = NewType("RelationId", int)

ElementId = NodeId | WayId | RelationId


class ElementKind(Enum):
    NODE = "node"
    WAY = "way"
    RELATION = "relation"

    @classmethod
    def from_str(cls, value: str) -> ElementKind:
        """Parse a kind from its name or one-letter abbreviation."""
        value = value.lower()
        for kind in cls:
            if value in (kind.value, kind.value[0]):
                return kind
        raise ValueError(f"Unknown element kind: {value!r}")
