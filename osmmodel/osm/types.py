from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from dataclasses import field
from datetime import datetime
from typing import ClassVar
from typing import NamedTuple

from osmmodel.osm.ids import ElementKind
from osmmodel.osm.ids import NodeId
from osmmodel.osm.ids import RelationId
from osmmodel.osm.ids import WayId
from osmmodel.osm.tags import OsmTags

logger = logging.getLogger(__name__)

COORDINATE_SCALE = 10_000_000


def _owned_tags(tags: Mapping[str, str]) -> OsmTags:
    return OsmTags(tags, read_only=True)


class Coordinate(NamedTuple):
    """Degrees, expected within [-90, 90] and [-180, 180] but never range checked."""

    latitude: float
    longitude: float

    @classmethod
    def from_fixed(cls, latitude: int, longitude: int) -> Coordinate:
        """Build from integer 1e-7 degree units, the OSM storage granularity."""
        return cls(latitude / COORDINATE_SCALE, longitude / COORDINATE_SCALE)


@dataclass(frozen=True, slots=True)
class OsmInfo:
    """Revision metadata; timestamp is expected to be an aware UTC datetime and is stored as given."""

    version: int
    timestamp: datetime | None = None
    changeset: int | None = None
    uid: int | None = None
    user: str | None = None
    visible: bool = True

    @property
    def is_deleted(self) -> bool:
        return not self.visible


@dataclass(frozen=True, slots=True)
class OsmNode:
    kind: ClassVar[ElementKind] = ElementKind.NODE

    id: NodeId
    latitude: float
    longitude: float
    tags: OsmTags = field(default_factory=OsmTags)
    info: OsmInfo | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "tags", _owned_tags(self.tags))

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(self.latitude, self.longitude)


@dataclass(frozen=True, slots=True)
class OsmWay:
    """Node ids of a line or area, kept in the order given."""

    kind: ClassVar[ElementKind] = ElementKind.WAY

    id: WayId
    nodes: tuple[NodeId, ...]
    tags: OsmTags = field(default_factory=OsmTags)
    info: OsmInfo | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "nodes", tuple(self.nodes))
        object.__setattr__(self, "tags", _owned_tags(self.tags))
        if not self.nodes:
            logger.warning("Way %d has no node references", self.id)

    @property
    def is_closed(self) -> bool:
        return bool(self.nodes) and self.nodes[0] == self.nodes[-1]


@dataclass(frozen=True, slots=True)
class OsmRelationMember:
    kind: ElementKind
    id: int
    role: str = ""

    @property
    def referenced_id(self) -> int:
        return self.id

    @classmethod
    def node(cls, id: NodeId, role: str = "") -> OsmRelationMember:
        return cls(ElementKind.NODE, id, role)

    @classmethod
    def way(cls, id: WayId, role: str = "") -> OsmRelationMember:
        return cls(ElementKind.WAY, id, role)

    @classmethod
    def relation(cls, id: RelationId, role: str = "") -> OsmRelationMember:
        return cls(ElementKind.RELATION, id, role)


@dataclass(frozen=True, slots=True)
class OsmRelation:
    """Roled member references, kept in the order given; cycles are not checked."""

    kind: ClassVar[ElementKind] = ElementKind.RELATION

    id: RelationId
    members: tuple[OsmRelationMember, ...]
    tags: OsmTags = field(default_factory=OsmTags)
    info: OsmInfo | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "members", tuple(self.members))
        object.__setattr__(self, "tags", _owned_tags(self.tags))

    def members_of_kind(self, kind: ElementKind) -> list[OsmRelationMember]:
        return [member for member in self.members if member.kind is kind]

    def members_with_role(self, role: str) -> list[OsmRelationMember]:
        return [member for member in self.members if member.role == role]


OsmElement = OsmNode | OsmWay | OsmRelation

