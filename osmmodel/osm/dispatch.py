from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from dataclasses import field

from osmmodel.osm.errors import ElementKindError
from osmmodel.osm.ids import ElementKind
from osmmodel.osm.types import OsmElement
from osmmodel.osm.types import OsmNode
from osmmodel.osm.types import OsmRelation
from osmmodel.osm.types import OsmWay


def kind_of(element: OsmElement) -> ElementKind:
    return element.kind


def extract(element: OsmElement, kind: ElementKind) -> OsmElement:
    """Return ``element`` if it is of ``kind``, else raise ElementKindError."""
    if element.kind is not kind:
        raise ElementKindError(expected=kind, actual=element.kind)
    return element


def as_node(element: OsmElement) -> OsmNode:
    match element:
        case OsmNode():
            return element
        case _:
            raise ElementKindError(expected=ElementKind.NODE, actual=element.kind)


def as_way(element: OsmElement) -> OsmWay:
    match element:
        case OsmWay():
            return element
        case _:
            raise ElementKindError(expected=ElementKind.WAY, actual=element.kind)


def as_relation(element: OsmElement) -> OsmRelation:
    match element:
        case OsmRelation():
            return element
        case _:
            raise ElementKindError(expected=ElementKind.RELATION, actual=element.kind)


@dataclass
class ElementPartition:
    nodes: list[OsmNode] = field(default_factory=list)
    ways: list[OsmWay] = field(default_factory=list)
    relations: list[OsmRelation] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.nodes) + len(self.ways) + len(self.relations)


def partition_elements(elements: Iterable[OsmElement]) -> ElementPartition:
    """Split a mixed stream by kind, keeping stream order within each kind."""
    partition = ElementPartition()
    for element in elements:
        match element:
            case OsmNode():
                partition.nodes.append(element)
            case OsmWay():
                partition.ways.append(element)
            case OsmRelation():
                partition.relations.append(element)
    return partition


@dataclass
class ElementStats:
    nodes: int = 0
    ways: int = 0
    relations: int = 0
    deleted: int = 0

    @property
    def total(self) -> int:
        return self.nodes + self.ways + self.relations

    def update(self, element: OsmElement) -> None:
        match element.kind:
            case ElementKind.NODE:
                self.nodes += 1
            case ElementKind.WAY:
                self.ways += 1
            case ElementKind.RELATION:
                self.relations += 1

        if element.info is not None and element.info.is_deleted:
            self.deleted += 1

    def update_all(self, elements: Iterable[OsmElement]) -> ElementStats:
        for element in elements:
            self.update(element)
        return self
