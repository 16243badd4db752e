from __future__ import annotations

import logging
from collections.abc import Generator
from collections.abc import Iterable
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

import pyarrow as pa
from more_itertools import batched

from osmmodel.osm.dispatch import partition_elements
from osmmodel.osm.ids import ElementKind
from osmmodel.osm.types import OsmElement
from osmmodel.osm.types import OsmNode
from osmmodel.osm.types import OsmRelation
from osmmodel.osm.types import OsmWay

logger = logging.getLogger(__name__)

ARROW_TAGS_TYPE = pa.map_(pa.string(), pa.string())

ARROW_MEMBER_TYPE = pa.struct(
    [
        pa.field("id", pa.int64()),
        pa.field("role", pa.string()),
        pa.field("type", pa.string()),
    ]
)

ARROW_INFO_FIELDS = [
    pa.field("timestamp", pa.timestamp("us", tz="UTC")),
    pa.field("changeset", pa.int64()),
    pa.field("uid", pa.int64()),
    pa.field("user", pa.string()),
    pa.field("visible", pa.bool_()),
]

ARROW_NODE_SCHEMA = pa.schema(
    [
        pa.field("id", pa.int64()),
        pa.field("version", pa.int64()),
        pa.field("tags", ARROW_TAGS_TYPE),
        pa.field("latitude", pa.float64()),
        pa.field("longitude", pa.float64()),
        *ARROW_INFO_FIELDS,
    ]
)

ARROW_WAY_SCHEMA = pa.schema(
    [
        pa.field("id", pa.int64()),
        pa.field("version", pa.int64()),
        pa.field("tags", ARROW_TAGS_TYPE),
        pa.field("nodes", pa.list_(pa.int64())),
        *ARROW_INFO_FIELDS,
    ]
)

ARROW_RELATION_SCHEMA = pa.schema(
    [
        pa.field("id", pa.int64()),
        pa.field("version", pa.int64()),
        pa.field("tags", ARROW_TAGS_TYPE),
        pa.field("members", pa.list_(ARROW_MEMBER_TYPE)),
        *ARROW_INFO_FIELDS,
    ]
)


@dataclass
class BatchConfig:
    batch_size: int = 10_000


def _info_arrays(items: Sequence[OsmElement]) -> list[pa.Array]:
    infos = [item.info for item in items]
    return [
        pa.array([i.timestamp if i else None for i in infos], type=pa.timestamp("us", tz="UTC")),
        pa.array([i.changeset if i else None for i in infos], type=pa.int64()),
        pa.array([i.uid if i else None for i in infos], type=pa.int64()),
        pa.array([i.user if i else None for i in infos], type=pa.string()),
        pa.array([i.visible if i else None for i in infos], type=pa.bool_()),
    ]


def _common_arrays(items: Sequence[OsmElement]) -> list[pa.Array]:
    return [
        pa.array([item.id for item in items], type=pa.int64()),
        pa.array([item.info.version if item.info else None for item in items], type=pa.int64()),
        pa.array([list(item.tags.items()) for item in items], type=ARROW_TAGS_TYPE),
    ]


def record_batch_for_nodes(nodes: Sequence[OsmNode]) -> pa.RecordBatch | None:
    if not nodes:
        return None

    arrays = [
        *_common_arrays(nodes),
        pa.array([node.latitude for node in nodes], type=pa.float64()),
        pa.array([node.longitude for node in nodes], type=pa.float64()),
        *_info_arrays(nodes),
    ]

    return pa.RecordBatch.from_arrays(arrays, schema=ARROW_NODE_SCHEMA)


def record_batch_for_ways(ways: Sequence[OsmWay]) -> pa.RecordBatch | None:
    if not ways:
        return None

    arrays = [
        *_common_arrays(ways),
        pa.array([list(way.nodes) for way in ways], type=pa.list_(pa.int64())),
        *_info_arrays(ways),
    ]

    return pa.RecordBatch.from_arrays(arrays, schema=ARROW_WAY_SCHEMA)


def record_batch_for_relations(relations: Sequence[OsmRelation]) -> pa.RecordBatch | None:
    if not relations:
        return None

    members: list[Any] = []
    for relation in relations:
        members.append([{"id": m.id, "role": m.role, "type": m.kind.value} for m in relation.members])

    arrays = [
        *_common_arrays(relations),
        pa.array(members, type=pa.list_(ARROW_MEMBER_TYPE)),
        *_info_arrays(relations),
    ]

    return pa.RecordBatch.from_arrays(arrays, schema=ARROW_RELATION_SCHEMA)


def record_batches(
    elements: Iterable[OsmElement], config: BatchConfig | None = None
) -> Generator[tuple[ElementKind, pa.RecordBatch], None, None]:
    """Convert a mixed element stream into per-kind record batches, node, way, relation per chunk."""
    config = config or BatchConfig()

    for chunk in batched(elements, config.batch_size):
        partition = partition_elements(chunk)
        logger.debug(
            "Converting %d nodes, %d ways, %d relations",
            len(partition.nodes),
            len(partition.ways),
            len(partition.relations),
        )

        for kind, batch in (
            (ElementKind.NODE, record_batch_for_nodes(partition.nodes)),
            (ElementKind.WAY, record_batch_for_ways(partition.ways)),
            (ElementKind.RELATION, record_batch_for_relations(partition.relations)),
        ):
            if batch is not None:
                yield kind, batch
