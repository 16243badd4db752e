from __future__ import annotations

from datetime import UTC
from datetime import datetime

import pytest

from osmmodel.osm.ids import NodeId
from osmmodel.osm.ids import RelationId
from osmmodel.osm.ids import WayId
from osmmodel.osm.types import OsmInfo
from osmmodel.osm.types import OsmNode
from osmmodel.osm.types import OsmRelation
from osmmodel.osm.types import OsmRelationMember
from osmmodel.osm.types import OsmWay


@pytest.fixture
def info():
    return OsmInfo(
        version=3,
        timestamp=datetime(2021, 12, 31, 15, 30, 45, tzinfo=UTC),
        changeset=4711,
        uid=42,
        user="mapper",
    )


@pytest.fixture
def node(info):
    return OsmNode(
        id=NodeId(1),
        latitude=51.5000001,
        longitude=-0.1234567,
        tags={"amenity": "cafe", "name": "Test Cafe"},
        info=info,
    )


@pytest.fixture
def way():
    return OsmWay(
        id=WayId(100),
        nodes=[NodeId(1), NodeId(2), NodeId(3), NodeId(1)],
        tags={"building": "yes"},
    )


@pytest.fixture
def relation():
    return OsmRelation(
        id=RelationId(1000),
        members=[
            OsmRelationMember.way(WayId(100), "outer"),
            OsmRelationMember.way(WayId(101), "inner"),
            OsmRelationMember.node(NodeId(1)),
        ],
        tags={"type": "multipolygon"},
    )
