from __future__ import annotations

from osmmodel.osm.ids import ElementKind


class OsmModelError(Exception):
    pass


class ElementKindError(OsmModelError, TypeError):
    """Raised when an element is extracted as a kind it does not hold."""

    def __init__(self, expected: ElementKind, actual: ElementKind) -> None:
        super().__init__(f"Expected {expected.value}, got {actual.value}")
        self.expected = expected
        self.actual = actual
