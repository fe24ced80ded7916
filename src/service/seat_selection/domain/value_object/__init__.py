"""Seat Selection Value Objects"""

from src.service.seat_selection.domain.value_object.adjacency_policy import AdjacencyPolicy
from src.service.seat_selection.domain.value_object.seat import Seat
from src.service.seat_selection.domain.value_object.section_geometry import (
    Point,
    PolygonGeometry,
    RectGeometry,
    Section,
    SectionGeometry,
    parse_section_geometry,
)

__all__ = [
    'AdjacencyPolicy',
    'Point',
    'PolygonGeometry',
    'RectGeometry',
    'Seat',
    'Section',
    'SectionGeometry',
    'parse_section_geometry',
]
