"""
Section Geometry Value Objects

Venue sections are outlined either by an axis-aligned rectangle or by a
polygon. Manifests deliver the rectangle under two key conventions
(minX/minY/maxX/maxY or x1/y1/x2/y2), parse_section_geometry normalizes
both into a tagged variant.
"""

from collections.abc import Mapping, Sequence
from typing import Any, Optional

import attrs


DEFAULT_MIN_CORNER = 0.0
DEFAULT_MAX_CORNER = 1000.0


@attrs.define(frozen=True)
class Point:
    x: float
    y: float


@attrs.define(frozen=True)
class RectGeometry:
    """Axis-aligned section bounds"""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    def contains(self, point: Point) -> bool:
        return self.min_x <= point.x <= self.max_x and self.min_y <= point.y <= self.max_y

    def bounding_box(self) -> 'RectGeometry':
        return self


@attrs.define(frozen=True)
class PolygonGeometry:
    """Section outline as a closed polygon (last point connects back to the first)"""

    points: tuple[Point, ...] = attrs.field(converter=tuple)

    @points.validator
    def _check_points(self, attribute: attrs.Attribute, value: tuple[Point, ...]) -> None:
        if len(value) < 3:
            raise ValueError('polygon needs at least 3 points')

    def contains(self, point: Point) -> bool:
        """Ray casting, points exactly on an edge may fall on either side"""
        inside = False
        j = len(self.points) - 1
        for i, current in enumerate(self.points):
            previous = self.points[j]
            crosses = (current.y > point.y) != (previous.y > point.y)
            if crosses:
                x_at_y = (previous.x - current.x) * (point.y - current.y) / (
                    previous.y - current.y
                ) + current.x
                if point.x < x_at_y:
                    inside = not inside
            j = i
        return inside

    def bounding_box(self) -> RectGeometry:
        xs = [p.x for p in self.points]
        ys = [p.y for p in self.points]
        return RectGeometry(min_x=min(xs), min_y=min(ys), max_x=max(xs), max_y=max(ys))


SectionGeometry = RectGeometry | PolygonGeometry


@attrs.define(frozen=True)
class Section:
    """Section (Value Object)"""

    id: str
    name: str
    color: Optional[str] = None
    geometry: Optional[SectionGeometry] = None


def _first_number(bounds: Mapping[str, Any], keys: tuple[str, str], default: float) -> float:
    for key in keys:
        value = bounds.get(key)
        if value is not None:
            return float(value)
    return default


def parse_section_geometry(
    bounds: Optional[Mapping[str, Any]],
    polygon: Optional[Sequence[Mapping[str, Any]]],
) -> Optional[SectionGeometry]:
    """
    Polygon wins when present, otherwise fall back to rectangle bounds.

    Raises TypeError when bounds is not an object or polygon is not a list.
    """
    if polygon is not None and not isinstance(polygon, (list, tuple)):
        raise TypeError(f'polygon must be a list of points, got {type(polygon).__name__}')
    if bounds is not None and not isinstance(bounds, Mapping):
        raise TypeError(f'bounds must be an object, got {type(bounds).__name__}')

    if polygon and len(polygon) >= 3:
        return PolygonGeometry(points=[Point(x=float(p['x']), y=float(p['y'])) for p in polygon])

    if not bounds or not any(
        bounds.get(key) is not None for key in ('minX', 'minY', 'maxX', 'maxY', 'x1', 'y1', 'x2', 'y2')
    ):
        return None

    return RectGeometry(
        min_x=_first_number(bounds, ('minX', 'x1'), DEFAULT_MIN_CORNER),
        min_y=_first_number(bounds, ('minY', 'y1'), DEFAULT_MIN_CORNER),
        max_x=_first_number(bounds, ('maxX', 'x2'), DEFAULT_MAX_CORNER),
        max_y=_first_number(bounds, ('maxY', 'y2'), DEFAULT_MAX_CORNER),
    )
