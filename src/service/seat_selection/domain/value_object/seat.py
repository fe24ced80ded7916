"""
Seat Value Object

Read-only seat record of the currently displayed seat map.
Rebuilt on every data refresh, the engine never mutates it.
"""

from collections.abc import Mapping
from typing import Any, Optional

import attrs

from src.service.seat_selection.domain.enum import SeatStatus


def _to_label(value: Any) -> Optional[str]:
    if value is None:
        return None
    label = str(value).strip()
    return label or None


def _to_coordinate(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _to_status(value: Any) -> SeatStatus:
    try:
        return SeatStatus(str(value).lower())
    except ValueError:
        return SeatStatus.AVAILABLE


@attrs.define(frozen=True)
class Seat:
    """Seat (Value Object)"""

    place_id: str
    x: Optional[float] = None
    y: Optional[float] = None
    row: Optional[str] = None
    seat: Optional[str] = None
    section: Optional[str] = None
    status: SeatStatus = attrs.field(default=SeatStatus.AVAILABLE, converter=_to_status)

    @property
    def has_coordinates(self) -> bool:
        return self.x is not None and self.y is not None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'Seat':
        """Create seat from a manifest place / API payload (camelCase or snake_case keys)"""
        place_id = data.get('placeId', data.get('place_id'))
        return cls(
            place_id=str(place_id) if place_id is not None else '',
            x=_to_coordinate(data.get('x')),
            y=_to_coordinate(data.get('y')),
            row=_to_label(data.get('row')),
            seat=_to_label(data.get('seat')),
            section=_to_label(data.get('section')),
            status=data.get('status') or SeatStatus.AVAILABLE,
        )
