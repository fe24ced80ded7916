"""
Seat Map Builder

Turns the raw seat map payload (encoded place ids, venue places, sold and
reserved id lists, section outlines) into the Seat / Section value objects
the adjacency engine works on.
"""

from collections.abc import Mapping
from typing import Any

import attrs
import orjson

from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.seat_selection.domain.enum import SeatStatus
from src.service.seat_selection.domain.value_object import (
    Seat,
    Section,
    parse_section_geometry,
)
from src.service.seat_selection.driven_adapter.place_id_codec import match_place_ids_with_places


@attrs.define(frozen=True)
class SeatMap:
    seats: tuple[Seat, ...] = attrs.field(converter=tuple)
    sections: tuple[Section, ...] = attrs.field(converter=tuple)


def _seat_status(place: Mapping[str, Any], sold: set[str], reserved: set[str]) -> SeatStatus:
    place_id = place['placeId']
    if place.get('available') is False:
        return SeatStatus.SOLD
    if place_id in sold:
        return SeatStatus.SOLD
    if place_id in reserved:
        return SeatStatus.RESERVED
    return SeatStatus.AVAILABLE


def _build_section(raw: Any) -> Section:
    if not isinstance(raw, Mapping):
        raise DomainError(f'Section entry must be an object, got {type(raw).__name__}')

    section_id = raw.get('id') or raw.get('_id') or raw.get('name')
    if not section_id:
        raise DomainError('Section without id or name in seat map payload')

    try:
        geometry = parse_section_geometry(raw.get('bounds'), raw.get('polygon'))
    except (KeyError, TypeError, ValueError) as e:
        raise DomainError(f'Invalid geometry for section {section_id}: {e}') from e

    return Section(
        id=str(section_id),
        name=str(raw.get('name') or section_id),
        color=raw.get('color'),
        geometry=geometry,
    )


def _load_payload(payload: Mapping[str, Any] | bytes | str) -> Mapping[str, Any]:
    if isinstance(payload, Mapping):
        return payload
    try:
        data = orjson.loads(payload)
    except orjson.JSONDecodeError as e:
        raise DomainError(f'Seat map payload is not valid JSON: {e}') from e
    if not isinstance(data, dict):
        raise DomainError('Seat map payload must be a JSON object')
    return data


@Logger.io
def build_seat_map(payload: Mapping[str, Any] | bytes | str) -> SeatMap:
    """
    Build the seat snapshot for one event.

    Status precedence: place marked unavailable > sold list > reserved list.
    """
    data = _load_payload(payload)
    place_ids = data.get('placeIds') or []
    places = data.get('places') or []
    sold = set(data.get('sold') or [])
    reserved = set(data.get('reserved') or [])

    if place_ids:
        matched_places = match_place_ids_with_places(place_ids, places)
    else:
        # Plain manifests already carry their place ids
        matched_places = [place for place in places if place.get('placeId')]

    seats = [
        Seat.from_dict({**place, 'status': _seat_status(place, sold, reserved)})
        for place in matched_places
    ]
    sections = [_build_section(raw) for raw in data.get('sections') or []]

    Logger.base.info(
        f'[SEAT-MAP] Built {len(seats)} seats in {len(sections)} sections '
        f'({len(sold)} sold, {len(reserved)} reserved)'
    )
    return SeatMap(seats=seats, sections=sections)
