"""
Place ID Codec

Encoded place ids carry the seat position so a seat map can be rebuilt
even when the venue manifest misses a place.

Formats:
- Piped:  VENUE_PREFIX(4) + base64url(section) + "|" + TIER_CODE + "|" + POSITION_CODE
- Legacy: VENUE_PREFIX(4) + SECTION_CHAR(1) + TIER_CODE(1) + POSITION_CODE

POSITION_CODE is base36 of (row << 48) | (seat << 32) | (x << 16) | y,
every component being 16 bits wide.
"""

import base64
import binascii
from collections.abc import Mapping, Sequence
import re
import string
from typing import Any, Optional

import attrs

from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger


MIN_PLACE_ID_LENGTH = 12
VENUE_PREFIX_LENGTH = 4
_COMPONENT_MASK = 0xFFFF
_BASE36_ALPHABET = string.digits + string.ascii_lowercase
_NON_DIGIT = re.compile(r'\D')


@attrs.define(frozen=True)
class DecodedPlaceId:
    section: str
    tier_code: str
    row: int
    seat: int
    x: int
    y: int


def _base64url_decode(text: str) -> str:
    padded = text + '=' * (-len(text) % 4)
    try:
        return base64.urlsafe_b64decode(padded).decode('utf-8')
    except (binascii.Error, UnicodeDecodeError, ValueError):
        # Not base64 after all, keep the raw section text
        return text


def _base64url_encode(text: str) -> str:
    return base64.urlsafe_b64encode(text.encode('utf-8')).decode('ascii').rstrip('=')


def _decode_position(code: str) -> Optional[tuple[int, int, int, int]]:
    try:
        combined = int(code, 36)
    except ValueError:
        return None
    if combined < 0:
        return None
    return (
        (combined >> 48) & _COMPONENT_MASK,
        (combined >> 32) & _COMPONENT_MASK,
        (combined >> 16) & _COMPONENT_MASK,
        combined & _COMPONENT_MASK,
    )


def _encode_position(row: int, seat: int, x: int, y: int) -> str:
    for name, value in (('row', row), ('seat', seat), ('x', x), ('y', y)):
        if not 0 <= value <= _COMPONENT_MASK:
            raise DomainError(f'Position component {name}={value} does not fit in 16 bits')

    combined = (row << 48) | (seat << 32) | (x << 16) | y
    digits = []
    while combined:
        combined, remainder = divmod(combined, 36)
        digits.append(_BASE36_ALPHABET[remainder])
    return ''.join(reversed(digits)) or '0'


def decode_place_id(place_id: Optional[str]) -> Optional[DecodedPlaceId]:
    """Decode an encoded place id, None when it is not one"""
    if not place_id or len(place_id) < MIN_PLACE_ID_LENGTH:
        return None

    if '|' in place_id:
        parts = place_id.split('|')
        if len(parts) != 3:
            return None
        section = _base64url_decode(parts[0][VENUE_PREFIX_LENGTH:])
        tier_code = parts[1]
        position_code = parts[2]
    else:
        section = place_id[VENUE_PREFIX_LENGTH : VENUE_PREFIX_LENGTH + 1]
        tier_code = place_id[VENUE_PREFIX_LENGTH + 1 : VENUE_PREFIX_LENGTH + 2]
        position_code = place_id[VENUE_PREFIX_LENGTH + 2 :]

    position = _decode_position(position_code)
    if position is None:
        Logger.base.debug(f'[PLACE-ID] Undecodable position code in {place_id}')
        return None

    row, seat, x, y = position
    return DecodedPlaceId(section=section, tier_code=tier_code, row=row, seat=seat, x=x, y=y)


def encode_place_id(
    *,
    venue_prefix: str,
    section: str,
    tier_code: str,
    row: int,
    seat: int,
    x: int,
    y: int,
) -> str:
    """Inverse of decode_place_id, piped format unless section and tier are one char each"""
    if len(venue_prefix) != VENUE_PREFIX_LENGTH:
        raise DomainError(f'Venue prefix must be {VENUE_PREFIX_LENGTH} characters: {venue_prefix}')

    position_code = _encode_position(row, seat, x, y)
    if len(section) == 1 and len(tier_code) == 1 and '|' not in section + tier_code:
        encoded = f'{venue_prefix}{section}{tier_code}{position_code}'
        if len(encoded) >= MIN_PLACE_ID_LENGTH:
            return encoded

    return f'{venue_prefix}{_base64url_encode(section)}|{tier_code}|{position_code}'


def _numeric_part(value: Any) -> str:
    if value is None:
        return ''
    return _NON_DIGIT.sub('', str(value))


def _section_matches(place_section: Any, decoded_section: str) -> bool:
    section = str(place_section or '').upper()
    if len(decoded_section) == 1:
        # Legacy ids only keep the first character of the section name
        return section[:1] == decoded_section.upper()
    return section == decoded_section.upper()


def match_place_ids_with_places(
    place_ids: Sequence[str], places: Sequence[Mapping[str, Any]]
) -> list[dict[str, Any]]:
    """
    Pair every encoded place id with its venue manifest place.

    Matching uses section + numeric row + numeric seat. The matched place keeps
    its own fields but takes the encoded id. Unmatched ids fall back to the
    decoded position, or to an empty place when the id does not decode.
    """
    matched_places: list[dict[str, Any]] = []

    for place_id in place_ids:
        decoded = decode_place_id(place_id)
        matched: Optional[Mapping[str, Any]] = None

        if decoded:
            for place in places:
                if (
                    _section_matches(place.get('section'), decoded.section)
                    and _numeric_part(place.get('row')) == str(decoded.row)
                    and _numeric_part(place.get('seat')) == str(decoded.seat)
                ):
                    matched = place
                    break

        if matched is not None:
            matched_places.append({**matched, 'placeId': place_id})
        elif decoded is not None:
            matched_places.append(
                {
                    'placeId': place_id,
                    'section': decoded.section,
                    'row': str(decoded.row),
                    'seat': str(decoded.seat),
                    'x': decoded.x,
                    'y': decoded.y,
                    'status': 'available',
                    'available': True,
                }
            )
        else:
            matched_places.append(
                {
                    'placeId': place_id,
                    'section': None,
                    'row': None,
                    'seat': None,
                    'x': None,
                    'y': None,
                    'status': 'available',
                    'available': True,
                }
            )

    return matched_places
