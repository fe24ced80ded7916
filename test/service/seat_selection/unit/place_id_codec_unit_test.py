"""
Unit tests for the place id codec

Covers both id layouts, decode failure modes and manifest matching.
"""

import pytest

from src.platform.exception.exceptions import DomainError
from src.service.seat_selection.driven_adapter.place_id_codec import (
    DecodedPlaceId,
    decode_place_id,
    encode_place_id,
    match_place_ids_with_places,
)


pytestmark = pytest.mark.unit


def _position(row: int, seat: int, x: int, y: int) -> int:
    return (row << 48) | (seat << 32) | (x << 16) | y


@pytest.fixture
def legacy_id() -> str:
    return encode_place_id(venue_prefix='VNUE', section='A', tier_code='T', row=5, seat=12, x=300, y=400)


@pytest.fixture
def piped_id() -> str:
    return encode_place_id(
        venue_prefix='VNUE', section='Balcony', tier_code='VIP', row=2, seat=7, x=40, y=80
    )


class TestEncodePlaceId:
    def test_legacy_layout(self, legacy_id) -> None:
        """Prefix, one-letter section, tier and base36 position"""
        assert '|' not in legacy_id
        assert legacy_id[:6] == 'VNUEAT'
        assert int(legacy_id[6:], 36) == _position(5, 12, 300, 400)

    def test_piped_layout(self, piped_id) -> None:
        """Base64url section and tier separated by pipes"""
        # 'Balcony' in unpadded base64url
        assert piped_id.startswith('VNUEQmFsY29ueQ|VIP|')
        assert int(piped_id.split('|')[2], 36) == _position(2, 7, 40, 80)

    def test_venue_prefix_length(self) -> None:
        """The venue prefix must be four characters"""
        with pytest.raises(DomainError):
            encode_place_id(venue_prefix='VEN', section='A', tier_code='T', row=1, seat=1, x=0, y=0)

    def test_component_overflow(self) -> None:
        """Position fields must fit in 16 bits"""
        with pytest.raises(DomainError, match='row=70000'):
            encode_place_id(
                venue_prefix='VNUE', section='A', tier_code='T', row=70000, seat=1, x=0, y=0
            )


class TestDecodePlaceId:
    def test_legacy(self, legacy_id) -> None:
        """Legacy ids decode back to their components"""
        assert decode_place_id(legacy_id) == DecodedPlaceId(
            section='A', tier_code='T', row=5, seat=12, x=300, y=400
        )

    def test_piped(self, piped_id) -> None:
        """Piped ids decode back to their components"""
        decoded = decode_place_id(piped_id)

        assert decoded is not None
        assert decoded.section == 'Balcony'
        assert decoded.tier_code == 'VIP'
        assert (decoded.row, decoded.seat, decoded.x, decoded.y) == (2, 7, 40, 80)

    def test_section_that_is_not_base64_is_kept_raw(self) -> None:
        """A section that does not decode as base64 is used as is"""
        code = encode_place_id(
            venue_prefix='VNUE', section='X', tier_code='T', row=1, seat=1, x=10, y=10
        )[6:]

        decoded = decode_place_id(f'VNUEMain Hall|T|{code}')

        assert decoded is not None
        assert decoded.section == 'Main Hall'

    @pytest.mark.parametrize(
        'place_id',
        [
            None,
            '',
            'VNUEAT123',  # shorter than 12
            'VNUEAT!!!!!!',  # not base36
            'VNUEQmFsY29ueQ|VIP',  # two parts
            'VNUEQmFsY29ueQ|VIP|1|2',  # four parts
        ],
    )
    def test_not_an_encoded_id(self, place_id) -> None:
        """Malformed ids decode to None"""
        assert decode_place_id(place_id) is None


class TestMatchPlaceIdsWithPlaces:
    def test_matched_place_takes_encoded_id(self, legacy_id) -> None:
        """A manifest place at the decoded position takes the encoded id"""
        places = [
            {'placeId': 'manifest-1', 'section': 'Arena', 'row': 'R5', 'seat': 'Seat 12', 'x': 101, 'y': 202},
            {'placeId': 'manifest-2', 'section': 'Arena', 'row': 'R5', 'seat': 'Seat 13', 'x': 121, 'y': 202},
        ]

        matched = match_place_ids_with_places([legacy_id], places)

        assert matched == [
            {'placeId': legacy_id, 'section': 'Arena', 'row': 'R5', 'seat': 'Seat 12', 'x': 101, 'y': 202}
        ]

    def test_multi_char_section_matches_whole_name(self, piped_id) -> None:
        """Long sections must match the full section name"""
        places = [
            {'section': 'Bal', 'row': '2', 'seat': '7', 'x': 1, 'y': 1},
            {'section': 'BALCONY', 'row': '2', 'seat': '7', 'x': 2, 'y': 2},
        ]

        matched = match_place_ids_with_places([piped_id], places)

        assert matched[0]['x'] == 2
        assert matched[0]['placeId'] == piped_id

    def test_unmatched_id_uses_decoded_position(self, legacy_id) -> None:
        """Without a manifest match the decoded position is used"""
        matched = match_place_ids_with_places([legacy_id], [])

        assert matched == [
            {
                'placeId': legacy_id,
                'section': 'A',
                'row': '5',
                'seat': '12',
                'x': 300,
                'y': 400,
                'status': 'available',
                'available': True,
            }
        ]

    def test_undecodable_id_keeps_a_placeholder(self) -> None:
        """Undecodable ids still yield a place"""
        matched = match_place_ids_with_places(['not-an-id'], [])

        assert matched[0]['placeId'] == 'not-an-id'
        assert matched[0]['section'] is None
        assert matched[0]['x'] is None

    def test_order_follows_place_ids(self, legacy_id, piped_id) -> None:
        """Output order follows the given ids"""
        matched = match_place_ids_with_places([piped_id, 'bogus', legacy_id], [])

        assert [place['placeId'] for place in matched] == [piped_id, 'bogus', legacy_id]
