"""
Integration tests for the seat selection API

The whole FastAPI app (DI container, exception handlers, schemas) is
exercised through TestClient. Requests carry their own seat snapshot.
"""

from fastapi.testclient import TestClient
import pytest

from src.platform.app_factory import create_app
from src.service.seat_selection.driven_adapter.place_id_codec import encode_place_id


pytestmark = pytest.mark.integration


ROW = [
    {'placeId': 'a', 'row': 'R1', 'seat': '1', 'section': 'A', 'x': 20, 'y': 100},
    {'placeId': 'b', 'row': 'R1', 'seat': '2', 'section': 'A', 'x': 40, 'y': 100},
    {'placeId': 'c', 'row': 'R1', 'seat': '3', 'section': 'A', 'x': 60, 'y': 100, 'status': 'sold'},
    {'placeId': 'd', 'row': 'R1', 'seat': '4', 'section': 'A', 'x': 80, 'y': 100},
]


@pytest.fixture(scope='module')
def client():
    with TestClient(create_app(title_suffix=' (Test)')) as test_client:
        yield test_client


class TestSelectEndpoint:
    def test_select_neighbour(self, client) -> None:
        """Selecting the next seat returns the grown selection"""
        response = client.post(
            '/api/seat_selection/select',
            json={'seats': ROW, 'selection': ['a'], 'place_id': 'b'},
        )

        assert response.status_code == 200
        assert response.json() == {'accepted': True, 'selection': ['a', 'b'], 'reason': None}

    def test_select_across_sold_seat(self, client) -> None:
        """A seat past a sold seat is rejected as stranded"""
        response = client.post(
            '/api/seat_selection/select',
            json={'seats': ROW, 'selection': ['a', 'b'], 'place_id': 'd'},
        )

        assert response.status_code == 200
        assert response.json() == {
            'accepted': False,
            'selection': ['a', 'b'],
            'reason': 'stranded_seat',
        }

    def test_select_sold_seat(self, client) -> None:
        """A sold seat is rejected as unavailable"""
        response = client.post(
            '/api/seat_selection/select',
            json={'seats': ROW, 'selection': [], 'place_id': 'c'},
        )

        assert response.json()['reason'] == 'seat_unavailable'

    def test_missing_place_id(self, client) -> None:
        """A request without place_id is a 400"""
        response = client.post('/api/seat_selection/select', json={'seats': ROW})

        assert response.status_code == 400
        assert response.json()['detail'][0]['loc'] == ['body', 'place_id']

    def test_unknown_status_value(self, client) -> None:
        """The API refuses statuses outside the enum"""
        seats = [{**ROW[0], 'status': 'blocked'}]

        response = client.post(
            '/api/seat_selection/select',
            json={'seats': seats, 'selection': [], 'place_id': 'a'},
        )

        assert response.status_code == 400


class TestDeselectEndpoint:
    def test_middle_seat_stays(self, client) -> None:
        """Deselecting a middle seat is rejected"""
        seats = [
            {'placeId': f'r1-{n}', 'row': 'R1', 'seat': str(n), 'section': 'A'} for n in range(1, 4)
        ]

        response = client.post(
            '/api/seat_selection/deselect',
            json={'seats': seats, 'selection': ['r1-1', 'r1-2', 'r1-3'], 'place_id': 'r1-2'},
        )

        assert response.status_code == 200
        assert response.json() == {
            'accepted': False,
            'selection': ['r1-1', 'r1-2', 'r1-3'],
            'reason': 'would_strand_selection',
        }


class TestValidateEndpoint:
    def test_connected(self, client) -> None:
        """A connected selection validates"""
        response = client.post(
            '/api/seat_selection/validate', json={'seats': ROW, 'selection': ['a', 'b']}
        )

        assert response.status_code == 200
        assert response.json()['valid'] is True

    def test_stale_seat(self, client) -> None:
        """A seat sold since selection is reported stale"""
        response = client.post(
            '/api/seat_selection/validate', json={'seats': ROW, 'selection': ['b', 'c']}
        )

        body = response.json()
        assert body['valid'] is False
        assert body['stale_place_ids'] == ['c']
        assert body['reason'] == 'seat_unavailable'


class TestAdjacencyEndpoint:
    def test_sold_neighbour(self, client) -> None:
        """Adjacency reports physical and status-aware answers"""
        response = client.post(
            '/api/seat_selection/adjacency',
            json={'seats': ROW, 'first_place_id': 'b', 'second_place_id': 'c'},
        )

        assert response.status_code == 200
        assert response.json() == {
            'first_place_id': 'b',
            'second_place_id': 'c',
            'physical': True,
            'considering_status': False,
        }

    def test_unknown_seat(self, client) -> None:
        """Unknown ids on adjacency are a 404"""
        response = client.post(
            '/api/seat_selection/adjacency',
            json={'seats': ROW, 'first_place_id': 'a', 'second_place_id': 'zz'},
        )

        assert response.status_code == 404
        assert response.json() == {'detail': 'Seat not found: zz'}


class TestSeatMapDecodeEndpoint:
    def test_decode(self, client) -> None:
        """Encoded ids decode into seats and sections"""
        place_ids = [
            encode_place_id(
                venue_prefix='VNUE', section='A', tier_code='T', row=1, seat=n, x=n * 20, y=100
            )
            for n in (1, 2)
        ]

        response = client.post(
            '/api/seat_selection/seat_map/decode',
            json={
                'placeIds': place_ids,
                'sold': [place_ids[1]],
                'sections': [{'id': 'A', 'name': 'Arena', 'bounds': {'minX': 0, 'maxX': 200}}],
            },
        )

        assert response.status_code == 200
        body = response.json()
        assert body['total_count'] == 2
        assert [seat['placeId'] for seat in body['seats']] == place_ids
        assert [seat['status'] for seat in body['seats']] == ['available', 'sold']
        assert body['seats'][0]['x'] == 20.0
        assert body['sections'][0]['geometry'] == {
            'kind': 'rect',
            'min_x': 0.0,
            'min_y': 0.0,
            'max_x': 200.0,
            'max_y': 1000.0,
            'points': [],
        }

    def test_broken_section(self, client) -> None:
        """A section without an id is a 400"""
        response = client.post(
            '/api/seat_selection/seat_map/decode',
            json={'sections': [{'color': 'red'}]},
        )

        assert response.status_code == 400

    @pytest.mark.parametrize(
        'section',
        [
            {'id': 'A', 'bounds': [0, 0, 10, 10]},
            {'id': 'A', 'bounds': 'wide'},
            {'id': 'A', 'polygon': 'abc'},
        ],
    )
    def test_section_geometry_of_wrong_shape(self, client, section) -> None:
        """Bounds or polygon of the wrong type is a 400"""
        response = client.post(
            '/api/seat_selection/seat_map/decode',
            json={'sections': [section]},
        )

        assert response.status_code == 400
        assert response.json()['detail'].startswith('Invalid geometry for section A')


class TestHealth:
    def test_health(self, client) -> None:
        """Health check answers healthy"""
        response = client.get('/health')

        assert response.status_code == 200
        assert response.json()['status'] == 'healthy'
