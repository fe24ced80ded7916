"""
Check Seat Adjacency Use Case
"""

from collections.abc import Sequence

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.seat_selection.app.dto import SeatAdjacencyResult
from src.service.seat_selection.domain.seat_adjacency_engine import SeatAdjacencyEngine
from src.service.seat_selection.domain.value_object import Seat


class CheckSeatAdjacencyUseCase:
    def __init__(self, seat_adjacency_engine: SeatAdjacencyEngine):
        self.seat_adjacency_engine = seat_adjacency_engine

    @staticmethod
    def _find_seat(seats: Sequence[Seat], place_id: str) -> Seat:
        for seat in seats:
            if seat.place_id == place_id:
                return seat
        raise NotFoundError(f'Seat not found: {place_id}')

    @Logger.io
    def execute(
        self, *, first_place_id: str, second_place_id: str, seats: Sequence[Seat]
    ) -> SeatAdjacencyResult:
        first = self._find_seat(seats, first_place_id)
        second = self._find_seat(seats, second_place_id)

        return SeatAdjacencyResult(
            first_place_id=first_place_id,
            second_place_id=second_place_id,
            physical=self.seat_adjacency_engine.is_physically_adjacent(first, second),
            considering_status=self.seat_adjacency_engine.is_adjacent_considering_status(
                first, second, seats
            ),
        )
