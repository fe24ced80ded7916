"""
Seat selection fixtures

Seat snapshots used across the engine, use case and controller tests.
All rows sit in section "A" unless a test says otherwise.
"""

from collections.abc import Callable
from typing import Optional

import pytest

from src.service.seat_selection.domain.enum import SeatStatus
from src.service.seat_selection.domain.seat_adjacency_engine import SeatAdjacencyEngine
from src.service.seat_selection.domain.value_object import AdjacencyPolicy, Seat


SeatFactory = Callable[..., Seat]


def _make_seat(
    place_id: str,
    *,
    row: Optional[str] = 'R1',
    seat: Optional[str] = None,
    section: Optional[str] = 'A',
    x: Optional[float] = None,
    y: Optional[float] = None,
    status: SeatStatus = SeatStatus.AVAILABLE,
) -> Seat:
    return Seat(
        place_id=place_id,
        x=x,
        y=y,
        row=row,
        seat=seat,
        section=section,
        status=status,
    )


@pytest.fixture
def make_seat() -> SeatFactory:
    return _make_seat


@pytest.fixture
def engine() -> SeatAdjacencyEngine:
    return SeatAdjacencyEngine()


@pytest.fixture
def strict_engine() -> SeatAdjacencyEngine:
    """Engine for venues where reserved seats block like sold ones"""
    return SeatAdjacencyEngine(AdjacencyPolicy(reserved_blocks_selection=True))


@pytest.fixture
def row_of_five() -> list[Seat]:
    """Row R1, seats 1..5, all available, 20 units apart"""
    return [
        _make_seat(f'r1-{number}', seat=str(number), x=float(number * 20), y=100.0)
        for number in range(1, 6)
    ]


@pytest.fixture
def row_with_sold_seat() -> list[Seat]:
    """Row a/b/c/d where c is sold: 1 available, 2 available, 3 sold, 4 available"""
    return [
        _make_seat('a', seat='1'),
        _make_seat('b', seat='2'),
        _make_seat('c', seat='3', status=SeatStatus.SOLD),
        _make_seat('d', seat='4'),
    ]
