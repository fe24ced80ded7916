"""
Seat Adjacency Engine

Decides whether seats are neighbours and whether a multi-seat selection
forms one connected group. Sold seats act as barriers.

Every call works on the snapshot it is handed and returns a boolean.
Nothing is cached between calls and malformed input answers False
instead of raising, the seat map calls this on every click.
"""

from collections import deque
from collections.abc import Sequence
from functools import cmp_to_key
import math
from typing import Optional

from src.service.seat_selection.domain.enum import SeatStatus
from src.service.seat_selection.domain.seat_label import (
    extract_number,
    is_single_letter,
    letter_distance,
)
from src.service.seat_selection.domain.value_object import AdjacencyPolicy, Seat


def _compare_row_position(a: Seat, b: Seat) -> int:
    """Left to right by x, then seat number, then raw label"""
    if a.x is not None and b.x is not None and a.x != b.x:
        return -1 if a.x < b.x else 1

    a_num = extract_number(a.seat)
    b_num = extract_number(b.seat)
    if a_num is not None and b_num is not None:
        return a_num - b_num

    a_label = a.seat or ''
    b_label = b.seat or ''
    return (a_label > b_label) - (a_label < b_label)


class SeatAdjacencyEngine:
    """
    Seat adjacency & connectivity rules

    Responsibility: pure decision functions over a caller supplied seat list
    """

    def __init__(self, policy: Optional[AdjacencyPolicy] = None) -> None:
        self.policy = policy or AdjacencyPolicy()

    # ------------------------------------------------------------------
    # Status helpers
    # ------------------------------------------------------------------
    def is_selectable(self, seat: Seat) -> bool:
        if seat.status == SeatStatus.AVAILABLE:
            return True
        return seat.status == SeatStatus.RESERVED and not self.policy.reserved_blocks_selection

    def _is_barrier(self, seat: Seat) -> bool:
        if seat.status == SeatStatus.SOLD:
            return True
        return seat.status == SeatStatus.RESERVED and self.policy.reserved_blocks_selection

    # ------------------------------------------------------------------
    # Physical adjacency
    # ------------------------------------------------------------------
    def is_physically_adjacent(self, a: Seat, b: Seat) -> bool:
        """
        Could these two seats ever be neighbours (status ignored)

        First matching rule decides:
        1. Different sections never touch
        2. Same row: seat numbers differ by exactly 1
        3. Same row, non-numeric labels: single letters next to each other
        4. Neighbouring rows: same or next column and within max_distance
        """
        if not a.place_id or not b.place_id:
            return False

        if a.section != b.section:
            return False

        if a.row and a.row == b.row:
            a_num = extract_number(a.seat)
            b_num = extract_number(b.seat)
            if a_num is not None and b_num is not None:
                return abs(a_num - b_num) == 1

            if a.seat and b.seat:
                return (
                    is_single_letter(a.seat)
                    and is_single_letter(b.seat)
                    and letter_distance(a.seat, b.seat) == 1
                )

        if a.row != b.row and a.has_coordinates and b.has_coordinates:
            return self._is_cross_row_adjacent(a, b)

        return False

    def _is_cross_row_adjacent(self, a: Seat, b: Seat) -> bool:
        a_row = extract_number(a.row)
        b_row = extract_number(b.row)
        if a_row is None or b_row is None:
            return False
        if not 1 <= abs(a_row - b_row) <= self.policy.max_row_gap:
            return False

        a_num = extract_number(a.seat)
        b_num = extract_number(b.seat)
        if a_num is None or b_num is None:
            return False
        if abs(a_num - b_num) > self.policy.max_column_gap:
            return False

        distance = math.hypot(a.x - b.x, a.y - b.y)  # type: ignore[operator]
        return distance <= self.policy.max_distance

    # ------------------------------------------------------------------
    # Status-aware adjacency
    # ------------------------------------------------------------------
    def is_adjacent_considering_status(
        self, a: Seat, b: Seat, all_seats: Sequence[Seat]
    ) -> bool:
        """Physical adjacency plus: both ends selectable and no sold seat in between"""
        if not self.is_selectable(a) or not self.is_selectable(b):
            return False

        if not self.is_physically_adjacent(a, b):
            return False

        # Same row: a sold seat between the two blocks the connection even when
        # irregular numbering makes the pair look adjacent
        if a.row == b.row and a.section == b.section:
            return not self._is_path_blocked(a, b, all_seats)

        return True

    def _is_path_blocked(self, a: Seat, b: Seat, all_seats: Sequence[Seat]) -> bool:
        row_seats = sorted(
            (s for s in all_seats if s.section == a.section and s.row == a.row),
            key=cmp_to_key(_compare_row_position),
        )
        a_index = self._find_index(row_seats, a.place_id)
        b_index = self._find_index(row_seats, b.place_id)
        if a_index is None or b_index is None:
            return False

        start, end = min(a_index, b_index), max(a_index, b_index)
        return any(self._is_barrier(seat) for seat in row_seats[start + 1 : end])

    @staticmethod
    def _find_index(row_seats: Sequence[Seat], place_id: str) -> Optional[int]:
        for index, seat in enumerate(row_seats):
            if seat.place_id == place_id:
                return index
        return None

    # ------------------------------------------------------------------
    # Selection rules
    # ------------------------------------------------------------------
    def can_add_seat(
        self, candidate: Seat, current_selection: Sequence[str], all_seats: Sequence[Seat]
    ) -> bool:
        """
        Single-seat admission: the first pick is free, every later pick must
        touch a selected seat that is still selectable (no stranded seats)
        """
        if not self.is_selectable(candidate):
            return False

        if not current_selection:
            return True

        selected_ids = set(current_selection)
        anchors = [
            seat
            for seat in all_seats
            if seat.place_id in selected_ids and self.is_selectable(seat)
        ]
        return any(
            self.is_adjacent_considering_status(candidate, anchor, all_seats)
            for anchor in anchors
        )

    def is_selection_connected(
        self, place_ids: Sequence[str], all_seats: Sequence[Seat]
    ) -> bool:
        """
        All selected seats reachable from each other (BFS over status-aware adjacency)

        Sold or unknown place ids make the selection invalid, an invalid
        selection is never connected.
        """
        if len(place_ids) <= 1:
            return True

        wanted = set(place_ids)
        selected = [
            seat for seat in all_seats if seat.place_id in wanted and self.is_selectable(seat)
        ]
        if len(selected) != len(place_ids):
            return False

        adjacency: dict[str, list[str]] = {}
        for seat in selected:
            adjacency[seat.place_id] = [
                other.place_id
                for other in selected
                if other is not seat
                and self.is_adjacent_considering_status(seat, other, all_seats)
            ]

        start = selected[0].place_id
        visited = {start}
        queue = deque([start])
        while queue:
            current = queue.popleft()
            for neighbor in adjacency[current]:
                if neighbor not in visited:
                    visited.add(neighbor)
                    queue.append(neighbor)

        return len(visited) == len(place_ids)

    def can_remove_seat(
        self, place_id: str, current_selection: Sequence[str], all_seats: Sequence[Seat]
    ) -> bool:
        """Deselection keeps the remaining seats connected"""
        remaining = [selected for selected in current_selection if selected != place_id]
        if len(remaining) <= 1:
            return True
        return self.is_selection_connected(remaining, all_seats)
