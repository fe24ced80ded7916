"""
Select Seat Use Case - seat map click flow
"""

from collections.abc import Sequence

from opentelemetry import trace

from src.platform.logging.loguru_io import Logger
from src.service.seat_selection.app.command.deselect_seat_use_case import DeselectSeatUseCase
from src.service.seat_selection.app.dto import RejectionReason, SelectionDecision
from src.service.seat_selection.domain.seat_adjacency_engine import SeatAdjacencyEngine
from src.service.seat_selection.domain.value_object import Seat


class SelectSeatUseCase:
    """
    Handle a click on a seat.

    Flow:
    1. Resolve the seat in the snapshot (unknown -> seat_not_found)
    2. Seat must be selectable (sold -> seat_unavailable)
    3. Already selected -> toggle off through DeselectSeatUseCase
    4. Selection size cap, checked before any adjacency rule
    5. Seat must touch the current selection (stranded -> stranded_seat)
    6. Append
    """

    def __init__(
        self,
        seat_adjacency_engine: SeatAdjacencyEngine,
        deselect_seat_use_case: DeselectSeatUseCase,
    ):
        self.seat_adjacency_engine = seat_adjacency_engine
        self.deselect_seat_use_case = deselect_seat_use_case
        self.tracer = trace.get_tracer(__name__)

    @Logger.io
    def execute(
        self, *, selection: Sequence[str], place_id: str, seats: Sequence[Seat]
    ) -> SelectionDecision:
        with self.tracer.start_as_current_span(
            'use_case.select_seat',
            attributes={'seat.place_id': place_id, 'selection.size': len(selection)},
        ):
            seat = next((s for s in seats if s.place_id == place_id), None)
            if seat is None:
                Logger.base.warning(f'[SELECT] Unknown place id {place_id}')
                return SelectionDecision.reject(selection, RejectionReason.SEAT_NOT_FOUND)

            if not self.seat_adjacency_engine.is_selectable(seat):
                return SelectionDecision.reject(selection, RejectionReason.SEAT_UNAVAILABLE)

            if place_id in selection:
                return self.deselect_seat_use_case.execute(
                    selection=selection, place_id=place_id, seats=seats
                )

            if len(selection) >= self.seat_adjacency_engine.policy.max_selection_size:
                return SelectionDecision.reject(selection, RejectionReason.MAX_SELECTION_REACHED)

            if not self.seat_adjacency_engine.can_add_seat(seat, selection, seats):
                Logger.base.warning(f'[SELECT] Rejected stranded seat {place_id}')
                return SelectionDecision.reject(selection, RejectionReason.STRANDED_SEAT)

            return SelectionDecision.accept([*selection, place_id])
