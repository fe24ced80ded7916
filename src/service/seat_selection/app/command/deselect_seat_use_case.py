"""
Deselect Seat Use Case
"""

from collections.abc import Sequence

from opentelemetry import trace

from src.platform.logging.loguru_io import Logger
from src.service.seat_selection.app.dto import RejectionReason, SelectionDecision
from src.service.seat_selection.domain.seat_adjacency_engine import SeatAdjacencyEngine
from src.service.seat_selection.domain.value_object import Seat


class DeselectSeatUseCase:
    """
    Remove a seat from the selection unless that strands the others.

    Removing the middle seat of three in a row would leave two seats with
    a gap between them, such a removal is rejected and the selection stays
    as it was.
    """

    def __init__(self, seat_adjacency_engine: SeatAdjacencyEngine):
        self.seat_adjacency_engine = seat_adjacency_engine
        self.tracer = trace.get_tracer(__name__)

    @Logger.io
    def execute(
        self, *, selection: Sequence[str], place_id: str, seats: Sequence[Seat]
    ) -> SelectionDecision:
        with self.tracer.start_as_current_span(
            'use_case.deselect_seat',
            attributes={'seat.place_id': place_id, 'selection.size': len(selection)},
        ):
            if place_id not in selection:
                return SelectionDecision.accept(selection)

            if not self.seat_adjacency_engine.can_remove_seat(place_id, selection, seats):
                Logger.base.warning(
                    f'[DESELECT] Rejected {place_id}: remaining {len(selection) - 1} seats would split'
                )
                return SelectionDecision.reject(selection, RejectionReason.WOULD_STRAND_SELECTION)

            return SelectionDecision.accept(
                [selected for selected in selection if selected != place_id]
            )
