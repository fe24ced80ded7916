"""
Validate Selection Use Case

Final guard before a selection is confirmed. Callers also run it after every
seat status refresh: another buyer may have bought one of the selected seats
in the meantime, which turns a connected selection into an invalid one.
"""

from collections.abc import Sequence

from opentelemetry import trace

from src.platform.logging.loguru_io import Logger
from src.service.seat_selection.app.dto import RejectionReason, SelectionValidation
from src.service.seat_selection.domain.seat_adjacency_engine import SeatAdjacencyEngine
from src.service.seat_selection.domain.value_object import Seat


class ValidateSelectionUseCase:
    def __init__(self, seat_adjacency_engine: SeatAdjacencyEngine):
        self.seat_adjacency_engine = seat_adjacency_engine
        self.tracer = trace.get_tracer(__name__)

    @Logger.io
    def execute(self, *, selection: Sequence[str], seats: Sequence[Seat]) -> SelectionValidation:
        with self.tracer.start_as_current_span(
            'use_case.validate_selection',
            attributes={'selection.size': len(selection)},
        ):
            engine = self.seat_adjacency_engine
            selectable_ids = {seat.place_id for seat in seats if engine.is_selectable(seat)}
            stale = tuple(place_id for place_id in selection if place_id not in selectable_ids)
            connected = engine.is_selection_connected(selection, seats)

            if len(selection) > engine.policy.max_selection_size:
                reason = RejectionReason.MAX_SELECTION_REACHED
            elif stale:
                Logger.base.warning(f'[VALIDATE] Selection holds seats no longer available: {stale}')
                reason = RejectionReason.SEAT_UNAVAILABLE
            elif not connected:
                reason = RejectionReason.DISCONNECTED_SELECTION
            else:
                return SelectionValidation(
                    valid=True, connected=True, selection=selection, stale_place_ids=()
                )

            return SelectionValidation(
                valid=False,
                connected=connected,
                selection=selection,
                stale_place_ids=stale,
                reason=reason,
            )
