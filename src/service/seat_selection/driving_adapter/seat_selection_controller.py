"""
Seat Selection Controller

Seat click / deselect / confirmation guards for the seat map UI.
Every request carries the seat snapshot the UI currently shows, the
service keeps no selection state between requests.
"""

from fastapi import APIRouter, status

from src.platform.config.di import container
from src.platform.logging.loguru_io import Logger
from src.service.seat_selection.app.dto import SelectionDecision
from src.service.seat_selection.driven_adapter.seat_map_builder import build_seat_map
from src.service.seat_selection.driving_adapter.seat_selection_schema import (
    SeatAdjacencyRequest,
    SeatAdjacencyResponse,
    SeatClickRequest,
    SeatMapDecodeRequest,
    SeatMapResponse,
    SeatSchema,
    SectionSchema,
    SelectionDecisionResponse,
    SelectionValidationResponse,
    ValidateSelectionRequest,
)


router = APIRouter(prefix='/api/seat_selection', tags=['seat-selection'])


def _decision_response(decision: SelectionDecision) -> SelectionDecisionResponse:
    return SelectionDecisionResponse(
        accepted=decision.accepted,
        selection=list(decision.selection),
        reason=decision.reason.value if decision.reason else None,
    )


@router.post('/select', status_code=status.HTTP_200_OK)
@Logger.io
async def select_seat(request: SeatClickRequest) -> SelectionDecisionResponse:
    """
    Seat click: adds the seat, or removes it when it is already selected.

    Rejections are regular responses (accepted=false + reason) so the UI can
    show a message and keep its current selection.
    """
    use_case = container.select_seat_use_case()
    decision = use_case.execute(
        selection=request.selection,
        place_id=request.place_id,
        seats=request.domain_seats(),
    )
    return _decision_response(decision)


@router.post('/deselect', status_code=status.HTTP_200_OK)
@Logger.io
async def deselect_seat(request: SeatClickRequest) -> SelectionDecisionResponse:
    use_case = container.deselect_seat_use_case()
    decision = use_case.execute(
        selection=request.selection,
        place_id=request.place_id,
        seats=request.domain_seats(),
    )
    return _decision_response(decision)


@router.post('/validate', status_code=status.HTTP_200_OK)
@Logger.io
async def validate_selection(request: ValidateSelectionRequest) -> SelectionValidationResponse:
    """Run before confirming a selection and after every seat status refresh"""
    use_case = container.validate_selection_use_case()
    result = use_case.execute(selection=request.selection, seats=request.domain_seats())
    return SelectionValidationResponse(
        valid=result.valid,
        connected=result.connected,
        selection=list(result.selection),
        stale_place_ids=list(result.stale_place_ids),
        reason=result.reason.value if result.reason else None,
    )


@router.post('/adjacency', status_code=status.HTTP_200_OK)
@Logger.io
async def check_seat_adjacency(request: SeatAdjacencyRequest) -> SeatAdjacencyResponse:
    use_case = container.check_seat_adjacency_use_case()
    result = use_case.execute(
        first_place_id=request.first_place_id,
        second_place_id=request.second_place_id,
        seats=request.domain_seats(),
    )
    return SeatAdjacencyResponse(
        first_place_id=result.first_place_id,
        second_place_id=result.second_place_id,
        physical=result.physical,
        considering_status=result.considering_status,
    )


@router.post('/seat_map/decode', status_code=status.HTTP_200_OK)
@Logger.io
async def decode_seat_map(request: SeatMapDecodeRequest) -> SeatMapResponse:
    """Decode encoded place ids and apply sold / reserved lists"""
    seat_map = build_seat_map(request.model_dump(by_alias=True))
    seats = [SeatSchema.from_domain(seat) for seat in seat_map.seats]
    return SeatMapResponse(
        seats=seats,
        sections=[SectionSchema.from_domain(section) for section in seat_map.sections],
        total_count=len(seats),
    )
