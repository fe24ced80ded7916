from src.service.seat_selection.app.dto.selection_dto import (
    RejectionReason,
    SeatAdjacencyResult,
    SelectionDecision,
    SelectionValidation,
)

__all__ = ['RejectionReason', 'SeatAdjacencyResult', 'SelectionDecision', 'SelectionValidation']
