"""Seat selection decision DTOs"""

from enum import StrEnum
from typing import Optional

import attrs


class RejectionReason(StrEnum):
    SEAT_NOT_FOUND = 'seat_not_found'
    SEAT_UNAVAILABLE = 'seat_unavailable'
    MAX_SELECTION_REACHED = 'max_selection_reached'
    STRANDED_SEAT = 'stranded_seat'
    WOULD_STRAND_SELECTION = 'would_strand_selection'
    DISCONNECTED_SELECTION = 'disconnected_selection'


@attrs.define(frozen=True)
class SelectionDecision:
    """
    Outcome of a seat click.

    A rejected decision always carries the selection it was given,
    callers never see a partially applied change.
    """

    accepted: bool
    selection: tuple[str, ...] = attrs.field(converter=tuple)
    reason: Optional[RejectionReason] = None

    @classmethod
    def accept(cls, selection: list[str] | tuple[str, ...]) -> 'SelectionDecision':
        return cls(accepted=True, selection=selection)

    @classmethod
    def reject(
        cls, selection: list[str] | tuple[str, ...], reason: RejectionReason
    ) -> 'SelectionDecision':
        return cls(accepted=False, selection=selection, reason=reason)


@attrs.define(frozen=True)
class SelectionValidation:
    """Result of re-checking a whole selection against fresh seat data"""

    valid: bool
    connected: bool
    selection: tuple[str, ...] = attrs.field(converter=tuple)
    stale_place_ids: tuple[str, ...] = attrs.field(converter=tuple, factory=tuple)
    reason: Optional[RejectionReason] = None


@attrs.define(frozen=True)
class SeatAdjacencyResult:
    first_place_id: str
    second_place_id: str
    physical: bool
    considering_status: bool
