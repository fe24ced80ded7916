"""Seat Status Enum"""

from enum import StrEnum


class SeatStatus(StrEnum):
    """Seat status as delivered by the seat map snapshot"""

    AVAILABLE = 'available'
    SOLD = 'sold'
    RESERVED = 'reserved'  # Held by another in-progress checkout
