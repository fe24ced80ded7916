"""Adjacency policy value object."""

import attrs

from src.platform.config.core_setting import Settings


@attrs.define(frozen=True)
class AdjacencyPolicy:
    """
    Adjacency Policy (Value Object).

    Thresholds the seat adjacency engine works with. Defaults match the
    behaviour venues were calibrated against, venues drawn at a different
    plan scale override them through settings.
    """

    max_distance: float = 60.0  # Plan units, cross-row pairs only
    max_row_gap: int = attrs.field(default=1, validator=attrs.validators.ge(1))
    max_column_gap: int = attrs.field(default=1, validator=attrs.validators.ge(0))
    max_selection_size: int = attrs.field(default=10, validator=attrs.validators.ge(1))
    reserved_blocks_selection: bool = False

    @classmethod
    def from_settings(cls, settings: Settings) -> 'AdjacencyPolicy':
        return cls(
            max_distance=settings.SEAT_ADJACENCY_MAX_DISTANCE,
            max_row_gap=settings.SEAT_ADJACENCY_MAX_ROW_GAP,
            max_column_gap=settings.SEAT_ADJACENCY_MAX_COLUMN_GAP,
            max_selection_size=settings.SEAT_SELECTION_MAX_SIZE,
            reserved_blocks_selection=settings.SEAT_RESERVED_BLOCKS_SELECTION,
        )
