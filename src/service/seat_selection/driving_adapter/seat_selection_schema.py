from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from src.service.seat_selection.domain.value_object import (
    PolygonGeometry,
    RectGeometry,
    Seat,
    Section,
)


class SeatSchema(BaseModel):
    """Seat record as held by the seat map UI"""

    model_config = ConfigDict(populate_by_name=True)

    place_id: str = Field(alias='placeId', min_length=1)
    x: Optional[float] = None
    y: Optional[float] = None
    row: Optional[str] = None
    seat: Optional[str] = None
    section: Optional[str] = None
    status: Literal['available', 'sold', 'reserved'] = 'available'

    def to_domain(self) -> Seat:
        return Seat.from_dict(self.model_dump(by_alias=True))

    @classmethod
    def from_domain(cls, seat: Seat) -> 'SeatSchema':
        return cls(
            place_id=seat.place_id,
            x=seat.x,
            y=seat.y,
            row=seat.row,
            seat=seat.seat,
            section=seat.section,
            status=seat.status.value,
        )


class SeatSnapshotRequest(BaseModel):
    seats: List[SeatSchema]

    def domain_seats(self) -> list[Seat]:
        return [seat.to_domain() for seat in self.seats]


class SeatClickRequest(SeatSnapshotRequest):
    """
    Seat Click Request

    selection: place ids currently picked, in pick order
    place_id: the seat that was clicked
    """

    selection: List[str] = []
    place_id: str


class ValidateSelectionRequest(SeatSnapshotRequest):
    selection: List[str] = []


class SeatAdjacencyRequest(SeatSnapshotRequest):
    first_place_id: str
    second_place_id: str


class SelectionDecisionResponse(BaseModel):
    accepted: bool
    selection: List[str]
    reason: Optional[str] = None


class SelectionValidationResponse(BaseModel):
    valid: bool
    connected: bool
    selection: List[str]
    stale_place_ids: List[str] = []
    reason: Optional[str] = None


class SeatAdjacencyResponse(BaseModel):
    first_place_id: str
    second_place_id: str
    physical: bool
    considering_status: bool


class SeatMapDecodeRequest(BaseModel):
    """Raw seat map payload as delivered by the event seat endpoint"""

    model_config = ConfigDict(populate_by_name=True)

    place_ids: List[str] = Field(default=[], alias='placeIds')
    places: List[dict[str, Any]] = []
    sold: List[str] = []
    reserved: List[str] = []
    sections: List[dict[str, Any]] = []


class SectionGeometrySchema(BaseModel):
    kind: Literal['rect', 'polygon']
    min_x: float
    min_y: float
    max_x: float
    max_y: float
    points: List[tuple[float, float]] = []


class SectionSchema(BaseModel):
    id: str
    name: str
    color: Optional[str] = None
    geometry: Optional[SectionGeometrySchema] = None

    @classmethod
    def from_domain(cls, section: Section) -> 'SectionSchema':
        geometry = None
        if isinstance(section.geometry, PolygonGeometry):
            box = section.geometry.bounding_box()
            geometry = SectionGeometrySchema(
                kind='polygon',
                min_x=box.min_x,
                min_y=box.min_y,
                max_x=box.max_x,
                max_y=box.max_y,
                points=[(p.x, p.y) for p in section.geometry.points],
            )
        elif isinstance(section.geometry, RectGeometry):
            geometry = SectionGeometrySchema(
                kind='rect',
                min_x=section.geometry.min_x,
                min_y=section.geometry.min_y,
                max_x=section.geometry.max_x,
                max_y=section.geometry.max_y,
            )
        return cls(id=section.id, name=section.name, color=section.color, geometry=geometry)


class SeatMapResponse(BaseModel):
    seats: List[SeatSchema]
    sections: List[SectionSchema]
    total_count: int = 0
