"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.service.seat_selection.app.command.deselect_seat_use_case import DeselectSeatUseCase
from src.service.seat_selection.app.command.select_seat_use_case import SelectSeatUseCase
from src.service.seat_selection.app.query.check_seat_adjacency_use_case import (
    CheckSeatAdjacencyUseCase,
)
from src.service.seat_selection.app.query.validate_selection_use_case import (
    ValidateSelectionUseCase,
)
from src.service.seat_selection.domain.seat_adjacency_engine import SeatAdjacencyEngine
from src.service.seat_selection.domain.value_object import AdjacencyPolicy


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Thresholds injected into the engine (venue plan scale overrides via settings)
    adjacency_policy = providers.Singleton(AdjacencyPolicy.from_settings, settings=config_service)

    # Stateless domain service, safe to share
    seat_adjacency_engine = providers.Singleton(SeatAdjacencyEngine, policy=adjacency_policy)

    # Seat Selection Use Cases (CQRS)
    deselect_seat_use_case = providers.Factory(
        DeselectSeatUseCase, seat_adjacency_engine=seat_adjacency_engine
    )
    select_seat_use_case = providers.Factory(
        SelectSeatUseCase,
        seat_adjacency_engine=seat_adjacency_engine,
        deselect_seat_use_case=deselect_seat_use_case,
    )
    validate_selection_use_case = providers.Factory(
        ValidateSelectionUseCase, seat_adjacency_engine=seat_adjacency_engine
    )
    check_seat_adjacency_use_case = providers.Factory(
        CheckSeatAdjacencyUseCase, seat_adjacency_engine=seat_adjacency_engine
    )


container = Container()


def setup() -> None:
    container.config_service()
    container.seat_adjacency_engine()


def cleanup() -> None:
    container.reset_singletons()
