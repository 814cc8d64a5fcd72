import random

import pytest

from pulltab.application.use_cases import (
    GetBoxStatusUseCase,
    GetPlayerStatisticsUseCase,
    GetTicketUseCase,
    GetUserTicketsUseCase,
    PurchaseTicketUseCase,
    RevealTabUseCase,
)
from tests.fakes import (
    InMemoryGameBoxRepository,
    InMemoryStatisticsRepository,
    InMemoryStore,
    InMemoryTicketRepository,
    InMemoryUnitOfWork,
    RecordingPublisher,
)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def ticket_repository(store):
    return InMemoryTicketRepository(lambda: store.state)


@pytest.fixture
def game_box_repository(store):
    return InMemoryGameBoxRepository(lambda: store.state)


@pytest.fixture
def statistics_repository(store):
    return InMemoryStatisticsRepository(lambda: store.state)


@pytest.fixture
def publisher():
    return RecordingPublisher()


@pytest.fixture
def purchase(store, rng, publisher):
    return PurchaseTicketUseCase(lambda: InMemoryUnitOfWork(store), message_publisher=publisher, rng=rng)


@pytest.fixture
def reveal(ticket_repository):
    return RevealTabUseCase(ticket_repository)


@pytest.fixture
def get_ticket(ticket_repository):
    return GetTicketUseCase(ticket_repository)


@pytest.fixture
def history(ticket_repository):
    return GetUserTicketsUseCase(ticket_repository)


@pytest.fixture
def box_status(game_box_repository):
    return GetBoxStatusUseCase(game_box_repository)


@pytest.fixture
def player_statistics(statistics_repository, ticket_repository):
    return GetPlayerStatisticsUseCase(statistics_repository, ticket_repository)
