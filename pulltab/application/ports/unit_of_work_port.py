"""Unit of work port (interface)"""
from abc import ABC, abstractmethod

from pulltab.application.ports.game_box_repository_port import GameBoxRepositoryPort
from pulltab.application.ports.statistics_repository_port import StatisticsRepositoryPort
from pulltab.application.ports.ticket_repository_port import TicketRepositoryPort


class UnitOfWorkPort(ABC):
    """All-or-nothing transaction over the game box, ticket and statistics stores

    Used as a context manager. Repositories are bound to the transaction on
    enter; anything not committed when the block exits is rolled back.
    Implementations raise TransactionFailedError/TransactionConflictError
    instead of store-specific errors.
    """

    game_boxes: GameBoxRepositoryPort
    tickets: TicketRepositoryPort
    statistics: StatisticsRepositoryPort

    @abstractmethod
    def __enter__(self) -> 'UnitOfWorkPort':
        pass

    @abstractmethod
    def __exit__(self, exc_type, exc, tb):
        pass

    @abstractmethod
    def commit(self) -> None:
        pass

    @abstractmethod
    def rollback(self) -> None:
        pass
