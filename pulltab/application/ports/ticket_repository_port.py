"""Ticket repository port (interface)"""
from abc import ABC, abstractmethod
from typing import List, Optional

from pulltab.domain.entities.ticket import Ticket


class TicketRepositoryPort(ABC):
    """Port for ticket persistence"""

    @abstractmethod
    def add(self, ticket: Ticket) -> Ticket:
        """Insert a ticket, returns ticket with ID"""
        pass

    @abstractmethod
    def get_for_player(self, ticket_id: int, player_id: int) -> Optional[Ticket]:
        """Ticket owned by ``player_id``, None if missing or owned by someone else"""
        pass

    @abstractmethod
    def add_revealed_tab(self, ticket_id: int, tab_index: int) -> None:
        """Idempotently record a revealed tab"""
        pass

    @abstractmethod
    def list_for_player(self, player_id: int, limit: int, offset: int) -> List[Ticket]:
        """Page of a player's tickets, newest first"""
        pass

    @abstractmethod
    def count_for_player(self, player_id: int, winners_only: bool = False) -> int:
        """Number of tickets a player holds"""
        pass
