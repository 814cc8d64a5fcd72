"""MongoDB ticket repository implementation"""
from typing import List, Optional

from pymongo import ASCENDING, DESCENDING
from pymongo.client_session import ClientSession
from pymongo.database import Database

from pulltab.application.ports.ticket_repository_port import TicketRepositoryPort
from pulltab.domain.entities.ticket import Ticket
from pulltab.infrastructure.persistence.mongo_sequences import next_sequence


class MongoTicketRepository(TicketRepositoryPort):
    """MongoDB implementation of ticket repository"""

    def __init__(self, db: Database, session: Optional[ClientSession] = None):
        self.db = db
        self.collection = db.tickets
        self.session = session

    def ensure_indexes(self) -> None:
        self.collection.create_index([("player_id", ASCENDING), ("created_at", DESCENDING)])

    def add(self, ticket: Ticket) -> Ticket:
        """Save ticket to MongoDB"""
        ticket.id = next_sequence(self.db, "tickets", self.session)
        self.collection.insert_one(ticket.to_dict(), session=self.session)
        return ticket

    def get_for_player(self, ticket_id: int, player_id: int) -> Optional[Ticket]:
        data = self.collection.find_one({"_id": ticket_id, "player_id": player_id}, session=self.session)
        return Ticket.from_dict(data) if data else None

    def add_revealed_tab(self, ticket_id: int, tab_index: int) -> None:
        self.collection.update_one(
            {"_id": ticket_id},
            {"$addToSet": {"revealed_tabs": tab_index}},
            session=self.session
        )

    def list_for_player(self, player_id: int, limit: int, offset: int) -> List[Ticket]:
        cursor = (
            self.collection.find({"player_id": player_id}, session=self.session)
            .sort([("created_at", DESCENDING), ("_id", DESCENDING)])
            .skip(offset)
            .limit(limit)
        )
        return [Ticket.from_dict(data) for data in cursor]

    def count_for_player(self, player_id: int, winners_only: bool = False) -> int:
        query = {"player_id": player_id}
        if winners_only:
            query["is_winner"] = True
        return self.collection.count_documents(query, session=self.session)
