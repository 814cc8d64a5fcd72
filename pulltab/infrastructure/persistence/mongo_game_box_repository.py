"""MongoDB game box repository implementation"""
from typing import Optional

from pymongo import ASCENDING, DESCENDING, ReturnDocument
from pymongo.client_session import ClientSession
from pymongo.database import Database

from pulltab.application.ports.game_box_repository_port import GameBoxRepositoryPort
from pulltab.domain.entities.game_box import GameBox
from pulltab.infrastructure.persistence.mongo_sequences import next_sequence

ACTIVE_FILTER = {"completed_at": None, "remaining_tickets": {"$gt": 0}}
NEWEST_FIRST = [("created_at", DESCENDING), ("_id", DESCENDING)]


class MongoGameBoxRepository(GameBoxRepositoryPort):
    """MongoDB implementation of game box repository

    With a session, every call runs inside that session's transaction.
    """

    def __init__(self, db: Database, session: Optional[ClientSession] = None):
        self.db = db
        self.collection = db.game_boxes
        self.session = session

    def ensure_indexes(self) -> None:
        self.collection.create_index(
            [("completed_at", ASCENDING), ("remaining_tickets", ASCENDING), ("created_at", DESCENDING)]
        )

    def lock_active(self) -> Optional[GameBox]:
        """Bump lock_version on the newest active box

        The write takes the document lock for the rest of the transaction, so a
        second purchase against the same box conflicts instead of reading stale
        counters.
        """
        data = self.collection.find_one_and_update(
            ACTIVE_FILTER,
            {"$inc": {"lock_version": 1}},
            sort=NEWEST_FIRST,
            return_document=ReturnDocument.AFTER,
            session=self.session
        )
        return GameBox.from_dict(data) if data else None

    def add(self, box: GameBox) -> GameBox:
        box.id = next_sequence(self.db, "game_boxes", self.session)
        data = box.to_dict()
        data["lock_version"] = 0
        self.collection.insert_one(data, session=self.session)
        return box

    def save(self, box: GameBox) -> None:
        data = box.to_dict()
        del data["_id"]
        self.collection.update_one({"_id": box.id}, {"$set": data}, session=self.session)

    def get_current(self) -> Optional[GameBox]:
        data = self.collection.find_one(ACTIVE_FILTER, sort=NEWEST_FIRST, session=self.session)
        if data is None:
            data = self.collection.find_one({}, sort=NEWEST_FIRST, session=self.session)
        return GameBox.from_dict(data) if data else None
