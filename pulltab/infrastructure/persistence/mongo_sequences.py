"""Integer id sequences stored in MongoDB"""
from typing import Optional

from pymongo import ReturnDocument
from pymongo.client_session import ClientSession
from pymongo.database import Database


def next_sequence(db: Database, name: str, session: Optional[ClientSession] = None) -> int:
    """Atomically allocate the next id of sequence ``name``"""
    counter = db.counters.find_one_and_update(
        {"_id": name},
        {"$inc": {"value": 1}},
        upsert=True,
        return_document=ReturnDocument.AFTER,
        session=session
    )
    return counter["value"]
