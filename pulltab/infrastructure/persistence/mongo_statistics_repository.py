"""MongoDB player statistics repository implementation"""
from typing import Optional

from pymongo.client_session import ClientSession
from pymongo.database import Database

from pulltab.application.ports.statistics_repository_port import StatisticsRepositoryPort
from pulltab.domain.entities.player_statistics import PlayerStatistics


class MongoStatisticsRepository(StatisticsRepositoryPort):
    """MongoDB implementation of player statistics repository"""

    def __init__(self, db: Database, session: Optional[ClientSession] = None):
        self.db = db
        self.collection = db.player_statistics
        self.session = session

    def get(self, player_id: int) -> Optional[PlayerStatistics]:
        data = self.collection.find_one({"_id": player_id}, session=self.session)
        return PlayerStatistics.from_dict(data) if data else None

    def get_or_create(self, player_id: int) -> PlayerStatistics:
        return self.get(player_id) or PlayerStatistics(player_id=player_id)

    def save(self, statistics: PlayerStatistics) -> None:
        data = statistics.to_dict()
        del data["_id"]
        self.collection.update_one(
            {"_id": statistics.player_id},
            {"$set": data},
            upsert=True,
            session=self.session
        )
