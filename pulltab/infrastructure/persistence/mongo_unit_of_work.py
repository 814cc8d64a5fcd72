"""MongoDB multi-document transaction as a unit of work"""
import logging
from typing import Optional

from pymongo import MongoClient
from pymongo.client_session import ClientSession
from pymongo.errors import PyMongoError
from pymongo.read_concern import ReadConcern
from pymongo.write_concern import WriteConcern

from pulltab.application.ports.unit_of_work_port import UnitOfWorkPort
from pulltab.domain.exceptions import TransactionConflictError, TransactionFailedError
from pulltab.infrastructure.persistence.mongo_game_box_repository import MongoGameBoxRepository
from pulltab.infrastructure.persistence.mongo_statistics_repository import MongoStatisticsRepository
from pulltab.infrastructure.persistence.mongo_ticket_repository import MongoTicketRepository

logger = logging.getLogger(__name__)


def translate_error(error: PyMongoError) -> TransactionFailedError:
    """Map a driver error onto the domain's transactional errors"""
    if error.has_error_label("TransientTransactionError"):
        return TransactionConflictError(f"Transaction aborted by concurrent write: {error}")
    return TransactionFailedError(f"Transaction failed: {error}")


class MongoUnitOfWork(UnitOfWorkPort):
    """MongoDB implementation of unit of work (requires a replica set)"""

    def __init__(self, client: MongoClient, db_name: str):
        self.client = client
        self.db_name = db_name
        self.session: Optional[ClientSession] = None

    def __enter__(self) -> 'MongoUnitOfWork':
        try:
            self.session = self.client.start_session()
            self.session.start_transaction(
                read_concern=ReadConcern("snapshot"),
                write_concern=WriteConcern("majority")
            )
        except PyMongoError as e:
            if self.session is not None:
                self.session.end_session()
            raise translate_error(e) from e

        db = self.client[self.db_name]
        self.game_boxes = MongoGameBoxRepository(db, self.session)
        self.tickets = MongoTicketRepository(db, self.session)
        self.statistics = MongoStatisticsRepository(db, self.session)
        return self

    def commit(self) -> None:
        try:
            self.session.commit_transaction()
        except PyMongoError as e:
            raise translate_error(e) from e

    def rollback(self) -> None:
        if self.session is not None and self.session.in_transaction:
            self.session.abort_transaction()

    def __exit__(self, exc_type, exc, tb):
        try:
            self.rollback()
        except PyMongoError as e:
            logger.warning(f"Failed to abort transaction: {e}")
        finally:
            self.session.end_session()

        if isinstance(exc, PyMongoError):
            raise translate_error(exc) from exc
        return False
