from .game_box_repository_port import GameBoxRepositoryPort
from .ticket_repository_port import TicketRepositoryPort
from .statistics_repository_port import StatisticsRepositoryPort
from .unit_of_work_port import UnitOfWorkPort
from .message_publisher_port import MessagePublisherPort

__all__ = [
    'GameBoxRepositoryPort',
    'TicketRepositoryPort',
    'StatisticsRepositoryPort',
    'UnitOfWorkPort',
    'MessagePublisherPort'
]
