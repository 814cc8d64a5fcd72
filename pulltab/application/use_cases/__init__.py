from .purchase_ticket_use_case import PurchaseTicketUseCase
from .reveal_tab_use_case import RevealTabUseCase
from .get_ticket_use_case import GetTicketUseCase
from .get_user_tickets_use_case import GetUserTicketsUseCase
from .get_box_status_use_case import GetBoxStatusUseCase
from .get_player_statistics_use_case import GetPlayerStatisticsUseCase

__all__ = [
    'PurchaseTicketUseCase',
    'RevealTabUseCase',
    'GetTicketUseCase',
    'GetUserTicketsUseCase',
    'GetBoxStatusUseCase',
    'GetPlayerStatisticsUseCase'
]
