from .purchase_ticket_request import PurchaseTicketRequest
from .purchase_ticket_response import PurchaseTicketResponse
from .reveal_tab_request import RevealTabRequest
from .reveal_tab_response import RevealTabResponse
from .ticket_details_request import TicketDetailsRequest
from .ticket_details_response import TicketDetailsResponse
from .ticket_history_request import TicketHistoryRequest
from .ticket_history_response import TicketHistoryResponse
from .box_status_response import BoxStatusResponse
from .player_statistics_response import PlayerStatisticsResponse

__all__ = [
    'PurchaseTicketRequest',
    'PurchaseTicketResponse',
    'RevealTabRequest',
    'RevealTabResponse',
    'TicketDetailsRequest',
    'TicketDetailsResponse',
    'TicketHistoryRequest',
    'TicketHistoryResponse',
    'BoxStatusResponse',
    'PlayerStatisticsResponse'
]
