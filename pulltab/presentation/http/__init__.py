from .handlers import (
    HealthHandler,
    MetricsHandler,
    PurchaseTicketHandler,
    TicketHistoryHandler,
    TicketHandler,
    RevealTabHandler,
    CurrentGameBoxHandler,
    PlayerStatisticsHandler
)

__all__ = [
    'HealthHandler',
    'MetricsHandler',
    'PurchaseTicketHandler',
    'TicketHistoryHandler',
    'TicketHandler',
    'RevealTabHandler',
    'CurrentGameBoxHandler',
    'PlayerStatisticsHandler'
]
