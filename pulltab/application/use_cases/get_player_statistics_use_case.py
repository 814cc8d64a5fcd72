"""Player statistics use case"""
import logging

import sentry_sdk

from pulltab.application.dto.player_statistics_response import PlayerStatisticsResponse
from pulltab.application.ports.statistics_repository_port import StatisticsRepositoryPort
from pulltab.application.ports.ticket_repository_port import TicketRepositoryPort
from pulltab.domain.entities.symbols import TICKET_PRICE
from pulltab.domain.exceptions import PullTabError, StatisticsNotFoundError

logger = logging.getLogger(__name__)


class GetPlayerStatisticsUseCase:
    """Use case for a player's lifetime results"""

    def __init__(self, statistics_repository: StatisticsRepositoryPort, ticket_repository: TicketRepositoryPort):
        self.statistics_repository = statistics_repository
        self.ticket_repository = ticket_repository

    def execute(self, player_id: int) -> PlayerStatisticsResponse:
        try:
            stats = self.statistics_repository.get(player_id)
            if stats is None:
                raise StatisticsNotFoundError()

            winning_tickets = self.ticket_repository.count_for_player(player_id, winners_only=True)
            total_spent = stats.tickets_played * TICKET_PRICE
            win_rate = winning_tickets / stats.tickets_played * 100 if stats.tickets_played else 0.0
            average_win = stats.total_winnings / winning_tickets if winning_tickets else 0.0

            return PlayerStatisticsResponse(
                tickets_played=stats.tickets_played,
                total_winnings=stats.total_winnings,
                biggest_win=stats.biggest_win,
                sessions_played=stats.sessions_played,
                last_played=stats.last_played,
                winning_tickets=winning_tickets,
                win_rate=round(win_rate, 2),
                total_spent=total_spent,
                net_profit=stats.total_winnings - total_spent,
                average_win=round(average_win, 2)
            )

        except PullTabError as e:
            return PlayerStatisticsResponse(error=str(e), error_code=e.code)

        except Exception as e:
            logger.exception(f"Unexpected error fetching statistics for player {player_id}")
            sentry_sdk.capture_exception(e)
            return PlayerStatisticsResponse(error="Failed to fetch statistics", error_code="internal")
