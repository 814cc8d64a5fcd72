"""Ticket history use case"""
import logging

import sentry_sdk

from pulltab.application.dto.ticket_history_request import TicketHistoryRequest
from pulltab.application.dto.ticket_history_response import TicketHistoryResponse
from pulltab.application.ports.ticket_repository_port import TicketRepositoryPort
from pulltab.domain.exceptions import InvalidArgumentError, PullTabError

logger = logging.getLogger(__name__)

MAX_PAGE_SIZE = 100


class GetUserTicketsUseCase:
    """Use case for a player's ticket history, newest first"""

    def __init__(self, ticket_repository: TicketRepositoryPort):
        self.ticket_repository = ticket_repository

    def execute(self, request: TicketHistoryRequest) -> TicketHistoryResponse:
        try:
            if request.limit < 1 or request.limit > MAX_PAGE_SIZE:
                raise InvalidArgumentError(f"Limit must be between 1 and {MAX_PAGE_SIZE}")
            if request.offset < 0:
                raise InvalidArgumentError("Offset must not be negative")

            tickets = self.ticket_repository.list_for_player(request.player_id, request.limit, request.offset)
            total = self.ticket_repository.count_for_player(request.player_id)
            return TicketHistoryResponse(
                tickets=tickets,
                total=total,
                limit=request.limit,
                offset=request.offset
            )

        except PullTabError as e:
            return TicketHistoryResponse(error=str(e), error_code=e.code)

        except Exception as e:
            logger.exception(f"Unexpected error fetching tickets for player {request.player_id}")
            sentry_sdk.capture_exception(e)
            return TicketHistoryResponse(error="Failed to fetch tickets", error_code="internal")
