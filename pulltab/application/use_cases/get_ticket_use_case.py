"""Get ticket details use case"""
import logging

import sentry_sdk

from pulltab.application.dto.ticket_details_request import TicketDetailsRequest
from pulltab.application.dto.ticket_details_response import TicketDetailsResponse
from pulltab.application.ports.ticket_repository_port import TicketRepositoryPort
from pulltab.domain.exceptions import PullTabError, TicketNotFoundError

logger = logging.getLogger(__name__)


class GetTicketUseCase:
    """Use case for a ticket with its reveal state"""

    def __init__(self, ticket_repository: TicketRepositoryPort):
        self.ticket_repository = ticket_repository

    def execute(self, request: TicketDetailsRequest) -> TicketDetailsResponse:
        try:
            ticket = self.ticket_repository.get_for_player(request.ticket_id, request.player_id)
            if ticket is None:
                raise TicketNotFoundError()
            return TicketDetailsResponse(ticket=ticket)

        except PullTabError as e:
            return TicketDetailsResponse(error=str(e), error_code=e.code)

        except Exception as e:
            logger.exception(f"Unexpected error fetching ticket {request.ticket_id}")
            sentry_sdk.capture_exception(e)
            return TicketDetailsResponse(error="Failed to fetch ticket", error_code="internal")
