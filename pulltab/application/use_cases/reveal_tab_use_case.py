"""Reveal tab use case"""
import logging

import sentry_sdk

from pulltab.application.dto.reveal_tab_request import RevealTabRequest
from pulltab.application.dto.reveal_tab_response import RevealTabResponse
from pulltab.application.ports.ticket_repository_port import TicketRepositoryPort
from pulltab.domain.entities.ticket import check_tab_index
from pulltab.domain.exceptions import PullTabError, TicketNotFoundError

logger = logging.getLogger(__name__)


class RevealTabUseCase:
    """Use case for disclosing one line of a ticket to its owner"""

    def __init__(self, ticket_repository: TicketRepositoryPort):
        self.ticket_repository = ticket_repository

    def execute(self, request: RevealTabRequest) -> RevealTabResponse:
        """Execute tab reveal"""
        try:
            tab_index = check_tab_index(request.tab_index)

            # Someone else's ticket is reported exactly like a missing one
            ticket = self.ticket_repository.get_for_player(request.ticket_id, request.player_id)
            if ticket is None:
                raise TicketNotFoundError()

            if ticket.reveal(tab_index):
                self.ticket_repository.add_revealed_tab(ticket.id, tab_index)

            return RevealTabResponse(
                tab_index=tab_index,
                symbols=[int(s) for s in ticket.tab_symbols(tab_index)],
                win_detected=ticket.tab_wins(tab_index),
                total_payout=ticket.total_payout,
                ticket=ticket
            )

        except PullTabError as e:
            logger.warning(f"Reveal of ticket {request.ticket_id} tab {request.tab_index} rejected: {e}")
            return RevealTabResponse(error=str(e), error_code=e.code)

        except Exception as e:
            logger.exception(f"Unexpected error revealing ticket {request.ticket_id}")
            sentry_sdk.capture_exception(e)
            return RevealTabResponse(error="Failed to reveal tab", error_code="internal")
